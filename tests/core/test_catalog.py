"""Unit tests for the detector catalog."""

import pytest

from credscan.core.catalog import Catalog
from credscan.core.exceptions import CatalogError
from credscan.core.patterns import Detector, PatternDefinition
from credscan.detectors import build_catalog, get_catalog, load_detector


def make(name, pattern="x"):
    return Detector(name, PatternDefinition(pattern))


def test_registration_order_is_kept():
    catalog = Catalog([make("B"), make("A"), make("C")])
    assert catalog.secret_types() == ("B", "A", "C")
    assert [d.secret_type for d in catalog] == ["B", "A", "C"]


def test_duplicate_secret_type_is_fatal():
    with pytest.raises(CatalogError) as exc:
        Catalog([make("A"), make("A", "y")])
    assert "A" in str(exc.value)


def test_catalog_is_immutable():
    catalog = Catalog([make("A")])
    with pytest.raises(AttributeError):
        catalog.extra = 1


def test_with_detector_returns_new_catalog():
    catalog = Catalog([make("A")])
    bigger = catalog.with_detector(make("B"))
    assert catalog.secret_types() == ("A",)
    assert bigger.secret_types() == ("A", "B")


def test_without():
    catalog = Catalog([make("A"), make("B"), make("C")])
    assert catalog.without(["B"]).secret_types() == ("A", "C")
    with pytest.raises(CatalogError):
        catalog.without(["Nope"])


def test_lookup():
    catalog = Catalog([make("A")])
    assert "A" in catalog
    assert catalog["A"].secret_type == "A"
    assert "B" not in catalog


def test_default_catalog_contents():
    assert get_catalog().secret_types() == (
        "Basic Auth Credentials",
        "DigitalOcean API Key",
        "Discord Bot Token",
        "GitLab Token",
        "NPM Token",
        "PyPI Token",
        "Slack Token",
        "Stripe Access Key",
        "Twilio API Key",
    )


def test_default_catalog_is_built_once():
    assert get_catalog() is get_catalog()


def test_build_catalog_subset():
    catalog = build_catalog(["twilio", "stripe"])
    assert catalog.secret_types() == ("Twilio API Key", "Stripe Access Key")


def test_unknown_detector_module_is_fatal():
    with pytest.raises(CatalogError):
        load_detector("does_not_exist")
