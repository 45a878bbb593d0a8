"""Test version information."""

import importlib.metadata
import re

from credscan import __version__


def test_version_string():
    """Test that __version__ is a valid version string."""
    assert isinstance(__version__, str)
    assert "." in __version__


def test_version_matches_package_metadata():
    """Test that __version__ matches the package metadata."""
    try:
        package_version = importlib.metadata.version("credscan")
        assert __version__ == package_version
    except importlib.metadata.PackageNotFoundError:
        # Package not installed, skip this test
        pass


def test_version_format():
    """Test that version follows semantic versioning pattern."""
    semver_pattern = r"^\d+\.\d+\.\d+(?:-[a-zA-Z0-9]+(?:\.\d+)?)?$"
    assert re.match(semver_pattern, __version__), f"Version {__version__} doesn't follow semver format"
