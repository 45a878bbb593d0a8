"""Built-in secret types and the default catalog."""

from __future__ import annotations
import importlib
import logging
import threading
from typing import Iterable, List, Optional

from credscan.core.catalog import Catalog
from credscan.core.exceptions import CatalogError
from credscan.core.patterns import Detector, PatternDefinition

logger = logging.getLogger(__name__)

# Registration order; decides tie-breaks between findings at the same offset.
# Each module exports SECRET_TYPE and PATTERN.
DETECTOR_MODULES = [
    "basic_auth",
    "digitalocean",
    "discord",
    "gitlab",
    "npm",
    "pypi",
    "slack",
    "stripe",
    "twilio",
]


def load_detector(module_name: str) -> Detector:
    """Import ``credscan.detectors.<module_name>`` and wrap it in a Detector."""
    try:
        module = importlib.import_module(f"{__name__}.{module_name}")
    except ImportError as e:
        raise CatalogError(f"Failed to load detector module {module_name}: {e}") from e

    secret_type = getattr(module, "SECRET_TYPE", None)
    pattern = getattr(module, "PATTERN", None)
    if not isinstance(secret_type, str) or not secret_type:
        raise CatalogError(f"Detector module {module_name} has no SECRET_TYPE")
    if not isinstance(pattern, PatternDefinition):
        raise CatalogError(f"Detector module {module_name} has no PATTERN", secret_type=secret_type)
    return Detector(secret_type=secret_type, definition=pattern)


def build_catalog(module_names: Optional[Iterable[str]] = None) -> Catalog:
    """Build a catalog from detector modules, in the order given."""
    names = DETECTOR_MODULES if module_names is None else list(module_names)
    detectors: List[Detector] = [load_detector(name) for name in names]
    return Catalog(detectors)


# Global catalog instance
_catalog: Optional[Catalog] = None
_catalog_lock = threading.Lock()


def get_catalog() -> Catalog:
    """Get the process-wide default catalog, building it on first use."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = build_catalog()
                logger.debug("default catalog: %s", ", ".join(_catalog.secret_types()))
    return _catalog
