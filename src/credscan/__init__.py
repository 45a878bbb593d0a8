"""credscan package metadata and public API."""
from importlib.metadata import version, PackageNotFoundError

from credscan.core.catalog import Catalog
from credscan.core.exceptions import CatalogError, ConfigError, CredscanError
from credscan.core.findings import Candidate, FileFinding, Finding
from credscan.core.patterns import Alternative, Detector, PatternDefinition
from credscan.core.scan import Scanner, scan
from credscan.detectors import get_catalog

try:
    __version__ = version("credscan")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "Alternative",
    "Candidate",
    "Catalog",
    "CatalogError",
    "ConfigError",
    "CredscanError",
    "Detector",
    "FileFinding",
    "Finding",
    "PatternDefinition",
    "Scanner",
    "get_catalog",
    "scan",
]
