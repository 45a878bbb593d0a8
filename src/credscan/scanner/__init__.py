# SPDX-License-Identifier: MIT
"""File-level scanning and configuration.

    from credscan.scanner import scan_paths, load_scanner_config
"""

from credscan.scanner.config import ScanConfig, load_scanner_config
from credscan.scanner.files import build_scanner, iter_files, scan_file, scan_paths, scan_text

__all__ = [
    "ScanConfig",
    "build_scanner",
    "iter_files",
    "load_scanner_config",
    "scan_file",
    "scan_paths",
    "scan_text",
]
