# SPDX-License-Identifier: MIT
"""File and directory scanning on top of the scan coordinator."""

from __future__ import annotations
import bisect
import fnmatch
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from credscan.core.exceptions import CatalogError, ConfigError
from credscan.core.findings import FileFinding
from credscan.core.scan import Scanner, allowlist_filter
from credscan.detectors import get_catalog
from credscan.scanner.config import ScanConfig, get_default_scanner_config

logger = logging.getLogger(__name__)

BINARY_EXTS = {
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".webp",
    ".ico",
    ".pdf",
    ".zip",
    ".gz",
    ".tar",
    ".tgz",
    ".7z",
    ".xz",
    ".dmg",
    ".exe",
    ".dll",
    ".so",
    ".a",
    ".o",
}


def build_scanner(config: Optional[ScanConfig] = None) -> Scanner:
    """Create a Scanner honouring ``disabled_detectors`` and ``allowlist``."""
    config = config or get_default_scanner_config()
    catalog = get_catalog()
    if config.disabled_detectors:
        try:
            catalog = catalog.without(config.disabled_detectors)
        except CatalogError as e:
            raise ConfigError(str(e), section="disabled_detectors") from e

    filters = ()
    if config.allowlist:
        filters = (allowlist_filter(config.allowlist),)
    return Scanner(catalog=catalog, filters=filters)


def _matches(rel: str, pattern: str) -> bool:
    if fnmatch.fnmatch(rel, pattern):
        return True
    # "**/" also matches at the top level
    return pattern.startswith("**/") and fnmatch.fnmatch(rel, pattern[3:])


def iter_files(root: Union[Path, str], config: Optional[ScanConfig] = None) -> Iterator[Path]:
    """Yield files under ``root`` that pass the include/exclude globs.

    A single file given as ``root`` is yielded unless it is excluded.
    """
    config = config or get_default_scanner_config()
    root_path = Path(root)

    if root_path.is_file():
        if not any(_matches(root_path.name, pat) for pat in config.exclude_globs):
            yield root_path
        return

    for path in sorted(root_path.rglob("*")):
        if not path.is_file():
            continue
        rel = path.relative_to(root_path).as_posix()
        if any(_matches(rel, pat) for pat in config.exclude_globs):
            continue
        if config.include_globs and not any(_matches(rel, pat) for pat in config.include_globs):
            continue
        yield path


def _read_text_safely(path: Path, max_bytes: int) -> Optional[str]:
    """
    Read a file as text. Returns None for binary, oversized or unreadable files.
    """
    if path.suffix.lower() in BINARY_EXTS:
        logger.debug("skipping binary extension: %s", path)
        return None
    try:
        if path.stat().st_size > max_bytes:
            logger.debug("skipping oversized file: %s", path)
            return None
        data = path.read_bytes()
    except OSError as e:
        logger.warning("cannot read %s: %s", path, e)
        return None

    # Heuristic: NUL bytes mean binary
    if b"\x00" in data:
        logger.debug("skipping binary file: %s", path)
        return None
    return data.decode("utf-8", errors="replace")


def scan_text(text: str, scanner: Scanner, path: str = "<stdin>") -> List[FileFinding]:
    """Scan ``text`` and attach 1-based line and column numbers."""
    findings = scanner.scan(text)
    if not findings:
        return []

    line_starts = [0]
    for i, ch in enumerate(text):
        if ch == "\n":
            line_starts.append(i + 1)

    out = []
    for f in findings:
        line_idx = bisect.bisect_right(line_starts, f.start) - 1
        out.append(
            FileFinding(
                path=path,
                line=line_idx + 1,
                column=f.start - line_starts[line_idx] + 1,
                finding=f,
            )
        )
    return out


def scan_file(path: Union[Path, str], scanner: Scanner, max_bytes: int = 1_000_000) -> List[FileFinding]:
    """Scan a single file; unreadable or binary files yield no findings."""
    path = Path(path)
    text = _read_text_safely(path, max_bytes)
    if text is None:
        return []
    return scan_text(text, scanner, path=str(path))


def scan_paths(
    paths: Iterable[Union[Path, str]],
    config: Optional[ScanConfig] = None,
    scanner: Optional[Scanner] = None,
) -> List[FileFinding]:
    """Scan every file under ``paths`` and return findings in file order."""
    config = config or get_default_scanner_config()
    scanner = scanner or build_scanner(config)

    findings: List[FileFinding] = []
    for root in paths:
        if not Path(root).exists():
            raise FileNotFoundError(f"Path not found: {root}")
        for file_path in iter_files(root, config):
            findings.extend(scan_file(file_path, scanner, config.max_file_size))
    return findings
