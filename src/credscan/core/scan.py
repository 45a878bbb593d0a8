# SPDX-License-Identifier: MIT
"""
Scan coordinator.

Runs every detector of a catalog over one buffer and returns a single list
of findings ordered by start offset. Findings from different secret types
that overlap are all kept; only exact duplicates are collapsed.
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from credscan.core.catalog import Catalog
from credscan.core.exceptions import ConfigError
from credscan.core.findings import Finding
from credscan.core.matching import as_text

# Predicate deciding whether a finding is kept.
FindingFilter = Callable[[Finding], bool]


def scan(
    text,
    catalog: Optional[Catalog] = None,
    filters: Sequence[FindingFilter] = (),
) -> List[Finding]:
    """Scan ``text`` with every detector in ``catalog``.

    Args:
        text: str or bytes buffer; bytes are matched byte for byte
        catalog: detectors to run, the built-in catalog when omitted
        filters: predicates applied to each finding before ordering

    Returns:
        Findings sorted by start offset. Ties keep catalog registration
        order.
    """
    if catalog is None:
        from credscan.detectors import get_catalog

        catalog = get_catalog()

    text = as_text(text)
    findings: List[Finding] = []
    for detector in catalog:
        findings.extend(Finding.from_candidate(c) for c in detector.find_all(text))

    if filters:
        findings = [f for f in findings if all(keep(f) for keep in filters)]

    # list.sort is stable, which preserves detector order for equal starts
    findings.sort(key=attrgetter("start"))
    return _collapse_duplicates(findings)


def _collapse_duplicates(findings: Iterable[Finding]) -> List[Finding]:
    seen = set()
    out = []
    for f in findings:
        key = f.key()
        if key in seen:
            continue
        seen.add(key)
        out.append(f)
    return out


def allowlist_filter(patterns: Iterable[str]) -> FindingFilter:
    """Build a filter dropping findings whose value fully matches a pattern.

    Raises:
        ConfigError: if a pattern is not a valid regular expression
    """
    compiled = []
    for pat in patterns:
        try:
            compiled.append(re.compile(pat))
        except re.error as e:
            raise ConfigError(f"Invalid allowlist pattern {pat!r}: {e}", section="allowlist")

    def keep(finding: Finding) -> bool:
        return not any(rx.fullmatch(finding.value) for rx in compiled)

    return keep


@dataclass(frozen=True)
class Scanner:
    """A catalog bundled with the filters to apply on every scan."""

    catalog: Catalog
    filters: Tuple[FindingFilter, ...] = field(default_factory=tuple)

    def scan(self, text) -> List[Finding]:
        return scan(text, self.catalog, self.filters)

    @classmethod
    def default(cls) -> "Scanner":
        from credscan.detectors import get_catalog

        return cls(catalog=get_catalog())
