# SPDX-License-Identifier: MIT
"""
Pattern definitions and detectors.

A :class:`PatternDefinition` is an ordered set of :class:`Alternative` match
rules for one secret type. Each alternative is plain data: a regex source and
the capture group that holds the reported value. A :class:`Detector` binds a
secret-type label to one definition.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from credscan.core.exceptions import CatalogError
from credscan.core.findings import Candidate
from credscan.core.matching import as_text

GroupRef = Union[int, str, None]


@dataclass(frozen=True)
class Alternative:
    """One surface form of a secret type.

    ``group`` names (or numbers) the capture group holding the value. When it
    is ``None``, or the group did not take part in a match, the whole match
    is the value.
    """

    pattern: str
    group: GroupRef = None
    description: Optional[str] = None


class PatternDefinition:
    """Immutable, pre-compiled list of alternatives for one secret type."""

    __slots__ = ("_alternatives", "_compiled")

    def __init__(self, *alternatives: Union[Alternative, str], flags: int = 0) -> None:
        if not alternatives:
            raise CatalogError("pattern definition needs at least one alternative")

        alts = tuple(a if isinstance(a, Alternative) else Alternative(a) for a in alternatives)
        compiled = []
        for alt in alts:
            try:
                regex = re.compile(alt.pattern, flags)
            except re.error as e:
                raise CatalogError(f"invalid pattern {alt.pattern!r}: {e}") from e
            _check_group(regex, alt)
            compiled.append(regex)

        object.__setattr__(self, "_alternatives", alts)
        object.__setattr__(self, "_compiled", tuple(compiled))

    def __setattr__(self, name, value):
        raise AttributeError("PatternDefinition is immutable")

    def __repr__(self) -> str:
        return f"PatternDefinition({', '.join(repr(a.pattern) for a in self._alternatives)})"

    @property
    def alternatives(self) -> Tuple[Alternative, ...]:
        return self._alternatives

    def __len__(self) -> int:
        return len(self._alternatives)

    def iter_matches(self, text: str) -> Iterator[Tuple[str, int, int]]:
        """Yield ``(value, start, end)`` for every match of every alternative.

        Alternatives are tried independently and in declaration order; within
        one alternative matches are non-overlapping and left to right.
        """
        for alt, regex in zip(self._alternatives, self._compiled):
            for m in regex.finditer(text):
                start, end = _value_span(m, alt.group)
                if start == end:
                    continue
                yield text[start:end], start, end


def _check_group(regex: "re.Pattern[str]", alt: Alternative) -> None:
    group = alt.group
    if group is None:
        return
    if isinstance(group, str):
        if group not in regex.groupindex:
            raise CatalogError(f"pattern {alt.pattern!r} has no group named {group!r}")
    elif not 0 <= group <= regex.groups:
        raise CatalogError(f"pattern {alt.pattern!r} has no group {group}")


def _value_span(m: "re.Match[str]", group: GroupRef) -> Tuple[int, int]:
    if group is not None:
        start, end = m.span(group)
        if start != -1:
            return start, end
    return m.span()


@dataclass(frozen=True)
class Detector:
    """Runtime matcher for one secret type."""

    secret_type: str
    definition: PatternDefinition

    def find_all(self, text) -> List[Candidate]:
        """Return every candidate in ``text``; empty when nothing matches."""
        text = as_text(text)
        if not text:
            return []
        return [
            Candidate(self.secret_type, value, start, end)
            for value, start, end in self.definition.iter_matches(text)
        ]
