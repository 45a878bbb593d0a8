"""Candidate and Finding data structures for credscan."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any

from credscan.core.redaction import redact_secret


@dataclass(frozen=True)
class Candidate:
    """Raw match produced by a single detector, before aggregation."""

    secret_type: str  # e.g. "Stripe Access Key"
    value: str  # exact matched secret, anchors excluded
    start: int  # offset of value in the scanned buffer
    end: int  # offset just past value


@dataclass(frozen=True)
class Finding:
    """A match that is part of the final, ordered scan result."""

    secret_type: str
    value: str
    start: int
    end: int

    @classmethod
    def from_candidate(cls, candidate: Candidate) -> "Finding":
        """Create a Finding from a detector candidate."""
        return cls(
            secret_type=candidate.secret_type,
            value=candidate.value,
            start=candidate.start,
            end=candidate.end,
        )

    def key(self):
        return (self.secret_type, self.value, self.start, self.end)

    def to_dict(self, redact: bool = False) -> Dict[str, Any]:
        """Convert Finding to dictionary format."""
        return {
            "secret_type": self.secret_type,
            "value": redact_secret(self.value) if redact else self.value,
            "start": self.start,
            "end": self.end,
        }


@dataclass(frozen=True)
class FileFinding:
    """A Finding located inside a file on disk."""

    path: str  # path as given by the caller
    line: int  # 1-based line number of finding.start
    column: int  # 1-based column of finding.start
    finding: Finding

    @property
    def secret_type(self) -> str:
        return self.finding.secret_type

    @property
    def value(self) -> str:
        return self.finding.value

    def to_dict(self, redact: bool = True) -> Dict[str, Any]:
        result = {"path": self.path, "line": self.line, "column": self.column}
        result.update(self.finding.to_dict(redact=redact))
        return result
