# SPDX-License-Identifier: MIT
"""Immutable, ordered collection of detectors."""

from __future__ import annotations
import logging
from typing import Dict, Iterable, Iterator, List, Tuple

from credscan.core.exceptions import CatalogError
from credscan.core.patterns import Detector

logger = logging.getLogger(__name__)


class Catalog:
    """Ordered set of detectors keyed by secret type.

    Built once and never mutated afterwards, so a single instance can be
    shared between threads without locking. Registration order decides how
    findings with equal start offsets are ordered.
    """

    __slots__ = ("_detectors", "_by_type")

    def __init__(self, detectors: Iterable[Detector]) -> None:
        ordered: List[Detector] = []
        by_type: Dict[str, Detector] = {}
        for detector in detectors:
            if detector.secret_type in by_type:
                raise CatalogError("Duplicate detector", secret_type=detector.secret_type)
            by_type[detector.secret_type] = detector
            ordered.append(detector)

        object.__setattr__(self, "_detectors", tuple(ordered))
        object.__setattr__(self, "_by_type", by_type)
        logger.debug("catalog built with %d detectors", len(ordered))

    def __setattr__(self, name, value):
        raise AttributeError("Catalog is immutable")

    def __iter__(self) -> Iterator[Detector]:
        return iter(self._detectors)

    def __len__(self) -> int:
        return len(self._detectors)

    def __contains__(self, secret_type: object) -> bool:
        return secret_type in self._by_type

    def __getitem__(self, secret_type: str) -> Detector:
        return self._by_type[secret_type]

    def __repr__(self) -> str:
        return f"Catalog({list(self.secret_types())!r})"

    @property
    def detectors(self) -> Tuple[Detector, ...]:
        return self._detectors

    def secret_types(self) -> Tuple[str, ...]:
        return tuple(d.secret_type for d in self._detectors)

    def with_detector(self, detector: Detector) -> "Catalog":
        """Return a new catalog with ``detector`` appended."""
        return Catalog(self._detectors + (detector,))

    def without(self, secret_types: Iterable[str]) -> "Catalog":
        """Return a new catalog without the given secret types.

        Raises:
            CatalogError: if a name is not part of this catalog
        """
        drop = set(secret_types)
        unknown = sorted(drop - set(self._by_type))
        if unknown:
            raise CatalogError(f"Unknown secret type(s): {', '.join(unknown)}")
        return Catalog(d for d in self._detectors if d.secret_type not in drop)
