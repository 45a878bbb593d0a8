# SPDX-License-Identifier: MIT
"""credscan exception hierarchy."""

from __future__ import annotations
from typing import Dict, Optional


class CredscanError(Exception):
    """Base class for all credscan errors.

    Keyword context given to the constructor is kept as attributes and
    appended to the message, e.g. ``bad value (config: x.yml)``.
    """

    # attribute name -> label used when rendering
    context_labels: Dict[str, str] = {}

    def __init__(self, message: str, **context: Optional[str]):
        unknown = set(context) - set(self.context_labels)
        if unknown:
            raise TypeError(f"unexpected context: {', '.join(sorted(unknown))}")
        for attr in self.context_labels:
            setattr(self, attr, context.get(attr))
        super().__init__(message)

    def __str__(self):
        parts = [super().__str__()]
        for attr, label in self.context_labels.items():
            value = getattr(self, attr)
            if value:
                parts.append(f"({label}: {value})")
        return " ".join(parts)


class CatalogError(CredscanError):
    """The detector catalog cannot be built.

    Patterns are static, so this only signals an authoring mistake (bad
    regex, duplicate secret type) and is raised at startup.
    """

    context_labels = {"secret_type": "secret type"}


class ConfigError(CredscanError):
    """Configuration is missing or invalid."""

    context_labels = {"config_path": "config", "section": "section"}
