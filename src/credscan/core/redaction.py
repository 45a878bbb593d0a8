# SPDX-License-Identifier: MIT
"""Masking of secret values in reports."""

from __future__ import annotations

# characters kept visible at each end of a masked value
KEEP_HEAD = 6
KEEP_TAIL = 4
MASK = "****"


def redact_secret(secret: str) -> str:
    """Mask ``secret`` for display.

    Values too short to keep both ends without revealing most of the secret
    are masked entirely.
    """
    if len(secret) <= KEEP_HEAD + KEEP_TAIL:
        return MASK
    return secret[:KEEP_HEAD] + MASK + secret[-KEEP_TAIL:]
