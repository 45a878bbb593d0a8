# SPDX-License-Identifier: MIT
"""
Discord bot tokens.

Format: ``[MNO]`` + 23-25 chars + ``.`` + 6 chars + ``.`` + 27 chars, all
from the URL-safe base64 alphabet.
"""
from credscan.core.matching import TOKEN_CHARS, token_bounded
from credscan.core.patterns import PatternDefinition

SECRET_TYPE = "Discord Bot Token"

_SEG = f"[{TOKEN_CHARS}]"

PATTERN = PatternDefinition(
    token_bounded(rf"[MNO]{_SEG}{{23,25}}\.{_SEG}{{6}}\.{_SEG}{{27}}"),
)
