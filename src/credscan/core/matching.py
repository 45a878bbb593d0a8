# SPDX-License-Identifier: MIT
"""
Shared building blocks for secret-type patterns.

Detector modules compose their regex sources from these helpers so that the
boundary and anchoring rules are spelled the same way everywhere.
"""

from __future__ import annotations
from typing import Union

# Name of the capture group holding the reported value.
VALUE = "value"

# RFC 3986 reserved (gen-delims) plus sub-delims.
URI_RESERVED = ":/?#[]@" + "!'()*+,;="

# Alphabet shared by most opaque API tokens.
TOKEN_CHARS = "A-Za-z0-9_-"


def _escape_class(chars: str) -> str:
    out = []
    for ch in chars:
        if ch in "\\]^-[":
            out.append("\\" + ch)
        else:
            out.append(ch)
    return "".join(out)


def uri_component() -> str:
    """Regex for a URI user or password segment.

    Defined by what it may not contain: reserved characters, sub-delimiters
    and whitespace. The match can never run past a delimiter.
    """
    return "[^" + _escape_class(URI_RESERVED) + r"\s]+"


def capture(body: str, name: str = VALUE) -> str:
    """Wrap ``body`` in a named group."""
    return f"(?P<{name}>{body})"


def token_bounded(body: str, alphabet: str = TOKEN_CHARS) -> str:
    """Require that ``body`` is not preceded or followed by ``alphabet``.

    ``alphabet`` is the inside of a character class. A fixed or bounded
    length token embedded in a longer run of the same alphabet is then
    rejected instead of being truncated.
    """
    return f"(?<![{alphabet}])(?:{body})(?![{alphabet}])"


def word_bounded(body: str) -> str:
    r"""Surround ``body`` with ``\b`` word boundaries."""
    return rf"\b(?:{body})\b"


def one_of(*prefixes: str) -> str:
    """Non-capturing alternation of literal prefixes."""
    return "(?:" + "|".join(prefixes) + ")"


def as_text(data: Union[str, bytes, bytearray, memoryview]) -> str:
    """Return ``data`` as a str suitable for matching.

    Binary buffers are decoded as Latin-1, which maps every byte to exactly
    one code point. Decoding never fails and offsets into the result are
    byte offsets into the original buffer.
    """
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode("latin-1")
    raise TypeError(f"expected str or bytes, got {type(data).__name__}")
