"""
Single-layer unescaping of JSON string-literal escapes.

Text that was serialized as JSON and then embedded in another JSON string
carries one extra layer of escaping (``{\\"a\\":1}`` instead of
``{"a":1}``). This module removes exactly one such layer.

The transform is best-effort, not a validator: escapes it does not
understand are copied through unchanged, backslash included.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Iterator

logger = logging.getLogger(__name__)

SIMPLE_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

HEX4 = re.compile(r"[0-9a-fA-F]{4}")
HEX8 = re.compile(r"[0-9a-fA-F]{8}")

HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)


def _decode_unicode4(text: str, start: int) -> tuple[str, int] | None:
    """Decode ``\\uXXXX`` at ``start`` (pointing at the backslash).

    A high surrogate directly followed by a low surrogate escape is
    composed into one code point.
    """
    hex_run = text[start + 2:start + 6]
    if not HEX4.fullmatch(hex_run):
        return None

    code = int(hex_run, 16)
    end = start + 6

    if code in HIGH_SURROGATES and text.startswith("\\u", end):
        low_run = text[end + 2:end + 6]
        if HEX4.fullmatch(low_run):
            low = int(low_run, 16)
            if low in LOW_SURROGATES:
                code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                end += 6

    return chr(code), end


def _decode_unicode8(text: str, start: int) -> tuple[str, int] | None:
    """Decode ``\\UXXXXXXXX`` at ``start`` (pointing at the backslash)."""
    hex_run = text[start + 2:start + 10]
    if not HEX8.fullmatch(hex_run):
        return None

    code = int(hex_run, 16)
    if code > sys.maxunicode:
        return None
    return chr(code), start + 10


def _scan(text: str) -> Iterator[tuple[str, bool]]:
    """Walk ``text`` and yield ``(piece, passed_through)`` pairs.

    ``passed_through`` is True for a backslash that did not start a
    recognised escape and was therefore copied literally.
    """
    i = 0
    length = len(text)

    while i < length:
        char = text[i]
        if char != "\\" or i + 1 >= length:
            # Ordinary character, or a lone trailing backslash
            yield char, char == "\\"
            i += 1
            continue

        nxt = text[i + 1]
        decoded: tuple[str, int] | None = None
        if nxt in SIMPLE_ESCAPES:
            decoded = SIMPLE_ESCAPES[nxt], i + 2
        elif nxt == "u":
            decoded = _decode_unicode4(text, i)
        elif nxt == "U":
            decoded = _decode_unicode8(text, i)

        if decoded is None:
            yield "\\", True
            i += 1
            continue

        piece, i = decoded
        yield piece, False


def unescape_json_string(text: str) -> str:
    """Remove one layer of JSON string escaping from ``text``.

    Handles ``\\"``, ``\\\\``, ``\\n``, ``\\r``, ``\\t``, ``\\uXXXX``
    (including surrogate pairs spread over two escapes) and the extended
    ``\\UXXXXXXXX`` form. Anything else is copied through unchanged.

    Args:
        text: The escaped text.

    Returns:
        The text with one escape layer removed.

    Examples:
        >>> unescape_json_string('{\\\\"a\\\\":1}')
        '{"a":1}'
    """
    pieces: list[str] = []
    passthrough = 0
    for piece, passed_through in _scan(text):
        pieces.append(piece)
        if passed_through:
            passthrough += 1

    if passthrough:
        logger.debug("Copied %d unrecognised escape(s) through unchanged", passthrough)

    return "".join(pieces)


def count_passthrough_escapes(text: str) -> int:
    """Count the backslashes the unescape pass would copy through verbatim."""
    return sum(1 for _, passed_through in _scan(text) if passed_through)
