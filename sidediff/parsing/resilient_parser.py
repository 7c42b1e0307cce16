"""
Resilient JSON recovery parser.

Turns text that may be plain JSON, a bare ``"key": value`` fragment that
lost its enclosing braces, or JSON escaped one extra time (for example a
payload logged inside another JSON string) into a ParseResult.

Recovery steps, attempted in order (first success wins):
    1. Direct ``json.loads`` of the stripped text.
    2. Brace wrapping of a bare key-value fragment.
    3. One unescape pass, then ``json.loads``.

Usage:
    from sidediff.parsing import parse, extract_inner, format_json

    result = parse('{\\"id\\": 5}')
    if result.ok:
        print(format_json(result.value))
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from sidediff.parsing.result import ParseErrorKind, ParseResult, RecoveryStrategy
from sidediff.parsing.unescape import unescape_json_string

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 2

# A quoted key followed by a colon at the very start of the text
BARE_FRAGMENT_PATTERN = re.compile(r'^"[^"]*"\s*:')

# Markers of one extra escaping layer
DOUBLE_ENCODING_PATTERN = re.compile(r'\\"|\\\\|\\[nrtuU]')

EMPTY_OR_NON_STRING = "empty or non-string input"
EMPTY_INPUT = "empty input"
INVALID_JSON = "invalid JSON"
STILL_INVALID = "still invalid after unescaping"
TOO_DEEP = "nesting too deep"


class _DepthExhausted(Exception):
    """The decoder ran out of recursion depth."""


def _reject_constant(name: str) -> Any:
    """Refuse the non-standard NaN and Infinity literals."""
    raise ValueError(f"Out of range float values are not JSON compliant: {name}")


def _loads(text: str) -> tuple[bool, Any, str | None]:
    """Run ``json.loads`` and report ``(ok, value, error_message)``.

    Raises:
        _DepthExhausted: If the input nests deeper than the decoder allows.
    """
    try:
        return True, json.loads(text, parse_constant=_reject_constant), None
    except ValueError as e:
        # JSONDecodeError, NaN/Infinity literals, integers past the digit limit
        return False, None, str(e)
    except RecursionError as e:
        raise _DepthExhausted() from e


def _looks_like_bare_fragment(text: str) -> bool:
    """Check for ``"key": value`` pairs that are missing their braces."""
    if text.startswith("{") or text.startswith("["):
        return False
    return BARE_FRAGMENT_PATTERN.match(text) is not None


def _looks_double_encoded(text: str) -> bool:
    """Check for escaped quotes, escaped backslashes or escape sequences."""
    return DOUBLE_ENCODING_PATTERN.search(text) is not None


def parse(text: Any) -> ParseResult:
    """Parse ``text`` as JSON, recovering from common malformations.

    This function never raises: every failure is returned as a
    ParseResult with ``ok=False``.

    Args:
        text: The text to parse. Anything that is not a non-empty string
            is reported as an empty input.

    Returns:
        A ParseResult describing the recovered value or the failure.

    Examples:
        >>> parse('{"a": 1}').value
        {'a': 1}
        >>> parse('"id": 5').value
        {'id': 5}
        >>> parse('').error
        'empty or non-string input'
    """
    if not isinstance(text, str) or not text:
        return ParseResult.failure(ParseErrorKind.EMPTY_INPUT, EMPTY_OR_NON_STRING)

    raw = text.strip()
    if not raw:
        return ParseResult.failure(ParseErrorKind.EMPTY_INPUT, EMPTY_INPUT)

    try:
        return _recover(raw)
    except _DepthExhausted:
        logger.debug("Decoder recursion exhausted on %d characters of input", len(raw))
        return ParseResult.failure(ParseErrorKind.DEPTH_EXCEEDED, TOO_DEEP)


def _recover(raw: str) -> ParseResult:
    """Apply the recovery steps to already-stripped, non-empty text."""
    ok, value, _ = _loads(raw)
    if ok:
        return ParseResult.success(value, RecoveryStrategy.DIRECT)

    if _looks_like_bare_fragment(raw):
        ok, value, _ = _loads("{" + raw + "}")
        if ok:
            logger.debug("Recovered bare key-value fragment by wrapping it in braces")
            return ParseResult.success(value, RecoveryStrategy.BRACE_WRAP)

    if _looks_double_encoded(raw):
        ok, value, error = _loads(unescape_json_string(raw))
        if ok:
            logger.debug("Recovered double-encoded JSON with one unescape pass")
            return ParseResult.success(value, RecoveryStrategy.UNESCAPE)
        return ParseResult.failure(ParseErrorKind.INVALID_JSON, error or STILL_INVALID)

    return ParseResult.failure(ParseErrorKind.INVALID_JSON, INVALID_JSON)


def _looks_like_json_container(text: str) -> bool:
    """Check whether a string value looks like a serialized object or array."""
    trimmed = text.strip()
    if trimmed.startswith("{") and "}" in trimmed:
        return True
    return trimmed.startswith("[") and "]" in trimmed


def extract_inner(text: Any) -> ParseResult:
    """Parse ``text`` and drill into a serialized JSON payload field.

    When the outer value is an object, its fields are scanned in order for
    a string value that itself looks like a JSON object or array. The first
    such field that parses successfully replaces the outer result, so a
    carrier like ``{"payload": "{\\"id\\": 1}"}`` yields ``{"id": 1}``.

    Args:
        text: The text to parse.

    Returns:
        The inner ParseResult when a payload field was found and parsed,
        otherwise the outer ParseResult unchanged.
    """
    result = parse(text)
    if not result.ok or not isinstance(result.value, dict):
        return result

    for key, field_value in result.value.items():
        if not isinstance(field_value, str) or not _looks_like_json_container(field_value):
            continue

        inner = parse(field_value)
        if inner.ok and inner.value is not None:
            logger.debug("Extracted inner JSON payload from field %r", key)
            return inner

    return result


def format_json(value: Any, indent: int = DEFAULT_INDENT) -> str:
    """Pretty-print ``value`` as JSON.

    Serialization failures (non-serializable objects, cyclic structures,
    excessive nesting) fall back to ``str(value)`` instead of raising.

    Args:
        value: The value to format.
        indent: Spaces per nesting level.

    Returns:
        The formatted JSON text, or the value's string form on failure.
    """
    try:
        return json.dumps(value, indent=indent, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug("Falling back to str() for unserializable value: %s", e)
        return str(value)
