"""
Plain value formatting and HTML markup helpers for the side-by-side renderer.

format_value() pretty-prints a JSON value without any escaping; callers
escape the result exactly once with escape_html() and only then wrap it in
a highlight span, so highlight markup is never escaped itself.
"""

from __future__ import annotations

import html
import json
import math
from typing import Any

from sidediff.render.delta import DepthExceededError

DEFAULT_INDENT = 2

# Maximum nesting depth for plain formatting to prevent stack overflow
MAX_FORMAT_DEPTH = 100


class _Missing:
    """Marker for a value that does not exist on one side of the comparison."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def format_value(
    value: Any,
    indent: int = 0,
    step: int = DEFAULT_INDENT,
    max_depth: int = MAX_FORMAT_DEPTH,
    depth: int = 0,
) -> str:
    """Pretty-print a JSON value as text.

    Nested lists and mappings put one element per line, indented by
    ``step`` spaces per level relative to ``indent``. The opening bracket is
    not indented (the caller has already positioned it); the closing bracket
    is indented by ``indent``.

    Args:
        value: The value to format. MISSING formats as empty text.
        indent: Current indentation of the line holding the value.
        step: Spaces added per nesting level.
        max_depth: Maximum container nesting depth.
        depth: Current depth (used for recursion).

    Returns:
        The formatted text, unescaped.

    Raises:
        DepthExceededError: If containers nest deeper than ``max_depth``.

    Examples:
        >>> format_value([])
        '[]'
        >>> print(format_value({"a": [1, True]}))
        {
          "a": [
            1,
            true
          ]
        }
    """
    if value is MISSING:
        return ""
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, float) and not math.isfinite(value):
        # NaN and Infinity have no JSON form
        return "null"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)

    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        if depth >= max_depth:
            raise DepthExceededError(depth, max_depth)
        pad = " " * (indent + step)
        inner = ",\n".join(
            pad + format_value(item, indent + step, step, max_depth, depth + 1)
            for item in value
        )
        return f"[\n{inner}\n{' ' * indent}]"

    if isinstance(value, dict):
        if not value:
            return "{}"
        if depth >= max_depth:
            raise DepthExceededError(depth, max_depth)
        pad = " " * (indent + step)
        inner = ",\n".join(
            pad
            + format_key(key)
            + ": "
            + format_value(item, indent + step, step, max_depth, depth + 1)
            for key, item in value.items()
        )
        return f"{{\n{inner}\n{' ' * indent}}}"

    # Not a JSON type; show its string form
    return json.dumps(str(value), ensure_ascii=False)


def format_key(key: Any) -> str:
    """Format an object key as a JSON-quoted string."""
    return json.dumps(str(key), ensure_ascii=False)


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for embedding in HTML, and nothing else."""
    return html.escape(text, quote=True)


def highlight(escaped: str, css_class: str) -> str:
    """Wrap already-escaped text in a highlight span."""
    return f'<span class="{css_class}">{escaped}</span>'
