"""
JSON side-by-side diff.

Recovers well-formed JSON from malformed or multiply-escaped text and
renders two JSON documents side by side from an externally computed delta.

Usage:
    from sidediff import parse, render

    left = parse(old_text).value
    right = parse(new_text).value
    result = render(left, right, delta)
    print(result.left, result.right)
"""

from sidediff.parsing import (
    ParseErrorKind,
    ParseResult,
    RecoveryStrategy,
    extract_inner,
    format_json,
    parse,
)
from sidediff.render import (
    DepthExceededError,
    RenderOptions,
    SideBySide,
    decode_delta,
    render,
)

__version__ = "0.1.0"
__all__ = [
    "parse",
    "extract_inner",
    "format_json",
    "ParseResult",
    "ParseErrorKind",
    "RecoveryStrategy",
    "render",
    "decode_delta",
    "RenderOptions",
    "SideBySide",
    "DepthExceededError",
]
