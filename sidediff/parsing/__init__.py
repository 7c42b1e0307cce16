"""
Resilient JSON recovery parsing.

Usage:
    from sidediff.parsing import parse, extract_inner, format_json

    result = parse('"id": 5')        # bare fragment, braces restored
    result = parse('{\\"a\\": 1}')   # double-encoded, one layer removed
    if result.ok:
        print(format_json(result.value))
    else:
        print(result.error_kind, result.error)
"""

from sidediff.parsing.resilient_parser import (
    DEFAULT_INDENT,
    extract_inner,
    format_json,
    parse,
)
from sidediff.parsing.result import ParseErrorKind, ParseResult, RecoveryStrategy
from sidediff.parsing.unescape import count_passthrough_escapes, unescape_json_string

__all__ = [
    # Parsing
    "parse",
    "extract_inner",
    "format_json",
    "DEFAULT_INDENT",
    # Results
    "ParseResult",
    "ParseErrorKind",
    "RecoveryStrategy",
    # Unescaping
    "unescape_json_string",
    "count_passthrough_escapes",
]
