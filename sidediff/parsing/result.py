"""
Result types returned by the resilient parser.

The parser never raises to its caller: every outcome, successful or not,
is described by a ParseResult.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ParseErrorKind(Enum):
    """Why a parse attempt failed."""

    EMPTY_INPUT = "empty_input"
    INVALID_JSON = "invalid_json"
    DEPTH_EXCEEDED = "depth_exceeded"


class RecoveryStrategy(Enum):
    """Which recovery step produced a successful value."""

    DIRECT = "direct"
    BRACE_WRAP = "brace_wrap"
    UNESCAPE = "unescape"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a piece of text as JSON.

    Exactly one of ``value`` and ``error`` is meaningful, depending on ``ok``.
    Note that a successful result may still carry ``value=None`` when the
    text was the JSON literal ``null``.

    Attributes:
        ok: Whether a JSON value was recovered.
        value: The parsed value (None on failure).
        error: Human-readable failure message (None on success).
        error_kind: Category of the failure (None on success).
        strategy: The recovery step that succeeded (None on failure).
    """

    ok: bool
    value: Any = None
    error: str | None = None
    error_kind: ParseErrorKind | None = None
    strategy: RecoveryStrategy | None = None

    def __post_init__(self) -> None:
        if self.ok:
            if self.error is not None or self.error_kind is not None:
                raise ValueError("A successful ParseResult cannot carry an error")
        else:
            if self.value is not None:
                raise ValueError("A failed ParseResult cannot carry a value")
            if self.error is None:
                raise ValueError("A failed ParseResult must carry an error message")

    @classmethod
    def success(cls, value: Any, strategy: RecoveryStrategy) -> "ParseResult":
        """Build a successful result."""
        return cls(ok=True, value=value, strategy=strategy)

    @classmethod
    def failure(cls, kind: ParseErrorKind, message: str) -> "ParseResult":
        """Build a failed result."""
        return cls(ok=False, error=message, error_kind=kind)

    def as_dict(self) -> dict[str, Any]:
        """Return the ``{ok, value, error}`` record form."""
        return {"ok": self.ok, "value": self.value, "error": self.error}
