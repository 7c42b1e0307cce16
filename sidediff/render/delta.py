"""
Decoding of externally computed diff deltas into tagged variants.

The external diff component encodes each tree position by shape:

    None                    unchanged
    [new]                   added
    [old, new]              modified
    [old, 0, 0]             deleted
    [old, dest, 3]          moved (dest: index in the new array)
    {"key": ...}            object node, recurse by field name
    {"_t": "a", ...}        array node, "k" keys address the new array,
                            "_k" keys address the old array

The raw delta is decoded once at the render boundary; everything
downstream dispatches on ``Delta.kind`` instead of re-inspecting shapes.
Shapes that match none of the above decode to Unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

logger = logging.getLogger(__name__)

ARRAY_MARKER_KEY = "_t"
ARRAY_MARKER = "a"
OLD_INDEX_PREFIX = "_"

DELETED_MARKER = 0
MOVED_MARKER = 3

# Old-array positions sort just after new-array positions with the same index
OLD_INDEX_OFFSET = 0.1

# Maximum nesting depth of node deltas to prevent stack overflow
MAX_DELTA_DEPTH = 100


class DeltaKind(Enum):
    """Classification of a delta position."""

    UNCHANGED = "unchanged"
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    MOVED = "moved"
    NODE = "node"


class DepthExceededError(ValueError):
    """Raised when a delta or value nests deeper than the configured limit."""

    def __init__(self, depth: int, limit: int) -> None:
        super().__init__(f"Nesting depth {depth} exceeds limit of {limit}")
        self.depth = depth
        self.limit = limit


@dataclass(frozen=True)
class Unchanged:
    kind = DeltaKind.UNCHANGED


@dataclass(frozen=True)
class Added:
    value: Any
    kind = DeltaKind.ADDED


@dataclass(frozen=True)
class Modified:
    old: Any
    new: Any
    kind = DeltaKind.MODIFIED


@dataclass(frozen=True)
class Deleted:
    old: Any
    kind = DeltaKind.DELETED


@dataclass(frozen=True)
class Moved:
    """An array element that changed position.

    Attributes:
        old: The value recorded by the diff component (often empty).
        destination: Index in the new array, or None when not recorded.
    """

    old: Any
    destination: int | None
    kind = DeltaKind.MOVED


@dataclass(frozen=True)
class ObjectNode:
    """Nested changes inside an object, keyed by field name."""

    children: dict[str, "Delta"] = field(default_factory=dict)
    kind = DeltaKind.NODE

    def child(self, key: str) -> "Delta":
        """Return the child delta for ``key`` (Unchanged when absent)."""
        return self.children.get(key, UNCHANGED)


@dataclass(frozen=True)
class ArrayEntry:
    """One keyed entry of an array node.

    Attributes:
        key: The raw key ("3" or "_3").
        index: The numeric index the key names.
        from_old: True for underscore keys, which address the old array.
        delta: The decoded child delta.
    """

    key: str
    index: int
    from_old: bool
    delta: "Delta"

    @property
    def position(self) -> float:
        """Sort position: ``index`` for new keys, ``index + 0.1`` for old keys."""
        return self.index + OLD_INDEX_OFFSET if self.from_old else float(self.index)


@dataclass(frozen=True)
class ArrayNode:
    """Nested changes inside an array, entries already in traversal order."""

    entries: tuple[ArrayEntry, ...] = ()
    kind = DeltaKind.NODE


Delta = Union[Unchanged, Added, Modified, Deleted, Moved, ObjectNode, ArrayNode]

UNCHANGED = Unchanged()


def _is_marker(value: Any, marker: int) -> bool:
    """Match an integer marker exactly (``False`` and ``0.0`` never match)."""
    return type(value) is int and value == marker


def _parse_array_key(key: Any) -> tuple[int, bool] | None:
    """Split an array delta key into ``(index, from_old)``.

    Returns None for the array marker and for keys that name no index.
    """
    if not isinstance(key, str) or key == ARRAY_MARKER_KEY:
        return None

    from_old = key.startswith(OLD_INDEX_PREFIX)
    digits = key[len(OLD_INDEX_PREFIX):] if from_old else key
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(digits), from_old


def array_key_order(raw: dict[str, Any]) -> list[str]:
    """Return the keys of a raw array delta in traversal order.

    A plain index ``k`` sorts at ``k``; an underscore index ``_k`` sorts at
    ``k + 0.1`` so a deletion is visited right after an insertion or
    modification at the same nominal position. Ties keep their original
    order; keys naming no index (including ``_t``) are dropped.

    Examples:
        >>> array_key_order({"_t": "a", "_1": [2, 0, 0], "1": [9], "0": [1, 2]})
        ['0', '1', '_1']
    """
    keyed: list[tuple[float, str]] = []
    for key in raw:
        parsed = _parse_array_key(key)
        if parsed is None:
            continue
        index, from_old = parsed
        keyed.append((index + OLD_INDEX_OFFSET if from_old else float(index), key))

    keyed.sort(key=lambda pair: pair[0])
    return [key for _, key in keyed]


def is_array_delta(raw: Any) -> bool:
    """Check for the ``_t: "a"`` array marker."""
    return isinstance(raw, dict) and raw.get(ARRAY_MARKER_KEY) == ARRAY_MARKER


def decode_delta(raw: Any, max_depth: int = MAX_DELTA_DEPTH, depth: int = 0) -> Delta:
    """Decode a raw delta into its tagged variant.

    Args:
        raw: The raw delta (None, a marker list, or a mapping).
        max_depth: Maximum nesting depth of node deltas.
        depth: Current depth (used for recursion).

    Returns:
        The decoded Delta. Unrecognised shapes decode to Unchanged.

    Raises:
        DepthExceededError: If node deltas nest deeper than ``max_depth``.

    Examples:
        >>> decode_delta([5])
        Added(value=5)
        >>> decode_delta([1, 0, 0])
        Deleted(old=1)
        >>> decode_delta("garbage")
        Unchanged()
    """
    if raw is None:
        return UNCHANGED

    if isinstance(raw, list):
        return _decode_marker_list(raw)

    if isinstance(raw, dict) and raw:
        if depth >= max_depth:
            raise DepthExceededError(depth, max_depth)
        if is_array_delta(raw):
            return _decode_array_node(raw, max_depth, depth)
        return ObjectNode(
            children={
                key: decode_delta(child, max_depth, depth + 1)
                for key, child in raw.items()
            }
        )

    logger.debug("Unrecognised delta shape %s, treating as unchanged", type(raw).__name__)
    return UNCHANGED


def _decode_marker_list(raw: list[Any]) -> Delta:
    """Decode the short marker lists."""
    if len(raw) == 1:
        return Added(raw[0])
    if len(raw) == 2:
        return Modified(raw[0], raw[1])
    if len(raw) == 3:
        if _is_marker(raw[2], DELETED_MARKER):
            return Deleted(raw[0])
        if _is_marker(raw[2], MOVED_MARKER):
            destination = raw[1] if type(raw[1]) is int and raw[1] >= 0 else None
            return Moved(raw[0], destination)

    logger.debug("Unrecognised delta list of length %d, treating as unchanged", len(raw))
    return UNCHANGED


def _decode_array_node(raw: dict[str, Any], max_depth: int, depth: int) -> ArrayNode:
    """Decode an ``_t: "a"`` mapping into an ordered ArrayNode."""
    entries = []
    for key in array_key_order(raw):
        index, from_old = _parse_array_key(key)
        entries.append(
            ArrayEntry(
                key=key,
                index=index,
                from_old=from_old,
                delta=decode_delta(raw[key], max_depth, depth + 1),
            )
        )
    return ArrayNode(entries=tuple(entries))


DELTA_TYPES = (Unchanged, Added, Modified, Deleted, Moved, ObjectNode, ArrayNode)


def ensure_decoded(delta: Any, max_depth: int = MAX_DELTA_DEPTH) -> Delta:
    """Return ``delta`` unchanged if already decoded, otherwise decode it."""
    if isinstance(delta, DELTA_TYPES):
        return delta
    return decode_delta(delta, max_depth)
