"""
Side-by-side rendering of two JSON documents and the delta between them.

The left rendering shows the old document with removed and changed values
highlighted; the right rendering shows the new document with added and
changed values highlighted. Both keep the same indentation so a viewer can
align them.

Highlight markup:
    <span class="diff-removed">...</span>   (left side)
    <span class="diff-added">...</span>     (right side)

Text inside and outside the spans is HTML-escaped exactly once.

Usage:
    from sidediff.render import render

    result = render({"a": 1}, {"a": 2}, {"a": [1, 2]})
    print(result.left)
    print(result.right)
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

from sidediff.render.delta import (
    OLD_INDEX_OFFSET,
    UNCHANGED,
    ArrayNode,
    Delta,
    DeltaKind,
    DepthExceededError,
    ObjectNode,
    ensure_decoded,
)
from sidediff.render.values import (
    DEFAULT_INDENT,
    MISSING,
    escape_html,
    format_key,
    format_value,
    highlight,
)

logger = logging.getLogger(__name__)

# Maximum nesting depth for rendering to prevent stack overflow
MAX_RENDER_DEPTH = 100

ADDED_CLASS = "diff-added"
REMOVED_CLASS = "diff-removed"

LEFT = "left"
RIGHT = "right"
SIDES = (LEFT, RIGHT)

BOTH_SIDES = frozenset(SIDES)
LEFT_ONLY = frozenset([LEFT])
RIGHT_ONLY = frozenset([RIGHT])


@dataclass(frozen=True)
class RenderOptions:
    """Settings threaded through a render call.

    Attributes:
        indent: Spaces per nesting level.
        max_depth: Maximum nesting depth before DepthExceededError.
        added_class: CSS class of the "added" highlight span.
        removed_class: CSS class of the "removed" highlight span.
    """

    indent: int = DEFAULT_INDENT
    max_depth: int = MAX_RENDER_DEPTH
    added_class: str = ADDED_CLASS
    removed_class: str = REMOVED_CLASS

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent cannot be negative (got {self.indent})")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1 (got {self.max_depth})")


@dataclass(frozen=True)
class SideBySide:
    """The two marked-up renderings."""

    left: str
    right: str

    def as_dict(self) -> dict[str, str]:
        """Return the ``{left, right}`` record form."""
        return asdict(self)


@dataclass(frozen=True)
class ArrayRow:
    """One element slot of a rendered array.

    Attributes:
        position: Sort key within the array.
        left: Old element (MISSING if the slot has none).
        right: New element (MISSING if the slot has none).
        delta: Delta applying to the slot.
        sides: Sides on which the slot is shown.
    """

    position: float
    left: Any
    right: Any
    delta: Delta
    sides: frozenset[str]


def render(
    left: Any,
    right: Any,
    delta: Any,
    options: RenderOptions | None = None,
) -> SideBySide:
    """Render the left and right documents side by side.

    Args:
        left: The old document.
        right: The new document.
        delta: The raw delta from the diff component (None when the
            documents are equal), or an already decoded Delta.
        options: Rendering settings (defaults to RenderOptions()).

    Returns:
        A SideBySide holding the left and right markup.

    Raises:
        DepthExceededError: If the delta or documents nest deeper than
            ``options.max_depth``.

    Examples:
        >>> result = render({"a": 1}, {"a": 1, "b": 2}, {"b": [2]})
        >>> print(result.right)
        {
          &quot;a&quot;: 1,
          &quot;b&quot;: <span class="diff-added">2</span>
        }
    """
    if options is None:
        options = RenderOptions()

    decoded = ensure_decoded(delta, options.max_depth)
    return SideBySide(
        left=render_side(left, right, decoded, LEFT, 0, options),
        right=render_side(left, right, decoded, RIGHT, 0, options),
    )


def render_side(
    left_val: Any,
    right_val: Any,
    delta: Any,
    side: str,
    indent: int = 0,
    options: RenderOptions | None = None,
    depth: int = 0,
) -> str:
    """Render one side of one tree position.

    Args:
        left_val: The old value at this position (MISSING if absent).
        right_val: The new value at this position (MISSING if absent).
        delta: The delta at this position.
        side: "left" or "right".
        indent: Indentation of the line holding this value.
        options: Rendering settings.
        depth: Current depth (used for recursion).

    Returns:
        The markup for this side, or an empty string when the position
        does not exist on this side.
    """
    if side not in SIDES:
        raise ValueError(f"side must be 'left' or 'right' (got {side!r})")
    if options is None:
        options = RenderOptions()

    delta = ensure_decoded(delta, options.max_depth)
    kind = delta.kind

    if kind is DeltaKind.UNCHANGED:
        own = left_val if side == LEFT else right_val
        return _plain(own, indent, options, depth)

    if kind is DeltaKind.ADDED:
        if side == LEFT:
            return ""
        return _marked(delta.value, options.added_class, indent, options, depth)

    if kind is DeltaKind.DELETED:
        if side == RIGHT:
            return ""
        return _marked(delta.old, options.removed_class, indent, options, depth)

    if kind is DeltaKind.MODIFIED:
        if side == LEFT:
            return _marked(delta.old, options.removed_class, indent, options, depth)
        return _marked(delta.new, options.added_class, indent, options, depth)

    if kind is DeltaKind.MOVED:
        if side == LEFT:
            return _marked(left_val, options.removed_class, indent, options, depth)
        return _marked(right_val, options.added_class, indent, options, depth)

    if depth >= options.max_depth:
        raise DepthExceededError(depth, options.max_depth)

    if isinstance(delta, ArrayNode):
        return _render_array(left_val, right_val, delta, side, indent, options, depth)
    return _render_object(left_val, right_val, delta, side, indent, options, depth)


def _plain(value: Any, indent: int, options: RenderOptions, depth: int) -> str:
    """Format and escape a value without highlighting."""
    return escape_html(format_value(value, indent, options.indent, options.max_depth, depth))


def _marked(value: Any, css_class: str, indent: int, options: RenderOptions, depth: int) -> str:
    """Format, escape and highlight a value. Absent values render as nothing."""
    if value is MISSING:
        return ""
    return highlight(_plain(value, indent, options, depth), css_class)


def _is_hidden(delta: Delta, side: str) -> bool:
    """Added entries do not exist on the left, deleted entries not on the right."""
    if side == LEFT:
        return delta.kind is DeltaKind.ADDED
    return delta.kind is DeltaKind.DELETED


def _empty_fallback(
    left_val: Any,
    right_val: Any,
    side: str,
    placeholder: str,
    indent: int,
    options: RenderOptions,
    depth: int,
) -> str:
    """Render a container whose children were all filtered out."""
    own = left_val if side == LEFT else right_val
    if own is MISSING:
        return placeholder
    return _plain(own, indent, options, depth)


def _render_object(
    left_val: Any,
    right_val: Any,
    node: ObjectNode,
    side: str,
    indent: int,
    options: RenderOptions,
    depth: int,
) -> str:
    """Render an object node field by field, keys sorted."""
    left_map = left_val if isinstance(left_val, dict) else {}
    right_map = right_val if isinstance(right_val, dict) else {}
    child_indent = indent + options.indent
    pad = " " * child_indent

    parts: list[str] = []
    for key in sorted(set(left_map) | set(right_map)):
        child = node.child(key)
        if _is_hidden(child, side):
            continue

        text = render_side(
            left_map.get(key, MISSING),
            right_map.get(key, MISSING),
            child,
            side,
            child_indent,
            options,
            depth + 1,
        )
        if not text:
            continue
        parts.append(f"{pad}{escape_html(format_key(key))}: {text}")

    if not parts:
        return _empty_fallback(left_val, right_val, side, "{}", indent, options, depth)

    closing = " " * indent
    return "{\n" + ",\n".join(parts) + f"\n{closing}}}"


def _render_array(
    left_val: Any,
    right_val: Any,
    node: ArrayNode,
    side: str,
    indent: int,
    options: RenderOptions,
    depth: int,
) -> str:
    """Render an array node element by element."""
    left_seq = left_val if isinstance(left_val, list) else []
    right_seq = right_val if isinstance(right_val, list) else []
    child_indent = indent + options.indent
    pad = " " * child_indent

    parts: list[str] = []
    for row in array_rows(left_seq, right_seq, node):
        if side not in row.sides or _is_hidden(row.delta, side):
            continue

        text = render_side(row.left, row.right, row.delta, side, child_indent, options, depth + 1)
        if not text:
            continue
        parts.append(pad + text)

    if not parts:
        return _empty_fallback(left_val, right_val, side, "[]", indent, options, depth)

    closing = " " * indent
    return "[\n" + ",\n".join(parts) + f"\n{closing}]"


def _at(seq: list[Any], index: int) -> Any:
    """Return ``seq[index]`` or MISSING when out of range."""
    return seq[index] if 0 <= index < len(seq) else MISSING


def array_rows(left_seq: list[Any], right_seq: list[Any], node: ArrayNode) -> list[ArrayRow]:
    """Lay out the element slots of an array node in display order.

    Old elements named by underscore entries (deleted or moved away) and
    new elements named by plain "added" entries or move destinations are
    set aside; the remaining old and new elements pair up in order, so
    unaffected elements keep their relative order on both sides. Plain
    entries of any other kind apply to the paired element at their index.

    Rows sort by position. Paired and new-only rows sit at their new
    index; an old-only row sits 0.1 after the pair preceding it in the old
    array, so each side lists its elements in that array's order. The
    row positions alone decide the layout; the key order of
    ``node.entries`` does not affect it.
    """
    removed_old: dict[int, Delta] = {}
    claimed_new: dict[int, Delta] = {}
    changes_at_new: dict[int, Delta] = {}

    for entry in node.entries:
        delta = entry.delta
        if entry.from_old:
            if delta.kind is DeltaKind.DELETED:
                removed_old[entry.index] = delta
            elif delta.kind is DeltaKind.MOVED:
                removed_old[entry.index] = delta
                claimed_new[_destination(delta, entry.index)] = delta
        elif delta.kind is DeltaKind.ADDED:
            claimed_new[entry.index] = delta
        else:
            changes_at_new[entry.index] = delta

    old_survivors = [i for i in range(len(left_seq)) if i not in removed_old]
    new_survivors = [j for j in range(len(right_seq)) if j not in claimed_new]
    paired = dict(zip(old_survivors, new_survivors))

    if len(old_survivors) != len(new_survivors):
        logger.debug(
            "Array delta leaves %d old and %d new elements unpaired; showing extras one-sided",
            len(old_survivors),
            len(new_survivors),
        )

    rows: list[ArrayRow] = []
    anchor = -1.0
    for i, old in enumerate(left_seq):
        if i in paired:
            j = paired[i]
            anchor = float(j)
            rows.append(ArrayRow(anchor, old, right_seq[j], changes_at_new.get(j, UNCHANGED), BOTH_SIDES))
        else:
            delta = removed_old.get(i, UNCHANGED)
            rows.append(ArrayRow(anchor + OLD_INDEX_OFFSET, old, MISSING, delta, LEFT_ONLY))

    for j in new_survivors[len(old_survivors):]:
        rows.append(ArrayRow(float(j), MISSING, right_seq[j], UNCHANGED, RIGHT_ONLY))
    for j, delta in claimed_new.items():
        rows.append(ArrayRow(float(j), MISSING, _at(right_seq, j), delta, RIGHT_ONLY))

    # Stable: old-only rows sharing an anchor keep their old-array order
    rows.sort(key=lambda row: row.position)
    return rows


def _destination(delta: Any, fallback: int) -> int:
    """Destination index of a move, or ``fallback`` when not recorded."""
    return delta.destination if delta.destination is not None else fallback
