"""
Side-by-side diff rendering.

Usage:
    from sidediff.render import render, RenderOptions

    result = render(left, right, delta, RenderOptions(indent=4))
    print(result.left)   # old document, removals highlighted
    print(result.right)  # new document, additions highlighted
"""

from sidediff.render.delta import (
    Added,
    ArrayEntry,
    ArrayNode,
    Deleted,
    Delta,
    DeltaKind,
    DepthExceededError,
    Modified,
    Moved,
    ObjectNode,
    Unchanged,
    array_key_order,
    decode_delta,
)
from sidediff.render.side_by_side import (
    ADDED_CLASS,
    LEFT,
    MAX_RENDER_DEPTH,
    REMOVED_CLASS,
    RIGHT,
    RenderOptions,
    SideBySide,
    render,
    render_side,
)
from sidediff.render.values import MISSING, escape_html, format_value

__all__ = [
    # Rendering
    "render",
    "render_side",
    "RenderOptions",
    "SideBySide",
    "LEFT",
    "RIGHT",
    "ADDED_CLASS",
    "REMOVED_CLASS",
    "MAX_RENDER_DEPTH",
    "DepthExceededError",
    # Delta decoding
    "decode_delta",
    "array_key_order",
    "Delta",
    "DeltaKind",
    "Unchanged",
    "Added",
    "Modified",
    "Deleted",
    "Moved",
    "ObjectNode",
    "ArrayNode",
    "ArrayEntry",
    # Value formatting
    "format_value",
    "escape_html",
    "MISSING",
]
