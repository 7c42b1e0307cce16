"""
Terminal display of side-by-side renderings using rich.

Converts the renderer's HTML-annotated markup into rich Text objects,
mapping each highlight class to a terminal style.
"""

from __future__ import annotations

import html
import re

from rich.table import Table
from rich.text import Text

from sidediff.render.side_by_side import RenderOptions, SideBySide

ADDED_STYLE = "bold green"
REMOVED_STYLE = "bold red strike"

SPAN_PATTERN = re.compile(r'<span class="([^"]*)">(.*?)</span>', re.DOTALL)


def _class_styles(options: RenderOptions) -> dict[str, str]:
    """Map the configured highlight classes to terminal styles."""
    return {
        options.added_class: ADDED_STYLE,
        options.removed_class: REMOVED_STYLE,
    }


def to_rich_text(markup: str, options: RenderOptions | None = None) -> Text:
    """Convert renderer markup into a styled rich Text.

    Highlighted segments get the style mapped from their class; unknown
    classes and unmarked text are appended unstyled. HTML entities are
    decoded in both.

    Args:
        markup: One side of a SideBySide.
        options: The options the markup was rendered with.

    Returns:
        A rich Text ready for printing.

    Examples:
        >>> to_rich_text('"a": <span class="diff-added">1</span>').plain
        '"a": 1'
    """
    if options is None:
        options = RenderOptions()
    styles = _class_styles(options)

    text = Text()
    position = 0
    for match in SPAN_PATTERN.finditer(markup):
        if match.start() > position:
            text.append(html.unescape(markup[position:match.start()]))
        css_class, content = match.group(1), match.group(2)
        text.append(html.unescape(content), style=styles.get(css_class))
        position = match.end()

    if position < len(markup):
        text.append(html.unescape(markup[position:]))

    return text


def side_by_side_table(
    result: SideBySide,
    left_title: str = "Left",
    right_title: str = "Right",
    options: RenderOptions | None = None,
) -> Table:
    """Build a two-column rich Table showing both renderings.

    Args:
        result: The renderings to show.
        left_title: Header of the left column.
        right_title: Header of the right column.
        options: The options the markup was rendered with.

    Returns:
        A Table with one row holding both sides.
    """
    table = Table(show_lines=False, expand=True)
    table.add_column(left_title, ratio=1, overflow="fold")
    table.add_column(right_title, ratio=1, overflow="fold")
    table.add_row(to_rich_text(result.left, options), to_rich_text(result.right, options))
    return table
