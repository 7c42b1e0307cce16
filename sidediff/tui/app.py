"""
Main Textual application for the side-by-side diff viewer.

This is the entry point for the TUI that shows a rendered comparison of two
JSON documents.
"""

from __future__ import annotations

from textual.app import App

from sidediff.render import RenderOptions, SideBySide
from sidediff.tui.views.comparison_screen import ComparisonScreen


class SideBySideApp(App):
    """A Textual app showing two JSON renderings side by side."""

    TITLE = "JSON Side-by-Side Diff"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        result: SideBySide,
        left_title: str = "Left",
        right_title: str = "Right",
        options: RenderOptions | None = None,
    ) -> None:
        """Initialize the app.

        Args:
            result: The two renderings to display.
            left_title: Header of the left panel.
            right_title: Header of the right panel.
            options: The options the renderings were produced with.
        """
        super().__init__()
        self.result = result
        self.left_title = left_title
        self.right_title = right_title
        self.options = options or RenderOptions()

    def on_mount(self) -> None:
        """Show the comparison screen."""
        self.push_screen(
            ComparisonScreen(
                self.result,
                left_title=self.left_title,
                right_title=self.right_title,
                options=self.options,
            )
        )
