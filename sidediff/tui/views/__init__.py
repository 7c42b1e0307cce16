"""TUI views for the side-by-side diff viewer."""

from sidediff.tui.views.comparison_screen import ComparisonScreen

__all__ = ["ComparisonScreen"]
