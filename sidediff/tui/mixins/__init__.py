"""Mixins for the TUI application."""

from sidediff.tui.mixins.dual_pane import DualPaneMixin

__all__ = ["DualPaneMixin"]
