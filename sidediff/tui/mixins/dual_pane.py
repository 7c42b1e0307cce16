"""
Dual Pane Mixin for left/right panel switching and scrolling.

Provides consistent panel behavior for side-by-side screens:
- action_switch_panel(): Toggle between left and right panels
- action_vim_left() / action_vim_right(): Focus a specific panel (h/l keys)
- action_vim_down() / action_vim_up() / action_vim_top() / action_vim_bottom():
  Scroll the active panel (j/k/g/G keys)
- _update_panel_styles(): Update active/inactive CSS classes on panels
- _focus_active_widget(): Abstract method subclasses must implement
- _active_scroll(): Abstract method returning the active panel's scroll container

Usage:
    class MyDualPaneScreen(DualPaneMixin, Screen):
        BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [...]

        def _focus_active_widget(self) -> None:
            ...

        def _active_scroll(self) -> ScrollableContainer:
            ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.binding import Binding
from textual.css.query import NoMatches

if TYPE_CHECKING:
    from textual.containers import ScrollableContainer


class DualPaneMixin:
    """Mixin for screens with left/right panel switching.

    Class Attributes:
        DUAL_PANE_BINDINGS: All bindings for dual-pane screens (vim
            scrolling plus panel switching).
    """

    DUAL_PANE_BINDINGS = [
        # Vim scrolling in the active panel
        Binding("j", "vim_down", "Down", show=False),
        Binding("k", "vim_up", "Up", show=False),
        Binding("g", "vim_top", "Top", show=False),
        Binding("G", "vim_bottom", "Bottom", show=False),
        # Panel switching (h/l vim-style + arrow keys + tab)
        Binding("h", "vim_left", "Left Panel", show=False),
        Binding("l", "vim_right", "Right Panel", show=False),
        Binding("left", "vim_left", "Left Panel", show=False),
        Binding("right", "vim_right", "Right Panel", show=False),
        Binding("tab", "switch_panel", "Switch Panel", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    _active_panel: str = "left"
    """Currently active panel identifier ('left' or 'right')."""

    @property
    def active_panel(self) -> str:
        """Return the active panel identifier ('left' or 'right')."""
        return self._active_panel

    def action_switch_panel(self) -> None:
        """Toggle between left and right panels."""
        self._active_panel = "right" if self._active_panel == "left" else "left"
        self._update_panel_styles()
        self._focus_active_widget()

    def action_vim_left(self) -> None:
        """Switch to left panel (vim h key)."""
        if self._active_panel != "left":
            self._active_panel = "left"
            self._update_panel_styles()
            self._focus_active_widget()

    def action_vim_right(self) -> None:
        """Switch to right panel (vim l key)."""
        if self._active_panel != "right":
            self._active_panel = "right"
            self._update_panel_styles()
            self._focus_active_widget()

    def action_vim_down(self) -> None:
        """Scroll the active panel down one line (vim j key)."""
        self._active_scroll().scroll_down()

    def action_vim_up(self) -> None:
        """Scroll the active panel up one line (vim k key)."""
        self._active_scroll().scroll_up()

    def action_vim_top(self) -> None:
        """Scroll the active panel to the top (vim g key)."""
        self._active_scroll().scroll_home()

    def action_vim_bottom(self) -> None:
        """Scroll the active panel to the bottom (vim G key)."""
        self._active_scroll().scroll_end()

    def action_quit(self) -> None:
        """Exit the application."""
        self.app.exit()

    def _update_panel_styles(self) -> None:
        """Update active/inactive CSS classes on panels.

        Queries for #left-panel and #right-panel widgets and updates
        their CSS classes based on which panel is currently active.
        Handles missing panels gracefully.
        """
        try:
            left = self.query_one("#left-panel")
            right = self.query_one("#right-panel")
        except NoMatches:
            return

        for panel, side in [(left, "left"), (right, "right")]:
            if self._active_panel == side:
                panel.remove_class("inactive")
                panel.add_class("active")
            else:
                panel.remove_class("active")
                panel.add_class("inactive")

    def _focus_active_widget(self) -> None:
        """Focus the appropriate widget in the active panel."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _focus_active_widget()"
        )

    def _active_scroll(self) -> ScrollableContainer:
        """Return the scroll container of the active panel."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _active_scroll()"
        )
