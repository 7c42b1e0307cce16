"""
Comparison Screen for side-by-side JSON diff viewing.

Displays the left (old) rendering alongside the right (new) rendering in a
split-screen view with synchronized scrolling.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from sidediff.render import RenderOptions, SideBySide
from sidediff.render.terminal import to_rich_text
from sidediff.tui.mixins import DualPaneMixin


class ComparisonScreen(DualPaneMixin, Screen):
    """Side-by-side diff view.

    The left panel shows the old document with removals highlighted, the
    right panel the new document with additions highlighted.
    """

    CSS = """
    ComparisonScreen {
        layout: vertical;
    }

    #comparison-container {
        height: 1fr;
    }

    #left-panel, #right-panel {
        width: 50%;
        border: solid $primary;
        padding: 0 1;
    }

    #left-panel {
        border-right: none;
    }

    #left-panel.active, #right-panel.active {
        border: solid $accent;
    }

    .panel-header {
        dock: top;
        height: 1;
        text-align: center;
        text-style: bold;
    }

    #left-scroll, #right-scroll {
        height: 1fr;
    }
    """

    BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [
        Binding("s", "toggle_sync", "Sync Scroll"),
    ]

    def __init__(
        self,
        result: SideBySide,
        left_title: str = "Left",
        right_title: str = "Right",
        options: RenderOptions | None = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the ComparisonScreen.

        Args:
            result: The two renderings to display.
            left_title: Header of the left panel.
            right_title: Header of the right panel.
            options: The options the renderings were produced with.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._result = result
        self._left_title = left_title
        self._right_title = right_title
        self._options = options or RenderOptions()
        self._sync_enabled: bool = True

    def compose(self) -> ComposeResult:
        """Compose the screen layout with side-by-side panels."""
        yield Header()
        with Horizontal(id="comparison-container"):
            with Vertical(id="left-panel", classes="active"):
                yield Static(self._left_title, classes="panel-header")
                with VerticalScroll(id="left-scroll"):
                    yield Static(to_rich_text(self._result.left, self._options), id="left-content")
            with Vertical(id="right-panel", classes="inactive"):
                yield Static(self._right_title, classes="panel-header")
                with VerticalScroll(id="right-scroll"):
                    yield Static(to_rich_text(self._result.right, self._options), id="right-content")
        yield Footer()

    def on_mount(self) -> None:
        """Hook up scroll synchronization and focus the left panel."""
        left_scroll = self.query_one("#left-scroll", VerticalScroll)
        right_scroll = self.query_one("#right-scroll", VerticalScroll)

        self.watch(left_scroll, "scroll_y", self._on_left_scrolled, init=False)
        self.watch(right_scroll, "scroll_y", self._on_right_scrolled, init=False)

        left_scroll.focus()
        self._update_panel_styles()

    def _on_left_scrolled(self, scroll_y: float) -> None:
        """Mirror the left panel's scroll position on the right panel."""
        if self._sync_enabled:
            self.query_one("#right-scroll", VerticalScroll).scroll_to(y=scroll_y, animate=False)

    def _on_right_scrolled(self, scroll_y: float) -> None:
        """Mirror the right panel's scroll position on the left panel."""
        if self._sync_enabled:
            self.query_one("#left-scroll", VerticalScroll).scroll_to(y=scroll_y, animate=False)

    def _active_scroll(self) -> VerticalScroll:
        """Return the scroll container of the active panel."""
        return self.query_one(f"#{self._active_panel}-scroll", VerticalScroll)

    def _focus_active_widget(self) -> None:
        """Focus the scroll container of the active panel."""
        self._active_scroll().focus()

    def action_toggle_sync(self) -> None:
        """Toggle synchronized scrolling between panels."""
        self._sync_enabled = not self._sync_enabled
        status = "enabled" if self._sync_enabled else "disabled"
        self.notify(f"Sync scroll {status}")

    @property
    def result(self) -> SideBySide:
        """Get the displayed renderings."""
        return self._result

    @property
    def sync_enabled(self) -> bool:
        """Check if sync scrolling is enabled."""
        return self._sync_enabled
