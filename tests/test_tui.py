"""Tests for the side-by-side viewer in sidediff/tui."""

from __future__ import annotations

import asyncio

from sidediff.tui.app import SideBySideApp
from sidediff.tui.mixins import DualPaneMixin
from sidediff.tui.views import ComparisonScreen


class TestComparisonScreenSetup:
    """Tests for screen construction and bindings."""

    def test_bindings(self):
        """The screen carries the dual-pane bindings plus sync toggle."""
        keys = {binding.key for binding in ComparisonScreen.BINDINGS}
        assert {"j", "k", "g", "G", "h", "l", "tab", "q", "s"} <= keys

    def test_initial_state(self, sample_result):
        """The left panel starts active with sync scrolling on."""
        screen = ComparisonScreen(sample_result)
        assert isinstance(screen, DualPaneMixin)
        assert screen.active_panel == "left"
        assert screen.sync_enabled is True
        assert screen.result is sample_result

    def test_app_keeps_result(self, sample_result):
        """The app holds what it was given."""
        app = SideBySideApp(sample_result, left_title="Old", right_title="New")
        assert app.result is sample_result
        assert app.left_title == "Old"
        assert app.options.indent == 2


class TestComparisonScreenInteraction:
    """Tests driving the running app."""

    def test_switch_panels_and_toggle_sync(self, sample_result):
        """Panel switching moves the active class; sync toggles off."""

        async def scenario():
            app = SideBySideApp(sample_result)
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                assert isinstance(screen, ComparisonScreen)
                assert screen.query_one("#left-panel").has_class("active")

                screen.action_switch_panel()
                await pilot.pause()
                assert screen.active_panel == "right"
                assert screen.query_one("#right-panel").has_class("active")
                assert screen.query_one("#left-panel").has_class("inactive")

                screen.action_vim_left()
                await pilot.pause()
                assert screen.active_panel == "left"

                await pilot.press("s")
                assert screen.sync_enabled is False

        asyncio.run(scenario())
