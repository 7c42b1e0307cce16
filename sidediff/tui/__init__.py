"""
TUI side-by-side diff viewer.

A Textual-based terminal UI showing the left and right renderings of a
JSON comparison next to each other with synchronized scrolling.

Usage:
    uv run python -m sidediff.main view old.json new.json delta.json

Components:
    - SideBySideApp: Main application class
    - ComparisonScreen: Side-by-side comparison view
    - DualPaneMixin: Panel switching and vim-style scrolling
"""
