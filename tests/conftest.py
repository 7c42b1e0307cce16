"""Pytest configuration and shared fixtures for sidediff tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from sidediff.render import SideBySide, render

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def left_doc() -> dict[str, Any]:
    """Return the old document of the basic comparison."""
    return {"a": 1, "b": 2}


@pytest.fixture
def right_doc() -> dict[str, Any]:
    """Return the new document of the basic comparison."""
    return {"a": 1, "b": 3, "c": 4}


@pytest.fixture
def basic_delta() -> dict[str, Any]:
    """Return the delta between left_doc and right_doc."""
    return {"b": [2, 3], "c": [4]}


@pytest.fixture
def sample_result(left_doc, right_doc, basic_delta) -> SideBySide:
    """Return the rendering of the basic comparison."""
    return render(left_doc, right_doc, basic_delta)

