"""Shared pytest fixtures for Shallot tests."""

from pathlib import Path

import pytest

from shallot.core.ir.config import StylesheetConfig
from shallot.core.ir.tokens import ColorMode, Theme


@pytest.fixture
def default_theme() -> Theme:
    """Return the default light theme (accent hsl(312 35% 33%))."""
    return Theme()


@pytest.fixture
def dark_theme() -> Theme:
    return Theme(mode=ColorMode.DARK)


@pytest.fixture
def default_config() -> StylesheetConfig:
    return StylesheetConfig()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return an empty project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root
