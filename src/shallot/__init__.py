"""
Shallot - design-token, theme and responsive-style engine.

Turns an accent seed, a color mode, token scales, breakpoints and
animation presets into one deterministic stylesheet for zero-JavaScript UIs.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import ConfigLoadError, InvalidConfigError, ShallotError
from .core.ir.config import StylesheetConfig
from .core.ir.tokens import ColorMode, Theme
from .core.stylesheet import Stylesheet, all_css, build_stylesheet


def _get_version() -> str:
    try:
        return _metadata_version("shallot")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "ShallotError",
    "InvalidConfigError",
    "ConfigLoadError",
    "StylesheetConfig",
    "ColorMode",
    "Theme",
    "Stylesheet",
    "all_css",
    "build_stylesheet",
]
