"""Core Shallot functionality: token model, theme resolution, responsive compilation, CSS generators."""

from . import ir
from .errors import ConfigLoadError, ConfigLocation, InvalidConfigError, ShallotError
from .responsive import Breakpoint, ResponsiveProperty, ResponsiveValue, compile_property, resolve
from .stylesheet import Stylesheet, all_css, build_stylesheet
from .theme import theme_css, theme_variables

__all__ = [
    "ir",
    "ShallotError",
    "InvalidConfigError",
    "ConfigLoadError",
    "ConfigLocation",
    "Breakpoint",
    "ResponsiveValue",
    "ResponsiveProperty",
    "compile_property",
    "resolve",
    "Stylesheet",
    "all_css",
    "build_stylesheet",
    "theme_css",
    "theme_variables",
]
