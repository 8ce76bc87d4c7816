"""
Shallot CLI Package.

- app.py: the ``shallot`` typer app (css, check, init, palette)
- utils.py: shared helpers
"""

from shallot.cli.app import app, main
from shallot.cli.utils import get_version, version_callback

__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]
