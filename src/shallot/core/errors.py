"""
Error types for Shallot token, theme and stylesheet validation.

Every failure in the engine is a construction-time validation error over
the token/config model. Nothing is retried and no partial CSS is emitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConfigLocation:
    """
    Where an invalid value came from.

    Attributes:
        config: Config area that failed (e.g. "responsive_value", "scale.radius")
        token: Optional token, breakpoint or property name inside that area
        file: Optional source file when the value was loaded from YAML
    """

    config: str
    token: str | None = None
    file: Path | None = None

    def format(self) -> str:
        """
        Format the location as a human-readable string.

        Returns:
            Formatted string like: "shallot.yaml: scale.radius[md]"
        """
        location = self.config
        if self.token is not None:
            location += f"[{self.token}]"
        if self.file is not None:
            location = f"{self.file}: {location}"
        return location


class ShallotError(Exception):
    """Base exception for all Shallot errors."""

    def __init__(self, message: str, location: ConfigLocation | None = None):
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location:
            return f"{self.location.format()}: {self.message}"
        return self.message


class InvalidConfigError(ShallotError):
    """
    Raised when a token or layout/animation config fails validation.

    Examples:
    - ResponsiveValue without a base entry and no default
    - Keyframe offsets that are not strictly increasing
    - Custom animation name colliding with a preset
    - Spacing or radius scale that is not strictly increasing
    - Palette missing a semantic role
    """

    @property
    def config(self) -> str | None:
        return self.location.config if self.location else None

    @property
    def token(self) -> str | None:
        return self.location.token if self.location else None


class ConfigLoadError(ShallotError):
    """
    Raised when shallot.yaml cannot be read or parsed.

    Examples:
    - Missing file when defaults are disabled
    - Invalid YAML
    - Schema violations reported by pydantic
    """

    pass


def make_config_error(
    message: str,
    config: str,
    token: str | None = None,
    file: Path | None = None,
) -> InvalidConfigError:
    """
    Helper to create an InvalidConfigError with location context.

    Args:
        message: Error description
        config: Config area that failed validation
        token: Optional token/breakpoint/property name
        file: Optional source file

    Returns:
        InvalidConfigError with location attached
    """
    return InvalidConfigError(message, ConfigLocation(config=config, token=token, file=file))
