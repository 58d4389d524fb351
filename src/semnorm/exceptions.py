"""Exceptions raised by semnorm."""

from pathlib import Path
from typing import Self


class SemnormError(Exception):
    """Base exception for all semnorm errors."""


class InvalidVersionFormatError(SemnormError, ValueError):
    """Raised when a value does not match the accepted version grammar.

    Attributes:
        value: The offending input.
    """

    def __init__(self: Self, value: str) -> None:
        """Initialize the error.

        Args:
            value: The input that failed to parse.
        """
        self.value = value
        super().__init__(f"Invalid version format: {value!r}")


class ConfigError(SemnormError):
    """Raised when a configuration file cannot be loaded.

    Attributes:
        path: Path of the offending configuration file.
        reason: Why loading failed.
    """

    def __init__(self: Self, path: Path, reason: str) -> None:
        """Initialize the error.

        Args:
            path: Path of the configuration file.
            reason: Description of the failure.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration in {path}: {reason}")
