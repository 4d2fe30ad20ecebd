"""Exceptions raised by projectversion."""

from typing import Self


class ProjectVersionError(Exception):
    """Base exception for all projectversion errors."""


class InvalidVersionError(ProjectVersionError, ValueError):
    """Raised when a core version string is blank or malformed.

    Attributes:
        version: The offending version string.
        reason: Why the string was rejected.
    """

    def __init__(self: Self, version: str, reason: str) -> None:
        """Initialize the error.

        Args:
            version: The offending version string.
            reason: Why the string was rejected.
        """
        self.version = version
        self.reason = reason
        super().__init__(f"Invalid version '{version}': {reason}")
