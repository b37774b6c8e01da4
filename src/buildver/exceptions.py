"""Exceptions raised or returned by buildver."""

from typing import Self


class BuildverError(Exception):
    """Base exception for all buildver errors."""


class VersionParseError(BuildverError, ValueError):
    """Raised or returned when a version string cannot be decoded.

    Attributes:
        offset: Number of input bytes consumed before the failure.
        message: Human readable description of the failure.
    """

    reason = "invalid version"

    def __init__(self: Self, offset: int, message: str | None = None) -> None:
        """Initialize the error.

        Args:
            offset: Number of input bytes consumed before the failure.
            message: Optional description. Defaults to the class reason.
        """
        self.offset = offset
        self.message = message or self.reason
        super().__init__(f"{self.message} at offset {offset}")

    def __eq__(self: Self, other: object) -> bool:
        """Errors are equal when their kind and offset match."""
        if not isinstance(other, VersionParseError):
            return NotImplemented
        return type(self) is type(other) and self.offset == other.offset

    def __hash__(self: Self) -> int:
        """Hash on kind and offset."""
        return hash((type(self), self.offset))


class UnexpectedEndOfInputError(VersionParseError):
    """More input was structurally required than was available."""

    reason = "unexpected end of input"


class InvalidSyntaxError(VersionParseError):
    """The available input violates the version grammar."""

    reason = "invalid syntax"


class TrailingDataError(VersionParseError):
    """A version was decoded but unconsumed input remains."""

    reason = "unexpected trailing data"


class InvalidConventionError(BuildverError, ValueError):
    """Raised when a convention tag is not recognized."""

    def __init__(self: Self, value: object) -> None:
        """Initialize the error.

        Args:
            value: The rejected convention value.
        """
        self.value = value
        super().__init__(f"Invalid convention: {value!r}")


class ConfigError(BuildverError):
    """Raised when the buildver configuration cannot be loaded."""
