"""Models a four-component build version."""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ._encoder import format_version
from .convention import Convention


@dataclass(frozen=True, order=True)
class Version:
    """Four-component build version such as ``12.34.56.78``.

    Versions compare lexicographically over their components. The convention
    is only a formatting hint and takes no part in equality or ordering.

    Attributes:
        major: First component (generation).
        minor: Second component.
        patch: Third component.
        build: Fourth component (build or commit number).
        convention: Convention the version was parsed with, if any.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    build: int = 0
    convention: Convention | None = field(default=None, compare=False)

    @classmethod
    def parse(
        cls: type[Self],
        version_str: str | bytes,
        convention: Convention | str = Convention.GUESS,
    ) -> "Version":
        """Parse a complete version string.

        Args:
            version_str: Version text, for example "12.34.56.78".
            convention: Convention to parse with.

        Returns:
            Parsed Version instance.

        Raises:
            VersionParseError: If the text is not a single valid version.
        """
        from ._decoder import parse_version

        return parse_version(version_str, convention)

    @classmethod
    def parse_strict(
        cls: type[Self],
        version_str: str | bytes,
        convention: Convention | str = Convention.GUESS,
    ) -> "Version":
        """Parse a complete version string, returning the zero version on failure.

        Args:
            version_str: Version text, for example "12, 34, 56, 78".
            convention: Convention to parse with.

        Returns:
            Parsed Version instance, or ``Version()`` if parsing failed.
        """
        from ._decoder import parse_strict

        return parse_strict(version_str, convention)

    @property
    def is_zero(self: Self) -> bool:
        """Whether this is the zero version returned for failed parses."""
        return self.as_tuple() == (0, 0, 0, 0)

    def as_tuple(self: Self) -> tuple[int, int, int, int]:
        """Return the four components in order."""
        return (self.major, self.minor, self.patch, self.build)

    def with_convention(self: Self, convention: Convention | str | None) -> Self:
        """Return a copy of this version carrying a different convention."""
        if convention is not None:
            convention = Convention.coerce(convention)
        return replace(self, convention=convention)

    def format(self: Self, convention: Convention | str = Convention.GUESS) -> str:
        """Format this version.

        Args:
            convention: Convention deciding the separator.

        Returns:
            The formatted version.
        """
        return format_version(self, convention)

    def __str__(self: Self) -> str:
        """Return the version formatted with dots."""
        return self.format()

    def __repr__(self: Self) -> str:
        """Return detailed string representation."""
        return f"Version({self.major}, {self.minor}, {self.patch}, {self.build})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls: type[Self], source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Allow Version to be used as a pydantic field type.

        Strings are parsed leniently with ``GUESS_SPACE`` and four-item
        sequences of integers are taken as components. Values serialize to
        text in their own convention.
        """
        return core_schema.no_info_plain_validator_function(
            _validate_version,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_version, when_used="always"
            ),
        )


def compare(a: Version, b: Version) -> int:
    """Compare two versions component by component.

    The first differing component decides, from major to build.

    Args:
        a: Left version.
        b: Right version.

    Returns:
        -1 if a is lower than b, 1 if it is higher, 0 if they are equal.
    """
    for left, right in zip(a.as_tuple(), b.as_tuple(), strict=True):
        if left != right:
            return -1 if left < right else 1
    return 0


def _validate_version(value: Any) -> Version:
    if isinstance(value, Version):
        return value
    if isinstance(value, str | bytes):
        return Version.parse(value, Convention.GUESS_SPACE)
    if isinstance(value, Sequence) and len(value) == 4:  # noqa: PLR2004
        if all(isinstance(part, int) and part >= 0 for part in value):
            return Version(*value)
    raise ValueError(f"Invalid version: {value!r}")


def _serialize_version(value: Version) -> str:
    return value.format(value.convention or Convention.GUESS)
