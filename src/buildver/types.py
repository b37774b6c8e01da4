"""Type aliases and result types needed in the package."""

from typing import NamedTuple, Self, TypeAlias

from .exceptions import VersionParseError
from .version import Version

VersionInput: TypeAlias = bytes | bytearray | memoryview | str


class ParseResult(NamedTuple):
    """Outcome of decoding a version.

    Attributes:
        version: The decoded version. On failure it holds the components
            parsed before the error and zeros for the rest.
        consumed: Number of input bytes consumed, also on failure.
        error: None on success, otherwise an UnexpectedEndOfInputError or an
            InvalidSyntaxError whose offset equals consumed.
    """

    version: Version
    consumed: int
    error: VersionParseError | None = None

    @property
    def ok(self: Self) -> bool:
        """Whether the version was decoded without error."""
        return self.error is None

    def raise_for_error(self: Self) -> Version:
        """Return the version or raise the decoding error.

        Returns:
            The decoded version.

        Raises:
            VersionParseError: If decoding failed.
        """
        if self.error is not None:
            raise self.error
        return self.version
