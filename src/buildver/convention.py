"""Separator conventions used to parse and format versions."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Self

from .exceptions import InvalidConventionError


class Convention(str, Enum):
    """Textual style of a version string.

    The guessing conventions infer the separator from the first one seen and
    format with dots. The ``*_SPACE`` variants additionally allow arbitrary
    whitespace around every separator and at both ends of the input.
    """

    GUESS = "guess"
    DOT = "dot"
    COMMA = "comma"
    GUESS_SPACE = "guess_space"
    DOT_SPACE = "dot_space"
    COMMA_SPACE = "comma_space"

    @classmethod
    def coerce(cls: type[Self], value: "Convention | str") -> "Convention":
        """Return the convention named by value.

        Args:
            value: A Convention or its string value. Matching is
                case-insensitive and accepts ``-`` in place of ``_``.

        Returns:
            The matching Convention.

        Raises:
            InvalidConventionError: If value does not name a convention.
        """
        if isinstance(value, Convention):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower().replace("-", "_"))
            except ValueError:
                pass
        raise InvalidConventionError(value)

    @property
    def rule(self: Self) -> "ConventionRule":
        """The parsing and formatting rule of this convention."""
        return CONVENTION_RULES[self]

    @property
    def is_guess(self: Self) -> bool:
        """Whether the separator is inferred while parsing."""
        return self.rule.separator is None

    def resolve(self: Self, separator: bytes) -> "Convention":
        """Return the concrete convention for a separator seen while parsing.

        Fixed conventions resolve to themselves.

        Args:
            separator: Separator bytes actually found in the input.

        Returns:
            The dot or comma convention of the same whitespace family.
        """
        if not self.is_guess:
            return self
        is_dot = separator.startswith(b".")
        if self.rule.whitespace:
            return Convention.DOT_SPACE if is_dot else Convention.COMMA_SPACE
        return Convention.DOT if is_dot else Convention.COMMA


@dataclass(frozen=True)
class ConventionRule:
    """How a convention parses and formats.

    Attributes:
        separator: Literal separator bytes required while parsing, or None if
            the separator is guessed from the input.
        space_after_comma: When guessing, a comma must be followed by exactly
            one space which becomes part of the separator.
        whitespace: Arbitrary whitespace is allowed around separators and at
            both ends of the input.
        format_separator: Text placed between components when formatting.
    """

    separator: bytes | None
    space_after_comma: bool
    whitespace: bool
    format_separator: str


CONVENTION_RULES: MappingProxyType[Convention, ConventionRule] = MappingProxyType(
    {
        Convention.GUESS: ConventionRule(None, True, False, "."),
        Convention.DOT: ConventionRule(b".", False, False, "."),
        Convention.COMMA: ConventionRule(b", ", False, False, ", "),
        Convention.GUESS_SPACE: ConventionRule(None, False, True, "."),
        Convention.DOT_SPACE: ConventionRule(b".", False, True, "."),
        Convention.COMMA_SPACE: ConventionRule(b",", False, True, ", "),
    }
)
