"""Formatting of versions to text."""

from typing import TYPE_CHECKING

from .convention import Convention

if TYPE_CHECKING:
    from .version import Version


def _format_component(value: int) -> str:
    if value <= 0:
        return "0"
    return str(value)


def format_version(
    version: "Version", convention: Convention | str = Convention.GUESS
) -> str:
    """Format a version according to a convention.

    Components are written as plain decimal digits. Components less than or
    equal to zero are written as ``0``. Guess and dot conventions join with
    ``.``, comma conventions with ``, ``.

    Args:
        version: The version to format.
        convention: Convention deciding the separator.

    Returns:
        The formatted version.

    Raises:
        InvalidConventionError: If convention is not recognized.

    Example:
        >>> format_version(Version(12, 34, 56, 78), Convention.COMMA)
        '12, 34, 56, 78'
    """
    separator = Convention.coerce(convention).rule.format_separator
    return separator.join(_format_component(part) for part in version.as_tuple())
