"""Decoding of versions from bytes."""

import logging
import sys
from typing import cast

from .convention import Convention, ConventionRule
from .exceptions import (
    InvalidSyntaxError,
    TrailingDataError,
    UnexpectedEndOfInputError,
    VersionParseError,
)
from .types import ParseResult, VersionInput
from .version import Version

logger = logging.getLogger(__name__)

COMPONENT_COUNT = 4
WHITESPACE = b" \t\n\r\x0b\x0c"
# str.isspace also accepts these, unicode White_Space does not.
_NOT_WHITESPACE = "\x1c\x1d\x1e\x1f"
MAX_COMPONENT = sys.maxsize
_MAX_DIGITS = len(str(MAX_COMPONENT))


def _as_bytes(data: VersionInput) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, bytes | bytearray | memoryview):
        return bytes(data)
    raise TypeError(f"Expected bytes or str, got {type(data).__name__}")


def _whitespace_width(data: bytes, pos: int) -> int:
    """Return the byte length of the whitespace character at pos, or 0.

    Non-ASCII whitespace such as U+00A0 or U+3000 is recognized in its UTF-8
    encoding.
    """
    if data[pos] in WHITESPACE:
        return 1
    if data[pos] < 0x80:  # noqa: PLR2004
        return 0
    for width in range(2, 5):
        try:
            char = data[pos : pos + width].decode("utf-8")
        except UnicodeDecodeError:
            continue
        if char.isspace() and char not in _NOT_WHITESPACE:
            return width
        return 0
    return 0


def _skip_whitespace(data: bytes, pos: int) -> int:
    while pos < len(data):
        width = _whitespace_width(data, pos)
        if not width:
            break
        pos += width
    return pos


def _scan_component(data: bytes, pos: int) -> tuple[int | None, int]:
    """Scan a run of ASCII digits starting at pos.

    Returns:
        The component value and the position after it, or None and pos if
        there are no digits or the value does not fit a native integer.
    """
    end = pos
    while end < len(data) and 0x30 <= data[end] <= 0x39:  # noqa: PLR2004
        end += 1
    if end == pos:
        return None, pos
    significant = data[pos:end].lstrip(b"0")
    if len(significant) > _MAX_DIGITS:
        return None, pos
    value = int(significant) if significant else 0
    if value > MAX_COMPONENT:
        return None, pos
    return value, end


def _scan_separator(
    data: bytes, pos: int, rule: ConventionRule, separator: bytes | None
) -> tuple[bytes | None, int, type[VersionParseError] | None]:
    """Scan the separator between two components.

    Args:
        data: Input being decoded.
        pos: Position just after the previous component.
        rule: Rule of the requested convention.
        separator: Separator fixed so far, or None if it is still to be
            guessed from this occurrence.

    Returns:
        The separator in effect from now on, the new position and the error
        kind if the separator is missing or wrong.
    """
    if rule.whitespace:
        pos = _skip_whitespace(data, pos)
    if pos >= len(data):
        return separator, pos, UnexpectedEndOfInputError

    if separator is None:
        first = data[pos : pos + 1]
        if first == b".":
            separator = b"."
        elif first == b",":
            separator = b", " if rule.space_after_comma else b","
        else:
            return None, pos, InvalidSyntaxError

    if len(data) - pos < len(separator):
        return separator, pos, UnexpectedEndOfInputError
    if data[pos : pos + len(separator)] != separator:
        return separator, pos, InvalidSyntaxError

    pos += len(separator)
    if rule.whitespace:
        pos = _skip_whitespace(data, pos)
    return separator, pos, None


def _failure(
    components: list[int], pos: int, error: type[VersionParseError]
) -> ParseResult:
    logger.debug("Version decoding failed: %s at offset %d", error.reason, pos)
    return ParseResult(Version(*components), pos, error(pos))


def parse(
    data: VersionInput, convention: Convention | str = Convention.GUESS
) -> ParseResult:
    """Decode a version from the start of data.

    The version is four runs of decimal digits joined by the separator of the
    convention. Input following the fourth component is left unconsumed and
    is not an error; use parse_strict or parse_version to reject it.

    Args:
        data: Input bytes. A str is encoded as UTF-8 and counted in bytes.
        convention: Convention to decode with. Guessing conventions take the
            separator from its first occurrence and require the same one at
            every later boundary.

    Returns:
        The decoded version, the number of bytes consumed and the error, if
        any. The consumed count is reported on failure too and points at the
        offending input. On success the version carries the convention that
        was actually used.

    Raises:
        InvalidConventionError: If convention is not recognized.

    Example:
        >>> parse(b"12.34.56.78")
        ParseResult(version=Version(12, 34, 56, 78), consumed=11, error=None)
    """
    convention = Convention.coerce(convention)
    rule = convention.rule
    buf = _as_bytes(data)

    separator = rule.separator
    components: list[int] = []
    pos = 0
    if rule.whitespace:
        pos = _skip_whitespace(buf, pos)
    if pos >= len(buf):
        return _failure(components, pos, UnexpectedEndOfInputError)

    for index in range(COMPONENT_COUNT):
        if index:
            separator, pos, error = _scan_separator(buf, pos, rule, separator)
            if error is not None:
                return _failure(components, pos, error)
        value, pos = _scan_component(buf, pos)
        if value is None:
            return _failure(components, pos, InvalidSyntaxError)
        components.append(value)

    if rule.whitespace:
        pos = _skip_whitespace(buf, pos)

    resolved = convention.resolve(cast(bytes, separator))
    version = Version(*components, convention=resolved)
    return ParseResult(version, pos, None)


def parse_strict(
    text: VersionInput, convention: Convention | str = Convention.GUESS
) -> Version:
    """Decode a version that must make up the whole input.

    Args:
        text: Complete version text.
        convention: Convention to decode with.

    Returns:
        The decoded version, or the zero version ``Version()`` if decoding
        failed or input was left over.

    Raises:
        InvalidConventionError: If convention is not recognized.
    """
    buf = _as_bytes(text)
    result = parse(buf, convention)
    if result.error is None and result.consumed == len(buf):
        return result.version
    return Version()


def parse_version(
    text: VersionInput, convention: Convention | str = Convention.GUESS
) -> Version:
    """Decode a version that must make up the whole input, raising on failure.

    Args:
        text: Complete version text.
        convention: Convention to decode with.

    Returns:
        The decoded version.

    Raises:
        UnexpectedEndOfInputError: If the input ends inside the version.
        InvalidSyntaxError: If the input is not a valid version.
        TrailingDataError: If input follows the version.
        InvalidConventionError: If convention is not recognized.
    """
    buf = _as_bytes(text)
    result = parse(buf, convention)
    version = result.raise_for_error()
    if result.consumed != len(buf):
        raise TrailingDataError(result.consumed)
    return version
