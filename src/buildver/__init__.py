"""buildver - parse and format four-component build versions.

A package for decoding versions such as ``12.34.56.78`` or ``12, 34, 56, 78``,
guessing the separator convention when it is not known, and formatting them
back in a chosen convention.
"""

from ._decoder import parse, parse_strict, parse_version
from ._encoder import format_version
from ._version import __version__
from .convention import CONVENTION_RULES, Convention, ConventionRule
from .exceptions import (
    BuildverError,
    InvalidConventionError,
    InvalidSyntaxError,
    TrailingDataError,
    UnexpectedEndOfInputError,
    VersionParseError,
)
from .types import ParseResult, VersionInput
from .version import Version, compare

__all__ = [
    "CONVENTION_RULES",
    "BuildverError",
    "Convention",
    "ConventionRule",
    "InvalidConventionError",
    "InvalidSyntaxError",
    "ParseResult",
    "TrailingDataError",
    "UnexpectedEndOfInputError",
    "Version",
    "VersionInput",
    "VersionParseError",
    "__version__",
    "compare",
    "format_version",
    "parse",
    "parse_strict",
    "parse_version",
]
