"""Command-line interface for buildver."""

from pathlib import Path
from typing import Annotated

import typer

from .._decoder import parse, parse_version
from .._encoder import format_version
from ..convention import Convention
from ..exceptions import ConfigError, TrailingDataError, VersionParseError
from ..version import Version, compare
from ._helpers import (
    ParseReport,
    configure_logging,
    console,
    print_conventions_table,
    print_error,
    print_error_location,
    print_parse_table,
    print_success,
)
from .config import load_config

app = typer.Typer(help="Parse and format four-component build versions")

ConventionOption = Annotated[
    Convention | None,
    typer.Option(
        ...,
        "--convention",
        "-c",
        help="Separator convention (default from config)",
        case_sensitive=False,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        help="Path to config file (buildver.toml or pyproject.toml)",
    ),
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option(..., "--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Parse and format four-component build versions."""
    configure_logging(verbose)


def _parse_or_exit(text: str, convention: Convention) -> Version:
    try:
        return parse_version(text, convention)
    except VersionParseError as e:
        print_error(f"Cannot parse '{text}': {e}")
        print_error_location(text, e.offset)
        raise typer.Exit(1) from e


@app.command("parse")
def parse_command(
    text: Annotated[str, typer.Argument(..., help="Version text to parse")],
    convention: ConventionOption = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            ...,
            "--strict/--no-strict",
            help="Reject input following the version (default from config)",
        ),
    ] = None,
    as_json: Annotated[
        bool, typer.Option(..., "--json", help="Print the result as JSON")
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Parse a version and show its components."""
    try:
        cfg = load_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    result = parse(text, convention or cfg.convention)
    use_strict = cfg.strict if strict is None else strict
    if result.ok and use_strict and result.consumed != len(text.encode("utf-8")):
        result = result._replace(error=TrailingDataError(result.consumed))

    if as_json:
        console.print_json(ParseReport.from_result(text, result).model_dump_json())
    elif result.error is None:
        print_parse_table(text, result)

    if result.error is not None:
        if not as_json:
            print_error(str(result.error))
            print_error_location(text, result.error.offset)
        raise typer.Exit(1)


@app.command("format")
def format_command(
    major: Annotated[int, typer.Argument(..., help="First component")],
    minor: Annotated[int, typer.Argument(..., help="Second component")],
    patch: Annotated[int, typer.Argument(..., help="Third component")],
    build: Annotated[int, typer.Argument(..., help="Fourth component")],
    convention: ConventionOption = None,
    config: ConfigOption = None,
) -> None:
    """Format four components as a version."""
    try:
        cfg = load_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    version = Version(major, minor, patch, build)
    console.print(
        format_version(version, convention or cfg.format_convention), highlight=False
    )


@app.command()
def convert(
    text: Annotated[str, typer.Argument(..., help="Version text to convert")],
    to_convention: Annotated[
        Convention,
        typer.Option(..., "--to", "-t", help="Target convention", case_sensitive=False),
    ],
    from_convention: Annotated[
        Convention | None,
        typer.Option(
            ...,
            "--from",
            "-f",
            help="Source convention (default from config)",
            case_sensitive=False,
        ),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Convert a version from one convention to another."""
    try:
        cfg = load_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    version = _parse_or_exit(text, from_convention or cfg.convention)
    console.print(version.format(to_convention), highlight=False)


@app.command("compare")
def compare_command(
    left: Annotated[str, typer.Argument(..., help="First version")],
    right: Annotated[str, typer.Argument(..., help="Second version")],
    convention: ConventionOption = None,
    config: ConfigOption = None,
) -> None:
    """Compare two versions."""
    try:
        cfg = load_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    conv = convention or cfg.convention
    a = _parse_or_exit(left, conv)
    b = _parse_or_exit(right, conv)
    symbol = {-1: "<", 0: "=", 1: ">"}[compare(a, b)]
    console.print(f"{a} {symbol} {b}", highlight=False)


@app.command("sort")
def sort_command(
    versions: Annotated[
        list[str] | None,
        typer.Argument(..., help="Versions to sort (default: read lines from stdin)"),
    ] = None,
    convention: ConventionOption = None,
    reverse: Annotated[
        bool, typer.Option(..., "--reverse", "-r", help="Sort highest first")
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Sort versions from lowest to highest."""
    try:
        cfg = load_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if not versions:
        stdin = typer.get_text_stream("stdin")
        versions = [line.strip() for line in stdin if line.strip()]

    conv = convention or cfg.convention
    parsed = [(_parse_or_exit(text, conv), text) for text in versions]
    for _, text in sorted(parsed, key=lambda item: item[0], reverse=reverse):
        console.print(text, highlight=False)


@app.command()
def conventions() -> None:
    """List the available conventions."""
    print_conventions_table()


@app.command()
def check(
    text: Annotated[str, typer.Argument(..., help="Version text to check")],
    convention: ConventionOption = None,
    config: ConfigOption = None,
) -> None:
    """Check that text is exactly one valid version."""
    try:
        cfg = load_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    version = _parse_or_exit(text, convention or cfg.convention)
    print_success(f"Valid version {version}")


if __name__ == "__main__":
    app()
