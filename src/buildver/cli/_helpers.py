"""Output helpers for the buildver CLI."""

import logging

from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..convention import CONVENTION_RULES, Convention
from ..types import ParseResult

console = Console()


class ParseReport(BaseModel):
    """JSON shape of a parse result."""

    input: str
    major: int
    minor: int
    patch: int
    build: int
    convention: Convention | None
    consumed: int
    error: str | None = None
    offset: int | None = None

    @classmethod
    def from_result(cls, text: str, result: ParseResult) -> "ParseReport":
        """Build a report from a decoder result."""
        version = result.version
        return cls(
            input=text,
            major=version.major,
            minor=version.minor,
            patch=version.patch,
            build=version.build,
            convention=version.convention,
            consumed=result.consumed,
            error=result.error.message if result.error else None,
            offset=result.error.offset if result.error else None,
        )


def configure_logging(verbose: bool) -> None:
    """Send log records to the console through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_error_location(text: str, offset: int) -> None:
    """Print text with a caret under the byte at offset."""
    prefix = text.encode("utf-8")[:offset].decode("utf-8", errors="ignore")
    console.print(f"  {escape(text)}", highlight=False)
    console.print(f"  {' ' * len(prefix)}[red]^[/red]")


def print_parse_table(text: str, result: ParseResult) -> None:
    """Print the components of a parse result as a table."""
    version = result.version
    table = Table(title=f"Version: {escape(text)}")
    table.add_column("Component", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("major", str(version.major))
    table.add_row("minor", str(version.minor))
    table.add_row("patch", str(version.patch))
    table.add_row("build", str(version.build))

    console.print(table)
    convention = version.convention.value if version.convention else "-"
    console.print(f"[dim]Convention: {convention}[/dim]")
    console.print(f"[dim]Consumed: {result.consumed} of {len(text.encode())}[/dim]")


def print_conventions_table() -> None:
    """Print all conventions and their rules."""
    table = Table(title="Conventions")
    table.add_column("Name", style="cyan")
    table.add_column("Separator", style="green")
    table.add_column("Whitespace")
    table.add_column("Formats as")

    for convention, rule in CONVENTION_RULES.items():
        if rule.separator is None:
            separator = "guessed"
        else:
            separator = repr(rule.separator.decode())
        table.add_row(
            convention.value,
            separator,
            "yes" if rule.whitespace else "no",
            repr(rule.format_separator),
        )

    console.print(table)
