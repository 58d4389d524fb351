"""Helper functions for the semnorm CLI."""

import logging
from collections.abc import Iterable
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message.

    Args:
        message: Message to print.
    """
    console.print(f"[green]✓[/green] {escape(message)}")


def print_failure(message: str) -> None:
    """Print a failed result to standard output.

    Args:
        message: Message to print.
    """
    console.print(f"[red]✗[/red] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message to standard error.

    Args:
        message: Error message to print.
    """
    error_console.print(f"[red]✗[/red] {escape(message)}")


def configure_logging() -> None:
    """Route DEBUG logging through rich on standard error."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def collect_versions(
    arguments: Iterable[str] | None, stream: TextIO, strip: bool
) -> list[str]:
    """Gather version values from arguments or, failing that, a stream.

    Blank stream lines are skipped.

    Args:
        arguments: Values given on the command line.
        stream: Stream to read one value per line from when no arguments are
            given.
        strip: Whether to strip surrounding whitespace from each value.

    Returns:
        Values to process, in order.
    """
    if arguments:
        values = list(arguments)
    else:
        values = [line.rstrip("\r\n") for line in stream if line.strip()]

    if strip:
        values = [value.strip() for value in values]
    return values
