"""Command-line interface for semnorm."""

import json
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from .._version import __version__
from ..config import SemnormConfig, load_config
from ..exceptions import ConfigError, InvalidVersionFormatError
from ..normalizer import is_valid
from ..normalizer import normalize as normalize_version
from ..normalizer import parse as parse_version
from ._helpers import (
    collect_versions,
    configure_logging,
    console,
    error_console,
    print_error,
    print_failure,
    print_success,
)

app = typer.Typer(help="Normalize loosely formed version strings to SemVer")

OUTPUT_FORMATS = ("text", "json")

FormatOption = Annotated[
    str | None,
    typer.Option(
        ...,
        "--format",
        "-f",
        help="Output format (text, json). Defaults to the configured format.",
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (semnorm.toml or pyproject.toml)",
    ),
]


def _load(config: Path | None) -> SemnormConfig:
    try:
        return load_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


def _resolve_format(output_format: str | None, settings: SemnormConfig) -> str:
    resolved = output_format or settings.output_format
    if resolved not in OUTPUT_FORMATS:
        print_error(f"Unknown format: {resolved}")
        error_console.print(f"Supported formats: {', '.join(OUTPUT_FORMATS)}")
        raise typer.Exit(1)
    return resolved


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"semnorm {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option(..., "--verbose", "-V", help="Enable debug logging"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            ...,
            "--version",
            help="Show the semnorm version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Normalize loosely formed version strings to SemVer."""
    if verbose:
        configure_logging()


@app.command()
def normalize(
    versions: Annotated[
        list[str] | None,
        typer.Argument(..., help="Versions to normalize (default: read stdin)"),
    ] = None,
    output_format: FormatOption = None,
    skip_invalid: Annotated[
        bool | None,
        typer.Option(
            ...,
            "--skip-invalid/--fail-fast",
            help="Report invalid versions and continue instead of stopping",
        ),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Normalize versions to major.minor.patch[.revision][-pre][+build].

    Errors go to stderr. Versions normalized before a failure are still
    written, also in JSON mode.

    Examples:
        semnorm normalize 23.01 1-Alpha
        git tag | semnorm normalize --skip-invalid --format json
    """
    settings = _load(config)
    resolved_format = _resolve_format(output_format, settings)
    keep_going = settings.skip_invalid if skip_invalid is None else skip_invalid

    values = collect_versions(versions, sys.stdin, settings.strip)
    if not values:
        print_error("No versions given")
        raise typer.Exit(1)

    results: list[dict[str, str]] = []
    failed = False
    for value in values:
        try:
            canonical = normalize_version(value)
        except InvalidVersionFormatError as e:
            failed = True
            print_error(str(e))
            if not keep_going:
                break
            continue

        if resolved_format == "json":
            results.append({"input": value, "version": canonical})
        else:
            typer.echo(canonical)

    if resolved_format == "json":
        typer.echo(json.dumps(results, indent=2))

    raise typer.Exit(1 if failed else 0)


@app.command()
def parse(
    version: Annotated[str, typer.Argument(..., help="Version to parse")],
    output_format: FormatOption = None,
    config: ConfigOption = None,
) -> None:
    """Show the components of a version."""
    settings = _load(config)
    resolved_format = _resolve_format(output_format, settings)
    value = version.strip() if settings.strip else version

    try:
        parsed = parse_version(value)
    except InvalidVersionFormatError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if resolved_format == "json":
        components = {**parsed.to_dict(), "canonical": str(parsed)}
        typer.echo(json.dumps(components, indent=2))
        return

    table = Table(title=f"Version {value}")
    table.add_column("Component", style="cyan")
    table.add_column("Value", style="green")

    for component, component_value in parsed.to_dict().items():
        table.add_row(
            component, "" if component_value is None else str(component_value)
        )
    table.add_row("canonical", str(parsed), style="bold")

    console.print(table)


@app.command()
def check(
    versions: Annotated[
        list[str] | None,
        typer.Argument(..., help="Versions to check (default: read stdin)"),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Check that versions match the accepted grammar."""
    settings = _load(config)
    values = collect_versions(versions, sys.stdin, settings.strip)
    if not values:
        print_error("No versions given")
        raise typer.Exit(1)

    invalid = 0
    for value in values:
        if is_valid(value):
            print_success(value)
        else:
            invalid += 1
            print_failure(value)

    if invalid:
        console.print(f"\n[dim]{invalid} of {len(values)} versions invalid[/dim]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
