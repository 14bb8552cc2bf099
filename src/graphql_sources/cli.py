"""CLI entry point for GraphQL Sources."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from .collector import SourceCollector
from .config import CollectorConfig, OutputFormat
from .errors import SourceProcessingError
from .output import get_formatter
from .processor import SourceProcessor

app = typer.Typer(
    name="graphql-sources",
    help="Deduplicate GraphQL documents and list their named operations and fragments.",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from . import __version__
        console.print(f"graphql-sources v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route package logs through Rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version", "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """GraphQL Sources - content-addressed GraphQL documents for code generation."""
    pass


@app.command()
def process(
    paths: Annotated[
        list[Path],
        typer.Argument(
            help="Files or directories to scan for GraphQL documents.",
            exists=True,
        ),
    ],
    output_format: Annotated[
        str,
        typer.Option(
            "--format", "-f",
            help="Output format: 'human' or 'json'.",
        ),
    ] = "human",
    extensions: Annotated[
        Optional[list[str]],
        typer.Option(
            "--ext", "-e",
            help="Filter files by extension (can be used multiple times, e.g., --ext .graphql --ext .ts).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Log every pipeline stage.",
        ),
    ] = False,
) -> None:
    """
    Collect GraphQL documents, deduplicate them and list their definitions.

    Every definition is split into its own source, identical texts are
    dropped, and each remaining source gets the shortest hash prefix that is
    unique across the run.

    Examples:

        # Scan GraphQL and Typescript files
        graphql-sources process src/

        # JSON manifest for build tooling
        graphql-sources process queries/ --format json
    """
    configure_logging(verbose)

    try:
        fmt = OutputFormat(output_format.lower())
    except ValueError:
        console.print(f"[red]Error: Invalid format '{output_format}'. Use 'human' or 'json'.[/red]")
        raise typer.Exit(1)

    try:
        config = CollectorConfig(paths=paths, extensions=extensions, output_format=fmt)
    except ValidationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if config.output_format == OutputFormat.HUMAN:
        console.print("[dim]Scanning for GraphQL documents...[/dim]")

    collector = SourceCollector()

    try:
        sources = collector.collect(config.paths, config.extensions)
        if not sources:
            console.print("[yellow]No GraphQL documents found in the specified paths.[/yellow]")
            raise typer.Exit(0)

        report = SourceProcessor().process(sources)
    except SourceProcessingError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    formatter = get_formatter(config.output_format.value, console)
    formatter.format(report)


if __name__ == "__main__":
    app()
