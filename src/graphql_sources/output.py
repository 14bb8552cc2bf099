"""Output formatters - human-readable and JSON output."""

from __future__ import annotations

import json
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .processor import ProcessingReport


class OutputFormatter:
    """Base class for output formatters."""

    def format(self, report: ProcessingReport, output: Optional[TextIO] = None) -> None:
        """Format and write the processing report."""
        raise NotImplementedError


class HumanFormatter(OutputFormatter):
    """Human-readable colored terminal output using Rich."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize formatter."""
        self.console = console or Console()

    def format(self, report: ProcessingReport, output: Optional[TextIO] = None) -> None:
        """Format and print the processing report."""
        self._print_header(report)
        self._print_summary(report)

        if report.results:
            self._print_sources(report)
        else:
            self.console.print("[yellow]No named operations or fragments found.[/yellow]")

    def _print_header(self, report: ProcessingReport) -> None:
        """Print the header panel."""
        title = Text("GraphQL Sources", style="bold blue")
        subtitle = Text(
            f"{len(report.results)} sources, {report.hash_length}-character identifiers",
            style="dim",
        )
        self.console.print()
        self.console.print(Panel(subtitle, title=title, border_style="blue"))
        self.console.print()

    def _print_summary(self, report: ProcessingReport) -> None:
        """Print the summary table."""
        table = Table(title="Summary", show_header=True, header_style="bold")
        table.add_column("Stage", style="dim")
        table.add_column("Count", justify="right")

        table.add_row("Input sources", str(report.input_count))
        table.add_row("Expanded definitions", str(report.expanded_count))
        table.add_row(
            "Duplicates dropped",
            Text(str(report.duplicate_count), style="yellow" if report.duplicate_count else "dim"),
        )
        table.add_row("Retained sources", str(report.retained_count))
        table.add_row("Emitted sources", Text(str(len(report.results)), style="green"))
        table.add_row("Operations and fragments", str(report.operation_count))

        self.console.print(table)
        self.console.print()

    def _print_sources(self, report: ProcessingReport) -> None:
        """Print one row per emitted source."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Location")
        table.add_column("Definitions")

        for result in report.results:
            names = ", ".join(operation.initial_name for operation in result.operations)
            table.add_row(result.identifier, result.source.location or "-", names)

        self.console.print(table)


class JSONFormatter(OutputFormatter):
    """JSON output for build tooling."""

    def __init__(self, pretty: bool = True) -> None:
        """Initialize formatter."""
        self.pretty = pretty

    def format(self, report: ProcessingReport, output: Optional[TextIO] = None) -> None:
        """Format and write the processing report as JSON."""
        data = report.to_dict()

        if self.pretty:
            json_str = json.dumps(data, indent=2, default=str)
        else:
            json_str = json.dumps(data, default=str)

        output = output or sys.stdout
        output.write(json_str)
        output.write("\n")


def get_formatter(format_name: str, console: Optional[Console] = None) -> OutputFormatter:
    """Get a formatter by name."""
    if format_name.lower() == "human":
        return HumanFormatter(console)
    if format_name.lower() == "json":
        return JSONFormatter()

    raise ValueError(f"Unknown format: {format_name}")
