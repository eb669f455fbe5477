"""
CLI context for fieldkit.

Provides shared console output and file loading for all CLI commands.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from fieldkit.exceptions import LoadError
from fieldkit.fields import BaseField
from fieldkit.loader import load_fields, load_records


@dataclass
class CLIContext:
    """
    Context object for CLI commands.

    Created once by the app callback and handed to every command through
    ``ctx.obj``.

    Attributes:
        console: Rich console for output
        verbose: Enable verbose output (ignored when json_mode is True)
        json_mode: When True, suppress all non-JSON output (set by commands)
    """

    console: Console
    verbose: bool = False
    json_mode: bool = False

    def print_verbose(self, message: str, **kwargs) -> None:
        """Print a message only in verbose, non-JSON mode."""
        if self.verbose and not self.json_mode:
            self.console.print(message, **kwargs)

    def print_error(self, message: str) -> None:
        if self.json_mode:
            self.console.print_json(data={"error": message})
        else:
            self.console.print(f"[red]✗ {message}[/red]")

    def print_json(self, data: Any) -> None:
        self.console.print_json(data=data)

    def load_fields_or_exit(self, path: Path) -> list[BaseField]:
        """
        Load field definitions and exit on failure.

        Raises:
            typer.Exit: If loading fails
        """
        self.print_verbose(f"[dim]Loading fields from: {path}[/dim]")
        try:
            fields = load_fields(path)
        except LoadError as e:
            self.print_error(f"Failed to load fields: {e}")
            raise typer.Exit(code=1) from e
        self.print_verbose(f"[green]✓ Loaded {len(fields)} field(s)[/green]")
        return fields

    def load_records_or_exit(self, path: Path) -> list[dict[str, Any]]:
        """
        Load data records and exit on failure.

        Raises:
            typer.Exit: If loading fails
        """
        self.print_verbose(f"[dim]Loading records from: {path}[/dim]")
        try:
            return load_records(path)
        except LoadError as e:
            self.print_error(f"Failed to load data: {e}")
            raise typer.Exit(code=1) from e
