"""fieldkit CLI - Typer-based command line interface."""

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from fieldkit.cli.context import CLIContext
from fieldkit.fields import ArrayField, BaseField, GroupField
from fieldkit.registry import get_global_registry

app = typer.Typer(
    name="fieldkit",
    help="fieldkit: form field definitions, validation and data import",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose output")
    ] = False,
):
    """Set up the shared CLI context."""
    ctx.obj = CLIContext(console=console, verbose=verbose)


@app.command(name="types")
def types_command(
    ctx: typer.Context,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """List registered field types."""
    cli_ctx: CLIContext = ctx.obj
    cli_ctx.json_mode = json_output
    registry = get_global_registry()
    names = registry.list_registered_names()

    if json_output:
        cli_ctx.print_json({name: registry[name].__name__ for name in names})
        return

    table = Table(title="Field types")
    table.add_column("Type", style="cyan")
    table.add_column("Field class")
    for name in names:
        table.add_row(name, registry[name].__name__)
    cli_ctx.console.print(table)


def _describe(fields: list[BaseField], depth: int = 0) -> list[tuple[str, str, str, str]]:
    rows = []
    for field in fields:
        indent = "  " * depth
        rows.append(
            (f"{indent}{field.name}", str(field.kind), field.label, "yes" if field.required else "")
        )
        if isinstance(field, (GroupField, ArrayField)):
            rows.extend(_describe(list(field.fields), depth + 1))
    return rows


@app.command(name="describe")
def describe_command(
    ctx: typer.Context,
    form: Annotated[Path, typer.Argument(help="Field definition file (YAML/JSON)")],
):
    """Show the fields defined in a definition file."""
    cli_ctx: CLIContext = ctx.obj
    fields = cli_ctx.load_fields_or_exit(form)

    table = Table(title=str(form))
    for column in ("Name", "Type", "Label", "Required"):
        table.add_column(column)
    for row in _describe(fields):
        table.add_row(*row)
    cli_ctx.console.print(table)


def import_record(fields: list[BaseField], record: dict[str, Any]) -> tuple[dict[str, Any], list[dict[str, Any]]]:
    """Import one record field by field.

    Returns the exported accepted values and the issues found. Absent values
    are accepted for fields whose schema allows None.
    """
    values: dict[str, Any] = {}
    issues: list[dict[str, Any]] = []
    for field in fields:
        raw = record.get(field.name)
        if raw is None and field.schema().is_valid(None):
            values[field.name] = None
            continue
        result = field.from_import_with_details(raw)
        if result.success:
            values[field.name] = field.to_export(result.data)
        else:
            issues.append(
                {
                    "field": field.name,
                    "message": result.error.message,
                    "path": list(result.error.path),
                    "code": result.error.code,
                }
            )
    return values, issues


@app.command(name="import")
def import_command(
    ctx: typer.Context,
    form: Annotated[Path, typer.Argument(help="Field definition file (YAML/JSON)")],
    data: Annotated[Path, typer.Argument(help="Data file with one record or a list of records")],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """
    Import data records through the field definitions.

    Every value is coerced and validated by its field. Exits with code 1
    when any record has an issue.
    """
    cli_ctx: CLIContext = ctx.obj
    cli_ctx.json_mode = json_output
    fields = cli_ctx.load_fields_or_exit(form)
    records = cli_ctx.load_records_or_exit(data)

    report = []
    for index, record in enumerate(records):
        values, issues = import_record(fields, record)
        report.append({"index": index, "values": values, "issues": issues})
    failed = sum(1 for entry in report if entry["issues"])

    if json_output:
        cli_ctx.print_json({"valid": failed == 0, "records": report})
    else:
        for entry in report:
            if not entry["issues"]:
                cli_ctx.print_verbose(f"[green]✓ Record {entry['index']}[/green]")
                continue
            cli_ctx.console.print(f"[red]✗ Record {entry['index']}[/red]")
            for issue in entry["issues"]:
                location = ".".join(str(part) for part in [issue["field"], *issue["path"]])
                cli_ctx.console.print(f"  {location}: {issue['message']} [dim]({issue['code']})[/dim]")
        summary_style = "red" if failed else "green"
        cli_ctx.console.print(
            f"[{summary_style}]{len(records) - failed}/{len(records)} record(s) imported[/{summary_style}]"
        )

    if failed:
        raise typer.Exit(code=1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
