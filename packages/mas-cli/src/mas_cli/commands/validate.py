import sys
from typing import Optional

import click
import yaml
from mas_core.models.findings import ValidationReport
from mas_core.validation.report import run_report_validation
from rich.console import Console
from rich.table import Table

from .common import fail, print_finding, read_raw

# (label, summary key, row style)
_SUMMARY_ROWS = [
    ("PASS", "pass", "green"),
    ("INFO", "info", "blue"),
    ("WARN", "warn", "yellow"),
    ("FAIL", "fail", "red"),
]


def _summary_table(result: ValidationReport) -> Table:
    table = Table(title="Validation Summary")
    table.add_column("Severity", style="cyan")
    table.add_column("Count", justify="right")
    for label, key, style in _SUMMARY_ROWS:
        table.add_row(label, str(result.summary.get(key, 0)), style=style)
    return table


def _print_findings(console: Console, result: ValidationReport) -> None:
    schema = [f for f in result.findings if f.code == "SCHEMA_INVALID"]
    consistency = [f for f in result.findings if f.code != "SCHEMA_INVALID"]

    for heading, group in (("Schema", schema), ("Consistency", consistency)):
        if not group:
            continue
        console.print(f"\n[bold]{heading}:[/bold]")
        for finding in group:
            print_finding(console, finding)


@click.command("validate")
@click.argument("file", required=False, type=click.Path(path_type=str, dir_okay=False))
@click.option(
    "--strict",
    is_flag=True,
    help="Treat warnings as failures (exit code 2).",
)
@click.option(
    "--export",
    type=click.Path(path_type=str, dir_okay=False),
    help="Export validation findings to YAML file.",
)
def validate(file: Optional[str], strict: bool, export: Optional[str]) -> None:
    """Check a team report (FILE or stdin) against the schema and for consistency."""
    console = Console()

    try:
        raw = read_raw(file)
        _, result = run_report_validation(raw)
        if export:
            with open(export, "w") as f:
                yaml.dump(result.model_dump(), f, default_flow_style=False, sort_keys=True)
    except (OSError, ValueError, RuntimeError) as e:
        fail(Console(stderr=True), f"Error during validation: {e}")

    console.print(f"\n[bold cyan]Report Validation[/bold cyan] {file or '<stdin>'}")
    if export:
        console.print(f"[green]✓[/green] Findings exported to {export}")
    console.print(_summary_table(result))

    if result.findings:
        _print_findings(console, result)
    else:
        console.print("\n[green]✓ No findings[/green]")

    if result.failed:
        console.print(f"\n[red]✗[/red] Report is invalid ({result.summary['fail']} failures)")
        sys.exit(1)
    if strict and result.warned:
        console.print(f"\n[yellow]⚠[/yellow] {result.summary['warn']} warnings (strict mode)")
        sys.exit(2)
    console.print("\n[green]✓[/green] Report is valid")
