from pathlib import Path
from typing import Optional

import click
from mas_core.aggregation import aggregate_results
from mas_core.data.loader import load_agent_results
from rich.console import Console

from .common import fail


@click.command("aggregate")
@click.argument("results", nargs=-1, required=True, type=click.Path(path_type=str, dir_okay=False))
@click.option("--project", default="", help="Project name recorded in the report.")
@click.option("--version", "version_", default="", help="Version the report is for.")
@click.option("--phase", default="", help="Workflow phase, e.g. 'PHASE 1: REVIEW'.")
@click.option("--title", default="", help="Report title (defaults to TEAM STATUS REPORT when rendered).")
@click.option(
    "--output",
    type=click.Path(path_type=str, dir_okay=False),
    help="Write the report JSON here instead of stdout.",
)
def aggregate(
    results: tuple[str, ...],
    project: str,
    version_: str,
    phase: str,
    title: str,
    output: Optional[str],
) -> None:
    """Combine agent result files into one team report."""
    console = Console(stderr=True)

    try:
        agent_results = load_agent_results(list(results))
        report = aggregate_results(agent_results, project, version_, phase, title=title)
    except (OSError, ValueError, RuntimeError) as e:
        fail(console, f"Error during aggregation: {e}")

    text = report.to_json() + "\n"
    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(
            f"[green]✓[/green] Aggregated {len(agent_results)} results into {output} (status {report.status.value})"
        )
    else:
        click.echo(text, nl=False)
