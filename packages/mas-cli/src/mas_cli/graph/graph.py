from typing import Optional

import click
import graphviz
from mas_core.models.report import Report
from mas_graph.render import render_section_dag
from rich.console import Console

from mas_cli.commands.common import fail, read_raw


@click.command("graph")
@click.argument("file", required=False, type=click.Path(path_type=str, dir_okay=False))
@click.option(
    "--output",
    type=click.Path(path_type=str, dir_okay=False),
    default="mas_section_dag.dot",
    show_default=True,
    help="Where to write the Graphviz DOT source.",
)
@click.option("--render", "render_image", is_flag=True, help="Also run Graphviz to produce an SVG next to the DOT file.")
def graph(file: Optional[str], output: str, render_image: bool) -> None:
    """Draw the section dependency graph of a team report."""
    console = Console(stderr=True)

    try:
        report = Report.model_validate(read_raw(file))
        dot = render_section_dag(report)
        dot.save(output)
        console.print(f"[green]✓[/green] Section graph written to {output}")
        if render_image:
            image = dot.render(output)
            console.print(f"[green]✓[/green] Rendered {image}")
    except graphviz.ExecutableNotFound as e:
        fail(console, f"Graphviz is not installed: {e}")
    except (OSError, ValueError, RuntimeError) as e:
        fail(console, f"Error: {e}")
