from pathlib import Path
from typing import Optional

import click
from mas_core.models.report import Report
from mas_core.validation.report import run_report_validation
from mas_render import RenderSettings, load_render_settings, render_box, render_narrative
from rich.console import Console

from .common import fail, print_finding, read_raw


def _emit(console: Console, text: str, out: Optional[str], label: str) -> None:
    if out is None:
        click.echo(text, nl=False)
        return
    Path(out).write_text(text, encoding="utf-8")
    console.print(f"[green]✓[/green] {label} written to {out}")


@click.command("render")
@click.argument("file", required=False, type=click.Path(path_type=str, dir_okay=False))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["box", "narrative"], case_sensitive=False),
    default="box",
    show_default=True,
    help="Format written to stdout when no output file is given for it.",
)
@click.option("--box-out", type=click.Path(path_type=str, dir_okay=False), help="Write the box report to this path.")
@click.option(
    "--narrative-out",
    type=click.Path(path_type=str, dir_okay=False),
    help="Write the Markdown narrative to this path.",
)
@click.option("--validate", "run_validation", is_flag=True, help="Validate the document first; abort on failures.")
@click.option(
    "--config",
    type=click.Path(path_type=str, dir_okay=False, exists=True),
    help="Render settings YAML (box_width, task_id_width, default_title).",
)
def render(
    file: Optional[str],
    fmt: str,
    box_out: Optional[str],
    narrative_out: Optional[str],
    run_validation: bool,
    config: Optional[str],
) -> None:
    """Render a team report (FILE or stdin) as a box and/or narrative."""
    console = Console(stderr=True)
    fmt = fmt.lower()

    try:
        settings = load_render_settings(config) if config else RenderSettings()
        raw = read_raw(file)

        if run_validation:
            report, validation = run_report_validation(raw)
            for finding in validation.findings:
                if finding.severity != "INFO":
                    print_finding(console, finding)
            if report is None or validation.failed:
                fail(console, f"Validation failed with {validation.summary.get('fail', 0)} errors")
        else:
            report = Report.model_validate(raw)

        if box_out or (fmt == "box" and not narrative_out):
            _emit(console, render_box(report, settings), box_out, "Box report")
        if narrative_out or fmt == "narrative":
            _emit(console, render_narrative(report, settings), narrative_out, "Narrative report")

    except (OSError, ValueError, RuntimeError) as e:
        # RenderError and deprecation errors are RuntimeErrors
        fail(console, f"Error: {e}")
