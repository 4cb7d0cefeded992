import json

import click
from mas_core.models.report import AgentResult, Report

SCHEMA_MODELS = {"report": Report, "agent-result": AgentResult}


@click.command("schema")
@click.option(
    "--kind",
    type=click.Choice(sorted(SCHEMA_MODELS)),
    default="report",
    show_default=True,
    help="Which document to describe.",
)
def schema(kind: str) -> None:
    """Print the JSON Schema of a report or agent result document."""
    doc = SCHEMA_MODELS[kind].model_json_schema(by_alias=True)
    click.echo(json.dumps(doc, indent=2))
