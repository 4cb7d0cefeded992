import logging

import click
from mas_cli.commands.aggregate import aggregate
from mas_cli.commands.render import render
from mas_cli.commands.schema import schema
from mas_cli.commands.validate import validate
from mas_cli.graph.graph import graph
from mas_core import __version__
from mas_core.codebase.deprecation import DeprecationConfig, set_deprecation_config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_handler: logging.Handler | None = None


def configure_logging(level: str) -> None:
    """Send ``mas.*`` log records to stderr at ``level``."""
    global _handler
    logger = logging.getLogger("mas")
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level.upper())


@click.group()
@click.option(
    "--log-level",
    envvar="MAS_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Log level for mas.* loggers (env: MAS_LOG_LEVEL).",
)
def cli(log_level: str) -> None:
    """Aggregate multi-agent results and render team status reports."""
    configure_logging(log_level)
    set_deprecation_config(DeprecationConfig.from_env())


@cli.command()
def version() -> None:
    """Print the mas version."""
    click.echo(f"mas {__version__}")


# add cli commands here

cli.add_command(render)
cli.add_command(validate)
cli.add_command(aggregate)
cli.add_command(schema)
cli.add_command(graph)
