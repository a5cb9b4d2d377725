"""Tailforge CLI entry point: Click group with subcommands."""

import logging

import click

from tailforge import __version__

LOG_LEVELS = ("debug", "info", "warning", "error")


def configure_logging(level: str) -> None:
    """Route ``tailforge.*`` records to stderr at *level* and above."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.version_option(version=__version__, prog_name="tailforge")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="warning",
    show_default=True,
    help="Logging threshold for every command",
)
def cli(log_level: str) -> None:
    """Tailforge - generate utility CSS for the classes your content uses."""
    configure_logging(log_level)


from tailforge.cli.build import build  # noqa: E402
from tailforge.cli.validate import validate  # noqa: E402
from tailforge.cli.inspect import inspect  # noqa: E402

for command in (build, validate, inspect):
    cli.add_command(command)
