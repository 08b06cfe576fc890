"""csskit CLI entry point: Click group with subcommands."""

import logging

import click

from csskit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="csskit")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def cli(log_level: str) -> None:
    """csskit - build CSS selectors from fragments."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from csskit.cli.build import build  # noqa: E402
from csskit.cli.combine import combine  # noqa: E402
from csskit.cli.rectangle import rectangle  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
cli.add_command(rectangle)
