"""CLI entry point for spkcheb."""

import click

from .evaluate import evaluate, derivative, state
from . import common as common
from ..logging import get_logger


logger = get_logger(__name__)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times: -v, -vv, -vvv)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (equivalent to -vv)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Suppress all logging except errors",
)
def cli(verbose: int, debug: bool, quiet: bool) -> None:
    """Evaluate Chebyshev ephemeris records."""
    common.configure_logging(
        {
            "quiet": quiet,
            "debug": debug,
            "verbose": verbose,
        }
    )
    logger.debug("Debug logging enabled")


cli.add_command(evaluate)
cli.add_command(derivative)
cli.add_command(state)

if __name__ == "__main__":
    cli()
