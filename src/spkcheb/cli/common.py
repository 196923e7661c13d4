"""
Command-line interface utilities for spkcheb.

This module maps the shared verbosity flags onto log levels and reads
coefficient data handed to the commands.
"""

import json
import logging
from typing import Any, Dict, IO

import click

from ..logging import get_logger, set_log_level

logger = get_logger(__name__)


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Dictionary with "quiet", "debug" and "verbose" entries
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)
    logger.debug(f"Logging configured with level {logging.getLevelName(log_level)}")


def load_json(stream: IO[str]) -> Any:
    """
    Read a JSON document from an open file.

    Raises:
        click.ClickException: If the file is not valid JSON
    """
    try:
        return json.load(stream)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{stream.name}: invalid JSON ({e})")


def format_vector(values: Any) -> str:
    """Format three floats separated by spaces, full precision."""
    return " ".join(repr(float(v)) for v in values)
