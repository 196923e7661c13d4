"""
CLI commands for evaluating Chebyshev coefficient records.
"""

import json
from typing import IO

import click

from ..chebyshev import evaluate as evaluate_series
from ..chebyshev import evaluate_derivative
from ..error import EphemerisError
from ..logging import get_logger
from ..segment import ChebyshevSegment
from .common import format_vector, load_json

logger = get_logger(__name__)


@click.command()
@click.argument("coeffs_file", type=click.File("r"))
@click.option(
    "--time", "-t", "t", type=float, required=True, help="Normalized time in [-1, 1]"
)
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object")
def evaluate(coeffs_file: IO[str], t: float, as_json: bool) -> None:
    """Evaluate a record of [x, y, z] coefficients read from COEFFS_FILE."""
    coefficients = load_json(coeffs_file)
    logger.info(f"Evaluating record from {coeffs_file.name} at t={t}")
    try:
        x, y, z = evaluate_series(coefficients, t)
    except EphemerisError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps({"x": x, "y": y, "z": z}))
    else:
        click.echo(format_vector((x, y, z)))


@click.command()
@click.argument("coeffs_file", type=click.File("r"))
@click.option(
    "--time", "-t", "t", type=float, required=True, help="Normalized time in [-1, 1]"
)
@click.option(
    "--radius",
    "-r",
    type=float,
    required=True,
    help="Half-length of the record's interval (seconds for SPK records)",
)
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object")
def derivative(coeffs_file: IO[str], t: float, radius: float, as_json: bool) -> None:
    """Evaluate the time derivative of the record in COEFFS_FILE."""
    coefficients = load_json(coeffs_file)
    logger.info(
        f"Differentiating record from {coeffs_file.name} at t={t}, radius={radius}"
    )
    try:
        vx, vy, vz = evaluate_derivative(coefficients, t, radius)
    except EphemerisError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps({"vx": vx, "vy": vy, "vz": vz}))
    else:
        click.echo(format_vector((vx, vy, vz)))


@click.command()
@click.argument("segment_file", type=click.File("r"))
@click.option("--jd", type=float, required=True, help="TDB Julian date")
@click.option(
    "--data-type",
    type=click.Choice(["2", "3"]),
    default="2",
    show_default=True,
    help="SPK data type of the records",
)
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object")
def state(segment_file: IO[str], jd: float, data_type: str, as_json: bool) -> None:
    """Compute position and velocity from the SPK records in SEGMENT_FILE.

    SEGMENT_FILE holds a JSON list of flat records:
    [midpoint, radius, x0..xn, y0..yn, z0..zn], times in seconds past J2000.
    """
    records = load_json(segment_file)
    try:
        segment = ChebyshevSegment.from_records(records, data_type=int(data_type))
        result = segment.compute_and_differentiate(jd)
    except EphemerisError as e:
        raise click.ClickException(str(e))

    position, velocity = result.to_lists()
    if as_json:
        click.echo(json.dumps({"position": position, "velocity": velocity}))
    else:
        click.echo(f"position: {format_vector(position)}")
        click.echo(f"velocity: {format_vector(velocity)}")
