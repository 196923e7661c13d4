"""
Three-dimensional Chebyshev series evaluation.

SPK and JPL ephemerides store each coordinate of a body over a fixed
interval as a Chebyshev series in normalized time t in [-1, 1]. The
functions here evaluate such a record, and its time derivative, with the
Clenshaw recurrence. The x, y and z channels are accumulated side by side
so every axis sees exactly the same sequence of floating point operations.

See https://naif.jpl.nasa.gov/pub/naif/toolkit_docs/C/cspice/cheby.html
"""

from collections.abc import Sequence
from typing import Any, Tuple

import numpy as np

from .constants import SECONDS_PER_DAY
from .error import InvalidInputError

Triple = Tuple[float, float, float]

ZERO_VECTOR: Triple = (0.0, 0.0, 0.0)


def _to_real(value: Any, name: str) -> float:
    """Convert a scalar argument to float.

    Strings, booleans and integers too large for a float are rejected.
    """
    if isinstance(value, (str, bytes)):
        raise InvalidInputError(f"{name} must be a real number, got a string")
    if isinstance(value, (bool, np.bool_)):
        raise InvalidInputError(f"{name} must be a real number, got a boolean")
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidInputError(
            f"{name} must be a real number, got {type(value).__name__}"
        ) from None


def _is_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    return isinstance(value, (Sequence, np.ndarray))


def _check_record(coefficients: Any) -> None:
    if not _is_sequence(coefficients):
        raise InvalidInputError(
            "Coefficients must be a sequence of 3-component vectors, "
            f"got {type(coefficients).__name__}"
        )
    if isinstance(coefficients, np.ndarray) and coefficients.ndim != 2:
        raise InvalidInputError(
            f"Coefficient array must be 2-dimensional, got {coefficients.ndim} dimension(s)"
        )


def _row(coefficients: Any, k: int) -> Triple:
    """Read the degree-k coefficient vector as three floats."""
    row = coefficients[k]
    if not _is_sequence(row):
        raise InvalidInputError(
            f"Coefficient {k} must be a sequence, got {type(row).__name__}"
        )
    if len(row) != 3:
        raise InvalidInputError(
            f"Coefficient {k} must have 3 components, got {len(row)}"
        )
    return (
        _to_real(row[0], f"coefficient[{k}][0]"),
        _to_real(row[1], f"coefficient[{k}][1]"),
        _to_real(row[2], f"coefficient[{k}][2]"),
    )


def evaluate(coefficients: Any, t: float) -> Triple:
    """Evaluate a 3D Chebyshev series at normalized time t.

    Args:
        coefficients: Sequence of n [x, y, z] coefficient vectors, where
            index k holds the coefficients of T_k. A numpy array of shape
            (n, 3) is also accepted.
        t: Normalized time. Nominally in [-1, 1]; values outside that range
            are extrapolated, not rejected.

    Returns:
        The (x, y, z) value of the series at t

    Raises:
        InvalidInputError: If the record is empty, is not a sequence of
            3-component vectors, or holds a non-numeric component
    """
    _check_record(coefficients)
    t = _to_real(t, "t")
    n = len(coefficients)
    if n == 0:
        raise InvalidInputError("Coefficients must contain at least one vector")
    if n == 1:
        return _row(coefficients, 0)

    b1x = b1y = b1z = 0.0
    b2x = b2y = b2z = 0.0
    t2 = 2.0 * t

    for k in range(n - 1, 0, -1):
        c0, c1, c2 = _row(coefficients, k)
        tx = t2 * b1x - b2x + c0
        ty = t2 * b1y - b2y + c1
        tz = t2 * b1z - b2z + c2
        b2x, b2y, b2z = b1x, b1y, b1z
        b1x, b1y, b1z = tx, ty, tz

    # The degree-0 term takes a half step with t, not 2t.
    c0, c1, c2 = _row(coefficients, 0)
    return (t * b1x - b2x + c0, t * b1y - b2y + c1, t * b1z - b2z + c2)


def evaluate_derivative(coefficients: Any, t: float, radius: float) -> Triple:
    """Evaluate the time derivative of a 3D Chebyshev series.

    The recurrence accumulates 2 * k * c_k, so its raw output is twice the
    derivative with respect to t; the final scale SECONDS_PER_DAY /
    (2 * radius) removes that factor and converts to the interval's time
    base. With radius in seconds, as SPK records store it, the result is
    in coefficient units per day.

    Args:
        coefficients: Sequence of n [x, y, z] coefficient vectors, as for
            :func:`evaluate`
        t: Normalized time, nominally in [-1, 1]
        radius: Half-length of the interval the record was fitted over

    Returns:
        The (vx, vy, vz) derivative. A record with fewer than two vectors is
        constant and yields (0.0, 0.0, 0.0). A zero radius yields infinities
        or NaNs rather than an error.

    Raises:
        InvalidInputError: If the record is not a sequence of 3-component
            vectors, or t, radius or a component is not a real number
    """
    _check_record(coefficients)
    t = _to_real(t, "t")
    radius = _to_real(radius, "radius")
    n = len(coefficients)
    if n < 2:
        return ZERO_VECTOR

    d1x = d1y = d1z = 0.0
    d2x = d2y = d2z = 0.0
    t2 = 2.0 * t

    for k in range(n - 1, 0, -1):
        c0, c1, c2 = _row(coefficients, k)
        k2 = 2.0 * k
        tx = t2 * d1x - d2x + k2 * c0
        ty = t2 * d1y - d2y + k2 * c1
        tz = t2 * d1z - d2z + k2 * c2
        d2x, d2y, d2z = d1x, d1y, d1z
        d1x, d1y, d1z = tx, ty, tz

    # t spans [-1, 1] over 2 * radius
    with np.errstate(divide="ignore", invalid="ignore"):
        scale = np.float64(SECONDS_PER_DAY) / (2.0 * radius)
        return (float(d1x * scale), float(d1y * scale), float(d1z * scale))
