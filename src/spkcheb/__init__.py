"""
spkcheb: Chebyshev series evaluation for planetary and lunar ephemerides.

The core is a pair of Clenshaw evaluators for three-dimensional Chebyshev
records (position and velocity). Around it sit an in-memory SPK segment
that picks the record for a given time, and small vector and time helpers.
"""

from .chebyshev import evaluate, evaluate_derivative
from .constants import J2000_EPOCH, SECONDS_PER_DAY
from .error import (
    EphemerisError,
    InvalidInputError,
    OutOfRangeError,
    UnsupportedError,
)
from .segment import ChebyshevSegment
from .vector import State, Vector

__all__ = [
    "evaluate",
    "evaluate_derivative",
    "J2000_EPOCH",
    "SECONDS_PER_DAY",
    "EphemerisError",
    "InvalidInputError",
    "OutOfRangeError",
    "UnsupportedError",
    "ChebyshevSegment",
    "State",
    "Vector",
]
