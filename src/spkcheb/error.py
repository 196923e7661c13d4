"""Exceptions raised by spkcheb."""

from typing import Any


class EphemerisError(Exception):
    """Base class for all spkcheb errors."""

    pass


class InvalidInputError(EphemerisError, ValueError):
    """Raised when an argument has the wrong type or shape."""

    pass


class UnsupportedError(EphemerisError):
    """Raised for SPK data types that have no evaluator."""

    pass


class OutOfRangeError(EphemerisError):
    """Raised when a time falls outside every record of a segment.

    Attributes:
        out_of_range_times: The time, or times, that could not be placed
    """

    def __init__(self, message: str, out_of_range_times: Any):
        super().__init__(message)
        self.out_of_range_times = out_of_range_times
