"""
In-memory SPK Chebyshev segments (data types 2 and 3).

A segment is an ordered run of coefficient records. Record i covers the
closed interval [midpoint_i - radius_i, midpoint_i + radius_i], expressed
in TDB seconds past J2000 as in SPK files, and holds a Chebyshev series for
each Cartesian component over that interval.
"""

from typing import Any, List, Sequence, Tuple, Union

import numpy as np

from .chebyshev import evaluate, evaluate_derivative
from .error import InvalidInputError, OutOfRangeError, UnsupportedError
from .julian import format_date, julian_to_gregorian, seconds_to_jd, tdb_to_seconds
from .logging import get_logger
from .vector import State, Vector

logger = get_logger(__name__)

# Type 2 stores position only; type 3 also stores velocity series
COMPONENT_COUNTS = {
    2: 3,
    3: 6,
}

TimeArg = Union[float, Sequence[float], np.ndarray]


class ChebyshevSegment:
    """A sequence of Chebyshev coefficient records covering a time span."""

    def __init__(
        self,
        midpoints: Sequence[float],
        radii: Sequence[float],
        coefficients: Any,
    ):
        """
        Initialize a segment.

        Args:
            midpoints: Centre of each record's interval, seconds past J2000
            radii: Half-length of each record's interval, in seconds
            coefficients: Array of shape (records, terms, 3); entry [i, k]
                is the [x, y, z] coefficient of T_k for record i

        Raises:
            InvalidInputError: If the arrays have inconsistent shapes
        """
        self.midpoints = np.asarray(midpoints, dtype=np.float64)
        self.radii = np.asarray(radii, dtype=np.float64)
        self.coefficients = np.asarray(coefficients, dtype=np.float64)

        if self.midpoints.ndim != 1 or self.radii.shape != self.midpoints.shape:
            raise InvalidInputError(
                "Midpoints and radii must be 1-dimensional arrays of equal length"
            )
        if self.coefficients.ndim != 3 or self.coefficients.shape[2] != 3:
            raise InvalidInputError(
                "Coefficients must have shape (records, terms, 3), "
                f"got {self.coefficients.shape}"
            )
        if self.coefficients.shape[0] != self.midpoints.shape[0]:
            raise InvalidInputError(
                f"Segment has {self.midpoints.shape[0]} intervals but "
                f"{self.coefficients.shape[0]} coefficient records"
            )
        if self.coefficients.shape[1] == 0:
            raise InvalidInputError("Coefficient records must hold at least one term")

    @classmethod
    def from_records(cls, records: Any, data_type: int = 2) -> "ChebyshevSegment":
        """
        Build a segment from flat SPK records.

        Each record is laid out as
        ``[midpoint, radius, X_0..X_n, Y_0..Y_n, Z_0..Z_n]``, followed for
        data type 3 by the velocity series, which are not used here.

        Args:
            records: 2D array-like, one row per record
            data_type: SPK data type, 2 or 3

        Returns:
            A ChebyshevSegment instance

        Raises:
            UnsupportedError: If data_type is not 2 or 3
            InvalidInputError: If the record length does not fit the data type
        """
        if data_type not in COMPONENT_COUNTS:
            raise UnsupportedError(f"Unsupported data type: {data_type}")
        component_count = COMPONENT_COUNTS[data_type]

        try:
            data = np.asarray(records, dtype=np.float64)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidInputError(f"Records must be numeric: {e}") from e
        if data.ndim != 2 or data.shape[0] == 0:
            raise InvalidInputError("Records must be a non-empty 2D array")

        segment_count, record_size = data.shape
        coefficient_count, remainder = divmod(record_size - 2, component_count)
        if coefficient_count < 1 or remainder:
            raise InvalidInputError(
                f"Record size {record_size} does not fit data type {data_type}"
            )

        coefficients = data[:, 2:].reshape(
            segment_count, component_count, coefficient_count
        )
        # (records, components, terms) -> (records, terms, xyz)
        coefficients = coefficients[:, :3, :].transpose(0, 2, 1)

        logger.debug(
            f"Loaded {segment_count} type {data_type} records "
            f"with {coefficient_count} coefficients each"
        )
        return cls(data[:, 0], data[:, 1], coefficients)

    def __len__(self) -> int:
        return self.midpoints.shape[0]

    @property
    def start_jd(self) -> float:
        """First Julian date covered by the segment."""
        return seconds_to_jd(float(np.min(self.midpoints - self.radii)))

    @property
    def end_jd(self) -> float:
        """Last Julian date covered by the segment."""
        return seconds_to_jd(float(np.max(self.midpoints + self.radii)))

    def coverage(self) -> str:
        """Describe the covered span as calendar dates.

        Returns:
            A string such as "2000-01-01 through 2000-01-03"
        """
        start = format_date(*julian_to_gregorian(self.start_jd))
        end = format_date(*julian_to_gregorian(self.end_jd))
        return f"{start} through {end}"

    def find_interval(self, tdb_seconds: float) -> int:
        """
        Find the first record whose interval contains a time.

        Args:
            tdb_seconds: TDB seconds past J2000

        Returns:
            Index of the record

        Raises:
            OutOfRangeError: If no record covers the time
        """
        inside = (self.midpoints - self.radii <= tdb_seconds) & (
            tdb_seconds <= self.midpoints + self.radii
        )
        matches = np.flatnonzero(inside)
        if matches.size == 0:
            raise OutOfRangeError(
                f"Time {tdb_seconds} is outside the coverage of this segment "
                f"({self.coverage()})",
                tdb_seconds,
            )
        return int(matches[0])

    def normalized_time(self, tdb_seconds: float, interval: int) -> float:
        """Map a time onto [-1, 1] within the given record's interval."""
        return float(
            (tdb_seconds - self.midpoints[interval]) / self.radii[interval]
        )

    def compute(self, tdb: TimeArg, tdb2: float = 0.0) -> Union[Vector, List[Vector]]:
        """
        Compute the position at one or more TDB Julian dates.

        Args:
            tdb: Julian date, or a sequence of Julian dates
            tdb2: Fraction of a day added to every date

        Returns:
            A position Vector, or a list of them for a sequence of dates
        """
        if np.ndim(tdb) == 0:
            return Vector(*self._position(self._locate(tdb_to_seconds(tdb, tdb2))))
        return [
            Vector(*self._position(located))
            for located in self._locate_many(tdb, tdb2)
        ]

    def compute_and_differentiate(
        self, tdb: TimeArg, tdb2: float = 0.0
    ) -> Union[State, List[State]]:
        """
        Compute position and velocity at one or more TDB Julian dates.

        Velocity is in the position units per day.

        Args:
            tdb: Julian date, or a sequence of Julian dates
            tdb2: Fraction of a day added to every date

        Returns:
            A State, or a list of them for a sequence of dates
        """
        if np.ndim(tdb) == 0:
            return self._state(self._locate(tdb_to_seconds(tdb, tdb2)))
        return [self._state(located) for located in self._locate_many(tdb, tdb2)]

    def _locate(self, tdb_seconds: float) -> Tuple[int, float]:
        interval = self.find_interval(tdb_seconds)
        t = self.normalized_time(tdb_seconds, interval)
        logger.debug(f"Time {tdb_seconds} falls in record {interval} at t={t}")
        return interval, t

    def _locate_many(self, tdb: TimeArg, tdb2: float) -> List[Tuple[int, float]]:
        located = []
        missing = []
        for jd in np.asarray(tdb, dtype=np.float64).ravel():
            seconds = tdb_to_seconds(float(jd), tdb2)
            try:
                located.append(self._locate(seconds))
            except OutOfRangeError:
                missing.append(seconds)
        if missing:
            raise OutOfRangeError(
                f"{len(missing)} time(s) are outside the coverage of this segment "
                f"({self.coverage()})",
                missing,
            )
        return located

    def _position(self, located: Tuple[int, float]) -> Tuple[float, float, float]:
        interval, t = located
        return evaluate(self.coefficients[interval].tolist(), t)

    def _state(self, located: Tuple[int, float]) -> State:
        interval, t = located
        record = self.coefficients[interval].tolist()
        # Radius in seconds gives velocity per day
        radius = float(self.radii[interval])
        return State(
            Vector(*evaluate(record, t)),
            Vector(*evaluate_derivative(record, t, radius)),
        )
