"""Unit tests for ChebyshevSegment."""

import unittest

import numpy as np

from spkcheb.constants import J2000_EPOCH
from spkcheb.error import InvalidInputError, OutOfRangeError, UnsupportedError
from spkcheb.segment import ChebyshevSegment
from spkcheb.vector import State, Vector

HALF_DAY = 43200.0


def make_records():
    """Two half-day-radius records back to back, starting at J2000 - 0.5.

    Record 0: x = T1, y = 5, z = T2
    Record 1: x = 10 + T1, y = -T1, z = 0
    """
    return [
        [0.0, HALF_DAY, 0.0, 1.0, 0.0, 5.0, 0.0, 0.0, 0.0, 0.0, 1.0],
        [2 * HALF_DAY, HALF_DAY, 10.0, 1.0, 0.0, 0.0, -1.0, 0.0, 0.0, 0.0, 0.0],
    ]


class TestChebyshevSegment(unittest.TestCase):
    """Test record selection and evaluation."""

    def setUp(self):
        """Set up a two-record type 2 segment."""
        self.segment = ChebyshevSegment.from_records(make_records())

    def test_from_records_layout(self):
        """Flat records become (records, terms, xyz) coefficients."""
        self.assertEqual(len(self.segment), 2)
        self.assertEqual(self.segment.coefficients.shape, (2, 3, 3))
        np.testing.assert_array_equal(
            self.segment.coefficients[0],
            [[0.0, 5.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]],
        )
        np.testing.assert_array_equal(self.segment.midpoints, [0.0, 2 * HALF_DAY])
        np.testing.assert_array_equal(self.segment.radii, [HALF_DAY, HALF_DAY])

    def test_coverage(self):
        """Coverage runs from the first start to the last end."""
        self.assertEqual(self.segment.start_jd, J2000_EPOCH - 0.5)
        self.assertEqual(self.segment.end_jd, J2000_EPOCH + 1.5)

    def test_coverage_dates(self):
        """Coverage is described in calendar dates."""
        self.assertEqual(self.segment.coverage(), "2000-01-01 through 2000-01-03")

    def test_find_interval(self):
        """Times map to the record whose interval contains them."""
        self.assertEqual(self.segment.find_interval(-HALF_DAY), 0)
        self.assertEqual(self.segment.find_interval(1000.0), 0)
        self.assertEqual(self.segment.find_interval(3 * HALF_DAY), 1)

    def test_shared_boundary_selects_first_record(self):
        """A time on a shared boundary belongs to the earlier record."""
        self.assertEqual(self.segment.find_interval(HALF_DAY), 0)

    def test_find_interval_out_of_range(self):
        """Times outside every record raise OutOfRangeError."""
        with self.assertRaises(OutOfRangeError) as cm:
            self.segment.find_interval(4 * HALF_DAY)
        self.assertEqual(cm.exception.out_of_range_times, 4 * HALF_DAY)
        self.assertIn("outside the coverage", str(cm.exception))
        self.assertIn("2000-01-01 through 2000-01-03", str(cm.exception))

    def test_normalized_time(self):
        """Times map linearly onto [-1, 1]."""
        self.assertEqual(self.segment.normalized_time(-HALF_DAY, 0), -1.0)
        self.assertEqual(self.segment.normalized_time(HALF_DAY / 2, 0), 0.5)
        self.assertEqual(self.segment.normalized_time(3 * HALF_DAY, 1), 1.0)

    def test_compute(self):
        """Position is the record's series at the normalized time."""
        position = self.segment.compute(J2000_EPOCH + 0.25)
        self.assertIsInstance(position, Vector)
        # t = 0.5
        self.assertEqual(position, Vector(0.5, 5.0, -0.5))

    def test_compute_second_record(self):
        """Later times use the later record."""
        position = self.segment.compute(J2000_EPOCH + 1.25)
        self.assertEqual(position, Vector(10.5, -0.5, 0.0))

    def test_split_julian_date(self):
        """tdb2 adds a fraction of a day."""
        self.assertEqual(
            self.segment.compute(J2000_EPOCH, 0.25),
            self.segment.compute(J2000_EPOCH + 0.25),
        )

    def test_compute_many(self):
        """A sequence of dates gives a list of positions."""
        positions = self.segment.compute([J2000_EPOCH, J2000_EPOCH + 1.0])
        self.assertEqual(positions, [Vector(0.0, 5.0, -1.0), Vector(10.0, 0.0, 0.0)])

        positions = self.segment.compute(np.array([J2000_EPOCH + 0.25]))
        self.assertEqual(positions, [Vector(0.5, 5.0, -0.5)])

    def test_compute_and_differentiate(self):
        """Velocity is in position units per day."""
        state = self.segment.compute_and_differentiate(J2000_EPOCH + 0.25)
        self.assertIsInstance(state, State)
        self.assertEqual(state.position, Vector(0.5, 5.0, -0.5))
        # x sweeps 2 units per day; dz/dt = 4t = 2 per unit t
        self.assertEqual(state.velocity, Vector(2.0, 0.0, 4.0))

    def test_velocity_matches_position_difference(self):
        """Velocity agrees with a finite difference of compute."""
        h = 1e-3
        jd = J2000_EPOCH + 0.3
        state = self.segment.compute_and_differentiate(jd)
        ahead = self.segment.compute(jd + h)
        behind = self.segment.compute(jd - h)
        numeric = (ahead - behind) / (2 * h)
        for axis in range(3):
            self.assertAlmostEqual(state.velocity[axis], numeric[axis], delta=1e-4)

    def test_compute_and_differentiate_many(self):
        """A sequence of dates gives a list of states."""
        states = self.segment.compute_and_differentiate(
            [J2000_EPOCH - 0.25, J2000_EPOCH + 1.0]
        )
        self.assertEqual(len(states), 2)
        self.assertEqual(states[1].position, Vector(10.0, 0.0, 0.0))
        self.assertEqual(states[1].velocity, Vector(2.0, -2.0, 0.0))

    def test_out_of_range_many(self):
        """Every uncovered time is reported."""
        with self.assertRaises(OutOfRangeError) as cm:
            self.segment.compute([J2000_EPOCH, J2000_EPOCH + 2.0, J2000_EPOCH - 1.0])
        self.assertEqual(
            cm.exception.out_of_range_times, [2 * 86400.0, -86400.0]
        )

    def test_logs_record_selection(self):
        """Record selection is logged at debug level."""
        with self.assertLogs("spkcheb.segment", level="DEBUG") as logs:
            self.segment.compute(J2000_EPOCH + 0.25)
        self.assertTrue(any("falls in record 0" in line for line in logs.output))


class TestChebyshevSegmentConstruction(unittest.TestCase):
    """Test segment construction and validation."""

    def test_type_3_ignores_velocity_series(self):
        """Data type 3 records evaluate only the position series."""
        record = [0.0, HALF_DAY, 1.0, 0.0, 2.0, 0.0, 3.0, 0.0]
        velocity_series = [9.0, 9.0, 9.0, 9.0, 9.0, 9.0]
        segment = ChebyshevSegment.from_records([record + velocity_series], data_type=3)
        self.assertEqual(segment.coefficients.shape, (1, 2, 3))
        self.assertEqual(segment.compute(J2000_EPOCH), Vector(1.0, 2.0, 3.0))

    def test_unsupported_data_type(self):
        """Only Chebyshev data types are accepted."""
        with self.assertRaises(UnsupportedError) as cm:
            ChebyshevSegment.from_records(make_records(), data_type=13)
        self.assertIn("Unsupported data type: 13", str(cm.exception))

    def test_record_size_must_fit_data_type(self):
        """Record length must be 2 + components * terms."""
        with self.assertRaises(InvalidInputError):
            ChebyshevSegment.from_records([[0.0, 1.0, 1.0, 2.0]])
        with self.assertRaises(InvalidInputError):
            ChebyshevSegment.from_records([[0.0, 1.0]])

    def test_records_must_be_numeric_2d(self):
        """Records must form a non-empty numeric table."""
        with self.assertRaises(InvalidInputError):
            ChebyshevSegment.from_records([[0.0, 1.0, 10 ** 400, 0.0, 0.0]])
        with self.assertRaises(InvalidInputError):
            ChebyshevSegment.from_records([])
        with self.assertRaises(InvalidInputError):
            ChebyshevSegment.from_records([0.0, 1.0, 2.0, 3.0, 4.0])
        with self.assertRaises(InvalidInputError):
            ChebyshevSegment.from_records([["a", "b", "c", "d", "e"]])

    def test_mismatched_arrays(self):
        """Midpoints, radii and coefficients must agree in length."""
        with self.assertRaises(InvalidInputError):
            ChebyshevSegment([0.0, 1.0], [1.0], np.zeros((2, 3, 3)))
        with self.assertRaises(InvalidInputError):
            ChebyshevSegment([0.0], [1.0], np.zeros((2, 3, 3)))
        with self.assertRaises(InvalidInputError):
            ChebyshevSegment([0.0], [1.0], np.zeros((1, 3, 2)))
        with self.assertRaises(InvalidInputError):
            ChebyshevSegment([0.0], [1.0], np.zeros((1, 0, 3)))


if __name__ == "__main__":
    unittest.main()
