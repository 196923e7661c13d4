"""Julian date helpers for TDB time arguments.

SPK segments index their records by TDB seconds past J2000, while callers
usually hold a Julian date. A Julian date may be passed split in two parts
(``tdb`` + ``tdb2``) to keep sub-millisecond precision.
"""

import math
from typing import Tuple

from .constants import GREGORIAN_REFORM_JDN, J2000_EPOCH, SECONDS_PER_DAY


def tdb_to_seconds(tdb: float, tdb2: float = 0.0) -> float:
    """Convert a (possibly split) TDB Julian date to seconds past J2000.

    Args:
        tdb: Julian date, or its integer-ish part
        tdb2: Remaining fraction of a day to add to ``tdb``

    Returns:
        float: Seconds past J2000
    """
    return (tdb - J2000_EPOCH) * SECONDS_PER_DAY + tdb2 * SECONDS_PER_DAY


def seconds_to_jd(seconds: float) -> float:
    """Convert seconds past J2000 back to a Julian date."""
    return J2000_EPOCH + seconds / SECONDS_PER_DAY


def julian_to_gregorian(julian_date: float) -> Tuple[int, int, int]:
    """Convert a Julian date to a calendar date.

    Dates on or after 1582-10-15 are Gregorian, earlier dates use the
    Julian calendar. Years before 1 CE are astronomical, so -1 is 2 BCE.
    Algorithm from Bate, Mueller & White, Fundamentals of Astrodynamics.

    Args:
        julian_date: Julian date to convert

    Returns:
        Tuple[int, int, int]: (year, month, day)
    """
    jd = julian_date + 0.5
    z = math.floor(jd)
    f = jd - z

    if z < GREGORIAN_REFORM_JDN:
        a = z
    else:
        # 1867216.25 is 1500-03-01T00:00
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    return int(year), int(month), int(day)


def format_date(year: int, month: int, day: int) -> str:
    """Format a calendar date as YYYY-MM-DD (year unpadded, may be negative)."""
    return "%d-%02d-%02d" % (year, month, day)
