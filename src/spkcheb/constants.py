"""Physical and calendar constants shared across spkcheb."""

# Julian Date of the J2000 epoch (2000-01-01T12:00:00 TDB)
J2000_EPOCH = 2451545.0

# Ephemeris records are fitted over intervals measured in days; velocities
# are reported per second.
SECONDS_PER_DAY = 86400.0

# First Julian Day Number of the Gregorian calendar (1582-10-15)
GREGORIAN_REFORM_JDN = 2299161
