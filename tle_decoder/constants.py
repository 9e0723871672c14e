"""Fixed conventions of the NORAD two-line element format."""

from __future__ import annotations

import math

DEG2RAD = math.pi / 180.0
MINUTES_PER_DAY = 1440.0
# Revolutions/day divided by this gives radians/minute.
XPDOTP = MINUTES_PER_DAY / (2.0 * math.pi)

EPOCH_YEAR_PIVOT = 57
DATA_LINE_LENGTH = 69
CHECKSUM_COLUMN = DATA_LINE_LENGTH - 1

# Zero-based column slices, line 1.
L1_LINE_NUMBER = slice(0, 1)
L1_SATELLITE_NUMBER = slice(2, 7)
L1_CLASSIFICATION = slice(7, 8)
L1_LAUNCH_YEAR = slice(9, 11)
L1_LAUNCH_NUMBER = slice(11, 14)
L1_LAUNCH_PIECE = slice(14, 17)
L1_EPOCH_YEAR = slice(18, 20)
L1_EPOCH_DAY = slice(20, 32)
L1_MEAN_MOTION_DOT = slice(33, 43)
L1_MEAN_MOTION_DOT_DOT = slice(44, 52)
L1_BSTAR = slice(53, 61)
L1_EPHEMERIS_TYPE = slice(62, 63)
L1_ELEMENT_NUMBER = slice(64, 68)

# Zero-based column slices, line 2.
L2_LINE_NUMBER = slice(0, 1)
L2_SATELLITE_NUMBER = slice(2, 7)
L2_INCLINATION = slice(8, 16)
L2_RIGHT_ASCENSION = slice(17, 25)
L2_ECCENTRICITY = slice(26, 33)
L2_ARGUMENT_OF_PERIGEE = slice(34, 42)
L2_MEAN_ANOMALY = slice(43, 51)
L2_MEAN_MOTION = slice(52, 63)
L2_REVOLUTION_NUMBER = slice(63, 68)
