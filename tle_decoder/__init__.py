"""Decoder for NORAD two-line element sets."""

from .checksum import checksum_ok, compute_checksum
from .constants import DEG2RAD, EPOCH_YEAR_PIVOT, MINUTES_PER_DAY, XPDOTP
from .decoder import decode, is_valid_tle, try_decode
from .errors import (
    ChecksumError,
    FieldDecodeError,
    IdentityMismatchError,
    StructuralError,
    TLEDecodeError,
)
from .record import TleRecord
from .timeconv import days_to_calendar, epoch_to_julian, julian_day

__version__ = "1.0.0"

__all__ = [
    "decode",
    "try_decode",
    "is_valid_tle",
    "TleRecord",
    "checksum_ok",
    "compute_checksum",
    "days_to_calendar",
    "epoch_to_julian",
    "julian_day",
    "DEG2RAD",
    "EPOCH_YEAR_PIVOT",
    "MINUTES_PER_DAY",
    "XPDOTP",
    "TLEDecodeError",
    "StructuralError",
    "IdentityMismatchError",
    "ChecksumError",
    "FieldDecodeError",
]
