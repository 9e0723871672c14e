"""Fixed-column field extraction for TLE data lines.

Every extractor takes an already validated data line and returns the decoded
value; malformed content raises :class:`FieldDecodeError` naming the field and
the raw column text.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional

from . import constants as c
from .errors import FieldDecodeError, IdentityMismatchError, StructuralError
from .lines import TleLines

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)$")
_DIGITS_RE = re.compile(r"^[0-9]+$")
# sign, mantissa digits, exponent sign, exponent digit: " 12345-3", "-11606-4"
_COMPACT_RE = re.compile(r"^([ +-])([0-9]{5})([+-])([0-9])$")
_CLASSIFICATIONS = frozenset({"U", "S", "T", ""})


def parse_int(field: str, raw: str, blank: Optional[int] = None) -> int:
    text = raw.strip()
    if not text and blank is not None:
        return blank
    if not _INT_RE.match(text):
        raise FieldDecodeError(field, raw, "not an integer")
    return int(text)


def parse_float(field: str, raw: str) -> float:
    text = raw.strip()
    if not _FLOAT_RE.match(text):
        raise FieldDecodeError(field, raw, "not a decimal number")
    return float(text)


def parse_implied_decimal(field: str, raw: str) -> float:
    """Digits with an assumed leading ``0.`` (eccentricity)."""

    text = raw.strip()
    if not _DIGITS_RE.match(text):
        raise FieldDecodeError(field, raw, "expected digits with implied decimal point")
    return float("0." + text)


def parse_compact_exponent(field: str, raw: str) -> float:
    """Decode the TLE exponential notation, e.g. ``" 12345-3"`` -> ``0.12345e-3``."""

    match = _COMPACT_RE.match(raw)
    if match is None:
        raise FieldDecodeError(field, raw, "expected sign, five digits, exponent sign, digit")
    sign, digits, exp_sign, exp_digit = match.groups()
    mantissa = float(f"{'-' if sign == '-' else ''}0.{digits}")
    exponent = int(exp_digit)
    if exp_sign == "-":
        exponent = -exponent
    return mantissa * 10.0 ** exponent


def parse_epoch_year(raw: str) -> int:
    """Window a two-digit year: below the pivot is 20xx, otherwise 19xx."""

    text = raw.strip()
    if not _DIGITS_RE.match(text) or len(text) > 2:
        raise FieldDecodeError("epoch_year", raw, "expected a two-digit year")
    year2 = int(text)
    return 2000 + year2 if year2 < c.EPOCH_YEAR_PIVOT else 1900 + year2


# ------------------------------- Line 1 ----------------------------------- #

def satellite_number(lines: TleLines) -> str:
    first = lines.line1[c.L1_SATELLITE_NUMBER].strip()
    second = lines.line2[c.L2_SATELLITE_NUMBER].strip()
    if first != second:
        raise IdentityMismatchError(first, second)
    if not first:
        raise FieldDecodeError("satellite_number", lines.line1[c.L1_SATELLITE_NUMBER], "blank")
    return first


def classification(line1: str) -> str:
    raw = line1[c.L1_CLASSIFICATION]
    value = raw.strip()
    if value not in _CLASSIFICATIONS:
        raise FieldDecodeError("classification", raw, "expected U, S or T")
    return value


def launch_year(line1: str) -> str:
    return line1[c.L1_LAUNCH_YEAR].strip()


def launch_number(line1: str) -> str:
    return line1[c.L1_LAUNCH_NUMBER].strip()


def launch_piece(line1: str) -> str:
    return line1[c.L1_LAUNCH_PIECE].strip()


def international_designator(line1: str) -> str:
    return launch_year(line1) + launch_number(line1) + launch_piece(line1)


def epoch_year(line1: str) -> int:
    return parse_epoch_year(line1[c.L1_EPOCH_YEAR])


def epoch_day(line1: str) -> float:
    return parse_float("epoch_day", line1[c.L1_EPOCH_DAY])


def mean_motion_dot(line1: str) -> float:
    value = parse_float("mean_motion_dot", line1[c.L1_MEAN_MOTION_DOT])
    return value / (c.XPDOTP * c.MINUTES_PER_DAY)


def mean_motion_dot_dot(line1: str) -> float:
    value = parse_compact_exponent("mean_motion_dot_dot", line1[c.L1_MEAN_MOTION_DOT_DOT])
    return value / (c.XPDOTP * c.MINUTES_PER_DAY * c.MINUTES_PER_DAY)


def bstar(line1: str) -> float:
    return parse_compact_exponent("bstar", line1[c.L1_BSTAR])


def ephemeris_type(line1: str) -> int:
    # Published element sets frequently leave this column blank.
    return parse_int("ephemeris_type", line1[c.L1_EPHEMERIS_TYPE], blank=0)


def element_number(line1: str) -> int:
    return parse_int("element_number", line1[c.L1_ELEMENT_NUMBER])


# ------------------------------- Line 2 ----------------------------------- #

def _angle(field: str, raw: str) -> float:
    return parse_float(field, raw) * c.DEG2RAD


def inclination(line2: str) -> float:
    return _angle("inclination", line2[c.L2_INCLINATION])


def right_ascension_ascending_node(line2: str) -> float:
    return _angle("right_ascension_ascending_node", line2[c.L2_RIGHT_ASCENSION])


def eccentricity(line2: str) -> float:
    return parse_implied_decimal("eccentricity", line2[c.L2_ECCENTRICITY])


def argument_of_perigee(line2: str) -> float:
    return _angle("argument_of_perigee", line2[c.L2_ARGUMENT_OF_PERIGEE])


def mean_anomaly(line2: str) -> float:
    return _angle("mean_anomaly", line2[c.L2_MEAN_ANOMALY])


def mean_motion(line2: str) -> float:
    return parse_float("mean_motion", line2[c.L2_MEAN_MOTION]) / c.XPDOTP


def revolution_number(line2: str) -> int:
    return parse_int("revolution_number", line2[c.L2_REVOLUTION_NUMBER])


# ------------------------------ Assembly ---------------------------------- #

def check_line_numbers(lines: TleLines) -> None:
    """Column 1 must identify the line as ``1`` and ``2`` respectively."""

    for expected, line, column in (
        ("1", lines.line1, c.L1_LINE_NUMBER),
        ("2", lines.line2, c.L2_LINE_NUMBER),
    ):
        if line[column] != expected:
            raise StructuralError(
                f"data line {expected} starts with {line[column]!r}, expected {expected!r}"
            )


def decode_fields(lines: TleLines) -> Dict[str, Any]:
    """Decode every field of both data lines into a mapping keyed by record attribute."""

    line1, line2 = lines.line1, lines.line2
    number = satellite_number(lines)
    return {
        "satellite_number": number,
        "satellite_name": lines.title if lines.title is not None else number,
        "classification": classification(line1),
        "launch_year": launch_year(line1),
        "launch_number": launch_number(line1),
        "launch_piece": launch_piece(line1),
        "international_designator": international_designator(line1),
        "epoch_year": epoch_year(line1),
        "epoch_day": epoch_day(line1),
        "mean_motion_dot": mean_motion_dot(line1),
        "mean_motion_dot_dot": mean_motion_dot_dot(line1),
        "bstar": bstar(line1),
        "ephemeris_type": ephemeris_type(line1),
        "element_number": element_number(line1),
        "inclination": inclination(line2),
        "right_ascension_ascending_node": right_ascension_ascending_node(line2),
        "eccentricity": eccentricity(line2),
        "argument_of_perigee": argument_of_perigee(line2),
        "mean_anomaly": mean_anomaly(line2),
        "mean_motion": mean_motion(line2),
        "revolution_number": revolution_number(line2),
    }


__all__ = [
    "parse_int",
    "parse_float",
    "parse_implied_decimal",
    "parse_compact_exponent",
    "parse_epoch_year",
    "check_line_numbers",
    "decode_fields",
]
