"""Mod-10 checksum of TLE data lines."""

from __future__ import annotations

from typing import Dict, List, Optional

from .constants import CHECKSUM_COLUMN
from .errors import ChecksumError
from .lines import TleLines


def compute_checksum(line: str) -> int:
    """Sum of digits plus one per minus sign over the columns before the checksum, mod 10."""

    total = 0
    for ch in line[:CHECKSUM_COLUMN]:
        if "0" <= ch <= "9":
            total += int(ch)
        elif ch == "-":
            total += 1
    return total % 10


def expected_checksum(line: str) -> Optional[int]:
    """The digit stored in the checksum column, or ``None`` if it is not a digit."""

    if len(line) <= CHECKSUM_COLUMN:
        return None
    ch = line[CHECKSUM_COLUMN]
    if not "0" <= ch <= "9":
        return None
    return int(ch)


def checksum_ok(line: str) -> bool:
    """Return ``True`` when ``line`` satisfies the NORAD checksum rule."""

    expected = expected_checksum(line)
    return expected is not None and compute_checksum(line) == expected


def validate(lines: TleLines) -> None:
    """Raise :class:`ChecksumError` naming every data line whose checksum fails."""

    failed: List[int] = []
    expected: Dict[int, Optional[int]] = {}
    computed: Dict[int, int] = {}
    for number, line in ((1, lines.line1), (2, lines.line2)):
        if checksum_ok(line):
            continue
        failed.append(number)
        expected[number] = expected_checksum(line)
        computed[number] = compute_checksum(line)
    if failed:
        raise ChecksumError(failed, expected=expected, computed=computed)


__all__ = ["compute_checksum", "expected_checksum", "checksum_ok", "validate"]
