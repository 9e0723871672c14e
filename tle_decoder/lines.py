"""Segment raw TLE text into a title and two data lines."""

from __future__ import annotations

import re
from typing import NamedTuple, Optional, Tuple

from .constants import DATA_LINE_LENGTH
from .errors import StructuralError

_LINE_BREAK = re.compile(r"\r\n|\n|\r")


class TleLines(NamedTuple):
    title: Optional[str]
    line1: str
    line2: str


def split_lines(text: str) -> Tuple[str, ...]:
    """Split on CRLF, LF or CR, dropping the empty tail left by a final newline."""

    parts = _LINE_BREAK.split(text)
    while parts and not parts[-1].strip():
        parts.pop()
    return tuple(parts)


def segment(text: str) -> TleLines:
    """Return the title (``None`` for 2-line input) and the two data lines."""

    lines = split_lines(text)
    if len(lines) not in (2, 3):
        raise StructuralError(
            f"expected 2 or 3 lines, got {len(lines)}", line_count=len(lines)
        )

    title: Optional[str] = None
    if len(lines) == 3:
        title = lines[0].strip()
    line1, line2 = (ln.rstrip() for ln in lines[-2:])

    for number, line in ((1, line1), (2, line2)):
        if len(line) != DATA_LINE_LENGTH:
            raise StructuralError(
                f"line {number} has {len(line)} columns, expected {DATA_LINE_LENGTH}",
                line_count=len(lines),
            )
    return TleLines(title=title, line1=line1, line2=line2)


__all__ = ["TleLines", "split_lines", "segment"]
