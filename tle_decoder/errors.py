"""Exceptions raised while decoding two-line element sets."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple


class TLEDecodeError(ValueError):
    """Base class for every failure of a decode attempt."""


class StructuralError(TLEDecodeError):
    """The text does not have the shape of a TLE (line count, line width, line numbers)."""

    def __init__(self, message: str, line_count: Optional[int] = None) -> None:
        super().__init__(message)
        self.line_count = line_count


class IdentityMismatchError(TLEDecodeError):
    """Catalog numbers on line 1 and line 2 disagree."""

    def __init__(self, line1_number: str, line2_number: str) -> None:
        super().__init__(
            f"catalog numbers differ between lines: {line1_number!r} != {line2_number!r}"
        )
        self.line1_number = line1_number
        self.line2_number = line2_number


class ChecksumError(TLEDecodeError):
    """One or both data lines fail the mod-10 checksum.

    ``lines`` holds the failing line numbers (``1``, ``2`` or both) and
    ``expected``/``computed`` map each of them to the encoded digit (``None``
    when the final column is not a digit) and the computed sum.
    """

    def __init__(
        self,
        lines: Sequence[int],
        expected: Optional[dict] = None,
        computed: Optional[dict] = None,
    ) -> None:
        self.lines: Tuple[int, ...] = tuple(lines)
        self.expected = dict(expected or {})
        self.computed = dict(computed or {})
        detail = ", ".join(
            f"line {n} (expected {self.expected.get(n)}, computed {self.computed.get(n)})"
            for n in self.lines
        )
        super().__init__(f"checksum failed: {detail}")


class FieldDecodeError(TLEDecodeError):
    """A fixed-column field could not be converted to its type."""

    def __init__(self, field: str, raw: str, reason: str = "") -> None:
        message = f"cannot decode field {field!r} from {raw!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.field = field
        self.raw = raw


__all__ = [
    "TLEDecodeError",
    "StructuralError",
    "IdentityMismatchError",
    "ChecksumError",
    "FieldDecodeError",
]
