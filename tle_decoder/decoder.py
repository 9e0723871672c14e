"""Decode pipeline: split, checksum gate, field decoding, epoch conversion."""

from __future__ import annotations

from typing import Optional

from . import checksum, fields
from .constants import L1_EPOCH_DAY
from .errors import FieldDecodeError, TLEDecodeError
from .lines import segment
from .logging import get_logger, log_context
from .record import TleRecord
from .timeconv import epoch_to_julian

LOGGER = get_logger(__name__)


def decode(text: str) -> TleRecord:
    """Decode a 2-line or 3-line element set.

    Raises a :class:`~tle_decoder.errors.TLEDecodeError` subclass when the
    text is malformed; no record is returned in that case.
    """

    lines = segment(text)
    checksum.validate(lines)
    fields.check_line_numbers(lines)
    values = fields.decode_fields(lines)
    try:
        jd_epoch = epoch_to_julian(values["epoch_year"], values["epoch_day"])
    except ValueError as exc:
        raise FieldDecodeError(
            "epoch_day", lines.line1[L1_EPOCH_DAY], str(exc)
        ) from exc

    record = TleRecord(
        jd_epoch=jd_epoch,
        line1=lines.line1,
        line2=lines.line2,
        title=lines.title,
        **values,
    )
    LOGGER.debug(
        "tle_decoded",
        extra={"satellite_number": record.satellite_number, "jd_epoch": jd_epoch},
    )
    return record


def try_decode(text: str) -> Optional[TleRecord]:
    """Like :func:`decode` but return ``None`` on malformed input."""

    try:
        return decode(text)
    except TLEDecodeError as exc:
        with log_context(error=exc.__class__.__name__):
            LOGGER.info("tle_rejected", extra={"reason": str(exc)})
        return None


def is_valid_tle(text: str) -> bool:
    return try_decode(text) is not None


__all__ = ["decode", "try_decode", "is_valid_tle"]
