"""The decoded two-line element record."""

from __future__ import annotations

import dataclasses
import datetime as dt
from typing import Any, Dict, Optional

from .timeconv import calendar_to_datetime, days_to_calendar


@dataclasses.dataclass(frozen=True)
class TleRecord:
    """Fully decoded TLE.

    Angles are in radians, ``mean_motion`` in radians/minute and its
    derivatives in radians/minute² and radians/minute³, matching the units
    SGP4-family propagators consume. Instances are only built by
    :func:`tle_decoder.decode` once every check has passed.
    """

    satellite_name: str
    satellite_number: str
    classification: str
    launch_year: str
    launch_number: str
    launch_piece: str
    international_designator: str
    epoch_year: int
    epoch_day: float
    mean_motion_dot: float
    mean_motion_dot_dot: float
    bstar: float
    ephemeris_type: int
    element_number: int
    inclination: float
    right_ascension_ascending_node: float
    eccentricity: float
    argument_of_perigee: float
    mean_anomaly: float
    mean_motion: float
    revolution_number: int
    jd_epoch: float
    line1: str
    line2: str
    title: Optional[str] = None
    is_valid: bool = True

    @property
    def epoch(self) -> dt.datetime:
        return calendar_to_datetime(days_to_calendar(self.epoch_year, self.epoch_day))

    def as_text(self, include_name: bool = True) -> str:
        lines = []
        if include_name and self.title is not None:
            lines.append(self.title)
        lines.extend([self.line1, self.line2])
        return "\n".join(lines) + "\n"

    def as_dict(self) -> Dict[str, Any]:
        payload = dataclasses.asdict(self)
        payload["epoch"] = self.epoch.isoformat()
        return payload


__all__ = ["TleRecord"]
