"""Cross-check decoded values against the sgp4 package's own TLE reader."""

from __future__ import annotations

import pytest
from sgp4.api import Satrec

from tle_decoder import decode

CASES = [
    (
        "1 25544U 98067A   20344.91719907  .00001264  00000-0  29621-4 0  9993",
        "2 25544  51.6466 223.8666 0002416  90.3778  30.6140 15.48970462256430",
    ),
    (
        "1 25544U 98067A   08264.51782528 -.00002182  00000-0 -11606-4 0  2927",
        "2 25544  51.6416 247.4627 0006703 130.5360 325.0288 15.72125391563537",
    ),
]


@pytest.mark.parametrize("line1, line2", CASES)
def test_elements_match_sgp4(line1: str, line2: str) -> None:
    record = decode(f"{line1}\n{line2}")
    sat = Satrec.twoline2rv(line1, line2)

    assert int(record.satellite_number) == sat.satnum
    assert record.epoch_year % 100 == sat.epochyr
    assert record.epoch_day == pytest.approx(sat.epochdays, abs=1e-9)
    assert record.bstar == pytest.approx(sat.bstar, rel=1e-12)
    assert record.mean_motion_dot == pytest.approx(sat.ndot, rel=1e-12)
    assert record.mean_motion_dot_dot == pytest.approx(sat.nddot, rel=1e-12, abs=1e-30)
    assert record.inclination == pytest.approx(sat.inclo, rel=1e-12)
    assert record.right_ascension_ascending_node == pytest.approx(sat.nodeo, rel=1e-12)
    assert record.eccentricity == pytest.approx(sat.ecco, rel=1e-12)
    assert record.argument_of_perigee == pytest.approx(sat.argpo, rel=1e-12)
    assert record.mean_anomaly == pytest.approx(sat.mo, rel=1e-12)
    assert record.mean_motion == pytest.approx(sat.no_kozai, rel=1e-12)


@pytest.mark.parametrize("line1, line2", CASES)
def test_epoch_julian_day_matches_sgp4(line1: str, line2: str) -> None:
    record = decode(f"{line1}\n{line2}")
    sat = Satrec.twoline2rv(line1, line2)
    assert record.jd_epoch == pytest.approx(sat.jdsatepoch + sat.jdsatepochF, abs=1e-8)
