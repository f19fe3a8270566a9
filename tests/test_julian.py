from datetime import datetime

import pytest
from pytz import timezone, utc

from seasonal.julian import civil_to_datetime, civil_to_jd, datetime_to_civil, jd_to_civil
from seasonal.models import CivilTime

# Meeus, Astronomical Algorithms, ch. 7 (Gregorian dates only)
_KNOWN_DAYS = [
    (CivilTime(2000, 1, 1, 12, 0), 2451545.0),
    (CivilTime(1999, 1, 1, 0, 0), 2451179.5),
    (CivilTime(1987, 1, 27, 0, 0), 2446822.5),
    (CivilTime(1987, 6, 19, 12, 0), 2446966.0),
    (CivilTime(1988, 1, 27, 0, 0), 2447187.5),
    (CivilTime(1988, 6, 19, 12, 0), 2447332.0),
    (CivilTime(1900, 1, 1, 0, 0), 2415020.5),
    (CivilTime(1600, 1, 1, 0, 0), 2305447.5),
    (CivilTime(1600, 12, 31, 0, 0), 2305812.5),
]


@pytest.mark.parametrize(("civil", "jd"), _KNOWN_DAYS)
def test_jd_to_civil_known_days(civil, jd):
    assert jd_to_civil(jd) == civil


@pytest.mark.parametrize(("civil", "jd"), _KNOWN_DAYS)
def test_civil_to_jd_known_days(civil, jd):
    assert civil_to_jd(civil) == pytest.approx(jd, abs=1e-9)


def test_jd_to_civil_rounds_to_nearest_minute():
    # 1957 Oct 4.81 (Sputnik 1): 0.81 day = 19h 26.4m
    assert jd_to_civil(2436116.31) == CivilTime(1957, 10, 4, 19, 26)


def test_minute_overflow_carries_into_hour():
    jd = 2451545.0 + 59.6 / 1440
    assert jd_to_civil(jd) == CivilTime(2000, 1, 1, 13, 0)


def test_minute_overflow_at_end_of_day_rolls_into_next_date():
    jd = 2451545.5 - 0.2 / 1440  # 2000-01-01 23:59:48
    civil = jd_to_civil(jd)
    assert civil == CivilTime(2000, 1, 1, 24, 0)
    assert civil_to_datetime(civil) == datetime(2000, 1, 2, 0, 0, tzinfo=utc)


def test_round_trip_minute_aligned():
    for minutes in (0, 1, 59, 60, 61, 719, 720, 1439):
        jd = 2457102.5 + minutes / 1440
        assert civil_to_jd(jd_to_civil(jd)) == pytest.approx(jd, abs=1e-6)


def test_january_and_february_belong_to_the_same_year():
    assert jd_to_civil(civil_to_jd(CivilTime(2024, 2, 29, 6, 30))) == CivilTime(
        2024, 2, 29, 6, 30
    )
    assert jd_to_civil(civil_to_jd(CivilTime(2025, 1, 1, 0, 0))).year == 2025


def test_civil_to_datetime_is_utc():
    dt = civil_to_datetime(CivilTime(2015, 3, 20, 22, 45))
    assert dt == datetime(2015, 3, 20, 22, 45, tzinfo=utc)
    assert dt.utcoffset().total_seconds() == 0


def test_civil_to_datetime_propagates_out_of_range_year():
    with pytest.raises(ValueError):
        civil_to_datetime(CivilTime(10000, 3, 20, 0, 0))


def test_datetime_to_civil_converts_to_utc_and_drops_seconds():
    seoul = timezone("Asia/Seoul")
    local = seoul.localize(datetime(2015, 3, 21, 7, 45, 42))
    assert datetime_to_civil(local) == CivilTime(2015, 3, 20, 22, 45)
