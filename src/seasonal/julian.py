"""Julian Day <-> Gregorian calendar conversion.

Independent of the seasonal-event math. Algorithms from Meeus,
*Astronomical Algorithms*, chapter 7, proleptic Gregorian calendar only.
"""

import math
from datetime import datetime, timedelta

from pytz import utc

from seasonal.models import CivilTime


def _round_half_up(x: float) -> float:
    return math.floor(x + 0.5)


def jd_to_civil(jd: float) -> CivilTime:
    """Convert a Julian Day to calendar fields, rounded to the nearest minute.

    The hour is the truncated day fraction; the remainder is rounded to the
    minute and a 60-minute result carries into the hour (which may reach 24).

    Args:
        jd: Julian Day (or Julian Ephemeris Day).

    Returns:
        CivilTime with year/month/day/hour/minute.
    """
    z = _round_half_up(jd)
    alpha = math.floor((z - 1867216.25) / 36524.25)
    b = z + alpha - math.floor(alpha / 4) + 1525.0
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = int(b - d - math.floor(30.6001 * e))
    month = int(e - 1 if e < 14 else e - 13)
    year = int(c - 4716 if month > 2 else c - 4715)

    k = 24.0 * (jd + 0.5 - z)
    hour = math.floor(k)
    minute = int(_round_half_up((k - hour) * 60.0))
    if minute == 60:
        minute = 0
        hour += 1

    return CivilTime(year=year, month=month, day=day, hour=int(hour), minute=minute)


def civil_to_jd(civil: CivilTime) -> float:
    """Convert calendar fields back to a Julian Day."""
    y, m = civil.year, civil.month
    if m <= 2:
        y -= 1
        m += 12
    a = math.floor(y / 100)
    b = 2 - a + math.floor(a / 4)
    day = civil.day + (civil.hour + civil.minute / 60.0) / 24.0
    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + day + b - 1524.5


def civil_to_datetime(civil: CivilTime) -> datetime:
    """Build a UTC datetime from calendar fields.

    Raises:
        ValueError: If the date is not representable by ``datetime``.
        OverflowError: If the 24:00 carry steps past ``datetime.max``.
    """
    midnight = datetime(civil.year, civil.month, civil.day, tzinfo=utc)
    return midnight + timedelta(hours=civil.hour, minutes=civil.minute)


def datetime_to_civil(dt: datetime) -> CivilTime:
    """Calendar fields of a datetime, in UTC if it is timezone-aware. Seconds are dropped."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(utc)
    return CivilTime(
        year=dt.year, month=dt.month, day=dt.day, hour=dt.hour, minute=dt.minute
    )
