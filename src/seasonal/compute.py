"""Seasonal event computation — equinox and solstice instants for a civil year.

Meeus, *Astronomical Algorithms*, chapter 27: a polynomial estimate of the
mean event, refined by 24 periodic terms, then converted to a UTC datetime.
Accurate to about a minute between 1000 and 3000 CE; outside that span the
result degrades silently.
"""

import logging
import math
from datetime import datetime

from seasonal.julian import civil_to_datetime, jd_to_civil
from seasonal.models import EventKind, Season, SeasonalEvent, SeasonQuery, YearSeasons

logger = logging.getLogger(__name__)

_J2000 = 2451545.0
_DAYS_PER_CENTURY = 36525.0

# a + b*t + c*t^2 + d*t^3 + e*t^4, t in millennia from 2000. Signs folded in.
# fmt: off
_POLYNOMIAL_COEFFICIENTS: dict[EventKind, tuple[float, float, float, float, float]] = {
    EventKind.NORTHWARD_EQUINOX: (2451623.80984, 365242.37404, 0.05169, -0.00411, -0.00057),
    EventKind.NORTHERN_SOLSTICE: (2451716.56767, 365241.62603, 0.00325, 0.00888, -0.00030),
    EventKind.SOUTHWARD_EQUINOX: (2451810.21715, 365242.01767, -0.11575, 0.00337, 0.00078),
    EventKind.SOUTHERN_SOLSTICE: (2451900.05952, 365242.74049, -0.06223, -0.00823, 0.00032),
}
# fmt: on

# (amplitude, phase deg, frequency deg/century)
_PERIODIC_TERMS: tuple[tuple[float, float, float], ...] = (
    (485, 324.96, 1934.136),
    (203, 337.23, 32964.467),
    (199, 342.08, 20.186),
    (182, 27.85, 445267.112),
    (156, 73.14, 45036.886),
    (136, 171.52, 22518.443),
    (77, 222.54, 65928.934),
    (74, 296.72, 3034.906),
    (70, 243.58, 9037.513),
    (58, 119.81, 33718.147),
    (52, 297.17, 150.678),
    (50, 21.02, 2281.226),
    (45, 247.54, 29929.562),
    (44, 325.15, 31555.956),
    (29, 60.93, 4443.417),
    (18, 155.12, 67555.328),
    (17, 288.79, 4562.452),
    (16, 198.04, 62894.029),
    (14, 199.76, 31436.921),
    (12, 95.39, 14577.848),
    (12, 287.11, 31931.756),
    (12, 320.81, 34777.259),
    (9, 227.73, 1222.114),
    (8, 15.45, 16859.074),
)

# (northern hemisphere, southern hemisphere)
# fmt: off
_SEASON_TO_KIND: dict[Season, tuple[EventKind, EventKind]] = {
    Season.VERNAL_EQUINOX: (EventKind.NORTHWARD_EQUINOX, EventKind.SOUTHWARD_EQUINOX),
    Season.SUMMER_SOLSTICE: (EventKind.NORTHERN_SOLSTICE, EventKind.SOUTHERN_SOLSTICE),
    Season.AUTUMNAL_EQUINOX: (EventKind.SOUTHWARD_EQUINOX, EventKind.NORTHWARD_EQUINOX),
    Season.WINTER_SOLSTICE: (EventKind.SOUTHERN_SOLSTICE, EventKind.NORTHERN_SOLSTICE),
}
# fmt: on


def _mean_event(year: int, kind: EventKind) -> float:
    """JDE0: mean event instant from the per-event quartic."""
    t = (year - 2000) / 1000.0
    return sum(c * t**n for n, c in enumerate(_POLYNOMIAL_COEFFICIENTS[kind]))


def _periodic_sum(centuries: float) -> float:
    """S(T) — sum of the periodic terms, in units of 0.00001 day."""
    return sum(
        amplitude * math.cos(math.radians(phase + centuries * frequency))
        for amplitude, phase, frequency in _PERIODIC_TERMS
    )


def _delta_t_days(year: int) -> float:
    """TT - UT, linear approximation near the present era (66 s at 2000)."""
    return (66.0 + (year - 2000) * 1.0) / 86400.0


def julian_ephemeris_day(year: int, kind: EventKind) -> float:
    """Refined Julian Day of an event, already shifted from TT to UT.

    Args:
        year: Civil year. Not validated.
        kind: Which of the four events.

    Returns:
        Julian Day (float).
    """
    jde0 = _mean_event(year, kind)
    centuries = (jde0 - _J2000) / _DAYS_PER_CENTURY
    w = math.radians(35999.373 * centuries - 2.47)
    damping = 1.0 + 0.0334 * math.cos(w) + 0.0007 * math.cos(2 * w)
    return jde0 + (0.00001 * _periodic_sum(centuries)) / damping - _delta_t_days(year)


def _instant_from_jde(year: int, kind: EventKind, jde: float) -> datetime:
    instant = civil_to_datetime(jd_to_civil(jde))
    logger.debug("%s %d: JDE=%.5f -> %s", kind.value, year, jde, instant.isoformat())
    return instant


def compute_event(year: int, kind: EventKind) -> datetime:
    """Compute the UTC instant of an event, to the minute.

    Raises:
        ValueError: If the resulting date is outside ``datetime``'s range.
    """
    return _instant_from_jde(year, kind, julian_ephemeris_day(year, kind))


def resolve_event_kind(season: Season, southern: bool) -> EventKind:
    """Map a calendar-relative name to the astronomical event for a hemisphere."""
    north, south = _SEASON_TO_KIND[season]
    return south if southern else north


def compute_season(season: Season, year: int, southern: bool = False) -> SeasonalEvent:
    """Compute a named event as seen from the given hemisphere."""
    kind = resolve_event_kind(season, southern)
    jde = julian_ephemeris_day(year, kind)
    return SeasonalEvent(
        season=season,
        kind=kind,
        jde=jde,
        instant=_instant_from_jde(year, kind, jde),
    )


def compute_vernal_equinox(year: int, southern: bool = False) -> datetime:
    """March equinox in the northern hemisphere, September equinox in the southern."""
    return compute_event(year, resolve_event_kind(Season.VERNAL_EQUINOX, southern))


def compute_summer_solstice(year: int, southern: bool = False) -> datetime:
    """June solstice in the northern hemisphere, December solstice in the southern."""
    return compute_event(year, resolve_event_kind(Season.SUMMER_SOLSTICE, southern))


def compute_autumnal_equinox(year: int, southern: bool = False) -> datetime:
    """September equinox in the northern hemisphere, March equinox in the southern."""
    return compute_event(year, resolve_event_kind(Season.AUTUMNAL_EQUINOX, southern))


def compute_winter_solstice(year: int, southern: bool = False) -> datetime:
    """December solstice in the northern hemisphere, June solstice in the southern."""
    return compute_event(year, resolve_event_kind(Season.WINTER_SOLSTICE, southern))


def compute_year(year: int, southern: bool = False) -> YearSeasons:
    """Compute all four named events of a civil year.

    Args:
        year: Civil year.
        southern: True if the observer is in the southern hemisphere.

    Returns:
        YearSeasons with events in Season declaration order.
    """
    events = tuple(compute_season(season, year, southern) for season in Season)
    return YearSeasons(year=year, southern=southern, events=events)


def midpoint(a: datetime, b: datetime) -> datetime:
    """Return the instant halfway between a and b, truncated to the minute.

    Seconds are dropped rather than rounded so results near a half minute
    don't flip between neighbours. Argument order does not matter.

    Raises:
        TypeError: If one datetime is naive and the other aware.
    """
    early, late = sorted((a, b))
    mid = early + (late - early) / 2
    return mid.replace(second=0, microsecond=0)


def run(query: SeasonQuery) -> YearSeasons:
    """Top-level entry point: takes a SeasonQuery and returns a YearSeasons."""
    return compute_year(query.year, query.southern)
