"""Data model definitions — explicit boundaries between query, compute, and display layers."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class EventKind(Enum):
    """Hemisphere-neutral solar events. Selects the coefficient set."""

    NORTHWARD_EQUINOX = "northward_equinox"  # March equinox
    NORTHERN_SOLSTICE = "northern_solstice"  # June solstice
    SOUTHWARD_EQUINOX = "southward_equinox"  # September equinox
    SOUTHERN_SOLSTICE = "southern_solstice"  # December solstice


class Season(Enum):
    """Calendar-relative event names, as an observer would call them."""

    VERNAL_EQUINOX = "vernal_equinox"
    SUMMER_SOLSTICE = "summer_solstice"
    AUTUMNAL_EQUINOX = "autumnal_equinox"
    WINTER_SOLSTICE = "winter_solstice"


@dataclass(frozen=True)
class CivilTime:
    """Gregorian calendar fields at minute resolution.

    ``hour`` may be 24 when minute rounding carries past 23:59; the
    datetime boundary rolls it into the next day.
    """

    year: int
    month: int  # 1-12
    day: int  # 1-31
    hour: int = 0  # 0-24
    minute: int = 0  # 0-59


@dataclass(frozen=True)
class SeasonQuery:
    """Raw caller input. The hemisphere flag is supplied, never looked up."""

    year: int  # Civil (Gregorian) year
    southern: bool = False  # True if the observer is south of the equator


@dataclass(frozen=True)
class SeasonalEvent:
    """A single computed event."""

    season: Season  # Name as seen from the observer's hemisphere
    kind: EventKind  # Astronomical event actually computed
    jde: float  # Refined Julian Ephemeris Day
    instant: datetime  # UTC, minute resolution


@dataclass(frozen=True)
class YearSeasons:
    """All four events of one civil year. The sole input to display code."""

    year: int
    southern: bool
    events: tuple[SeasonalEvent, ...]  # In Season declaration order

    def __getitem__(self, season: Season) -> SeasonalEvent:
        for event in self.events:
            if event.season is season:
                return event
        raise KeyError(season)

    def chronological(self) -> tuple[SeasonalEvent, ...]:
        """Events sorted by instant (southern-hemisphere names are not in calendar order)."""
        return tuple(sorted(self.events, key=lambda e: e.instant))


@dataclass(frozen=True)
class ObserverLocation:
    """Result of geocoding. Only used to derive the hemisphere flag and a display zone."""

    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees)
    timezone: str | None  # IANA zone name, None if not resolvable (open sea)
    address_display: str  # Normalized address returned by geocoder (for display)
