"""CLI entry point: print the equinoxes and solstices of a year.

    uv run seasonal 2025
    uv run seasonal 2025 --address "Sydney" --lang en --midpoints
    uv run seasonal 2025 --lat=-33.9 --tz Australia/Sydney
"""

import argparse
import logging
import os
import sys
from datetime import datetime, tzinfo

from dotenv import load_dotenv
from pytz import UnknownTimeZoneError, timezone

from seasonal.compute import midpoint, run
from seasonal.i18n import t
from seasonal.location import GeocodingError, geocode_location, is_southern_hemisphere
from seasonal.models import SeasonQuery, YearSeasons

logger = logging.getLogger(__name__)

_LABEL_WIDTH = 20


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seasonal",
        description="Compute the equinox and solstice instants of a year (UTC).",
    )
    parser.add_argument("year", type=int, help="Civil (Gregorian) year")
    where = parser.add_mutually_exclusive_group()
    where.add_argument(
        "--south", action="store_true", help="Observer is in the southern hemisphere"
    )
    where.add_argument("--lat", type=float, help="Observer latitude in decimal degrees")
    where.add_argument("--address", help="Observer address, geocoded with Nominatim")
    parser.add_argument("--tz", help="IANA timezone for an extra local-time column")
    parser.add_argument("--lang", choices=("en", "ko"), default="en")
    parser.add_argument(
        "--midpoints",
        action="store_true",
        help="Also print the midpoint between consecutive events",
    )
    return parser


def _format_instant(instant: datetime, zone: tzinfo | None) -> str:
    text = f"{instant:%Y-%m-%d %H:%M} UTC"
    if zone is not None:
        local = instant.astimezone(zone)
        text += f"   {local:%Y-%m-%d %H:%M %Z}"
    return text


def format_seasons(
    seasons: YearSeasons,
    lang: str = "en",
    zone: tzinfo | None = None,
    midpoints: bool = False,
) -> str:
    """Render a YearSeasons as a plain-text table, in chronological order."""
    hemisphere = t("hemisphere_south" if seasons.southern else "hemisphere_north", lang)
    lines = [t("header", lang).format(year=seasons.year, hemisphere=hemisphere)]
    events = seasons.chronological()
    for i, event in enumerate(events):
        label = t(event.season.value, lang)
        lines.append(f"{label:<{_LABEL_WIDTH}} {_format_instant(event.instant, zone)}")
        if midpoints and i + 1 < len(events):
            mid = midpoint(event.instant, events[i + 1].instant)
            label = "  " + t("label_midpoint", lang)
            lines.append(f"{label:<{_LABEL_WIDTH}} {_format_instant(mid, zone)}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = os.environ.get("SEASONAL_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        parser.error(f"unknown SEASONAL_LOG_LEVEL: {log_level}")
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    southern = args.south
    zone_name = args.tz
    if args.lat is not None:
        southern = is_southern_hemisphere(args.lat)
    elif args.address:
        try:
            location = geocode_location(args.address)
        except GeocodingError as e:
            print(t("error_address", args.lang).format(error=e), file=sys.stderr)
            return 1
        southern = is_southern_hemisphere(location.lat)
        zone_name = zone_name or location.timezone

    zone = None
    if zone_name:
        try:
            zone = timezone(zone_name)
        except UnknownTimeZoneError:
            parser.error(f"unknown timezone: {zone_name}")

    logger.debug("year=%d southern=%s zone=%s", args.year, southern, zone_name)
    seasons = run(SeasonQuery(year=args.year, southern=southern))
    print(format_seasons(seasons, lang=args.lang, zone=zone, midpoints=args.midpoints))
    return 0


if __name__ == "__main__":
    sys.exit(main())
