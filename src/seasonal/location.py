"""Hemisphere source — geocoding and timezone lookup for the CLI.

The computation layer never imports this module; callers derive the
hemisphere flag here and pass it in as a plain bool.
"""

import logging
import math
import os

import httpx
from timezonefinder import TimezoneFinder

from seasonal.models import ObserverLocation

logger = logging.getLogger(__name__)

_NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
_tf = TimezoneFinder()


class GeocodingError(Exception):
    """Geocoder call failure."""


def is_southern_hemisphere(lat: float) -> bool:
    """True if the latitude is south of the equator. A negative zero counts as south."""
    return math.copysign(1.0, lat) < 0


def timezone_at(lat: float, lng: float) -> str | None:
    """IANA timezone name for a coordinate, or None over open sea."""
    return _tf.timezone_at(lat=lat, lng=lng)


def _geocode_nominatim(
    address: str, client: httpx.Client
) -> tuple[float, float, str] | None:
    """Nominatim (OpenStreetMap) geocoder. Returns (lat, lng, display_name) or None."""
    params = {"q": address, "format": "json", "limit": 1}
    headers = {"User-Agent": os.environ.get("SEASONAL_USER_AGENT", "Seasonal/1.0")}
    resp = client.get(_NOMINATIM_URL, params=params, headers=headers)
    resp.raise_for_status()
    results = resp.json()
    if not results:
        return None
    r = results[0]
    return float(r["lat"]), float(r["lon"]), r["display_name"]


def geocode_location(
    address: str, client: httpx.Client | None = None
) -> ObserverLocation:
    """Resolve an address string to an ObserverLocation.

    Args:
        address: Address string in any language.
        client: httpx client to use. A short-lived one is created if None.

    Returns:
        ObserverLocation containing lat/lng, timezone name, and normalized address.

    Raises:
        GeocodingError: On HTTP error, malformed response, or when the address cannot be found.
    """
    logger.info("Geocoding %r", address)
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=10)
    try:
        result = _geocode_nominatim(address, client)
    except httpx.HTTPError as e:
        raise GeocodingError(f"Nominatim request failed: {e}") from e
    except (KeyError, ValueError, IndexError, TypeError) as e:
        raise GeocodingError(f"Malformed Nominatim response: {e}") from e
    finally:
        if owns_client:
            client.close()

    if result is None:
        raise GeocodingError(f"Address not found: {address}")
    lat, lng, address_display = result

    tz_name = timezone_at(lat, lng)
    if tz_name is None:
        logger.warning("No timezone for lat=%s, lng=%s", lat, lng)
    logger.debug("Resolved %r -> (%s, %s) %s", address, lat, lng, tz_name)

    return ObserverLocation(
        lat=lat, lng=lng, timezone=tz_name, address_display=address_display
    )
