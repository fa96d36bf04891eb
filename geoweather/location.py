# ABOUTME: Derives the visitor's location from the geolocation headers added by the edge network.
# ABOUTME: Falls back to the configured default location when any of the hints is missing.

import logging
import math
from collections.abc import Mapping
from datetime import datetime, timezone

from geoweather.models import EdgeMetadata, Location

logger = logging.getLogger(__name__)

CITY_HEADER = "cf-ipcity"
COUNTRY_HEADER = "cf-ipcountry"
REGION_HEADER = "cf-region"
LATITUDE_HEADER = "cf-iplatitude"
LONGITUDE_HEADER = "cf-iplongitude"

UNKNOWN_REGION = "unknown region"


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_coordinate(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_edge_metadata(headers: Mapping[str, str]) -> EdgeMetadata:
    """Read the edge network's visitor-location headers.

    Blank headers count as absent. Coordinates are only set when both latitude and
    longitude are present and parse as finite numbers.
    """
    lat = _parse_coordinate(_header(headers, LATITUDE_HEADER))
    lon = _parse_coordinate(_header(headers, LONGITUDE_HEADER))
    return EdgeMetadata(
        city=_header(headers, CITY_HEADER),
        country=_header(headers, COUNTRY_HEADER),
        region=_header(headers, REGION_HEADER),
        coordinates=(lat, lon) if lat is not None and lon is not None else None,
    )


def location_from_metadata(metadata: EdgeMetadata) -> Location | None:
    """Build a Location only when city, country, region and coordinates are all present."""
    if metadata.city is None or metadata.country is None or metadata.region is None:
        return None
    if metadata.coordinates is None:
        return None
    lat, lon = metadata.coordinates
    return Location(
        latitude=lat,
        longitude=lon,
        city=metadata.city,
        region=metadata.region,
        country=metadata.country,
    )


def derive_location(metadata: EdgeMetadata, default: Location) -> tuple[Location, bool]:
    """Return the location to query and whether it was derived from the request."""
    location = location_from_metadata(metadata)
    if location is None:
        logger.info("Incomplete location metadata, using default location %s", default.city)
        return default, False
    return location, True


def log_request(path: str, metadata: EdgeMetadata) -> None:
    """Log one line per inbound request. Never raises."""
    try:
        logger.info(
            "%s - [%s], located at: %s, within: %s",
            datetime.now(timezone.utc).isoformat(),
            path,
            metadata.coordinates or (0.0, 0.0),
            metadata.region or UNKNOWN_REGION,
        )
    except Exception:
        logger.exception("Failed to log inbound request")
