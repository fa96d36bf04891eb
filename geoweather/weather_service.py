# ABOUTME: Service layer for the OpenWeatherMap OneCall API call and response parsing.
# ABOUTME: Returns a tagged FetchResult separating network failures, parse failures and success.

import logging
from enum import Enum

import httpx
from pydantic import BaseModel, ValidationError

from geoweather.config import EXCLUDE_PARTS, ONECALL_URL, UNITS
from geoweather.models import Location, WeatherReport

logger = logging.getLogger(__name__)


class FetchStatus(str, Enum):
    OK = "ok"
    NETWORK_ERROR = "network_error"
    PARSE_ERROR = "parse_error"


class FetchResult(BaseModel):
    """Outcome of one weather lookup. `report` is set only when status is OK."""

    status: FetchStatus
    report: WeatherReport | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.OK


def build_query(location: Location, api_key: str) -> dict:
    """Query parameters for the OneCall endpoint."""
    return {
        "lat": location.latitude,
        "lon": location.longitude,
        "units": UNITS,
        "exclude": EXCLUDE_PARTS,
        "appid": api_key,
    }


async def fetch_weather(client: httpx.AsyncClient, location: Location, api_key: str) -> FetchResult:
    """Fetch current conditions and the daily forecast for a location.

    Makes a single GET with no retry. Transport errors and non-2xx statuses map to
    NETWORK_ERROR; a body that is not a valid OneCall payload maps to PARSE_ERROR.
    """
    try:
        resp = await client.get(ONECALL_URL, params=build_query(location, api_key))
        resp.raise_for_status()
    except httpx.HTTPError as e:
        # The exception text carries the request URL, which includes the API key.
        logger.warning("Weather request failed: %s", type(e).__name__)
        return FetchResult(status=FetchStatus.NETWORK_ERROR, detail=type(e).__name__)

    try:
        report = WeatherReport.model_validate(resp.json())
    except ValueError as e:
        # ValidationError and json.JSONDecodeError are both ValueErrors.
        logger.error("Weather payload could not be parsed: %s", _describe(e))
        return FetchResult(status=FetchStatus.PARSE_ERROR, detail=_describe(e))

    return FetchResult(status=FetchStatus.OK, report=report)


def _describe(error: ValueError) -> str:
    if isinstance(error, ValidationError):
        return f"{error.error_count()} validation error(s) for {error.title}"
    return str(error)
