# ABOUTME: Dependency container for the request handler using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient, the fallback location and the API key secret name.

import httpx
from pydantic import BaseModel, ConfigDict

from geoweather.config import DEFAULT_LOCATION, WEATHER_API_KEY_SECRET
from geoweather.models import Location


class HandlerDeps(BaseModel):
    """Dependencies injected into the request handler at application startup."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    http_client: httpx.AsyncClient
    default_location: Location = DEFAULT_LOCATION
    api_key_secret: str = WEATHER_API_KEY_SECRET


def create_http_client() -> httpx.AsyncClient:
    """Create the outbound client. One attempt per request: no retry transport, default timeouts."""
    return httpx.AsyncClient()
