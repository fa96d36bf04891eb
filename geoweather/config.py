# ABOUTME: Runtime configuration for the geoweather handler: endpoint constants, secrets, logging.
# ABOUTME: Loads a local .env on import and reads the weather API key fresh on every request.

import logging
import os

from dotenv import load_dotenv

from geoweather.models import Location

load_dotenv()

ONECALL_URL = "https://api.openweathermap.org/data/2.5/onecall"
UNITS = "imperial"
EXCLUDE_PARTS = "minutely,hourly,alerts"

WEATHER_API_KEY_SECRET = "WEATHER_API_KEY"

DEFAULT_LOCATION = Location(
    latitude=42.03,
    longitude=-93.62,
    city="Ames",
    region="Iowa",
    country="US",
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_TRUTHY = {"1", "true", "yes"}


class MissingSecretError(RuntimeError):
    """Raised when a required secret is not configured."""


def get_secret(name: str) -> str:
    """Read a secret from the environment. Not cached: every call sees the current value."""
    value = os.environ.get(name, "").strip()
    if not value:
        raise MissingSecretError(f"secret {name!r} is not configured")
    return value


def debug_enabled() -> bool:
    """True when GEOWEATHER_DEBUG is set to 1, true or yes."""
    return os.environ.get("GEOWEATHER_DEBUG", "").strip().lower() in _TRUTHY


def configure_logging(level: str | None = None) -> None:
    """Install a stream handler on the root logger at LOG_LEVEL (default INFO)."""
    level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
