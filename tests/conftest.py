# ABOUTME: Shared test fixtures for the geoweather test suite.
# ABOUTME: Provides a configured API key and a sample OneCall payload.

import pytest


@pytest.fixture(autouse=True)
def api_key(monkeypatch):
    """Configure the weather API key secret for every test."""
    monkeypatch.setenv("WEATHER_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def onecall_payload() -> dict:
    """A trimmed OneCall response for Paris with one forecast day."""
    return {
        "lat": 48.85,
        "lon": 2.35,
        "timezone": "Europe/Paris",
        "timezone_offset": 7200,
        "current": {"dt": 1700000000, "temp": 60.0, "humidity": 70},
        "daily": [
            {
                "dt": 1700000000,
                "temp": {"morn": 55.0, "day": 65.0, "eve": 58.0, "night": 50.0, "min": 50.0, "max": 65.0},
            }
        ],
    }
