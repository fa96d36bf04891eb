# ABOUTME: Pydantic BaseModels for the OneCall weather payload and the visitor location.
# ABOUTME: Field aliases map the provider's wire names onto readable attribute names.

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """Location used for the weather query, either derived from edge metadata or the default."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    city: str
    region: str
    country: str


class EdgeMetadata(BaseModel):
    """Geolocation hints the edge network attached to a request. Every field may be missing."""

    city: str | None = None
    country: str | None = None
    region: str | None = None
    coordinates: tuple[float, float] | None = None


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict:
        """Serialize back into the provider's wire shape."""
        return self.model_dump(by_alias=True)


class CurrentConditions(_Payload):
    temperature: float = Field(alias="temp")


class DailyTemperatures(_Payload):
    morning: float = Field(alias="morn")
    day: float
    evening: float = Field(alias="eve")
    night: float
    min: float
    max: float


class DailyForecast(_Payload):
    temperature: DailyTemperatures = Field(alias="temp")


class WeatherReport(_Payload):
    """Parsed OneCall response. `current` and `daily` are independently optional."""

    latitude: float = Field(alias="lat")
    longitude: float = Field(alias="lon")
    utc_offset_seconds: int = Field(alias="timezone_offset")
    current: CurrentConditions | None = None
    daily: list[DailyForecast] | None = None
