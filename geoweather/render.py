# ABOUTME: Renders the weather summary page for a location and a OneCall report.
# ABOUTME: Checks that current and daily data are present and HTML-escapes every interpolated string.

from html import escape

from pydantic import BaseModel

from geoweather.models import Location, WeatherReport

PAGE_STYLE = "body{padding:6em; font-family: sans-serif;} h1{color:#f6821f}"

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<title>Geolocation: Weather</title>
<meta charset="UTF-8">
</head>
<body>
<style>{style}</style>
<div id="container">
{content}
</div>
</body>
</html>
"""

HEADING = "<h1>Weather \U0001f326: Python + Starlette at the edge</h1>"
ATTRIBUTION = (
    '<p>This demo uses weather data from <a href="https://openweathermap.org" target="_blank">openweathermap.org</a>.</p>',
    '<p>Forecasts come from the <a href="https://openweathermap.org/api/one-call-api" target="_blank">One Call API</a>.</p>',
)


class RenderResult(BaseModel):
    """Either a rendered document or the reason it could not be rendered."""

    html: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.html is not None


def render_page(location: Location, report: WeatherReport, known_location: bool) -> RenderResult:
    if report.current is None:
        return RenderResult(error="weather report has no current conditions")
    if not report.daily:
        return RenderResult(error="weather report has no daily forecast")

    first_day = report.daily[0].temperature
    parts = [HEADING, *ATTRIBUTION]
    if known_location:
        parts.append("<p>Your location is estimated using edge network servers.</p>")
    else:
        parts.append(f"<p><b>Unable to determine location, using {escape(location.city)} as default.</b></p>")
    parts.append(f"<p>Showing weather data for: Lat: {report.latitude}, Long: {report.longitude}.</p>")
    parts.append(
        f"<p>Weather data for city: {escape(location.city)}, region: {escape(location.region)}, "
        f"country: {escape(location.country)}</p>"
    )
    parts.append(f"<p>The current temperature is: {report.current.temperature}°F.</p>")
    parts.append(
        f"<p>Daily forecast: morning: {first_day.morning}, day: {first_day.day}, "
        f"evening: {first_day.evening}, night: {first_day.night}</p>"
    )
    return RenderResult(html=PAGE_TEMPLATE.format(style=PAGE_STYLE, content="\n".join(parts)))
