# ABOUTME: Tests for the weather page renderer.
# ABOUTME: Checks page content, location copy, HTML escaping and the missing-data preconditions.

from geoweather.config import DEFAULT_LOCATION
from geoweather.models import Location, WeatherReport
from geoweather.render import render_page

PARIS = Location(latitude=48.85, longitude=2.35, city="Paris", region="Ile-de-France", country="FR")


class TestRenderPage:
    def test_renders_current_and_first_day(self, onecall_payload):
        """render_page includes the location and the reported temperatures.

        Implementation: Renders the sample payload for Paris.
        Passing implies: The page shows the current temperature and the first day's forecast.
        """
        report = WeatherReport.model_validate(onecall_payload)
        result = render_page(PARIS, report, known_location=True)

        assert result.ok
        assert result.error is None
        html = result.html
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Geolocation: Weather</title>" in html
        assert "city: Paris, region: Ile-de-France, country: FR" in html
        assert "The current temperature is: 60.0°F." in html
        assert "morning: 55.0, day: 65.0, evening: 58.0, night: 50.0" in html
        assert "Lat: 48.85, Long: 2.35" in html
        assert 'href="https://openweathermap.org"' in html

    def test_known_location_copy(self, onecall_payload):
        """A derived location mentions the edge network estimate.

        Implementation: Renders with known_location=True.
        Passing implies: The default-location warning is not shown.
        """
        html = render_page(PARIS, WeatherReport.model_validate(onecall_payload), True).html
        assert "estimated using edge network servers" in html
        assert "Unable to determine location" not in html

    def test_unknown_location_copy(self, onecall_payload):
        """A fallback location explains that the default is used.

        Implementation: Renders the default location with known_location=False.
        Passing implies: Visitors are told their location could not be determined.
        """
        html = render_page(DEFAULT_LOCATION, WeatherReport.model_validate(onecall_payload), False).html
        assert "Unable to determine location, using Ames as default." in html
        assert "estimated using edge network servers" not in html

    def test_location_strings_are_escaped(self, onecall_payload):
        """Location strings from request metadata are HTML-escaped.

        Implementation: Renders a location whose city contains a script tag.
        Passing implies: Header values cannot inject markup into the page.
        """
        hostile = PARIS.model_copy(update={"city": "<script>alert(1)</script>", "region": 'a"b&c'})
        html = render_page(hostile, WeatherReport.model_validate(onecall_payload), True).html

        assert "<script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
        assert "a&quot;b&amp;c" in html

    def test_missing_current_is_an_error(self, onecall_payload):
        """A report without current conditions is not rendered.

        Implementation: Drops the current section before rendering.
        Passing implies: The renderer reports the problem instead of raising.
        """
        del onecall_payload["current"]
        result = render_page(PARIS, WeatherReport.model_validate(onecall_payload), True)

        assert not result.ok
        assert result.html is None
        assert "current" in result.error

    def test_empty_daily_is_an_error(self, onecall_payload):
        """A report with an empty daily list is not rendered.

        Implementation: Replaces daily with an empty list.
        Passing implies: daily[0] is only read when it exists.
        """
        onecall_payload["daily"] = []
        result = render_page(PARIS, WeatherReport.model_validate(onecall_payload), True)

        assert not result.ok
        assert "daily" in result.error

    def test_missing_daily_is_an_error(self, onecall_payload):
        """A report without a daily section is not rendered.

        Implementation: Drops the daily section before rendering.
        Passing implies: Absent and empty daily data are handled the same way.
        """
        del onecall_payload["daily"]
        result = render_page(PARIS, WeatherReport.model_validate(onecall_payload), True)
        assert "daily" in result.error
