# ABOUTME: ASGI web entry point for the geoweather page.
# ABOUTME: Builds a Starlette app whose single catch-all route runs the locate, fetch, render sequence.

import contextlib
import logging
import os

import httpx
import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse, Response
from starlette.routing import Route

from geoweather.config import DEFAULT_LOCATION, configure_logging, debug_enabled, get_secret
from geoweather.deps import HandlerDeps, create_http_client
from geoweather.location import derive_location, log_request, parse_edge_metadata
from geoweather.models import Location
from geoweather.render import render_page
from geoweather.weather_service import FetchStatus, fetch_weather

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "no weather data available"
UNREADABLE_MESSAGE = "weather data could not be read"


async def handle_request(request: Request, deps: HandlerDeps) -> Response:
    """Run one request through log, derive location, fetch weather and render.

    A missing API key raises MissingSecretError, which is left to the server to turn into a 500.
    """
    metadata = parse_edge_metadata(request.headers)
    log_request(request.url.path, metadata)

    location, known_location = derive_location(metadata, deps.default_location)
    api_key = get_secret(deps.api_key_secret)

    result = await fetch_weather(deps.http_client, location, api_key)
    if result.status is FetchStatus.NETWORK_ERROR:
        return PlainTextResponse(NO_DATA_MESSAGE, status_code=400)
    if not result.ok:
        return PlainTextResponse(UNREADABLE_MESSAGE, status_code=502)

    page = render_page(location, result.report, known_location)
    if not page.ok:
        logger.error("Cannot render weather page: %s", page.error)
        return PlainTextResponse(UNREADABLE_MESSAGE, status_code=502)
    return HTMLResponse(page.html)


async def weather_page(request: Request) -> Response:
    """Catch-all endpoint: every path and method gets the weather page."""
    return await handle_request(request, request.app.state.deps)


def create_app(
    http_client: httpx.AsyncClient | None = None,
    default_location: Location = DEFAULT_LOCATION,
    debug: bool | None = None,
) -> Starlette:
    """Create the ASGI application.

    When no client is injected, one is created on startup and closed on shutdown.
    An injected client belongs to the caller and is left open.
    """

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        if http_client is not None:
            yield
            return
        async with create_http_client() as client:
            app.state.deps = HandlerDeps(http_client=client, default_location=default_location)
            yield

    app = Starlette(
        debug=debug_enabled() if debug is None else debug,
        routes=[Route("/{path:path}", weather_page)],
        lifespan=lifespan,
    )
    if http_client is not None:
        app.state.deps = HandlerDeps(http_client=http_client, default_location=default_location)
    return app


def main() -> None:
    """Serve the app with uvicorn on HOST:PORT."""
    configure_logging()
    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "8787"))
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    main()
