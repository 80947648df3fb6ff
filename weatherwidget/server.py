"""Weather widget backend: FastAPI JSON endpoints for suggestions, weather and forecast."""

import logging
import os
from dataclasses import asdict
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from weatherwidget import __version__
from weatherwidget.config.defaults import DEFAULT_CONFIG_PATH
from weatherwidget.config.loader import load_config
from weatherwidget.config.schema import WidgetConfig
from weatherwidget.forecast.daily import summarize_days
from weatherwidget.forecast.hourly import hourly_strip
from weatherwidget.ingest.owm_client import WeatherApiError
from weatherwidget.ingest.weather_fetcher import WeatherFetcher
from weatherwidget.reporting.formatters import day_dict, snapshot_panel
from weatherwidget.session import ERR_CITY_NOT_FOUND, ERR_FORECAST, ERR_WEATHER
from weatherwidget.suggest.service import SuggestionService

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(os.environ.get("WEATHERWIDGET_CONFIG", DEFAULT_CONFIG_PATH))

app = FastAPI(title="Weather Widget", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# One suggestion cache per process, shared by every client of this server.
_state: dict = {}


def configure(config: WidgetConfig, fetcher: WeatherFetcher | None = None) -> None:
    """Bind the app to a config and fetcher. Called lazily on first request."""
    fetcher = fetcher or WeatherFetcher.from_config(config)
    _state.clear()
    _state["config"] = config
    _state["fetcher"] = fetcher
    _state["suggest"] = SuggestionService(
        fetcher.suggestions,
        ttl_ms=config.suggest.ttl_ms,
        min_query_length=config.suggest.min_query_length,
    )


def _get(name: str):
    if not _state:
        try:
            configure(load_config(CONFIG_PATH))
        except WeatherApiError as e:
            logger.error("Weather provider not configured: %s", e)
            raise HTTPException(503, "Weather provider not configured") from e
    return _state[name]


@app.get("/api/suggest")
def get_suggestions(q: str = ""):
    """City autocomplete. Failures yield an empty list."""
    service: SuggestionService = _get("suggest")
    return [asdict(s) for s in service.lookup(q)]


@app.get("/api/weather")
def get_weather(q: str | None = None, lat: float | None = None, lon: float | None = None):
    """Current conditions by city name (``q``) or by coordinates."""
    fetcher: WeatherFetcher = _get("fetcher")
    if q is not None and q.strip():
        try:
            snapshot = fetcher.current_by_name(q.strip())
        except WeatherApiError as e:
            logger.warning("Weather by name %r failed: %s", q, e)
            status = 404 if e.status_code == 404 else 502
            raise HTTPException(status, ERR_CITY_NOT_FOUND) from e
    elif lat is not None and lon is not None:
        try:
            snapshot = fetcher.current_by_coords(lat, lon)
        except WeatherApiError as e:
            logger.warning("Weather by coords (%s, %s) failed: %s", lat, lon, e)
            raise HTTPException(502, ERR_WEATHER) from e
    else:
        raise HTTPException(400, "Provide q or lat and lon")
    return snapshot_panel(snapshot)


@app.get("/api/forecast")
def get_forecast(lat: float, lon: float):
    """Hourly strip and per-day summaries for a coordinate pair."""
    fetcher: WeatherFetcher = _get("fetcher")
    config: WidgetConfig = _get("config")
    try:
        entries, timezone = fetcher.forecast(lat, lon)
    except WeatherApiError as e:
        logger.warning("Forecast (%s, %s) failed: %s", lat, lon, e)
        raise HTTPException(502, ERR_FORECAST) from e

    days = summarize_days(
        entries, timezone, max_days=config.forecast.max_days, lang=config.provider.lang
    )
    hourly = hourly_strip(entries, timezone, config.forecast.hourly_count)
    return {
        "timezone": timezone,
        "hourly": [asdict(p) for p in hourly],
        "days": [day_dict(d) for d in days],
    }


@app.get("/api/health")
def get_health():
    """Quick health check."""
    return {"ok": True, "version": __version__}


def run(config: WidgetConfig, host: str | None = None, port: int | None = None) -> None:
    import uvicorn

    configure(config)
    uvicorn.run(app, host=host or config.server.host, port=port or config.server.port)


if __name__ == "__main__":
    run(load_config(CONFIG_PATH))
