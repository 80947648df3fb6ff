"""Weather fetcher: provider calls plus parsing into model objects."""

import logging

from weatherwidget.config.loader import resolve_api_key
from weatherwidget.config.schema import WidgetConfig
from weatherwidget.ingest.owm_client import OwmClient
from weatherwidget.ingest.parsing import parse_forecast, parse_snapshot, parse_suggestions
from weatherwidget.models.weather import ForecastEntry, SuggestionRecord, WeatherSnapshot

logger = logging.getLogger(__name__)


class WeatherFetcher:
    def __init__(self, client: OwmClient):
        self.client = client

    @classmethod
    def from_config(cls, config: WidgetConfig) -> "WeatherFetcher":
        p = config.provider
        client = OwmClient(
            api_key=resolve_api_key(config),
            base_url=p.base_url,
            units=p.units.value,
            lang=p.lang,
            timeout=p.timeout_seconds,
            geocode_limit=p.geocode_limit,
        )
        return cls(client)

    def current_by_coords(self, lat: float, lon: float) -> WeatherSnapshot:
        return parse_snapshot(self.client.current_by_coords(lat, lon))

    def current_by_name(self, city: str) -> WeatherSnapshot:
        return parse_snapshot(self.client.current_by_name(city))

    def forecast(self, lat: float, lon: float) -> tuple[list[ForecastEntry], int]:
        """Forecast entries and the location's UTC offset in seconds."""
        entries, timezone = parse_forecast(self.client.forecast_by_coords(lat, lon))
        logger.debug("Forecast for (%s, %s): %d entries", lat, lon, len(entries))
        return entries, timezone

    def suggestions(self, query: str) -> list[SuggestionRecord]:
        return parse_suggestions(self.client.geocode(query), self.client.lang)
