"""Per-widget state: search input, suggestions, current conditions, forecast.

A session lives on one asyncio event loop. Provider calls are blocking, so
they run in worker threads; every request takes a sequence token and only
the response holding the latest token is applied. Older responses that
arrive late are dropped.
"""

import asyncio
import logging

from weatherwidget.config.schema import WidgetConfig
from weatherwidget.forecast.daily import summarize_days
from weatherwidget.forecast.hourly import hourly_strip
from weatherwidget.ingest.owm_client import WeatherApiError
from weatherwidget.ingest.weather_fetcher import WeatherFetcher
from weatherwidget.models.common import Clock, now_ms
from weatherwidget.models.weather import (
    DaySummary,
    ForecastEntry,
    HourlyPoint,
    SuggestionRecord,
    WeatherSnapshot,
)
from weatherwidget.suggest.debounce import Debouncer
from weatherwidget.suggest.service import SuggestionService

logger = logging.getLogger(__name__)

ERR_WEATHER = "Weather request failed"
ERR_CITY_NOT_FOUND = "City not found"
ERR_FORECAST = "Forecast request failed"


class WidgetSession:
    def __init__(
        self,
        fetcher: WeatherFetcher,
        config: WidgetConfig | None = None,
        clock: Clock = now_ms,
        loop: asyncio.AbstractEventLoop | None = None,
    ):
        self.fetcher = fetcher
        self.config = config or WidgetConfig()
        s = self.config.suggest
        self.suggest = SuggestionService(
            fetcher.suggestions,
            ttl_ms=s.ttl_ms,
            min_query_length=s.min_query_length,
            clock=clock,
        )
        self._debouncer = Debouncer(self._spawn_refresh, s.debounce_ms, loop)

        self.city = ""
        self.suggestions: list[SuggestionRecord] = []
        self.weather: WeatherSnapshot | None = None
        self.forecast: list[ForecastEntry] = []
        self.timezone = 0
        self.error = ""

        self._weather_seq = 0
        self._suggest_seq = 0
        self._tasks: set[asyncio.Task] = set()

    # --- Search input ---

    def on_input(self, text: str) -> None:
        """Record a keystroke and (re)arm the suggestion timer."""
        self.city = text
        self._debouncer.trigger(text)

    def _spawn_refresh(self, text: str) -> None:
        task = self._debouncer.loop.create_task(self.refresh_suggestions(text))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def refresh_suggestions(self, text: str) -> None:
        self._suggest_seq += 1
        token = self._suggest_seq
        result = await asyncio.to_thread(self.suggest.lookup, text)
        if token != self._suggest_seq:
            logger.debug("Dropping stale suggestions for %r", text)
            return
        self.suggestions = result

    async def select_suggestion(self, suggestion: SuggestionRecord) -> None:
        """Fill the input with the chosen label and load weather for its coordinates."""
        self._debouncer.cancel()
        self._suggest_seq += 1  # invalidate any lookup still in flight
        self.city = suggestion.display
        self.suggestions = []
        await self.load_by_coords(suggestion.lat, suggestion.lon)

    async def submit(self) -> None:
        query = self.city.strip()
        if query:
            await self.load_by_name(query)

    # --- Weather ---

    def _next_weather_token(self) -> int:
        self._weather_seq += 1
        self.error = ""
        return self._weather_seq

    async def load_by_coords(self, lat: float, lon: float) -> None:
        token = self._next_weather_token()
        try:
            snapshot = await asyncio.to_thread(self.fetcher.current_by_coords, lat, lon)
        except WeatherApiError as e:
            self._fail(token, ERR_WEATHER, e)
            return
        await self._apply_weather(token, snapshot, lat, lon)

    async def load_by_name(self, city: str) -> None:
        token = self._next_weather_token()
        try:
            snapshot = await asyncio.to_thread(self.fetcher.current_by_name, city)
        except WeatherApiError as e:
            self._fail(token, ERR_CITY_NOT_FOUND, e)
            return
        await self._apply_weather(token, snapshot, snapshot.lat, snapshot.lon)

    async def _apply_weather(
        self,
        token: int,
        snapshot: WeatherSnapshot,
        lat: float | None,
        lon: float | None,
    ) -> None:
        if token != self._weather_seq:
            logger.debug("Dropping stale weather for %s", snapshot.name)
            return
        self.weather = snapshot
        self.forecast = []
        self.timezone = snapshot.timezone
        if lat is None or lon is None:
            logger.warning("No coordinates for %s, skipping forecast", snapshot.name)
            return

        try:
            entries, timezone = await asyncio.to_thread(self.fetcher.forecast, lat, lon)
        except WeatherApiError as e:
            self._fail(token, ERR_FORECAST, e)
            return
        if token != self._weather_seq:
            logger.debug("Dropping stale forecast for %s", snapshot.name)
            return
        self.forecast = entries
        self.timezone = timezone

    def _fail(self, token: int, message: str, cause: Exception) -> None:
        if token != self._weather_seq:
            logger.debug("Ignoring stale failure: %s", cause)
            return
        logger.warning("%s: %s", message, cause)
        self.error = message

    # --- Derived panels ---

    @property
    def days(self) -> list[DaySummary]:
        return summarize_days(
            self.forecast,
            self.timezone,
            max_days=self.config.forecast.max_days,
            lang=self.config.provider.lang,
        )

    @property
    def hourly(self) -> list[HourlyPoint]:
        return hourly_strip(self.forecast, self.timezone, self.config.forecast.hourly_count)

    async def drain(self) -> None:
        """Wait for suggestion refreshes already spawned by the debouncer."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))
