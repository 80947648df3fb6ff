"""OpenWeatherMap API client for current conditions, forecast and geocoding."""

import logging

import httpx

logger = logging.getLogger(__name__)

OWM_BASE_URL = "https://api.openweathermap.org"
DEFAULT_USER_AGENT = "weatherwidget/0.1.0"


class WeatherApiError(Exception):
    """Raised when the weather provider fails or returns an unusable response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OwmClient:
    """Thin wrapper around the OpenWeatherMap REST endpoints.

    Every request carries the API key plus unit and locale parameters.
    There is no retry: a failed call raises WeatherApiError straight away.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = OWM_BASE_URL,
        units: str = "metric",
        lang: str = "ru",
        timeout: float = 10.0,
        geocode_limit: int = 5,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        if not api_key:
            raise WeatherApiError("OWM_API_KEY not set")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.lang = lang
        self.timeout = timeout
        self.geocode_limit = geocode_limit
        self.user_agent = user_agent

    def _get(self, endpoint: str, params: dict) -> dict | list:
        url = f"{self.base_url}{endpoint}"
        query = {**params, "appid": self.api_key, "lang": self.lang}
        try:
            resp = httpx.get(
                url,
                params=query,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
        except httpx.RequestError as e:
            logger.error("OWM request failed: %s -> %s", endpoint, e)
            raise WeatherApiError(f"Request failed: {e}") from e

        if resp.status_code >= 400:
            logger.error("OWM API %d: %s -> %s", resp.status_code, endpoint, resp.text)
            raise WeatherApiError(f"HTTP {resp.status_code}", resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            logger.error("OWM returned non-JSON body for %s", endpoint)
            raise WeatherApiError("Malformed response") from e

    # --- Current conditions ---

    def current_by_coords(self, lat: float, lon: float) -> dict:
        """Fetch current conditions for a coordinate pair."""
        return self._get(
            "/data/2.5/weather", {"lat": lat, "lon": lon, "units": self.units}
        )

    def current_by_name(self, city: str) -> dict:
        """Fetch current conditions for a free-text city name."""
        return self._get("/data/2.5/weather", {"q": city, "units": self.units})

    # --- Forecast ---

    def forecast_by_coords(self, lat: float, lon: float) -> dict:
        """Fetch the 5-day / 3-hour forecast list for a coordinate pair."""
        return self._get(
            "/data/2.5/forecast", {"lat": lat, "lon": lon, "units": self.units}
        )

    # --- Geocoding ---

    def geocode(self, query: str) -> list[dict]:
        """Search cities by name. Returns up to ``geocode_limit`` raw candidates."""
        data = self._get(
            "/geo/1.0/direct", {"q": query, "limit": self.geocode_limit}
        )
        if not isinstance(data, list):
            raise WeatherApiError("Malformed geocoding response")
        return data
