"""Weather data models for current conditions, forecast samples and suggestions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherSnapshot:
    name: str
    country: str
    temp: float
    feels_like: float
    humidity: int
    pressure_hpa: float
    wind_speed: float
    clouds_pct: int
    visibility_m: int
    sunrise: int  # unix seconds
    sunset: int  # unix seconds
    timezone: int  # UTC offset, seconds
    description: str = ""
    icon: str = ""
    dt: int = 0
    lat: float | None = None
    lon: float | None = None


@dataclass(frozen=True)
class ForecastEntry:
    dt: int  # unix seconds
    temp: float
    temp_min: float
    temp_max: float
    icon: str
    description: str


@dataclass(frozen=True)
class DaySummary:
    key: str  # YYYY-MM-DD, local to the forecast location
    min: int
    max: int
    icon: str
    description: str
    dt: int  # timestamp of the representative entry
    weekday: str
    representative: ForecastEntry


@dataclass(frozen=True)
class HourlyPoint:
    dt: int
    time_label: str  # HH:MM local
    temp: int
    icon: str
    description: str


@dataclass(frozen=True)
class SuggestionRecord:
    display: str
    lat: float
    lon: float
