"""Normalize raw OpenWeatherMap payloads into model objects."""

import logging

from weatherwidget.ingest.owm_client import WeatherApiError
from weatherwidget.models.weather import ForecastEntry, SuggestionRecord, WeatherSnapshot

logger = logging.getLogger(__name__)

_MALFORMED = (KeyError, TypeError, ValueError, IndexError)


def parse_snapshot(raw: dict) -> WeatherSnapshot:
    """Build a WeatherSnapshot from a /data/2.5/weather response."""
    try:
        main = raw["main"]
        sys_ = raw.get("sys") or {}
        weather = (raw.get("weather") or [{}])[0]
        coord = raw.get("coord") or {}
        return WeatherSnapshot(
            name=raw.get("name", ""),
            country=sys_.get("country", ""),
            temp=float(main["temp"]),
            feels_like=float(main["feels_like"]),
            humidity=int(main["humidity"]),
            pressure_hpa=float(main["pressure"]),
            wind_speed=float((raw.get("wind") or {}).get("speed", 0.0)),
            clouds_pct=int((raw.get("clouds") or {}).get("all", 0)),
            visibility_m=int(raw.get("visibility", 0)),
            sunrise=int(sys_.get("sunrise", 0)),
            sunset=int(sys_.get("sunset", 0)),
            timezone=int(raw.get("timezone", 0)),
            description=weather.get("description", ""),
            icon=weather.get("icon", ""),
            dt=int(raw.get("dt", 0)),
            lat=coord.get("lat"),
            lon=coord.get("lon"),
        )
    except _MALFORMED as e:
        logger.error("Malformed weather payload: %s", e)
        raise WeatherApiError("Malformed weather response") from e


def parse_forecast(raw: dict) -> tuple[list[ForecastEntry], int]:
    """Extract forecast entries and the location UTC offset from /data/2.5/forecast."""
    try:
        entries = [_parse_entry(item) for item in raw["list"]]
        timezone = int((raw.get("city") or {}).get("timezone", 0))
    except _MALFORMED as e:
        logger.error("Malformed forecast payload: %s", e)
        raise WeatherApiError("Malformed forecast response") from e
    return entries, timezone


def _parse_entry(item: dict) -> ForecastEntry:
    main = item["main"]
    temp = float(main["temp"])
    weather = item["weather"][0]
    # min/max are optional per sample; fall back to temp
    temp_min = main.get("temp_min")
    temp_max = main.get("temp_max")
    return ForecastEntry(
        dt=int(item["dt"]),
        temp=temp,
        temp_min=float(temp_min) if temp_min is not None else temp,
        temp_max=float(temp_max) if temp_max is not None else temp,
        icon=weather.get("icon", ""),
        description=weather.get("description", ""),
    )


def suggestion_label(item: dict, lang: str) -> str:
    """Display label: local name (or name), optional state, country."""
    local_names = item.get("local_names") or {}
    name = local_names.get(lang) or item["name"]
    state = item.get("state")
    parts = [name]
    if state:
        parts.append(state)
    parts.append(item.get("country", ""))
    return ", ".join(parts)


def parse_suggestions(raw: list[dict], lang: str) -> list[SuggestionRecord]:
    """Turn geocoding candidates into SuggestionRecords."""
    try:
        return [
            SuggestionRecord(
                display=suggestion_label(item, lang),
                lat=float(item["lat"]),
                lon=float(item["lon"]),
            )
            for item in raw
        ]
    except _MALFORMED as e:
        raise WeatherApiError("Malformed geocoding response") from e
