"""Output formatters for the current-conditions panel and forecast strips."""

import json
from dataclasses import asdict

from weatherwidget.config.schema import Units
from weatherwidget.models.weather import DaySummary, HourlyPoint, SuggestionRecord, WeatherSnapshot
from weatherwidget.units import hpa_to_mmhg, js_round, m_to_km

# (panel temperature, strip temperature, wind speed) suffixes per unit system
UNIT_LABELS: dict[Units, tuple[str, str, str]] = {
    Units.METRIC: ("°C", "°", "m/s"),
    Units.IMPERIAL: ("°F", "°F", "mph"),
    Units.STANDARD: ("K", "K", "m/s"),
}


def snapshot_panel(s: WeatherSnapshot) -> dict:
    """Snapshot fields plus the display values the panel shows."""
    data = asdict(s)
    data.update(
        {
            "temp_display": js_round(s.temp),
            "feels_like_display": js_round(s.feels_like),
            "pressure_mmhg": hpa_to_mmhg(s.pressure_hpa),
            "visibility_km": m_to_km(s.visibility_m),
            "wind_speed_display": f"{s.wind_speed:.2f}",
        }
    )
    return data


def day_dict(d: DaySummary) -> dict:
    data = asdict(d)
    data.pop("representative")
    return data


def format_current_text(s: WeatherSnapshot, units: Units = Units.METRIC) -> str:
    """Plain text current-conditions panel, labelled for the given unit system."""
    temp_label, _, speed_label = UNIT_LABELS[units]
    lines = [
        f"{s.name}, {s.country}",
        f"{js_round(s.temp)}{temp_label}  {s.description}".rstrip(),
        f"Feels like: {js_round(s.feels_like)}{temp_label}",
        f"Humidity: {s.humidity}%",
        f"Pressure: {hpa_to_mmhg(s.pressure_hpa)} mmHg",
        f"Wind: {s.wind_speed:.2f} {speed_label}",
        f"Clouds: {s.clouds_pct}%",
        f"Visibility: {m_to_km(s.visibility_m)} km",
    ]
    return "\n".join(lines)


def format_hourly_text(points: list[HourlyPoint], units: Units = Units.METRIC) -> str:
    deg = UNIT_LABELS[units][1]
    return "  ".join(f"{p.time_label} {p.temp}{deg}" for p in points)


def format_days_text(days: list[DaySummary], units: Units = Units.METRIC) -> str:
    deg = UNIT_LABELS[units][1]
    return "\n".join(
        f"{d.weekday:<12} {d.max:>4}{deg} {d.min:>4}{deg}  {d.description}" for d in days
    )


def format_suggestions_text(suggestions: list[SuggestionRecord]) -> str:
    return "\n".join(f"{s.display} ({s.lat:.4f}, {s.lon:.4f})" for s in suggestions)


def format_json(
    snapshot: WeatherSnapshot | None = None,
    hourly: list[HourlyPoint] | None = None,
    days: list[DaySummary] | None = None,
) -> str:
    """JSON for programmatic consumption; omitted panels are left out."""
    data: dict = {}
    if snapshot is not None:
        data["current"] = snapshot_panel(snapshot)
    if hourly is not None:
        data["hourly"] = [asdict(p) for p in hourly]
    if days is not None:
        data["days"] = [day_dict(d) for d in days]
    return json.dumps(data, indent=2, ensure_ascii=False)
