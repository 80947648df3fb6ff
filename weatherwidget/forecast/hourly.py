"""Hourly strip: the next few forecast samples labelled in local time."""

from datetime import UTC, datetime

from weatherwidget.models.weather import ForecastEntry, HourlyPoint
from weatherwidget.units import js_round

HOURLY_COUNT = 8  # 24h at 3-hour resolution


def time_label(ts: int, offset: int) -> str:
    return datetime.fromtimestamp(ts + offset, tz=UTC).strftime("%H:%M")


def hourly_strip(
    entries: list[ForecastEntry], offset: int, count: int = HOURLY_COUNT
) -> list[HourlyPoint]:
    if count <= 0:
        return []
    return [
        HourlyPoint(
            dt=e.dt,
            time_label=time_label(e.dt, offset),
            temp=js_round(e.temp),
            icon=e.icon,
            description=e.description,
        )
        for e in entries[:count]
    ]
