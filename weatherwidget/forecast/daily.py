"""Reduce a 3-hour forecast list into one summary per local calendar day.

Day boundaries come from ``timestamp + utc_offset`` read as UTC, never from
the host's local timezone, so output is identical wherever it runs.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from weatherwidget.models.weather import DaySummary, ForecastEntry
from weatherwidget.units import js_round

MAX_DAYS = 7
NOON_HOUR = 12

WEEKDAYS = {
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
    "ru": ["понедельник", "вторник", "среда", "четверг", "пятница", "суббота", "воскресенье"],
}


def _local(ts: int, offset: int) -> datetime:
    return datetime.fromtimestamp(ts + offset, tz=UTC)


def day_key(ts: int, offset: int) -> str:
    """YYYY-MM-DD of the location's local date."""
    return _local(ts, offset).strftime("%Y-%m-%d")


def local_hour(ts: int, offset: int) -> int:
    return _local(ts, offset).hour


def weekday_label(ts: int, offset: int, lang: str = "en") -> str:
    names = WEEKDAYS.get(lang, WEEKDAYS["en"])
    return names[_local(ts, offset).weekday()]


@dataclass
class _DayBucket:
    noon: ForecastEntry
    min: float = float("inf")
    max: float = float("-inf")


def summarize_days(
    entries: list[ForecastEntry],
    offset: int,
    max_days: int = MAX_DAYS,
    lang: str = "en",
) -> list[DaySummary]:
    """Group entries by local date and summarize each of the first ``max_days`` days.

    The representative entry is the one whose local hour is nearest noon;
    on a tie the earlier entry stays.
    """
    buckets: dict[str, _DayBucket] = {}
    for entry in entries:
        key = day_key(entry.dt, offset)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = _DayBucket(noon=entry)
        # a sample with min > max still must not invert the day range
        low, high = sorted((entry.temp_min, entry.temp_max))
        bucket.min = min(bucket.min, low)
        bucket.max = max(bucket.max, high)

        distance = abs(local_hour(entry.dt, offset) - NOON_HOUR)
        current = abs(local_hour(bucket.noon.dt, offset) - NOON_HOUR)
        if distance < current:
            bucket.noon = entry

    days = []
    for key, bucket in list(buckets.items())[:max_days]:
        noon = bucket.noon
        days.append(
            DaySummary(
                key=key,
                min=js_round(bucket.min),
                max=js_round(bucket.max),
                icon=noon.icon,
                description=noon.description,
                dt=noon.dt,
                weekday=weekday_label(noon.dt, offset, lang),
                representative=noon,
            )
        )
    return days
