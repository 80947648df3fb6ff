"""Tests for the hourly forecast strip."""

from weatherwidget.forecast.hourly import HOURLY_COUNT, hourly_strip, time_label
from weatherwidget.ingest.parsing import parse_forecast

TUESDAY_UTC = 1770681600


class TestTimeLabel:
    def test_applies_offset(self):
        assert time_label(TUESDAY_UTC, 0) == "00:00"
        assert time_label(TUESDAY_UTC, 10800) == "03:00"
        assert time_label(TUESDAY_UTC, 19800) == "05:30"
        assert time_label(TUESDAY_UTC, -3600) == "23:00"


class TestHourlyStrip:
    def test_first_count_entries(self, owm_forecast: dict):
        entries, tz = parse_forecast(owm_forecast)
        strip = hourly_strip(entries, tz)
        assert len(strip) == HOURLY_COUNT
        assert [p.time_label for p in strip[:3]] == ["09:00", "12:00", "15:00"]
        assert strip[0].temp == -5
        assert strip[1].temp == -4  # -4.5 rounds up
        assert strip[0].icon == "13d"

    def test_fewer_entries_than_count(self, make_entry):
        entries = [make_entry(TUESDAY_UTC, 1.0)]
        assert len(hourly_strip(entries, 0, count=8)) == 1

    def test_non_positive_count(self, make_entry):
        entries = [make_entry(TUESDAY_UTC, 1.0)]
        assert hourly_strip(entries, 0, count=0) == []
        assert hourly_strip(entries, 0, count=-2) == []
