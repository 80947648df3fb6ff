"""Tests for turning provider payloads into model objects."""

import pytest

from weatherwidget.ingest.owm_client import WeatherApiError
from weatherwidget.ingest.parsing import (
    parse_forecast,
    parse_snapshot,
    parse_suggestions,
    suggestion_label,
)


class TestParseSnapshot:
    def test_fields(self, owm_current: dict):
        s = parse_snapshot(owm_current)
        assert s.name == "Москва"
        assert s.country == "RU"
        assert s.temp == -3.5
        assert s.feels_like == -8.26
        assert s.humidity == 86
        assert s.pressure_hpa == 1015
        assert s.wind_speed == 3.876
        assert s.clouds_pct == 100
        assert s.visibility_m == 7500
        assert s.sunrise == 1770699000
        assert s.sunset == 1770732600
        assert s.timezone == 10800
        assert s.description == "пасмурно"
        assert s.icon == "04d"
        assert (s.lat, s.lon) == (55.7522, 37.6156)

    def test_optional_fields_default(self, owm_current: dict):
        for key in ("clouds", "visibility", "wind", "coord"):
            owm_current.pop(key)
        s = parse_snapshot(owm_current)
        assert s.clouds_pct == 0
        assert s.visibility_m == 0
        assert s.wind_speed == 0.0
        assert s.lat is None

    def test_missing_main_raises(self, owm_current: dict):
        del owm_current["main"]
        with pytest.raises(WeatherApiError):
            parse_snapshot(owm_current)


class TestParseForecast:
    def test_entries_and_timezone(self, owm_forecast: dict):
        entries, tz = parse_forecast(owm_forecast)
        assert tz == 10800
        assert len(entries) == 40
        first = entries[0]
        assert first.dt == 1770703200
        assert first.temp == -5.0
        assert first.temp_min == -6.0
        assert first.temp_max == -4.0
        assert first.icon == "13d"
        assert first.description == "небольшой снег"

    def test_min_max_fall_back_to_temp(self, owm_forecast: dict):
        main = owm_forecast["list"][0]["main"]
        del main["temp_min"]
        del main["temp_max"]
        entries, _ = parse_forecast(owm_forecast)
        assert entries[0].temp_min == entries[0].temp_max == -5.0

    def test_missing_timezone_is_zero(self, owm_forecast: dict):
        del owm_forecast["city"]
        _, tz = parse_forecast(owm_forecast)
        assert tz == 0

    def test_malformed_entry_raises(self, owm_forecast: dict):
        owm_forecast["list"][3]["weather"] = []
        with pytest.raises(WeatherApiError):
            parse_forecast(owm_forecast)


class TestSuggestions:
    def test_local_name_state_country(self, owm_geo: list):
        assert suggestion_label(owm_geo[0], "ru") == "Москва, Moscow, RU"

    def test_falls_back_to_name(self, owm_geo: list):
        assert suggestion_label(owm_geo[1], "ru") == "Moscow, Idaho, US"

    def test_without_state(self, owm_geo: list):
        assert suggestion_label(owm_geo[2], "ru") == "Moscow, US"

    def test_parse_records(self, owm_geo: list):
        records = parse_suggestions(owm_geo, "en")
        assert [r.display for r in records] == [
            "Moscow, Moscow, RU",
            "Moscow, Idaho, US",
            "Moscow, US",
        ]
        assert records[1].lat == 46.7323875
        assert records[1].lon == -117.0001651

    def test_malformed_raises(self):
        with pytest.raises(WeatherApiError):
            parse_suggestions([{"name": "X"}], "en")
