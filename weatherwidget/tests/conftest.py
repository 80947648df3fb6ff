"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherwidget.config.schema import WidgetConfig
from weatherwidget.models.weather import ForecastEntry

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str):
    with open(FIXTURE_DIR / name, encoding="utf-8") as f:
        return json.load(f)


def make_entry(
    dt: int,
    temp: float,
    temp_min: float | None = None,
    temp_max: float | None = None,
    icon: str = "01d",
    description: str = "clear sky",
) -> ForecastEntry:
    return ForecastEntry(
        dt=dt,
        temp=temp,
        temp_min=temp if temp_min is None else temp_min,
        temp_max=temp if temp_max is None else temp_max,
        icon=icon,
        description=description,
    )


@pytest.fixture
def default_config() -> WidgetConfig:
    return WidgetConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"lang": "en", "units": "metric"},
        "suggest": {"debounce_ms": 250},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def owm_current() -> dict:
    return load_fixture("owm_current_moscow.json")


@pytest.fixture
def owm_forecast() -> dict:
    return load_fixture("owm_forecast_moscow.json")


@pytest.fixture
def owm_geo() -> list:
    return load_fixture("owm_geo_moscow.json")


@pytest.fixture
def api_key_env(monkeypatch):
    monkeypatch.setenv("OWM_API_KEY", "test-key")
    return "test-key"


@pytest.fixture(name="make_entry")
def make_entry_fixture():
    return make_entry
