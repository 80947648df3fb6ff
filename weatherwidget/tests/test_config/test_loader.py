"""Tests for config loading and get/set."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from weatherwidget.config.loader import (
    get_config_value,
    load_config,
    resolve_api_key,
    save_config,
    set_config_value,
)
from weatherwidget.config.schema import Units, WidgetConfig


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.provider.lang == "en"
        assert config.suggest.debounce_ms == 250
        # untouched sections keep defaults
        assert config.suggest.ttl_ms == 120_000
        assert config.forecast.max_days == 7

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config == WidgetConfig()

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "nope.yaml")
        assert config.provider.units == Units.METRIC
        assert config.provider.lang == "ru"

    def test_none_path_uses_defaults(self):
        assert load_config(None).suggest.min_query_length == 2

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"suggest": {"debounce": 300}}, f)
        with pytest.raises(ValidationError):
            load_config(path)


class TestApiKey:
    def test_reads_named_env_var(self, monkeypatch):
        monkeypatch.setenv("MY_KEY", "abc")
        config = set_config_value(WidgetConfig(), "provider.api_key_env", "MY_KEY")
        assert resolve_api_key(config) == "abc"

    def test_missing_env_var_is_empty(self, monkeypatch):
        monkeypatch.delenv("OWM_API_KEY", raising=False)
        assert resolve_api_key(WidgetConfig()) == ""


class TestGetConfigValue:
    def test_dotted_key(self, default_config: WidgetConfig):
        assert get_config_value(default_config, "suggest.ttl_ms") == 120_000

    def test_top_level(self, default_config: WidgetConfig):
        val = get_config_value(default_config, "server")
        assert val.port == 8777

    def test_invalid_key(self, default_config: WidgetConfig):
        with pytest.raises((KeyError, AttributeError)):
            get_config_value(default_config, "nonexistent.key")


class TestSetConfigValue:
    def test_set_and_revalidate(self, default_config: WidgetConfig):
        new_config = set_config_value(default_config, "forecast.max_days", 5)
        assert new_config.forecast.max_days == 5
        assert default_config.forecast.max_days == 7

    def test_string_coercion(self, default_config: WidgetConfig):
        new_config = set_config_value(default_config, "suggest.debounce_ms", "250")
        assert new_config.suggest.debounce_ms == 250
        new_config = set_config_value(default_config, "provider.timeout_seconds", "2.5")
        assert new_config.provider.timeout_seconds == 2.5

    def test_string_fields_pass_through(self, default_config: WidgetConfig):
        new_config = set_config_value(default_config, "provider.units", "imperial")
        assert new_config.provider.units == Units.IMPERIAL
        new_config = set_config_value(default_config, "provider.lang", "true")
        assert new_config.provider.lang == "true"

    def test_invalid_value_raises(self, default_config: WidgetConfig):
        with pytest.raises(ValidationError):
            set_config_value(default_config, "forecast.max_days", 8)

    def test_unknown_key_raises(self, default_config: WidgetConfig):
        with pytest.raises(KeyError):
            set_config_value(default_config, "suggest.nope", 1)


class TestSaveConfig:
    def test_round_trip(self, tmp_path: Path, default_config: WidgetConfig):
        changed = set_config_value(default_config, "provider.lang", "en")
        path = save_config(changed, tmp_path / "out" / "widget.yaml")
        assert load_config(path) == changed
