"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class Units(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"
    STANDARD = "standard"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.openweathermap.org"
    units: Units = Units.METRIC
    lang: str = "ru"
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    geocode_limit: int = Field(default=5, ge=1, le=5)
    api_key_env: str = "OWM_API_KEY"


class SuggestConfig(BaseModel):
    model_config = {"extra": "forbid"}

    debounce_ms: int = Field(default=300, ge=0)
    ttl_ms: int = Field(default=120_000, ge=0)
    min_query_length: int = Field(default=2, ge=1)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_days: int = Field(default=7, ge=1, le=7)
    hourly_count: int = Field(default=8, ge=0, le=40)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class WidgetConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    suggest: SuggestConfig = SuggestConfig()
    forecast: ForecastConfig = ForecastConfig()
    server: ServerConfig = ServerConfig()
