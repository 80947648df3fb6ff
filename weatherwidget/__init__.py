"""Weather lookup widget backend: autocomplete, current conditions, forecast strips."""

__version__ = "0.1.0"
