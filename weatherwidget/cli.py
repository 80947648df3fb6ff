"""CLI entry point for the weather widget."""

import argparse
import asyncio
import logging
import sys

from weatherwidget import __version__
from weatherwidget.config.defaults import DEFAULT_CONFIG_PATH
from weatherwidget.config.loader import get_config_value, load_config, save_config, set_config_value
from weatherwidget.config.schema import WidgetConfig
from weatherwidget.ingest.owm_client import WeatherApiError
from weatherwidget.ingest.weather_fetcher import WeatherFetcher
from weatherwidget.reporting.formatters import (
    format_current_text,
    format_days_text,
    format_hourly_text,
    format_json,
    format_suggestions_text,
)
from weatherwidget.session import WidgetSession
from weatherwidget.suggest.service import SuggestionService


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherwidget",
        description="City weather lookup: current conditions and forecast",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG_PATH, help="Config YAML path"
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")

    sub = parser.add_subparsers(dest="command")

    # current / forecast
    for name, help_text in (
        ("current", "Show current conditions"),
        ("forecast", "Show current conditions with hourly and weekly forecast"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("city", nargs="?", help="City name")
        p.add_argument("--lat", type=float)
        p.add_argument("--lon", type=float)
        p.add_argument("--json", action="store_true", help="JSON output")

    # suggest
    suggest_p = sub.add_parser("suggest", help="City autocomplete")
    suggest_p.add_argument("query")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")
    set_p.add_argument("--write", action="store_true", help="Save back to the config file")

    # serve
    serve_p = sub.add_parser("serve", help="Run the JSON HTTP service")
    serve_p.add_argument("--host")
    serve_p.add_argument("--port", type=int)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "config":
        return _cmd_config(config, args)
    if args.command == "serve":
        return _cmd_serve(config, args)

    try:
        fetcher = WeatherFetcher.from_config(config)
    except WeatherApiError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command in ("current", "forecast"):
        return _cmd_weather(config, fetcher, args)
    elif args.command == "suggest":
        return _cmd_suggest(config, fetcher, args)
    else:
        parser.print_help()
        return 1


def _cmd_weather(config: WidgetConfig, fetcher: WeatherFetcher, args) -> int:
    if not args.city and (args.lat is None or args.lon is None):
        print("Error: give a city or both --lat and --lon", file=sys.stderr)
        return 1

    session = WidgetSession(fetcher, config)
    if args.city:
        session.city = args.city
        asyncio.run(session.submit())
    else:
        asyncio.run(session.load_by_coords(args.lat, args.lon))

    if session.weather is None:
        print(f"Error: {session.error}", file=sys.stderr)
        return 1

    with_forecast = args.command == "forecast"
    if args.json:
        print(
            format_json(
                session.weather,
                session.hourly if with_forecast else None,
                session.days if with_forecast else None,
            )
        )
    else:
        units = config.provider.units
        print(format_current_text(session.weather, units))
        if with_forecast and session.forecast:
            print()
            print(format_hourly_text(session.hourly, units))
            print()
            print(format_days_text(session.days, units))

    if with_forecast and session.error:
        print(f"Error: {session.error}", file=sys.stderr)
        return 1
    return 0


def _cmd_suggest(config: WidgetConfig, fetcher: WeatherFetcher, args) -> int:
    service = SuggestionService(
        fetcher.suggestions,
        ttl_ms=config.suggest.ttl_ms,
        min_query_length=config.suggest.min_query_length,
    )
    suggestions = service.lookup(args.query)
    if not suggestions:
        print("No matches")
        return 0
    print(format_suggestions_text(suggestions))
    return 0


def _cmd_config(config: WidgetConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
        except Exception as e:
            print(f"Error: {e}")
            return 1
        print(f"Set {key.strip()} = {get_config_value(new_config, key.strip())}")
        if args.write:
            path = save_config(new_config, args.config)
            print(f"Wrote {path}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_serve(config: WidgetConfig, args) -> int:
    from weatherwidget.server import run

    try:
        run(config, host=args.host, port=args.port)
    except WeatherApiError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
