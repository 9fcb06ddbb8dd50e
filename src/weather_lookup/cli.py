# Project: weather-lookup
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
cli.py — Command-line interface for weather-lookup.

We use argparse (stdlib) rather than click because:
- No extra dependency to install
- Sufficient for 4 simple subcommands

Commands:
  weather-lookup search CITY               — look up weather and record it
  weather-lookup search --lat N --lon N    — look up by coordinates
  weather-lookup history [--city Q] [--date LABEL]
  weather-lookup dates                     — list dates with searches
  weather-lookup clear-history             — forget all searches
"""

import argparse
import os
from pathlib import Path

from weather_lookup.config import DEFAULT_CONFIG_PATH, load_config
from weather_lookup.history import HistoryStore
from weather_lookup.lookup import InputError, search_city, search_coordinates
from weather_lookup.query import ALL_DATES, available_dates, filter_history, group_by_date
from weather_lookup.render import render_current, render_forecast, render_history
from weather_lookup.storage import DEFAULT_QUOTA_BYTES, FileStorage
from weather_lookup.weather import API_KEY_ENV, OPENWEATHER_URL, WeatherGatewayError


def build_store(config: dict) -> HistoryStore:
    """Create the history store described by the [storage]/[history]/[log] config."""
    storage = FileStorage(
        Path(config["storage"]["directory"]),
        quota_bytes=config["storage"].get("quota_bytes", DEFAULT_QUOTA_BYTES),
    )
    return HistoryStore(
        storage,
        max_entries=config["history"]["max_entries"],
        log_path=Path(config["log"]["path"]),
    )


def gateway_options(config: dict) -> dict:
    """Keyword arguments for fetch_weather taken from the [weather] config."""
    weather = config["weather"]
    return {
        "api_key": os.environ.get(weather.get("api_key_env", API_KEY_ENV)),
        "base_url": weather.get("base_url", OPENWEATHER_URL),
        "timeout": weather.get("timeout", 10),
        "log_path": Path(config["log"]["path"]),
    }


def cmd_search(args, config: dict) -> None:
    """Look up weather, print it, and record it in the history."""
    store = build_store(config)
    options = gateway_options(config)

    try:
        if args.lat is not None or args.lon is not None:
            if args.city is not None:
                raise InputError("Give either a city or --lat/--lon, not both.")
            if args.lat is None or args.lon is None:
                raise InputError("Both --lat and --lon are required for a coordinate search.")
            result = search_coordinates(args.lat, args.lon, store, **options)
        else:
            result = search_city(args.city or "", store, **options)
    except InputError as e:
        print(f"[error] {e}")
        raise SystemExit(1)
    except WeatherGatewayError as e:
        print(f"[error] {e} (status {e.status})")
        raise SystemExit(1)

    weather = result["weather"]
    print()
    print(render_current(weather))
    print()
    print(render_forecast(weather["forecast"]))


def cmd_history(args, config: dict) -> None:
    """Print the search history grouped by date, optionally filtered."""
    entries = build_store(config).read_all()
    matches = filter_history(entries, city_query=args.city, date=args.date)
    print(render_history(group_by_date(matches)))


def cmd_dates(args, config: dict) -> None:
    """Print the dates that have recorded searches, newest first."""
    labels = available_dates(build_store(config).read_all())
    if not labels:
        print("No searches yet.")
        return
    for label in labels:
        print(label)


def cmd_clear_history(args, config: dict) -> None:
    """Delete every recorded search."""
    build_store(config).clear()
    print("[history] Search history cleared.")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="weather-lookup",
        description="Weather lookups with a local search history, using OpenWeatherMap",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to config.toml (default: ./config.toml)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    p_search = subparsers.add_parser("search", help="Look up weather and record it in history")
    p_search.add_argument("city", nargs="?", default=None, help='City name, e.g. "Seattle" (omit when using --lat/--lon)')
    p_search.add_argument("--lat", type=float, default=None, help="Latitude in decimal degrees")
    p_search.add_argument("--lon", type=float, default=None, help="Longitude in decimal degrees")

    p_history = subparsers.add_parser("history", help="Show recent searches grouped by date")
    p_history.add_argument("--city", default="", help="Only show cities containing this text")
    p_history.add_argument(
        "--date",
        default=ALL_DATES,
        help=f'Only show one date, e.g. "January 5, 2024" (default: {ALL_DATES})',
    )

    subparsers.add_parser("dates", help="List dates that have searches")
    subparsers.add_parser("clear-history", help="Delete all recorded searches")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    commands = {
        "search": cmd_search,
        "history": cmd_history,
        "dates": cmd_dates,
        "clear-history": cmd_clear_history,
    }
    commands[args.command](args, config)


if __name__ == "__main__":
    main()
