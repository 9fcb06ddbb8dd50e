# Project: weather-lookup
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
lookup.py — One search, end to end.

    validate input -> fetch weather -> record in history -> re-read -> group

Input errors are raised before any network call. A failed weather lookup
leaves the history untouched; only successful lookups are recorded.
"""

import math

from weather_lookup.history import HistoryStore
from weather_lookup.query import group_by_date
from weather_lookup.weather import fetch_weather


class InputError(ValueError):
    """The search could not be sent (empty city, bad coordinates)."""


def entry_from_weather(payload: dict) -> dict:
    """Build a history entry (without id/timestamp) from a gateway payload."""
    location = payload.get("location", {})
    return {
        "city":     location.get("city", ""),
        "country":  location.get("country", ""),
        "weather":  payload["current"],
        "forecast": payload.get("forecast", []),
    }


def search_city(city: str, store: HistoryStore, **gateway_kwargs) -> dict:
    """Look up weather for a city name and record it in the history.

    Args:
        city: City typed by the user. Surrounding whitespace is ignored.
        store: History store the successful lookup is recorded in.
        **gateway_kwargs: Passed through to fetch_weather (api_key,
            base_url, timeout, log_path).

    Returns:
        Dict with keys weather (gateway payload), entry (stored history
        entry) and history (grouped history after the write).

    Raises:
        InputError: If the city is empty or whitespace.
        WeatherGatewayError: If the lookup failed.
    """
    trimmed = (city or "").strip()
    if not trimmed:
        raise InputError("Enter a city to get the forecast.")

    payload = fetch_weather(city=trimmed, **gateway_kwargs)
    return _record(payload, store)


def search_coordinates(
    latitude: float,
    longitude: float,
    store: HistoryStore,
    **gateway_kwargs,
) -> dict:
    """Look up weather for a latitude/longitude pair and record it.

    Raises:
        InputError: If either coordinate is not a finite number in range.
        WeatherGatewayError: If the lookup failed.
    """
    _check_coordinate(latitude, "Latitude", 90)
    _check_coordinate(longitude, "Longitude", 180)

    payload = fetch_weather(latitude=latitude, longitude=longitude, **gateway_kwargs)
    return _record(payload, store)


def _check_coordinate(value, name: str, limit: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InputError(f"{name} must be a number.")
    if not -limit <= value <= limit:
        raise InputError(f"{name} must be between -{limit} and {limit}.")


def _record(payload: dict, store: HistoryStore) -> dict:
    entry = store.record(entry_from_weather(payload))
    return {
        "weather": payload,
        "entry":   entry,
        "history": group_by_date(store.read_all()),
    }
