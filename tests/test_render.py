# Project: weather-lookup
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for render.py — plain-text output."""

from datetime import datetime

from weather_lookup.query import group_by_date
from weather_lookup.render import (
    format_temperature,
    render_current,
    render_forecast,
    render_history,
)


def _ms(hour: int, minute: int = 0) -> int:
    return int(datetime(2024, 1, 5, hour, minute).timestamp() * 1000)


PAYLOAD = {
    "location": {"city": "Seattle", "country": "US"},
    "current": {
        "temperature": 11.6,
        "feels_like": 10.2,
        "description": "light rain",
        "humidity": 81,
        "wind_speed": 4.6,
        "icon": "10d",
    },
    "forecast": [
        {"dt": int(datetime(2024, 1, 5, 15, 0).timestamp()), "temperature": 12.4,
         "description": "overcast clouds", "icon": "04d"},
    ],
}


def test_format_temperature_rounds_both_scales():
    assert format_temperature(0) == (0, 32)
    assert format_temperature(-40) == (-40, -40)
    assert format_temperature(21.6) == (22, 71)


def test_render_current_contains_key_fields():
    text = render_current(PAYLOAD)
    assert "Seattle, US" in text
    assert "12°C / 53°F" in text
    assert "light rain" in text
    assert "81%" in text
    assert "4.6 m/s" in text


def test_render_current_without_country():
    payload = {**PAYLOAD, "location": {"city": "Seattle", "country": ""}}
    assert "📍 Seattle\n" in render_current(payload)


def test_render_forecast_rows():
    text = render_forecast(PAYLOAD["forecast"])
    assert "Next 1 forecast points" in text
    assert "Fri 05 Jan 15:00" in text
    assert "overcast clouds" in text


def test_render_forecast_empty():
    assert render_forecast([]) == "No forecast available."


def test_render_history_empty():
    assert render_history([]) == "No searches yet."


def test_render_history_groups_and_counts():
    entries = [
        {"id": "b", "timestamp": _ms(9, 30), "city": "Oslo", "country": "NO",
         "weather": {"temperature": -3.2, "description": "snow"}, "forecast": []},
        {"id": "a", "timestamp": _ms(8, 5), "city": "Tokyo", "country": "JP",
         "weather": {"temperature": 8.0, "description": "clear sky"}, "forecast": []},
    ]
    text = render_history(group_by_date(entries))
    lines = text.splitlines()
    assert lines[0] == "January 5, 2024 — 2 searches"
    assert "09:30" in lines[1] and "Oslo, NO" in lines[1] and "-3°C" in lines[1]
    assert "08:05" in lines[2] and "Tokyo, JP" in lines[2]


def test_render_history_singular():
    entries = [{"id": "a", "timestamp": _ms(8), "city": "Lima", "country": "",
                "weather": {"temperature": 20.0, "description": ""}, "forecast": []}]
    assert render_history(group_by_date(entries)).startswith("January 5, 2024 — 1 search\n")
