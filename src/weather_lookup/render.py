# Project: weather-lookup
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
render.py — Plain-text rendering of lookups and search history.

All rendering functions return strings ready to print.
"""

from weather_lookup.utils import fmt_clock, fmt_forecast_time


def format_temperature(celsius: float) -> tuple[int, int]:
    """Return (°C, °F), both rounded to whole degrees."""
    return round(celsius), round(celsius * 9 / 5 + 32)


def _place(city: str, country: str | None) -> str:
    return f"{city}, {country}" if country else city


def render_current(payload: dict) -> str:
    """Render the current-conditions block of a lookup.

    Args:
        payload: Normalized dict from fetch_weather.

    Returns:
        Multi-line string.
    """
    location = payload["location"]
    current = payload["current"]
    c, f = format_temperature(current["temperature"])
    feels_c, _ = format_temperature(current["feels_like"])

    lines = [
        f"📍 {_place(location['city'], location.get('country'))}",
        f"🌡  Temperature:    {c}°C / {f}°F  (feels like {feels_c}°C)",
        f"☁️  Conditions:     {current['description'] or 'unknown'}",
        f"💧 Humidity:        {current['humidity']}%",
        f"💨 Wind:            {current['wind_speed']} m/s",
    ]
    return "\n".join(lines)


def render_forecast(points: list[dict]) -> str:
    """Render forecast points as a fixed-width table.

    Args:
        points: Forecast list from fetch_weather (dt in seconds).

    Returns:
        Multi-line string, or a one-line notice when there is no forecast.
    """
    if not points:
        return "No forecast available."

    sep = "─" * 48
    lines = [f"Next {len(points)} forecast points", sep, "Time                Temp°C  Conditions", sep]
    for p in points:
        c, _ = format_temperature(p["temperature"])
        lines.append(f"{fmt_forecast_time(p['dt']):<18}  {c:>5}°  {p['description']}")
    lines.append(sep)
    return "\n".join(lines)


def render_history(groups: list[dict]) -> str:
    """Render grouped history, one block per date.

    Args:
        groups: Output of query.group_by_date.

    Returns:
        Multi-line string.
    """
    if not groups:
        return "No searches yet."

    blocks = []
    for group in groups:
        count = len(group["entries"])
        noun = "search" if count == 1 else "searches"
        lines = [f"{group['date']} — {count} {noun}"]
        for entry in group["entries"]:
            weather = entry.get("weather", {})
            c, f = format_temperature(weather.get("temperature", 0))
            place = _place(entry.get("city", ""), entry.get("country"))
            lines.append(
                f"  {fmt_clock(entry['timestamp'])}  {place:<24} {c:>4}°C {f:>4}°F  "
                f"{weather.get('description', '')}"
            )
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
