# Project: weather-lookup
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
weather.py — Fetch current conditions and a short forecast from OpenWeatherMap.

Requires an API key, read from the OPENWEATHER_API_KEY environment
variable unless passed explicitly. Units are metric (°C, m/s).

The provider response is normalized into a small, predictable shape:

    {
        "location": {"city": str, "country": str},
        "current":  {"temperature", "feels_like", "description",
                     "humidity", "wind_speed", "icon"},
        "forecast": [{"dt", "temperature", "description", "icon"}, ...],
    }

Absent numbers become 0, absent descriptions "", absent icons "01d".
Failures raise WeatherGatewayError carrying an HTTP-style status code.

API docs: https://openweathermap.org/current and https://openweathermap.org/forecast5
"""

import os

import requests
from weather_lookup.utils import with_retry, log_error, DEFAULT_LOG_PATH


OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5"
API_KEY_ENV = "OPENWEATHER_API_KEY"

FORECAST_POINTS = 5
DEFAULT_ICON = "01d"

MISSING_CITY_MESSAGE = "Provide a city name, e.g. 'Seattle'."
DEFAULT_LOOKUP_MESSAGE = "Unable to load weather for that city."
UPSTREAM_FAILURE_MESSAGE = "Something went wrong while contacting OpenWeatherMap."


class WeatherGatewayError(RuntimeError):
    """A weather lookup failed. `status` follows HTTP conventions."""

    def __init__(self, message: str, status: int = 500):
        super().__init__(message)
        self.status = status


def fetch_weather(
    city: str | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
    api_key: str | None = None,
    base_url: str = OPENWEATHER_URL,
    timeout: float = 10,
    log_path=DEFAULT_LOG_PATH,
) -> dict:
    """Fetch normalized current weather plus up to FORECAST_POINTS forecast points.

    Look up either by `city` or by `latitude`/`longitude`.

    Args:
        city: City name, e.g. 'Seattle' or 'Paris,FR'.
        latitude: Decimal degrees, used when no city is given.
        longitude: Decimal degrees, used when no city is given.
        api_key: OpenWeatherMap key. Falls back to $OPENWEATHER_API_KEY.
        base_url: Provider base URL (no trailing slash).
        timeout: Seconds per HTTP request.
        log_path: Log file for upstream failures.

    Returns:
        Normalized dict with location, current and forecast keys.

    Raises:
        WeatherGatewayError: 400 when no city/coordinates were given, 500
            when the key is missing or the provider cannot be reached, or
            the provider's own status for a rejected lookup.
    """
    location_params, fallback_city = _location_params(city, latitude, longitude)

    key = api_key or os.environ.get(API_KEY_ENV)
    if not key:
        raise WeatherGatewayError(f"Missing {API_KEY_ENV} on the server.", status=500)

    params = {**location_params, "units": "metric", "appid": key}

    def _get(endpoint: str) -> requests.Response:
        return requests.get(f"{base_url}/{endpoint}", params=params, timeout=timeout)

    try:
        current_response = with_retry(
            _get, "weather", label="OpenWeatherMap current weather API",
            log_path=log_path, retry_on=(requests.RequestException,),
        )
    except RuntimeError as e:
        raise WeatherGatewayError(UPSTREAM_FAILURE_MESSAGE, status=500) from e

    if not current_response.ok:
        raise WeatherGatewayError(
            _error_message(current_response), status=current_response.status_code
        )

    try:
        current_data = current_response.json()
    except ValueError as e:
        log_error(f"Weather lookup returned invalid JSON: {e}", log_path=log_path)
        raise WeatherGatewayError(UPSTREAM_FAILURE_MESSAGE, status=500) from e

    forecast_data = _fetch_forecast(_get, log_path)

    result = _parse_current(current_data, fallback_city)
    result["forecast"] = _parse_forecast(forecast_data)
    return result


def _location_params(
    city: str | None,
    latitude: float | None,
    longitude: float | None,
) -> tuple[dict, str]:
    """Build the query params for a city or coordinate lookup.

    Returns:
        (params, fallback_city) where fallback_city labels the result if
        the provider does not name the place.

    Raises:
        WeatherGatewayError: 400 if neither a city nor both coordinates are given.
    """
    query = (city or "").strip()
    if query:
        return {"q": query}, query
    if latitude is not None and longitude is not None:
        return {"lat": latitude, "lon": longitude}, f"{latitude:.2f}, {longitude:.2f}"
    raise WeatherGatewayError(MISSING_CITY_MESSAGE, status=400)


def _fetch_forecast(get, log_path) -> dict | None:
    """Fetch the 5-day/3-hour forecast. Failures are logged, not raised."""
    try:
        response = with_retry(
            get, "forecast", label="OpenWeatherMap forecast API",
            log_path=log_path, retry_on=(requests.RequestException,),
        )
    except RuntimeError as e:
        print(f"[weather] Forecast lookup failed: {e}")
        return None

    if not response.ok:
        print(f"[weather] Forecast lookup failed with status {response.status_code}")
        return None

    try:
        return response.json()
    except ValueError as e:
        log_error(f"Forecast lookup returned invalid JSON: {e}", log_path=log_path)
        return None


def _error_message(response: requests.Response) -> str:
    """Return the provider's error message, or a generic one."""
    try:
        payload = response.json()
    except ValueError:
        return DEFAULT_LOOKUP_MESSAGE
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return DEFAULT_LOOKUP_MESSAGE


def _number(value) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return 0


def _section(data: dict, key: str) -> dict:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _first_condition(data: dict) -> dict:
    conditions = data.get("weather")
    if isinstance(conditions, list) and conditions and isinstance(conditions[0], dict):
        return conditions[0]
    return {}


def _parse_current(data: dict, fallback_city: str) -> dict:
    """Normalize the /weather response into location + current blocks."""
    if not isinstance(data, dict):
        raise WeatherGatewayError(UPSTREAM_FAILURE_MESSAGE, status=500)

    main = _section(data, "main")
    wind = _section(data, "wind")
    sys_info = _section(data, "sys")
    condition = _first_condition(data)

    return {
        "location": {
            "city":    data.get("name") or fallback_city,
            "country": sys_info.get("country") or "",
        },
        "current": {
            "temperature": _number(main.get("temp")),
            "feels_like":  _number(main.get("feels_like")),
            "description": condition.get("description") or "",
            "humidity":    _number(main.get("humidity")),
            "wind_speed":  _number(wind.get("speed")),
            "icon":        condition.get("icon") or DEFAULT_ICON,
        },
    }


def _parse_forecast(data: dict | None) -> list[dict]:
    """Normalize the first FORECAST_POINTS entries of a /forecast response."""
    if not isinstance(data, dict):
        return []
    points = data.get("list")
    if not isinstance(points, list):
        return []

    result = []
    for point in points[:FORECAST_POINTS]:
        if not isinstance(point, dict):
            continue
        condition = _first_condition(point)
        result.append({
            "dt":          int(_number(point.get("dt"))),
            "temperature": _number(_section(point, "main").get("temp")),
            "description": condition.get("description") or "",
            "icon":        condition.get("icon") or DEFAULT_ICON,
        })
    return result
