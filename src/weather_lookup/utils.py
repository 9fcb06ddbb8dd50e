# Project: weather-lookup
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
utils.py — Shared utilities: retry logic, error logging, time labels.
"""

import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any


DEFAULT_LOG_PATH = Path("logs/weather_lookup.log")
MAX_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 2


def fmt_clock(timestamp_ms: int) -> str:
    """Format a millisecond epoch timestamp as a local 'HH:MM' label."""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%H:%M")


def fmt_forecast_time(dt: int) -> str:
    """Format a forecast point time (seconds since epoch) as 'Mon 24 Feb 15:00'.

    Args:
        dt: Seconds since epoch, as returned by the provider.

    Returns:
        Local-time label for the forecast point.
    """
    return datetime.fromtimestamp(dt).strftime("%a %d %b %H:%M")


def with_retry(
    fn: Callable[..., Any],
    *args: Any,
    label: str = "API call",
    log_path: Path = DEFAULT_LOG_PATH,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
    **kwargs: Any,
) -> Any:
    """Call a function up to MAX_ATTEMPTS times, retrying on `retry_on` errors.

    Args:
        fn: Callable to invoke (wrap args in a closure where convenient).
        *args: Positional arguments forwarded to fn.
        label: Human-readable name for the call, used in warning messages.
        log_path: Path to the log file for recording final failures.
        retry_on: Exception types worth retrying. Anything else propagates
            from the first attempt unchanged.
        **kwargs: Keyword arguments forwarded to fn.

    Returns:
        The return value of fn on success.

    Raises:
        RuntimeError: If all MAX_ATTEMPTS attempts raise exceptions.
    """
    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            return fn(*args, **kwargs)
        except retry_on as e:
            if attempt < MAX_ATTEMPTS:
                print(
                    f"[weather] {label} failed (attempt {attempt}/{MAX_ATTEMPTS}): "
                    f"{e}. Retrying in {RETRY_DELAY_SECONDS}s..."
                )
                time.sleep(RETRY_DELAY_SECONDS)
            else:
                msg = f"All {MAX_ATTEMPTS} attempts failed for {label}. Check your internet connection."
                print(f"[weather] {msg}")
                log_error(f"{label}: {e}", log_path=log_path)
                raise RuntimeError(msg) from e


def log_error(message: str, log_path: Path = DEFAULT_LOG_PATH) -> None:
    """Append a timestamped ERROR line to the log file.

    Args:
        message: Error description to log.
        log_path: Destination log file path.
    """
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(log_path, "a") as f:
            f.write(f"{timestamp} [ERROR] {message}\n")
    except OSError:
        pass  # Never crash on logging failure
