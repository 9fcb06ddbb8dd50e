# Project: weather-lookup
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
The config path defaults to "config.toml" in the current working directory,
but can be overridden for testing or with `weather-lookup --config`.
"""

import tomllib
from pathlib import Path


DEFAULT_CONFIG_PATH = Path("config.toml")


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load and validate a TOML configuration file.

    Args:
        path: Path to the TOML config file.

    Returns:
        Nested dict of configuration values.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If required keys or sections are missing or invalid.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml and set your API key variable."
        )

    with open(path, "rb") as f:
        config = tomllib.load(f)

    _validate(config)
    return config


def _validate(config: dict) -> None:
    """Validate that all required config sections and keys are present.

    Expected config schema::

        [weather]
        api_key_env = <str>   # env var holding the OpenWeatherMap key
        base_url    = <str>   # optional, provider base URL
        timeout     = <int>   # optional, seconds per request

        [storage]
        directory   = <str>   # where the search history is persisted
        quota_bytes = <int>   # optional, max size of one stored value

        [history]
        max_entries = <int>   # searches kept, oldest evicted first

        [log]
        path = <str>          # relative or absolute path to the log file

    Args:
        config: Parsed TOML config dict.

    Raises:
        ValueError: If any required section or key is absent, or
            max_entries is not a positive integer.
    """
    required_sections = ["weather", "storage", "history", "log"]
    for section in required_sections:
        if section not in config:
            raise ValueError(f"Missing required config section: [{section}]")

    required_keys = {
        "storage": ("directory",),
        "history": ("max_entries",),
        "log": ("path",),
    }
    for section, keys in required_keys.items():
        for key in keys:
            if key not in config[section]:
                raise ValueError(f"Missing required config key: [{section}].{key}")

    max_entries = config["history"]["max_entries"]
    if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries < 1:
        raise ValueError(
            f"Invalid config value: [history].max_entries must be a positive integer, got {max_entries!r}"
        )
