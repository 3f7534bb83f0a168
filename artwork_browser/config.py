"""
Configuration settings for the Artwork Browser
"""

import copy
import os
import json
from typing import Dict, Any

from artwork_browser.errors import ConfigError


DEFAULT_CONFIG = {
    "api": {
        "base_url": "https://api.artic.edu/api/v1",
        "timeout": 15,
        "fields": [
            "id",
            "title",
            "place_of_origin",
            "artist_display",
            "inscriptions",
            "date_start",
            "date_end",
        ],
    },
    "ui": {
        "per_page": 10,
        "title": "Art Institute of Chicago - Artworks",
    },
}

CONFIG_FILE = os.path.expanduser("~/.artwork_browser_config.json")


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge `override` into `base` (in place)."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def _parse_per_page(value: Any) -> int:
    try:
        per_page = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"per_page must be an integer, got {value!r}") from e
    if per_page < 1:
        raise ConfigError(f"per_page must be at least 1, got {per_page}")
    return per_page


def load_config(config_file: str = CONFIG_FILE) -> Dict[str, Any]:
    """
    Load configuration from defaults, the JSON config file and then
    environment variables, in that order of precedence.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if os.path.exists(config_file):
        try:
            with open(config_file, 'r') as f:
                file_config = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise ConfigError(f"Error loading config file {config_file}: {e}") from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {config_file} must contain a JSON object")
        _merge(config, file_config)

    if os.environ.get("ARTWORK_API_URL"):
        config["api"]["base_url"] = os.environ["ARTWORK_API_URL"]

    if os.environ.get("ARTWORK_PER_PAGE"):
        config["ui"]["per_page"] = os.environ["ARTWORK_PER_PAGE"]

    # page size is fixed for the whole session, so validate it up front
    config["ui"]["per_page"] = _parse_per_page(config["ui"]["per_page"])

    return config

