"""
Configuration for the News Gallery application.

Settings are read from config.json next to this module, then overridden by
environment variables where one is set.
"""

import json
import logging
import os
from typing import Any, Dict, cast

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "sheet_csv_url": "",
    "fetch_timeout": 10,
    "user_agent": "NewsGalleryBot/1.0",
    "placeholder_image": "https://placehold.co/400x250/cccccc/333333?text=No+Image",
    "log_level": "INFO",
}


def load_config(config_filename: str = "config.json") -> Dict[str, Any]:
    """Loads configuration from a JSON file, filling in defaults."""
    # Build absolute path relative to this module
    base_dir = os.path.dirname(os.path.abspath(__file__))
    config_path = os.path.join(base_dir, config_filename)

    config = dict(DEFAULT_CONFIG)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config.update(json.load(f))
    except FileNotFoundError:
        logger.warning("Config file not found at %s. Using defaults.", config_path)
    return config


CONFIG: Dict[str, Any] = load_config()

# Env Vars
SHEET_CSV_URL: str = os.environ.get(
    "GALLERY_SHEET_CSV_URL", cast(str, CONFIG["sheet_csv_url"])
)
FETCH_TIMEOUT: float = float(
    os.environ.get("GALLERY_FETCH_TIMEOUT", CONFIG["fetch_timeout"])
)
USER_AGENT: str = cast(str, CONFIG["user_agent"])
PLACEHOLDER_IMAGE: str = cast(str, CONFIG["placeholder_image"])
LOG_LEVEL: str = os.environ.get("GALLERY_LOG_LEVEL", cast(str, CONFIG["log_level"]))
