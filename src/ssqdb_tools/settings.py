"""Runtime configuration for the command-line tools.

Only ambient settings live here (logging for now). The lint rules and the
quote file format are fixed and are not read from configuration.

An optional JSON file can be pointed at with SSQDB_TOOLS_CONFIG, which may
itself come from a .env file:

    {"logging": {"enabled": true, "level": "DEBUG", "file": {"enabled": true}}}
"""

from __future__ import annotations

import json
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

CONFIG_ENV_VAR = "SSQDB_TOOLS_CONFIG"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"

# Relative to the directory the tool is run from, like the .env lookup.
DEFAULT_CONFIG_PATH = "config.json"


def config_path() -> str:
    load_dotenv(find_dotenv(usecwd=True))
    return os.path.abspath(os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)


def load_config(path: Optional[str] = None) -> dict:
    """Load the JSON config, treating a missing file as an empty config."""

    path = path or config_path()
    if not os.path.exists(path):
        return {}

    with open(path, "r", encoding="utf-8") as handle:
        config = json.load(handle)
    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    return config


def logging_settings(config: dict) -> dict:
    """Return the logging section with the LOG_LEVEL override applied."""

    logging_config = dict(config.get("logging", {}) or {})
    level = os.getenv(LOG_LEVEL_ENV_VAR)
    if level:
        logging_config["level"] = level
    return logging_config
