# Area: Shared
"""
cribbage_client._shared.config — Client configuration
======================================================

Loads configuration from an optional JSON file, then from a .env file
and the process environment (environment wins).

Config keys:
    server_url               Base URL of the game server (required)
    player_id                Default player id for active-games lookups
    request_timeout_seconds  HTTP timeout, default 10
    log_file                 Log file path, default cribbage_client.log
    log_level                Logging level name, default INFO
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ..errors import ConfigError

logger = logging.getLogger("cribbage_client.config")

DEFAULTS: Dict[str, Any] = {
    "request_timeout_seconds": 10.0,
    "log_file": "cribbage_client.log",
    "log_level": "INFO",
}

REQUIRED_CONFIG_KEYS = [
    "server_url",
]

ENV_MAPPINGS = {
    "CRIBBAGE_SERVER_URL": "server_url",
    "CRIBBAGE_PLAYER_ID": "player_id",
    "CRIBBAGE_REQUEST_TIMEOUT": "request_timeout_seconds",
    "CRIBBAGE_LOG_FILE": "log_file",
    "CRIBBAGE_LOG_LEVEL": "log_level",
}


def load_config(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Load config from file and environment.

    Args:
        config_path: Optional path to a JSON config file
        env_file: Optional .env path; defaults to searching from the cwd

    Returns:
        Configuration dict with defaults filled in
    """
    config: Dict[str, Any] = dict(DEFAULTS)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config.update(json.load(f))
        else:
            logger.warning(f"Config file not found: {path}")

    load_dotenv(env_file)

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    try:
        config["request_timeout_seconds"] = float(config["request_timeout_seconds"])
    except (TypeError, ValueError):
        logger.warning(
            f"Invalid request timeout {config['request_timeout_seconds']!r}, using default"
        )
        config["request_timeout_seconds"] = DEFAULTS["request_timeout_seconds"]

    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate required configuration keys.

    Raises:
        ConfigError: If required keys are missing or empty
    """
    missing = [k for k in REQUIRED_CONFIG_KEYS if not config.get(k)]
    if missing:
        raise ConfigError(missing)
