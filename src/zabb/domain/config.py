from __future__ import annotations

"""
Configuration Domain Management.

Handles the persisted user preferences (preferred backend, default search
flags, logging) stored as JSON in the user data directory, with fallback to
defaults when the file is missing or corrupted.
"""

import json
import logging
import os
from typing import Any, Dict

from zabb.domain.constants import BACKEND_AUTO, CURRENT_CONFIG_VERSION
from zabb.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)


def get_config_file() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), "config.json")


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Oracle backend ("auto" tries zoxide, then fasd)
        "backend": BACKEND_AUTO,

        # Default search scope
        "shortest": False,
        "all": False,

        # Diagnostics
        "log_level": "WARNING",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    Unknown keys in the file are ignored. A missing, unreadable or
    non-object file yields the defaults.

    Returns:
        Dict[str, Any]: The effective stored configuration.
    """
    config = get_default_config()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]
    return config


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the configuration to disk.

    Args:
        config: Configuration dictionary; only known keys are written.
    """
    defaults = get_default_config()
    payload: Dict[str, Any] = {k: config.get(k, v) for k, v in defaults.items()}
    payload["version"] = CURRENT_CONFIG_VERSION

    config_file = get_config_file()
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
