from __future__ import annotations

"""
Configuration Domain Management.

Persists user preferences as JSON in the user data directory. Missing or
corrupted files fall back to defaults; unknown keys from older files are
preserved, missing keys are filled from defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from projectlister.domain.constants import CURRENT_CONFIG_VERSION
from projectlister.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

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
        # Project source
        "source_path": "",
        "source_url": "",
        "active_document": "",

        # Traversal policy
        "guard_cycles": True,
        "include_containers": False,

        # Output
        "output_file": "",
        "print_report": True,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk merged over the defaults.

    Args:
        path: Config file location. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: The merged configuration, or defaults on failure.
    """
    config_path = path or get_config_path()
    defaults = get_default_config()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    data.pop("version", None)
    defaults.update(data)
    return defaults


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist the configuration to disk.

    Returns:
        bool: True on success, False if the file could not be written (logged).
    """
    config_path = path or get_config_path()
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION

    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {config_path}")
    return True
