from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional

# --- Configuration ---
BASE_URL = "https://hack-or-snooze-v2.herokuapp.com"

CONFIG_PATH = os.path.expanduser("~/.config/hack_or_snooze/config.json")
SESSION_FILE = os.path.expanduser("~/.config/hack_or_snooze/session.json")

REQUEST_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "hack-or-snooze-client/0.1",
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "base_url": BASE_URL,
    # seconds; None leaves requests without a timeout
    "timeout": None,
    "session_file": SESSION_FILE,
}

# --- Logging ---
logger = logging.getLogger("hack_or_snooze")

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(debug: bool = False, log_dir: str = "/tmp") -> Optional[str]:
    """Configure the package logger.

    Only the ``hack_or_snooze`` logger is touched, so an application that
    embeds the client keeps its own root logging setup. Without ``debug``
    the package stays silent; with it, DEBUG records go to a fresh file in
    ``log_dir`` whose path is returned.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    if not debug:
        logger.setLevel(logging.CRITICAL)
        logger.addHandler(logging.NullHandler())
        return None

    ts = datetime.now().strftime("%Y%m%dT%H%M%S")
    debug_path = os.path.join(log_dir, f"hack_or_snooze_debug_{ts}_{os.getpid()}.log")

    handler = logging.FileHandler(debug_path, mode="a")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)

    logger.debug("Debug logging enabled to %s", debug_path)
    return debug_path


def ensure_config_file_exists(path: str = CONFIG_PATH) -> None:
    """Write the default config file if the user's config file is not found."""
    if os.path.exists(path):
        return
    logger.info("Config file not found at %s, creating default.", path)
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w") as f:
            json.dump(DEFAULT_CONFIG, f, indent=2)
    except OSError as e:
        logger.error("Failed to create default config file: %s", e)


def load_config(path: str = CONFIG_PATH) -> Dict[str, Any]:
    """Load the config file, filling in defaults for missing keys."""
    ensure_config_file_exists(path)
    config = dict(DEFAULT_CONFIG)
    try:
        with open(path, "r") as f:
            loaded = json.load(f)
    except (IOError, json.JSONDecodeError) as e:
        logger.error("Failed to load config from %s: %s", path, e)
        return config

    if not isinstance(loaded, dict):
        logger.warning("Ignoring config at %s: expected a JSON object", path)
        return config

    config.update(loaded)
    logger.info("Loaded config from %s", path)
    return config
