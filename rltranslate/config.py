"""
Handles loading and saving the persisted user configuration.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from rltranslate.models import Configuration
from rltranslate.constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME

logger = logging.getLogger(__name__)

class ConfigError(Exception):
    """Base class for configuration storage failures."""

class ConfigUnreadable(ConfigError):
    """Raised when the configuration file is missing or cannot be parsed."""

class ConfigWriteError(ConfigError):
    """Raised when the configuration file cannot be written."""

def _resolve_config_dir() -> Optional[Path]:
    try:
        return Path.home() / CONFIG_DIR_NAME
    except (RuntimeError, KeyError):
        return None

# configuration file location, None when the home directory is unknown
CONFIG_DIR = _resolve_config_dir()
CONFIG_FILE = CONFIG_DIR / CONFIG_FILE_NAME if CONFIG_DIR is not None else None

def _read_config_file(path: Path) -> Dict[str, Any]:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigUnreadable(f"Cannot read configuration file {path}: {exc}") from exc

    try:
        data = json.loads(raw.decode("utf-8"))
    except ValueError as exc:
        raise ConfigUnreadable(f"Configuration file {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigUnreadable(f"Configuration file {path} must contain a JSON object.")
    return data

def load_config(*, missing_ok: bool = False) -> Configuration:
    """
    Loads the configuration from disk.

    A missing file is an error unless ``missing_ok`` is set, in which case an
    empty configuration is returned and nothing is written.
    """
    if CONFIG_FILE is None:
        raise ConfigUnreadable("Cannot determine the home directory.")

    if missing_ok and not CONFIG_FILE.exists():
        logger.debug("No configuration file at %s, starting empty", CONFIG_FILE)
        return Configuration()

    data = _read_config_file(CONFIG_FILE)
    logger.debug("Loaded configuration from %s", CONFIG_FILE)
    return Configuration.from_dict(data)

def save_config(config: Configuration) -> None:
    """
    Writes the whole configuration document back to disk.
    """
    if CONFIG_DIR is None or CONFIG_FILE is None:
        raise ConfigWriteError("Cannot determine the home directory.")

    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        CONFIG_FILE.write_text(json.dumps(config.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as exc:
        raise ConfigWriteError(f"Cannot write configuration file {CONFIG_FILE}: {exc}") from exc
    logger.debug("Saved configuration to %s", CONFIG_FILE)
