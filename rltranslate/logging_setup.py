"""Application-wide logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler
from rltranslate.config import CONFIG_DIR
from rltranslate.constants import LOG_FILE_NAME

LOG_FILE = CONFIG_DIR / LOG_FILE_NAME if CONFIG_DIR is not None else None

def init_logging(level: int = logging.INFO, console_level: int = logging.WARNING) -> Optional[Path]:
    """
    Configures root logging with a rotating file handler and a stderr console handler.

    Returns the path to the log file, or None when no file handler could be installed.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return LOG_FILE

    root_logger.setLevel(min(level, console_level))

    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if CONFIG_DIR is None or LOG_FILE is None:
        root_logger.debug("Home directory unknown, logging to console only.")
        return None

    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(LOG_FILE, maxBytes=512_000, backupCount=3, encoding="utf-8")
    except OSError as exc:
        root_logger.warning("Cannot open log file %s: %s", LOG_FILE, exc)
        return None

    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    root_logger.debug("Logging initialized. Log file: %s", LOG_FILE)

    return LOG_FILE
