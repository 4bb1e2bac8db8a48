"""
Stores constant values used across the application.
"""

from __future__ import annotations

APP_NAME = "rl"
CONFIG_DIR_NAME = ".rustlator"
CONFIG_FILE_NAME = "config.json"
LOG_FILE_NAME = "rl.log"

TRANSLATE_ENDPOINT = "translate"
LANGUAGES_ENDPOINT = "languages"

# column width of the language code in --list output
LANGUAGE_CODE_WIDTH = 10
