"""
Command-line interface for the rl translator.
"""

from __future__ import annotations

import sys
import logging
import argparse
from typing import Callable, List, Optional
from rltranslate.config import ConfigError, load_config
from rltranslate.constants import APP_NAME, LANGUAGE_CODE_WIDTH
from rltranslate.logging_setup import init_logging
from rltranslate.models import DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE, ProbeResult
from rltranslate.intents import (
    UpdateLanguagePrefs,
    IntentResolver,
    ListLanguages,
    UpdateApiUrl,
    IntentError,
    MissingText,
    ShowStatus,
    Translate,
    Intent
)
from rltranslate.services.libretranslate_service import (
    LibreTranslateService,
    LibreTranslateError
)

logger = logging.getLogger(__name__)

MISSING_TEXT_MESSAGE = "Error: missing TEXT argument. Either provide text to translate or use --status."

ServiceFactory = Callable[[str], LibreTranslateService]

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Translate words between languages using LibreTranslate",
    )
    parser.add_argument("text", nargs="?", default=None, help="The text to translate")
    parser.add_argument(
        "-t",
        "--to",
        default=None,
        help=f"Set the target language (default: {DEFAULT_TARGET_LANGUAGE})",
    )
    parser.add_argument(
        "-f",
        "--from",
        dest="source",
        default=None,
        help=f"Set the source language (default: {DEFAULT_SOURCE_LANGUAGE})",
    )
    parser.add_argument("-s", "--status", action="store_true", help="Show current language settings")
    parser.add_argument("-l", "--list", action="store_true", help="List available languages")
    parser.add_argument("-a", "--api", default=None, help="Set the API URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug logging to stderr")
    return parser

def describe_probe(result: ProbeResult) -> str:
    if result.reachable:
        return "API URL is accessible."
    if result.status_code is not None:
        return f"API URL responded with status: {result.status_code} {result.reason or ''}".rstrip()
    return f"Failed to reach API URL: {result.reason}"

def _show_status(intent: ShowStatus, service: LibreTranslateService) -> None:
    print("Current language settings:")
    print(f"From: {intent.source}")
    print(f"To: {intent.target}")
    print(f"API URL: {intent.api_url}")
    print(describe_probe(service.probe()))

def _list_languages(service: LibreTranslateService) -> None:
    languages = service.list_languages()
    print("Available languages:")
    for language in languages:
        print(f"{language.code:<{LANGUAGE_CODE_WIDTH}} - {language.name}")

def execute(intent: Intent, service_factory: ServiceFactory = LibreTranslateService) -> int:
    """
    Renders ``intent``, performing its network call when it has one.
    """
    if isinstance(intent, UpdateApiUrl):
        print(f"API URL updated to: {intent.url}")
        return 0
    if isinstance(intent, UpdateLanguagePrefs):
        print("Language settings updated.")
        return 0
    if isinstance(intent, MissingText):
        print(MISSING_TEXT_MESSAGE, file=sys.stderr)
        return 1

    with service_factory(intent.api_url) as service:
        if isinstance(intent, ListLanguages):
            _list_languages(service)
        elif isinstance(intent, ShowStatus):
            _show_status(intent, service)
        elif isinstance(intent, Translate):
            print(service.translate(intent.text, intent.source, intent.target))
    return 0

def run(
    argv: Optional[List[str]] = None,
    *,
    resolver: Optional[IntentResolver] = None,
    service_factory: ServiceFactory = LibreTranslateService,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        log_path = init_logging(level=logging.DEBUG, console_level=logging.DEBUG)
    else:
        log_path = init_logging()
    logger.debug("%s starting (logs: %s)", APP_NAME, log_path)

    resolver = resolver or IntentResolver()
    try:
        # --api may create the configuration file on first use
        config = load_config(missing_ok=args.api is not None)
        intent = resolver.resolve(args, config)
        return execute(intent, service_factory)
    except (ConfigError, IntentError, LibreTranslateError) as exc:
        logger.info("%s failed: %s", APP_NAME, exc, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

def main() -> None:
    sys.exit(run())

__all__ = ["main", "run", "build_parser", "execute", "describe_probe"]
