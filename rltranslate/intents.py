"""
Turns parsed command-line arguments and the stored configuration into the
single action an invocation performs.

Rules are checked in order and the first matching rule wins, so for example
``--api`` combined with text only updates the API URL, and ``--to`` combined
with text only updates the language preference.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union
from rltranslate.config import save_config
from rltranslate.models import Configuration

logger = logging.getLogger(__name__)

class IntentError(Exception):
    """Raised when the arguments and configuration cannot form a runnable intent."""

class MissingApiUrl(IntentError):
    """Raised when a network action is requested without a stored API URL."""

    def __init__(self) -> None:
        super().__init__("Missing 'api_url' in configuration file. Set it with --api <url>.")

@dataclass(frozen=True)
class UpdateApiUrl:
    url: str

@dataclass(frozen=True)
class UpdateLanguagePrefs:
    target: Optional[str] = None
    source: Optional[str] = None

@dataclass(frozen=True)
class ListLanguages:
    api_url: str

@dataclass(frozen=True)
class ShowStatus:
    source: str
    target: str
    api_url: str

@dataclass(frozen=True)
class Translate:
    text: str
    source: str
    target: str
    api_url: str

@dataclass(frozen=True)
class MissingText:
    """No text was given and no other action was requested."""

Intent = Union[UpdateApiUrl, UpdateLanguagePrefs, ListLanguages, ShowStatus, Translate, MissingText]

def _require_api_url(config: Configuration) -> str:
    if not config.api_url:
        raise MissingApiUrl()
    return config.api_url

def _update_api_url(args: Any, config: Configuration) -> Intent:
    return UpdateApiUrl(url=args.api)

def _list_languages(args: Any, config: Configuration) -> Intent:
    return ListLanguages(api_url=_require_api_url(config))

def _update_language_prefs(args: Any, config: Configuration) -> Intent:
    return UpdateLanguagePrefs(target=args.to, source=args.source)

def _show_status(args: Any, config: Configuration) -> Intent:
    return ShowStatus(
        source=config.source_language,
        target=config.target_language,
        api_url=_require_api_url(config),
    )

def _translate(args: Any, config: Configuration) -> Intent:
    return Translate(
        text=args.text,
        source=config.source_language,
        target=config.target_language,
        api_url=_require_api_url(config),
    )

def _missing_text(args: Any, config: Configuration) -> Intent:
    return MissingText()

Rule = Tuple[str, Callable[[Any], bool], Callable[[Any, Configuration], Intent]]

# (name, predicate over args, builder) in priority order
RULES: Tuple[Rule, ...] = (
    ("update-api-url", lambda args: args.api is not None, _update_api_url),
    ("list-languages", lambda args: bool(args.list), _list_languages),
    ("update-language-prefs", lambda args: args.to is not None or args.source is not None, _update_language_prefs),
    ("show-status", lambda args: bool(args.status), _show_status),
    ("translate", lambda args: args.text is not None, _translate),
    ("missing-text", lambda args: True, _missing_text),
)

def select_rule(args: Any) -> Rule:
    """
    Returns the first rule whose predicate matches ``args``.
    """
    for rule in RULES:
        if rule[1](args):
            return rule
    raise AssertionError("the final rule always matches")

class IntentResolver:
    """
    Resolves one intent per invocation and applies configuration updates.
    """

    def __init__(self, save: Callable[[Configuration], None] = save_config):
        self._save = save

    def resolve(self, args: Any, config: Configuration) -> Intent:
        """
        Resolves ``args`` against ``config``.

        Update intents are applied to ``config`` and persisted before returning.
        """
        name, _, build = select_rule(args)
        intent = build(args, config)
        logger.debug("Resolved intent %s: %s", name, intent)

        if isinstance(intent, UpdateApiUrl):
            config.api_url = intent.url
            self._save(config)
            logger.info("API URL updated to %s", intent.url)
        elif isinstance(intent, UpdateLanguagePrefs):
            if intent.target is not None:
                config.target = intent.target
            if intent.source is not None:
                config.source = intent.source
            self._save(config)
            logger.info("Language settings updated (from=%s, to=%s)", config.source, config.target)

        return intent
