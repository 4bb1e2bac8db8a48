"""
Core data models and value objects used across the rl translator.
"""

from __future__ import annotations

from typing import Any, Dict, Optional
from dataclasses import dataclass, field

DEFAULT_SOURCE_LANGUAGE = "en"
DEFAULT_TARGET_LANGUAGE = "fi"

API_URL_KEY = "api_url"
SOURCE_KEY = "from"
TARGET_KEY = "to"

def _string_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None

@dataclass
class Configuration:
    """
    Persisted user preferences.

    Only ``api_url``, ``from`` and ``to`` are interpreted. Every other key read
    from disk is kept in ``extra`` and written back untouched.
    """

    api_url: Optional[str] = None
    source: Optional[str] = None
    target: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "Configuration":
        if not data:
            return cls()
        api_url = _string_or_none(data.get(API_URL_KEY))
        source = _string_or_none(data.get(SOURCE_KEY))
        target = _string_or_none(data.get(TARGET_KEY))

        # recognised keys holding non-string values stay in extra as-is
        extra = {
            key: value
            for key, value in data.items()
            if not (
                (key == API_URL_KEY and api_url is not None)
                or (key == SOURCE_KEY and source is not None)
                or (key == TARGET_KEY and target is not None)
            )
        }
        return cls(api_url=api_url, source=source, target=target, extra=extra)

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.extra)
        if self.api_url is not None:
            data[API_URL_KEY] = self.api_url
        if self.source is not None:
            data[SOURCE_KEY] = self.source
        if self.target is not None:
            data[TARGET_KEY] = self.target
        return data

    @property
    def source_language(self) -> str:
        return DEFAULT_SOURCE_LANGUAGE if self.source is None else self.source

    @property
    def target_language(self) -> str:
        return DEFAULT_TARGET_LANGUAGE if self.target is None else self.target

@dataclass(frozen=True)
class LanguageDescriptor:
    """
    A language offered by the translation service.
    """

    code: str
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LanguageDescriptor":
        code = data["code"]
        name = data["name"]
        if not isinstance(code, str) or not isinstance(name, str):
            raise TypeError("language code and name must be strings")
        return cls(code=code, name=name)

@dataclass(frozen=True)
class ProbeResult:
    """
    Outcome of a liveness check against the API base URL.
    """

    reachable: bool
    status_code: Optional[int] = None
    reason: Optional[str] = None
