"""
Handles interactions with a LibreTranslate-compatible HTTP API.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests
from rltranslate.constants import LANGUAGES_ENDPOINT, TRANSLATE_ENDPOINT
from rltranslate.models import LanguageDescriptor, ProbeResult

logger = logging.getLogger(__name__)

class LibreTranslateError(Exception):
    """Base class for failures talking to the translation service."""

class TransportError(LibreTranslateError):
    """Raised when the request could not be completed on the network level."""

class ServiceError(LibreTranslateError):
    """Raised when the service answers with a non-success status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"Service responded with status {status_code}: {message}")
        self.status_code = status_code

class DecodeError(LibreTranslateError):
    """Raised when the response body does not have the expected shape."""

def normalize_base_url(api_url: str) -> str:
    return api_url.rstrip("/")

def _service_error(response: requests.Response) -> ServiceError:
    message = response.reason or "unknown error"
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        message = body["error"]
    return ServiceError(response.status_code, message)

class LibreTranslateService:
    """
    Thin wrapper around the LibreTranslate REST endpoints.

    Each method performs exactly one blocking request. There is no retry and no
    timeout beyond what ``requests`` does by default.
    """

    def __init__(self, api_url: str, session: Optional[requests.Session] = None):
        self.api_url = normalize_base_url(api_url)
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "LibreTranslateService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _endpoint(self, path: str = "") -> str:
        return f"{self.api_url}/{path}"

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.info("Request to %s failed: %s", url, exc)
            raise TransportError(f"Failed to reach {url}: {exc}") from exc

        if not response.ok:
            error = _service_error(response)
            logger.info("%s %s -> %s", method, url, error)
            raise error
        return response

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"Response from {response.url} is not valid JSON: {exc}") from exc

    def probe(self) -> ProbeResult:
        """
        Checks whether the API base URL answers. Never raises.
        """
        url = self._endpoint()
        try:
            response = self.session.get(url)
        except requests.RequestException as exc:
            logger.info("Probe of %s failed: %s", url, exc)
            return ProbeResult(reachable=False, reason=str(exc))

        logger.debug("Probe of %s returned %s", url, response.status_code)
        if response.ok:
            return ProbeResult(reachable=True, status_code=response.status_code)
        return ProbeResult(reachable=False, status_code=response.status_code, reason=response.reason)

    def list_languages(self) -> List[LanguageDescriptor]:
        """
        Returns the languages offered by the service.
        """
        response = self._send("GET", self._endpoint(LANGUAGES_ENDPOINT))
        data = self._json(response)
        if not isinstance(data, list):
            raise DecodeError(f"Expected a list of languages, got {type(data).__name__}.")
        try:
            return [LanguageDescriptor.from_dict(item) for item in data]
        except (KeyError, TypeError, AttributeError) as exc:
            raise DecodeError(f"Malformed language entry: {exc!r}") from exc

    def translate(self, text: str, source: str, target: str) -> str:
        """
        Translates ``text`` and returns the service's text unmodified.
        """
        payload = {"q": text, "source": source, "target": target}
        response = self._send("POST", self._endpoint(TRANSLATE_ENDPOINT), json=payload)
        data = self._json(response)
        translated = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(translated, str):
            raise DecodeError(f"Response is missing 'translatedText': {data!r}")
        logger.debug("Translated %d characters %s -> %s", len(text), source, target)
        return translated
