"""Translator capability and its HTTP backend.

``Translator`` is the protocol the pipeline depends on: one method that
turns a text into a target language or raises
:class:`~event_translator.errors.TranslationError`.  Anything with a
matching ``translate`` method works, which is how the tests plug in fakes.

``MicrosoftTranslator`` is the concrete backend: a thin, synchronous
wrapper around the Azure-style text translation REST API.  It is the only
place in the package that makes a network call.

Wire format
-----------
Request::

    POST {endpoint}/translate?api-version=3.0&to=fr
    Ocp-Apim-Subscription-Key: <key>
    Ocp-Apim-Subscription-Region: <region>
    Content-Type: application/json

    [{"Text": "..."}]

Response::

    [{"translations": [{"text": "...", "to": "fr"}]}]

Only the first translation of the first item is used.

Sync vs async
-------------
The backend uses the synchronous ``requests`` library.  FastAPI runs sync
endpoint handlers inside its thread pool, so a blocking call here does not
stall the event loop, and the pipeline can fan calls out over a
``ThreadPoolExecutor`` when more than one worker is configured.
"""

from __future__ import annotations

import logging
from typing import Protocol

import requests

from event_translator.errors import EmptyTranslationError, TranslationError

logger = logging.getLogger(__name__)

# HTTP statuses worth retrying: throttling and server-side failures.
_RETRYABLE_STATUSES = frozenset({408, 429, 500, 502, 503, 504})


class Translator(Protocol):
    """Text-translation capability consumed by the pipeline."""

    def translate(self, text: str, target_language: str) -> str:
        """Translate *text* into *target_language*.

        Raises:
            TranslationError: On any failure.
        """
        ...


class MicrosoftTranslator:
    """Synchronous client for the ``/translate`` endpoint.

    One instance is created per application and reused across requests;
    it holds no per-call state and is safe to share between threads.

    Attributes:
        _url:       Full ``/translate`` URL.
        _params:    Query parameters shared by every call (``api-version``).
        _headers:   Credential and content-type headers.
        _timeout:   HTTP request timeout in seconds.
    """

    def __init__(
        self,
        *,
        endpoint: str,
        subscription_key: str,
        region: str,
        api_version: str = "3.0",
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialise the client.

        Args:
            endpoint:         Base URL, e.g.
                              ``https://api.cognitive.microsofttranslator.com``.
                              ``/translate`` is appended automatically.
            subscription_key: API key sent as ``Ocp-Apim-Subscription-Key``.
            region:           Resource region sent as
                              ``Ocp-Apim-Subscription-Region``.
            api_version:      Value of the ``api-version`` query parameter.
            timeout_seconds:  HTTP request timeout.
        """
        self._url = f"{endpoint.rstrip('/')}/translate"
        self._params = {"api-version": api_version}
        self._headers = {
            "Ocp-Apim-Subscription-Key": subscription_key,
            "Ocp-Apim-Subscription-Region": region,
            "Content-Type": "application/json",
        }
        self._timeout = timeout_seconds

    @classmethod
    def from_settings(cls, settings) -> MicrosoftTranslator:
        """Build a client from a ``TranslatorSettings`` section."""
        return cls(
            endpoint=settings.endpoint,
            subscription_key=settings.subscription_key,
            region=settings.region,
            api_version=settings.api_version,
            timeout_seconds=settings.timeout_seconds,
        )

    @property
    def url(self) -> str:
        return self._url

    def translate(self, text: str, target_language: str) -> str:
        """Translate *text* into *target_language*.

        Returns:
            The translated text, exactly as the service returned it.

        Raises:
            TranslationError: On timeout, connection failure, non-200
                status or a malformed body.  Timeouts, connection errors,
                throttling and 5xx responses are marked ``retryable``.
            EmptyTranslationError: If the service answered 200 with no
                translations.
        """
        params = {**self._params, "to": target_language}

        try:
            response = requests.post(
                self._url,
                params=params,
                headers=self._headers,
                json=[{"Text": text}],
                timeout=self._timeout,
            )
        except requests.exceptions.Timeout as exc:
            logger.warning(
                "MicrosoftTranslator: request timed out after %.1fs (to=%s)",
                self._timeout,
                target_language,
            )
            raise TranslationError(target_language, exc, retryable=True) from exc
        except requests.exceptions.ConnectionError as exc:
            logger.warning("MicrosoftTranslator: cannot connect to %s", self._url)
            raise TranslationError(target_language, exc, retryable=True) from exc
        except requests.exceptions.RequestException as exc:
            logger.error("MicrosoftTranslator: request failed: %s", exc)
            raise TranslationError(target_language, exc) from exc

        if response.status_code != 200:
            logger.error(
                "MicrosoftTranslator: HTTP %d for to=%s", response.status_code, target_language
            )
            raise TranslationError(
                target_language,
                f"non-OK HTTP status: {response.status_code}, response: {response.text}",
                retryable=response.status_code in _RETRYABLE_STATUSES,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise TranslationError(
                target_language, f"error decoding response body: {exc}"
            ) from exc

        return self._extract_text(data, target_language)

    # ── Internal helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _extract_text(data, target_language: str) -> str:
        """Pull the first translated text out of a decoded response body."""
        if not isinstance(data, list):
            raise TranslationError(target_language, "unexpected response shape")
        if not data:
            raise EmptyTranslationError(target_language)

        first = data[0]
        if not isinstance(first, dict):
            raise TranslationError(target_language, "unexpected response shape")
        translations = first.get("translations") or []
        if not isinstance(translations, list):
            raise TranslationError(target_language, "unexpected response shape")
        if not translations:
            raise EmptyTranslationError(target_language)

        item = translations[0]
        if not isinstance(item, dict) or not isinstance(item.get("text"), str):
            raise TranslationError(target_language, "translation entry has no text")
        return item["text"]
