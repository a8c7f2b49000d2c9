"""Typed exceptions for the event translation service.

A small, explicit hierarchy lets the HTTP layer map every failure to a
deterministic status code without inspecting message strings:

    - ``EventValidationError`` → 400
    - ``EventConflictError``   → 409
    - ``TranslationError``     → 500

Domain outcomes like "event not found" are represented by ``None`` rather
than an exception, matching the store contract.
"""

from __future__ import annotations


class EventTranslatorError(RuntimeError):
    """Base exception for all service failures."""


class EventValidationError(EventTranslatorError):
    """An event is missing required fields or carries empty entries."""


class EventConflictError(EventTranslatorError):
    """An event with the same name is already stored.

    Args:
        name: The conflicting event name.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"event already exists: {name}")
        self.name = name


class TranslationError(EventTranslatorError):
    """The translator capability failed for one target language.

    Raising this aborts the whole batch; no partial mapping is returned.

    Args:
        language: Target language code that failed.
        cause: Underlying exception or a human-readable reason.
        retryable: ``True`` for transient failures (timeouts, connection
            errors, throttling, 5xx) where retrying the request may succeed.
    """

    def __init__(
        self,
        language: str,
        cause: BaseException | str | None = None,
        *,
        retryable: bool = False,
    ) -> None:
        reason = str(cause) if cause is not None else "unknown error"
        super().__init__(f"Error translating to {language}: {reason}")
        self.language = language
        self.cause = cause
        self.retryable = retryable


class EmptyTranslationError(TranslationError):
    """The backend reported success but returned zero translations."""

    def __init__(self, language: str) -> None:
        super().__init__(language, "no translations found in the response")
