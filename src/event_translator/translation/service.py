"""Keyword-protected translation pipeline.

:func:`translate_protected` is the core algorithm; ``EventTranslationService``
wires it to event composition and the event store and is what the HTTP
layer and the CLI call.

Pipeline
--------
1. **Shield**: keywords → ``KW<i>PLH`` placeholders (``shield.py``).
2. **Translate**: one translator call per requested language, with the
   same shielded text.
3. **Unshield**: placeholders → keywords in each translated text.
4. **Aggregate**: ``{language: text}`` in request order.

Failure contract
----------------
All-or-nothing.  The first language that fails raises
:class:`~event_translator.errors.TranslationError` naming that language;
no partial mapping is ever returned and the caller stores nothing.  Any
other exception escaping a translator is wrapped so the failing language
is always identified.

Concurrency
-----------
With ``max_workers=1`` (the default) languages are translated one after
another in request order.  With more workers the calls are fanned out over
a ``ThreadPoolExecutor`` and joined before returning.  The first failure
is recorded in a shared ``_BatchAbort`` before it propagates: queued calls
are cancelled, and a worker that picks up another language after that
point skips the backend instead of calling it.  A call already on the wire
cannot be interrupted; it ends within the HTTP timeout and its result is
dropped.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait

from event_translator.errors import EventConflictError, TranslationError
from event_translator.models import EventDetails
from event_translator.store import EventStore
from event_translator.translation.composer import compose_event_text
from event_translator.translation.shield import shield_keywords, unshield_keywords
from event_translator.translation.translator import Translator

logger = logging.getLogger(__name__)


# ── Module-level helpers ──────────────────────────────────────────────────────


def _translate_one(translator: Translator, text: str, language: str) -> str:
    """Call the translator once, normalising failures to ``TranslationError``."""
    try:
        return translator.translate(text, language)
    except TranslationError:
        raise
    except Exception as exc:
        raise TranslationError(language, exc) from exc


def _translate_sequential(
    translator: Translator, text: str, languages: list[str]
) -> dict[str, str]:
    return {lang: _translate_one(translator, text, lang) for lang in languages}


class _BatchAborted(Exception):
    """Raised in place of a call skipped because another language failed."""


class _BatchAbort:
    """First failure of a fan-out batch, shared by its worker threads."""

    def __init__(self) -> None:
        self.error: TranslationError | None = None
        self._lock = threading.Lock()
        self._aborted = threading.Event()

    def is_set(self) -> bool:
        return self._aborted.is_set()

    def fail(self, error: TranslationError) -> None:
        with self._lock:
            if self.error is None:
                self.error = error
        # error is recorded before the flag so a skipped call implies one
        self._aborted.set()


def _translate_in_batch(
    translator: Translator, text: str, language: str, abort: _BatchAbort
) -> str:
    if abort.is_set():
        logger.debug("Skipping %s: batch already failed", language)
        raise _BatchAborted(language)
    try:
        return _translate_one(translator, text, language)
    except TranslationError as exc:
        abort.fail(exc)
        raise


def _translate_concurrent(
    translator: Translator, text: str, languages: list[str], max_workers: int
) -> dict[str, str]:
    abort = _BatchAbort()
    executor = ThreadPoolExecutor(
        max_workers=min(max_workers, len(languages)),
        thread_name_prefix="translate",
    )
    futures: dict[Future[str], str] = {
        executor.submit(_translate_in_batch, translator, text, lang, abort): lang
        for lang in languages
    }
    try:
        wait(futures, return_when=FIRST_EXCEPTION)
        if abort.error is not None:
            raise abort.error
        results = {futures[future]: future.result() for future in futures}
    except BaseException:
        executor.shutdown(wait=False, cancel_futures=True)
        raise
    executor.shutdown(wait=True)
    return {lang: results[lang] for lang in languages}


# ── Public API ────────────────────────────────────────────────────────────────


def translate_protected(
    text: str,
    keywords: list[str],
    languages: list[str],
    translator: Translator,
    *,
    max_workers: int = 1,
) -> dict[str, str]:
    """Translate *text* into every language in *languages*, keeping keywords.

    Args:
        text:        Source text.
        keywords:    Substrings to keep verbatim, in priority order.
        languages:   Target language codes.  An empty list returns ``{}``
                     without calling the translator.
        translator:  Translation capability.
        max_workers: Number of languages translated at the same time.

    Returns:
        Language → translated text with keywords restored, ordered like
        *languages*.

    Raises:
        TranslationError: For the first language that failed.
    """
    if not languages:
        return {}

    shielded, mapping = shield_keywords(text, keywords)

    if max_workers > 1 and len(languages) > 1:
        raw = _translate_concurrent(translator, shielded, languages, max_workers)
    else:
        raw = _translate_sequential(translator, shielded, languages)

    return {lang: unshield_keywords(translated, mapping) for lang, translated in raw.items()}


class EventTranslationService:
    """Composes, translates and stores events.

    Attributes:
        translator:   Translation capability shared by all requests.
        max_workers:  Per-event language fan-out; ``1`` keeps calls sequential.
    """

    def __init__(self, translator: Translator, *, max_workers: int = 1) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.translator = translator
        self.max_workers = max_workers

    def translate_event(self, event: EventDetails) -> dict[str, str]:
        """Return the per-language translations of *event*'s composed text.

        Raises:
            TranslationError: If any requested language fails.
        """
        source = compose_event_text(event)
        logger.debug(
            "Translating event %r into %d language(s) with %d keyword(s)",
            event.name,
            len(event.languages),
            len(event.keywords),
        )
        try:
            translations = translate_protected(
                source,
                event.keywords,
                event.languages,
                self.translator,
                max_workers=self.max_workers,
            )
        except TranslationError as exc:
            logger.error("Translation of event %r failed: %s", event.name, exc)
            raise
        logger.info("Translated event %r into %s", event.name, ", ".join(translations) or "-")
        return translations

    def create_event(self, event: EventDetails, store: EventStore) -> EventDetails:
        """Translate *event* and store it under its name.

        The name is checked before any translator call so a duplicate does
        not cost a round of translations; the store re-checks atomically on
        insert in case a concurrent request got there first.

        Returns:
            The stored event, including its translations.

        Raises:
            EventConflictError: If the name is already taken.
            TranslationError: If any language fails; nothing is stored.
        """
        if store.exists(event.name):
            logger.info("Event %r already exists", event.name)
            raise EventConflictError(event.name)

        translations = self.translate_event(event)
        return store.create(event.with_translations(translations))
