"""In-memory event store.

``EventStore`` is the interface the HTTP layer and the event service
consume; ``InMemoryEventStore`` is the only implementation.

Locking strategy:
    A single :class:`threading.Lock` guards the dict.  ``create`` performs
    the existence check and the insert under the same lock acquisition, so
    two concurrent creations of the same name cannot both succeed even
    though each request translated its event before reaching the store.
    The loser gets :class:`~event_translator.errors.EventConflictError` and
    the stored entry is left untouched.

Events are copied on the way in and on the way out; callers never hold a
reference into the store.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Protocol

from event_translator.errors import EventConflictError
from event_translator.models import EventDetails

logger = logging.getLogger(__name__)


class EventStore(Protocol):
    """Unique-keyed table of translated events."""

    def get(self, name: str) -> EventDetails | None: ...

    def exists(self, name: str) -> bool: ...

    def create(self, event: EventDetails) -> EventDetails: ...

    def list_names(self) -> list[str]: ...

    def __len__(self) -> int: ...


class InMemoryEventStore:
    """Thread-safe dict-backed :class:`EventStore`."""

    def __init__(self) -> None:
        self._events: dict[str, EventDetails] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> EventDetails | None:
        """Return a copy of the stored event, or ``None`` if *name* is unknown."""
        with self._lock:
            event = self._events.get(name)
        return copy.deepcopy(event) if event is not None else None

    def exists(self, name: str) -> bool:
        with self._lock:
            return name in self._events

    def create(self, event: EventDetails) -> EventDetails:
        """Insert *event* if no event with the same name exists.

        Returns:
            A copy of the stored event.

        Raises:
            EventConflictError: If the name is already taken.
        """
        stored = copy.deepcopy(event)
        with self._lock:
            if stored.name in self._events:
                logger.info("Rejected duplicate event %r", stored.name)
                raise EventConflictError(stored.name)
            self._events[stored.name] = stored
        logger.info("Stored event %r (%d translations)", stored.name, len(stored.translations))
        return copy.deepcopy(stored)

    def list_names(self) -> list[str]:
        with self._lock:
            return list(self._events)

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
