"""Tests for the in-memory event store (event_translator/store.py)."""

import threading

import pytest

from event_translator.errors import EventConflictError
from event_translator.models import EventDetails
from event_translator.store import InMemoryEventStore


def _event(name: str = "Fest", **overrides) -> EventDetails:
    data = {
        "name": name,
        "location": "Lyon",
        "details": "Fun",
        "languages": ["fr"],
        "translations": {"fr": "Fête"},
        **overrides,
    }
    return EventDetails(**data)


@pytest.mark.unit
class TestInMemoryEventStore:
    def test_get_unknown_returns_none(self, store):
        assert store.get("missing") is None
        assert store.exists("missing") is False

    def test_create_then_get_returns_equal_event(self, store):
        event = _event()
        stored = store.create(event)
        assert stored == event
        assert store.get("Fest") == event
        assert store.exists("Fest") is True

    def test_duplicate_name_conflicts_and_keeps_original(self, store):
        store.create(_event(location="Lyon"))
        with pytest.raises(EventConflictError) as exc_info:
            store.create(_event(location="Paris"))
        assert exc_info.value.name == "Fest"
        assert store.get("Fest").location == "Lyon"

    def test_returned_events_are_copies(self, store):
        store.create(_event())
        fetched = store.get("Fest")
        fetched.translations["fr"] = "tampered"
        fetched.languages.append("de")
        again = store.get("Fest")
        assert again.translations == {"fr": "Fête"}
        assert again.languages == ["fr"]

    def test_caller_mutation_after_create_does_not_leak(self, store):
        event = _event()
        store.create(event)
        event.link_names["late"] = "https://late.example"
        assert store.get("Fest").link_names == {}

    def test_len_and_list_names(self, store):
        store.create(_event("a"))
        store.create(_event("b"))
        assert len(store) == 2
        assert store.list_names() == ["a", "b"]


@pytest.mark.unit
def test_concurrent_creates_of_same_name_have_one_winner():
    store = InMemoryEventStore()
    threads_count = 8
    start = threading.Barrier(threads_count)
    winners: list[str] = []
    conflicts: list[str] = []
    lock = threading.Lock()

    def worker(i: int) -> None:
        start.wait(timeout=5)
        try:
            store.create(_event(details=f"attempt {i}"))
        except EventConflictError:
            with lock:
                conflicts.append(str(i))
        else:
            with lock:
                winners.append(f"attempt {i}")

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert len(winners) == 1
    assert len(conflicts) == threads_count - 1
    assert store.get("Fest").details == winners[0]
