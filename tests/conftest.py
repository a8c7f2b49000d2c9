"""
Shared pytest fixtures for the event translator test suite.

This module provides fixtures that are automatically available to all test files:
- A recording fake translator
- A fresh in-memory event store
- FastAPI TestClient instances wired to the fakes

No fixture touches the network; ``MicrosoftTranslator`` is tested by
patching ``requests.post`` directly in its own test module.
"""

import pytest
from fastapi.testclient import TestClient

from event_translator.api.server import create_app
from event_translator.config import ServiceConfig
from event_translator.models import EventDetails
from event_translator.store import InMemoryEventStore
from tests.constants import FEST_EVENT
from tests.fakes import FakeTranslator

# ============================================================================
# DOMAIN FIXTURES
# ============================================================================


@pytest.fixture
def fake_translator() -> FakeTranslator:
    """A translator that always succeeds."""
    return FakeTranslator()


@pytest.fixture
def store() -> InMemoryEventStore:
    """An empty event store."""
    return InMemoryEventStore()


@pytest.fixture
def fest_event() -> EventDetails:
    """The minimal ``Fest`` event as a dataclass."""
    return EventDetails.from_dict(FEST_EVENT)


# ============================================================================
# FASTAPI TEST CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def service_config() -> ServiceConfig:
    """Default configuration, independent of any local server.ini."""
    return ServiceConfig()


@pytest.fixture
def test_client(service_config, fake_translator, store) -> TestClient:
    """
    Create a FastAPI TestClient backed by ``fake_translator`` and ``store``.

    Example:
        def test_get(test_client):
            response = test_client.get("/event", params={"type": "Fest"})
            assert response.status_code == 404
    """
    app = create_app(service_config, translator=fake_translator, store=store)
    return TestClient(app)
