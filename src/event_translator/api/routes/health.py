"""Health and root endpoints.

Provides the root ``/`` endpoint (API identity and version) and the
``/health`` endpoint (liveness check with the stored event count).

The version string is read from ``event_translator.__version__``, which
is resolved at import time via ``importlib.metadata``.
"""

from fastapi import APIRouter

from event_translator import __version__
from event_translator.store import EventStore


def router(store: EventStore) -> APIRouter:
    """Build the health router."""
    api = APIRouter()

    @api.get("/")
    async def root():
        """Root endpoint showing API identity and current version."""
        return {"message": "Event Translator API", "version": __version__}

    @api.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok", "events": len(store)}

    return api
