"""
Route registration entry point for the FastAPI application.

Keeps the public `register_routes(app, service, store)` API stable while
splitting implementation into focused router modules.
"""

from fastapi import FastAPI

from event_translator.api.routes import events, health
from event_translator.store import EventStore
from event_translator.translation.service import EventTranslationService


def register_routes(app: FastAPI, service: EventTranslationService, store: EventStore) -> None:
    """Register all API routes with the FastAPI app."""
    app.include_router(health.router(store))
    app.include_router(events.router(service, store))
