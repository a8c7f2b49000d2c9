"""Event endpoints.

``POST /event`` validates the body, runs the keyword-protected translation
pipeline and stores the result.  ``GET /event?type=<name>`` returns a
stored event.

Status codes
------------
- 201: event translated and stored; body is the stored event
- 400: body failed validation (see ``server.py`` for the handler)
- 404: no event with that name
- 409: an event with that name already exists
- 500: translation failed for at least one language; nothing stored.
  Transient backend failures (timeouts, throttling, 5xx) also carry a
  ``Retry-After`` header

Handlers are plain ``def`` so FastAPI runs them in its thread pool; the
translator makes blocking HTTP calls.
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from event_translator.api.models import (
    ErrorResponse,
    EventRequest,
    EventResponse,
    MessageResponse,
)
from event_translator.errors import EventConflictError, TranslationError
from event_translator.models import validate_event
from event_translator.store import EventStore
from event_translator.translation.service import EventTranslationService

logger = logging.getLogger(__name__)

RETRY_AFTER_SECONDS = 1


def router(service: EventTranslationService, store: EventStore) -> APIRouter:
    """Build the events router bound to *service* and *store*."""
    api = APIRouter()

    @api.post(
        "/event",
        status_code=status.HTTP_201_CREATED,
        response_model=EventResponse,
        responses={
            400: {"model": ErrorResponse},
            409: {"model": MessageResponse},
            500: {"model": ErrorResponse},
        },
    )
    def post_event(request: EventRequest):
        """Translate and store a new event."""
        event = request.to_event()
        validate_event(event)

        try:
            stored = service.create_event(event, store)
        except EventConflictError:
            return JSONResponse(
                status_code=status.HTTP_409_CONFLICT,
                content={"message": "Event already exists"},
            )
        except TranslationError as exc:
            headers = {"Retry-After": str(RETRY_AFTER_SECONDS)} if exc.retryable else None
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": str(exc)},
                headers=headers,
            )

        return EventResponse.from_event(stored)

    @api.get(
        "/event",
        response_model=EventResponse,
        responses={404: {"model": ErrorResponse}},
    )
    def get_event(type: str = ""):  # noqa: A002 - query parameter name is part of the API
        """Return the stored event named by the ``type`` query parameter."""
        event = store.get(type)
        if event is None:
            logger.debug("Event %r not found", type)
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": "Event not found"},
            )
        return EventResponse.from_event(event)

    return api
