"""
FastAPI application for the event translation service.

This module builds and configures the FastAPI application. It sets up:
- CORS middleware from ``security.cors_origins``
- The translation backend, event service and in-memory event store
- A handler that turns request validation failures into 400 responses
- All API route endpoints

``create_app`` accepts an explicit translator and store so tests and
embedding applications can supply their own; the module-level ``app`` is
built from the loaded configuration and is what ``uvicorn`` serves.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from event_translator import __version__
from event_translator.api.models import describe_validation_errors
from event_translator.api.routes import register_routes
from event_translator.config import ServiceConfig
from event_translator.config import config as default_config
from event_translator.errors import EventValidationError
from event_translator.store import EventStore, InMemoryEventStore
from event_translator.translation.service import EventTranslationService
from event_translator.translation.translator import MicrosoftTranslator, Translator

logger = logging.getLogger(__name__)


async def _validation_error_handler(_request: Request, exc: RequestValidationError):
    detail = describe_validation_errors(exc.errors())
    logger.info("Rejected invalid request: %s", detail)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": detail})


async def _event_validation_error_handler(_request: Request, exc: EventValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


def create_app(
    cfg: ServiceConfig | None = None,
    *,
    translator: Translator | None = None,
    store: EventStore | None = None,
) -> FastAPI:
    """Build a fully wired FastAPI application.

    Args:
        cfg: Configuration; defaults to the module-level singleton.
        translator: Translation capability; defaults to a
            ``MicrosoftTranslator`` built from ``cfg.translator``.
        store: Event store; defaults to a fresh ``InMemoryEventStore``.
    """
    cfg = cfg or default_config
    if translator is None:
        translator = MicrosoftTranslator.from_settings(cfg.translator)
    if store is None:
        store = InMemoryEventStore()

    service = EventTranslationService(translator, max_workers=cfg.translator.max_workers)

    application = FastAPI(title="Event Translator", version=__version__)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.security.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(RequestValidationError, _validation_error_handler)
    application.add_exception_handler(EventValidationError, _event_validation_error_handler)

    register_routes(application, service, store)
    return application


app = create_app()


def start_server(host: str | None = None, port: int | None = None) -> None:
    """Serve ``app`` with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        app,
        host=host or default_config.server.host,
        port=port or default_config.server.port,
        log_level=default_config.logging.level.lower(),
    )


if __name__ == "__main__":
    start_server()
