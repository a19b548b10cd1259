"""
FastAPI application for the support chat widget.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from support_chat.chat import ChatService, create_service
from support_chat.config.log_setup import configure_logging
from support_chat.config.settings import Settings, get_settings
from support_chat.errors import StoreError, SupportChatError

from .routes import health_router, router

logger = logging.getLogger(__name__)


def create_app(
    service: ChatService | None = None,
    settings: Settings | None = None,
    init_store: bool = True,
) -> FastAPI:
    """
    Build the API application.

    Args:
        service: Prebuilt chat service. Built from settings when None.
        settings: Application settings. Defaults to the global settings.
        init_store: Create the schema and seed FAQs on startup, and close
            the store on shutdown.

    Returns:
        Configured FastAPI app.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if service is None:
        service = create_service(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if init_store:
            await service.store.init_schema()
            await service.store.seed_faqs()
        logger.info(
            f"Support chat API ready "
            f"(database: {'configured' if settings.database_url else 'missing'}, "
            f"LLM key: {'configured' if settings.has_llm_credentials else 'missing'})"
        )
        yield
        if init_store:
            await service.store.close()

    app = FastAPI(title="ShopEase Support Chat", version="0.1.0", lifespan=lifespan)
    app.state.chat_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)

    @app.exception_handler(SupportChatError)
    async def handle_support_chat_error(request: Request, exc: SupportChatError):
        if isinstance(exc, StoreError) or exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
            return JSONResponse(
                status_code=500,
                content={"error": "An error occurred while processing your request. Please try again."},
            )
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "An unexpected error occurred"})

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon() -> Response:
        return Response(status_code=204)

    app.include_router(health_router)
    app.include_router(router)
    # Paths used by the original web frontend
    app.include_router(health_router, prefix="/api")
    app.include_router(router, prefix="/api")

    return app
