"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from src.adapters.http.auth_service import HttpRegistrationEndpoint
from src.adapters.reporting.log_reporter import LoggingErrorReporter
from src.api.forms import FormRegistry
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Registration form backend v1 - Validate and submit account registrations",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the auth service HTTP client on startup
    - Creates the form registry wired to the registration endpoint
    - Closes the HTTP client on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info("Auth service: %s", settings.auth_service_url)

    client = httpx.AsyncClient(
        base_url=settings.auth_service_url,
        timeout=settings.request_timeout_seconds,
    )
    endpoint = HttpRegistrationEndpoint(client, register_path=settings.register_path)

    # Store registry in app state for dependency injection
    app.state.forms = FormRegistry(
        endpoint=endpoint,
        destination=settings.post_registration_destination,
        error_reporter=LoggingErrorReporter(),
    )

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await client.aclose()
    logger.info("Auth service client closed")


app = FastAPI(
    title="signup-core",
    description="Registration form backend - Field validation and registration submission",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint.

    Returns 200 OK once startup has created the form registry.
    """
    forms = request.app.state.forms
    return {"status": "healthy", "open_forms": str(len(forms))}
