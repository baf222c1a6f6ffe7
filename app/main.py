# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Entities API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
#   poetry run entities-api
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from app.config import settings
from app.exceptions import (
    EntityApiException,
    entity_api_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.openapi import document_url, install_versioned_docs
from app.routers import entities, health
from app.versioning import (
    SUPPORTED_VERSIONS_HEADER,
    VERSIONED_PREFIX,
    default_version,
    format_supported_versions,
    resolve_api_version,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Nothing to connect or clean up; startup and shutdown are logged.
    """
    logger.info(f"Starting {settings.API_TITLE} in {settings.ENVIRONMENT} mode")
    logger.info(f"Supported API versions: {format_supported_versions()}")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info(f"Shutting down {settings.API_TITLE}")


# =============================================================================
# Middleware
# =============================================================================

async def report_api_versions(request: Request, call_next):
    """Advertise the supported API versions on every response."""
    response = await call_next(request)
    if settings.REPORT_API_VERSIONS:
        response.headers[SUPPORTED_VERSIONS_HEADER] = format_supported_versions()
    return response


# =============================================================================
# Root Endpoint
# =============================================================================

async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": settings.API_TITLE,
        "version": str(default_version()),
        "api_versions": format_supported_versions(),
        "docs": settings.DOCS_URL,
        "openapi": document_url(default_version()),
        "health": "/health",
    }


# =============================================================================
# Application Factory
# =============================================================================

def create_app() -> FastAPI:
    """
    Build the FastAPI application from the current settings.

    Documents and Swagger UI pages are registered per supported version,
    so FastAPI's single built-in document is turned off.
    """
    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=str(default_version()),
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Entities",
                "description": "Create, read, update and delete entities",
            },
            {
                "name": "Health",
                "description": "API health and liveness checks",
            },
        ],
    )

    # CORS middleware - allows cross-origin requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.HTTPS_REDIRECT:
        app.add_middleware(HTTPSRedirectMiddleware)

    app.middleware("http")(report_api_versions)

    # Exception handlers
    app.add_exception_handler(EntityApiException, entity_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Health check endpoints
    app.include_router(
        health.router,
        tags=["Health"]
    )

    # Entity endpoints (versioned)
    app.include_router(
        entities.router,
        prefix=f"{VERSIONED_PREFIX}/entities",
        tags=["Entities"],
        dependencies=[Depends(resolve_api_version)],
    )

    app.add_api_route("/", root, methods=["GET"], tags=["Root"])

    install_versioned_docs(app)

    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn on API_HOST:API_PORT."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG and settings.is_development,
    )
