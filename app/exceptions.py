# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Client-input failures (unbindable body or query, malformed identifiers)
# answer with a bare 400 and no body. Everything else that reaches a handler
# here is rendered as {"detail", "code", ["suggestion"], ["details"]}.
# =============================================================================

import logging
from typing import Any

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import settings

logger = logging.getLogger(__name__)


class EntityApiException(Exception):
    """
    Base exception for the Entities API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "ENTITY_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Entity Exceptions
# =============================================================================

class EntityNotFoundError(EntityApiException):
    """Raised by a backend when an entity ID doesn't exist."""

    def __init__(self, entity_id: str):
        super().__init__(
            message=f"Entity not found: {entity_id}",
            code="ENTITY_NOT_FOUND",
            status_code=404,
            suggestion="Check that the entity id is correct",
            details={"entity_id": entity_id}
        )


class PatchOperationError(EntityApiException):
    """Raised by a backend when a patch document cannot be applied."""

    def __init__(self, path: str, error: str):
        super().__init__(
            message=f"Unable to apply patch operation at '{path}': {error}",
            code="PATCH_UNPROCESSABLE",
            status_code=422,
            suggestion="Check that each operation targets an existing field of the entity",
            details={"path": path, "error": error}
        )


# =============================================================================
# Versioning Exceptions
# =============================================================================

class UnsupportedApiVersionError(EntityApiException):
    """Raised when the version segment of the URL is not a supported API version."""

    def __init__(self, requested: str, supported: list[str]):
        super().__init__(
            message=f"Unsupported API version: {requested}",
            code="UNSUPPORTED_API_VERSION",
            status_code=400,
            suggestion=f"Use one of the supported versions: {', '.join(supported)}",
            details={"requested_version": requested, "supported_versions": supported}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def entity_api_exception_handler(
    request: Request,
    exc: EntityApiException
) -> JSONResponse:
    """
    Convert EntityApiException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> Response:
    """
    Handle request binding errors.

    A body, query or path value that cannot be bound is a bad request;
    the response carries no error payload.
    """
    logger.warning(
        f"Unbindable request {request.method} {request.url.path}: "
        f"{len(exc.errors())} validation error(s)"
    )
    return Response(status_code=400)


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    In development with DEBUG on, the exception type and message are
    included in the response.

    Registered for Exception, this runs outside every user middleware,
    so the supported-versions header is added here.
    """
    from app.versioning import SUPPORTED_VERSIONS_HEADER, format_supported_versions

    logger.exception(f"Unexpected error: {exc}")
    content: dict[str, Any] = {
        "detail": "An unexpected error occurred",
        "code": "INTERNAL_ERROR",
    }
    if settings.DEBUG and settings.is_development:
        content["details"] = {"type": type(exc).__name__, "error": str(exc)}

    headers: dict[str, str] = {}
    if settings.REPORT_API_VERSIONS:
        headers[SUPPORTED_VERSIONS_HEADER] = format_supported_versions()

    return JSONResponse(status_code=500, content=content, headers=headers)
