# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# These live outside the versioned API surface.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app import __version__
from app.config import settings
from app.versioning import supported_versions

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str
    api_versions: list[str]


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.ENVIRONMENT,
        version=__version__,
        api_versions=[str(version) for version in supported_versions()],
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    """
    return LivenessResponse(
        status="alive",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
