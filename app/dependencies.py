# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends

from core.services.entity_handler import EntityRequestHandler
from core.services.entity_service import EntityService


def get_entity_service() -> type[EntityService]:
    """
    Get the entity backend.

    Override with app.dependency_overrides to plug in another backend.
    """
    return EntityService


def get_entity_handler(
    service: Annotated[type[EntityService], Depends(get_entity_service)],
) -> EntityRequestHandler:
    """Build the per-request entity handler."""
    return EntityRequestHandler(service)


# Type alias for dependency injection
EntityHandlerDep = Annotated[EntityRequestHandler, Depends(get_entity_handler)]
