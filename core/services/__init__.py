# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .entity_service import EntityService
from .entity_handler import EntityRequestHandler, GET_ENTITY_ACTION

__all__ = [
    "EntityService",
    "EntityRequestHandler",
    "GET_ENTITY_ACTION",
]
