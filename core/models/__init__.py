# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - entity.py: Entity request/response schemas
# - patch.py: JSON Patch operation schemas
# - result.py: Tagged handler result
#
# These models define the "contract" between API and clients.
# =============================================================================

from .entity import (
    NIL_UUID,
    CreateEntityRequest,
    EntityResponse,
    GetEntitiesRequest,
    SortDirection,
    UpdateEntityRequest,
    is_nil_uuid,
)

from .patch import (
    PatchDocument,
    PatchOperation,
    PatchOperationType,
)

from .result import (
    HandlerResult,
    ResultKind,
)

__all__ = [
    # Entity
    "NIL_UUID",
    "CreateEntityRequest",
    "EntityResponse",
    "GetEntitiesRequest",
    "SortDirection",
    "UpdateEntityRequest",
    "is_nil_uuid",
    # Patch
    "PatchDocument",
    "PatchOperation",
    "PatchOperationType",
    # Result
    "HandlerResult",
    "ResultKind",
]
