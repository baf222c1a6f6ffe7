# =============================================================================
# core/services/entity_service.py - Entity Backend
# =============================================================================
# Data access for entities. There is no store behind this service yet:
# - get_entities / get_entity find nothing
# - add_entity fabricates a new random id for every call
# - update_entity / patch_entity echo the target id
# - delete_entity has no effect
#
# A real backend keeps these signatures and signals a missing entity with
# EntityNotFoundError (or None from update/patch) and an inapplicable patch
# with PatchOperationError.
# =============================================================================

import logging
from uuid import UUID, uuid4

from core.models.entity import (
    CreateEntityRequest,
    EntityResponse,
    GetEntitiesRequest,
    UpdateEntityRequest,
    is_nil_uuid,
)
from core.models.patch import PatchDocument

logger = logging.getLogger(__name__)


def _require_id(entity_id: UUID | None) -> None:
    if is_nil_uuid(entity_id):
        raise ValueError("entity_id must be a non-zero UUID")


class EntityService:
    """
    Service for entity data access.

    Provides a clean interface between request handlers and storage.
    Every method rejects a missing request or a zero id with ValueError.
    """

    @staticmethod
    def get_entities(request: GetEntitiesRequest) -> list[EntityResponse] | None:
        """
        Get a page of entities.

        Args:
            request: Paging, search, filter, sort and shaping options

        Returns:
            Matching entities, or None when nothing matched

        Raises:
            ValueError: If request is None
        """
        if request is None:
            raise ValueError("request must not be None")

        logger.debug(
            f"Listing entities: page={request.page} page_size={request.page_size} "
            f"fields={request.selected_fields or 'all'}"
        )
        return None

    @staticmethod
    def get_entity(entity_id: UUID) -> EntityResponse | None:
        """
        Get an entity by ID.

        Returns:
            The entity, or None if no entity has this id

        Raises:
            ValueError: If entity_id is missing or the zero UUID
        """
        _require_id(entity_id)

        logger.debug(f"Fetching entity: {entity_id}")
        return None

    @staticmethod
    def add_entity(request: CreateEntityRequest) -> EntityResponse:
        """
        Create an entity.

        The id is always freshly generated, never taken from the request.

        Raises:
            ValueError: If request is None
        """
        if request is None:
            raise ValueError("request must not be None")

        entity = EntityResponse(
            id=uuid4(),
            name=request.name,
            description=request.description,
            attributes=request.attributes,
        )
        logger.debug(f"Created entity: {entity.id}")
        return entity

    @staticmethod
    def update_entity(entity_id: UUID, request: UpdateEntityRequest) -> EntityResponse | None:
        """
        Replace an entity.

        Returns:
            The updated entity, or None if no entity has this id

        Raises:
            ValueError: If entity_id is the zero UUID or request is None
        """
        _require_id(entity_id)
        if request is None:
            raise ValueError("request must not be None")

        logger.debug(f"Updating entity: {entity_id}")
        return EntityResponse(
            id=entity_id,
            name=request.name,
            description=request.description,
            attributes=request.attributes,
        )

    @staticmethod
    def patch_entity(entity_id: UUID, operations: PatchDocument) -> EntityResponse | None:
        """
        Apply a patch document to an entity.

        Returns:
            The updated entity, or None if no entity has this id

        Raises:
            ValueError: If entity_id is the zero UUID or operations is None
        """
        _require_id(entity_id)
        if operations is None:
            raise ValueError("operations must not be None")

        targets = sorted({op.target_field or "/" for op in operations})
        logger.debug(f"Patching entity {entity_id} with {len(operations)} operation(s) on {targets}")
        return EntityResponse(id=entity_id)

    @staticmethod
    def delete_entity(entity_id: UUID) -> None:
        """
        Delete an entity.

        Raises:
            ValueError: If entity_id is missing or the zero UUID
        """
        _require_id(entity_id)

        logger.debug(f"Deleting entity: {entity_id}")
