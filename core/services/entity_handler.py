# =============================================================================
# core/services/entity_handler.py - Entity Request Handling
# =============================================================================
# One method per entity operation. Each takes the already-bound request
# values (any of which may be None), checks that the required ones are
# present, delegates to the entity backend and returns a HandlerResult.
#
# Requests and responses stay out of here: app/routers/entities.py maps the
# results to HTTP responses.
# =============================================================================

import logging
from uuid import UUID

from app.exceptions import EntityNotFoundError, PatchOperationError
from core.models.entity import (
    CreateEntityRequest,
    GetEntitiesRequest,
    UpdateEntityRequest,
    is_nil_uuid,
)
from core.models.patch import PatchDocument
from core.models.result import HandlerResult
from core.services.entity_service import EntityService

logger = logging.getLogger(__name__)

# Operation the Location header of a created entity points to
GET_ENTITY_ACTION = "get_entity"


class EntityRequestHandler:
    """
    Handles requests for the entity resource.

    Input checks happen before the backend is called; a failed check
    short-circuits with a bad_request result.
    """

    def __init__(self, service: type[EntityService] = EntityService):
        self.service = service

    def list_entities(self, request: GetEntitiesRequest | None) -> HandlerResult:
        """Get a page of entities; no_content when nothing matched."""
        if request is None:
            logger.warning("List rejected: no request")
            return HandlerResult.bad_request()

        entities = self.service.get_entities(request)

        if not entities:
            return HandlerResult.no_content()

        return HandlerResult.ok(entities)

    def get_entity(self, entity_id: UUID | None) -> HandlerResult:
        """Get one entity; no_content when the id matched nothing."""
        if is_nil_uuid(entity_id):
            logger.warning("Get rejected: zero entity id")
            return HandlerResult.bad_request()

        entity = self.service.get_entity(entity_id)

        if entity is None:
            return HandlerResult.no_content()

        return HandlerResult.ok(entity)

    def create_entity(self, request: CreateEntityRequest | None) -> HandlerResult:
        """Create an entity; the result locates it via get_entity."""
        if request is None:
            logger.warning("Create rejected: no request body")
            return HandlerResult.bad_request()

        entity = self.service.add_entity(request)
        logger.info(f"Created entity: {entity.id}")

        return HandlerResult.created(entity, GET_ENTITY_ACTION, entity_id=entity.id)

    def replace_entity(
        self,
        entity_id: UUID | None,
        request: UpdateEntityRequest | None,
    ) -> HandlerResult:
        """Fully update an entity."""
        if request is None or is_nil_uuid(entity_id):
            logger.warning(f"Update rejected: entity_id={entity_id} body_present={request is not None}")
            return HandlerResult.bad_request()

        try:
            entity = self.service.update_entity(entity_id, request)
        except EntityNotFoundError:
            return HandlerResult.not_found()

        if entity is None:
            return HandlerResult.not_found()

        return HandlerResult.ok(entity)

    def patch_entity(
        self,
        entity_id: UUID | None,
        operations: PatchDocument | None,
    ) -> HandlerResult:
        """Fully or partially update an entity with a patch document."""
        if operations is None or is_nil_uuid(entity_id):
            logger.warning(f"Patch rejected: entity_id={entity_id} document_present={operations is not None}")
            return HandlerResult.bad_request()

        try:
            entity = self.service.patch_entity(entity_id, operations)
        except EntityNotFoundError:
            return HandlerResult.not_found()
        except PatchOperationError as e:
            logger.info(f"Patch of entity {entity_id} not applicable: {e.message}")
            return HandlerResult.unprocessable()

        if entity is None:
            return HandlerResult.not_found()

        return HandlerResult.ok(entity)

    def delete_entity(self, entity_id: UUID | None) -> HandlerResult:
        """Delete an entity."""
        if is_nil_uuid(entity_id):
            logger.warning("Delete rejected: zero entity id")
            return HandlerResult.bad_request()

        try:
            self.service.delete_entity(entity_id)
        except EntityNotFoundError:
            return HandlerResult.not_found()

        return HandlerResult.no_content()
