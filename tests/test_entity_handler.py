# =============================================================================
# tests/test_entity_handler.py - Entity Request Handler Tests
# =============================================================================
# Unit tests for EntityRequestHandler without any HTTP layer:
# - Presence checks short-circuit with bad_request
# - Placeholder backend results map to no_content / created / ok
# - Not-found and unprocessable results surface from a backend that
#   reports them
#
# Run with: poetry run pytest tests/test_entity_handler.py -v
# =============================================================================

import logging
from uuid import UUID, uuid4

import pytest

from app.exceptions import EntityNotFoundError, PatchOperationError
from core.models import (
    CreateEntityRequest,
    EntityResponse,
    GetEntitiesRequest,
    PatchOperation,
    PatchOperationType,
    ResultKind,
    UpdateEntityRequest,
)
from core.services.entity_handler import GET_ENTITY_ACTION, EntityRequestHandler
from core.services.entity_service import EntityService


def replace_name(value: str = "Dave") -> PatchOperation:
    return PatchOperation(op=PatchOperationType.REPLACE, path="/name", value=value)


# =============================================================================
# Backends reporting the reserved outcomes
# =============================================================================

class StoredEntityService(EntityService):
    """Backend holding exactly one entity."""

    stored = EntityResponse(id=UUID("550e8400-e29b-41d4-a716-446655440000"), name="Acme")

    @staticmethod
    def get_entities(request):
        return [StoredEntityService.stored]

    @staticmethod
    def get_entity(entity_id):
        if entity_id == StoredEntityService.stored.id:
            return StoredEntityService.stored
        return None


class MissingEntityService(EntityService):
    """Backend where every id is unknown."""

    @staticmethod
    def update_entity(entity_id, request):
        raise EntityNotFoundError(str(entity_id))

    @staticmethod
    def patch_entity(entity_id, operations):
        return None

    @staticmethod
    def delete_entity(entity_id):
        raise EntityNotFoundError(str(entity_id))


class RejectingPatchService(EntityService):
    """Backend that cannot apply any patch."""

    @staticmethod
    def patch_entity(entity_id, operations):
        raise PatchOperationError(operations[0].path, "field does not exist")


# =============================================================================
# List
# =============================================================================

class TestListEntities:
    """Tests for EntityRequestHandler.list_entities."""

    def test_returns_bad_request_when_request_is_none(self, handler):
        # Act
        result = handler.list_entities(None)

        # Assert
        assert result.kind == ResultKind.BAD_REQUEST
        assert result.status_code == 400
        assert result.payload is None

    def test_returns_no_content_when_no_entities_exist(self, handler):
        # Arrange
        request = GetEntitiesRequest()

        # Act
        result = handler.list_entities(request)

        # Assert
        assert result.kind == ResultKind.NO_CONTENT
        assert result.status_code == 204

    def test_returns_ok_with_entities_from_backend(self):
        handler = EntityRequestHandler(StoredEntityService)

        result = handler.list_entities(GetEntitiesRequest(search="acme"))

        assert result.kind == ResultKind.OK
        assert result.payload == [StoredEntityService.stored]


# =============================================================================
# Get by id
# =============================================================================

class TestGetEntity:
    """Tests for EntityRequestHandler.get_entity."""

    def test_returns_bad_request_when_id_is_nil(self, handler, nil_id):
        result = handler.get_entity(nil_id)

        assert result.kind == ResultKind.BAD_REQUEST

    def test_returns_bad_request_when_id_is_none(self, handler):
        result = handler.get_entity(None)

        assert result.kind == ResultKind.BAD_REQUEST

    def test_returns_no_content_when_no_entities_exist(self, handler, entity_id):
        result = handler.get_entity(entity_id)

        assert result.kind == ResultKind.NO_CONTENT
        assert result.payload is None

    def test_returns_ok_with_stored_entity(self):
        handler = EntityRequestHandler(StoredEntityService)

        result = handler.get_entity(StoredEntityService.stored.id)

        assert result.kind == ResultKind.OK
        assert result.payload.name == "Acme"


# =============================================================================
# Create
# =============================================================================

class TestCreateEntity:
    """Tests for EntityRequestHandler.create_entity."""

    def test_returns_bad_request_when_request_is_none(self, handler):
        result = handler.create_entity(None)

        assert result.kind == ResultKind.BAD_REQUEST

    def test_returns_created_when_request_is_successful(self, handler):
        # Arrange
        request = CreateEntityRequest()

        # Act
        result = handler.create_entity(request)

        # Assert
        assert result.kind == ResultKind.CREATED
        assert result.status_code == 201
        assert isinstance(result.payload, EntityResponse)
        assert result.payload.id.int != 0

    def test_location_points_to_get_entity_with_new_id(self, handler):
        result = handler.create_entity(CreateEntityRequest(name="Acme"))

        assert result.location_action == GET_ENTITY_ACTION
        assert result.location_params == {"entity_id": str(result.payload.id)}

    def test_every_call_generates_a_new_id(self, handler):
        request = CreateEntityRequest(name="Acme")

        first = handler.create_entity(request)
        second = handler.create_entity(request)

        assert first.payload.id != second.payload.id


# =============================================================================
# Full update
# =============================================================================

class TestReplaceEntity:
    """Tests for EntityRequestHandler.replace_entity."""

    def test_returns_bad_request_when_request_is_none(self, handler, entity_id):
        result = handler.replace_entity(entity_id, None)

        assert result.kind == ResultKind.BAD_REQUEST

    def test_returns_bad_request_when_id_is_nil(self, handler, nil_id):
        result = handler.replace_entity(nil_id, UpdateEntityRequest(name="Acme"))

        assert result.kind == ResultKind.BAD_REQUEST

    def test_returns_ok_with_updated_entity(self, handler, entity_id):
        result = handler.replace_entity(entity_id, UpdateEntityRequest(name="Acme"))

        assert result.kind == ResultKind.OK
        assert result.payload.id == entity_id
        assert result.payload.name == "Acme"

    def test_returns_not_found_when_backend_reports_missing_entity(self, entity_id):
        handler = EntityRequestHandler(MissingEntityService)

        result = handler.replace_entity(entity_id, UpdateEntityRequest())

        assert result.kind == ResultKind.NOT_FOUND
        assert result.status_code == 404


# =============================================================================
# Patch
# =============================================================================

class TestPatchEntity:
    """Tests for EntityRequestHandler.patch_entity."""

    def test_returns_bad_request_when_patch_document_is_none(self, handler, entity_id):
        result = handler.patch_entity(entity_id, None)

        assert result.kind == ResultKind.BAD_REQUEST

    def test_returns_bad_request_when_id_is_nil(self, handler, nil_id):
        result = handler.patch_entity(nil_id, [replace_name()])

        assert result.kind == ResultKind.BAD_REQUEST

    def test_empty_patch_document_is_accepted(self, handler, entity_id):
        result = handler.patch_entity(entity_id, [])

        assert result.kind == ResultKind.OK
        assert result.payload.id == entity_id

    def test_returns_not_found_when_backend_returns_nothing(self, entity_id):
        handler = EntityRequestHandler(MissingEntityService)

        result = handler.patch_entity(entity_id, [replace_name()])

        assert result.kind == ResultKind.NOT_FOUND

    def test_returns_unprocessable_when_patch_cannot_be_applied(self, entity_id):
        handler = EntityRequestHandler(RejectingPatchService)

        result = handler.patch_entity(entity_id, [replace_name()])

        assert result.kind == ResultKind.UNPROCESSABLE
        assert result.status_code == 422


# =============================================================================
# Delete
# =============================================================================

class TestDeleteEntity:
    """Tests for EntityRequestHandler.delete_entity."""

    def test_returns_bad_request_when_id_is_nil(self, handler, nil_id):
        result = handler.delete_entity(nil_id)

        assert result.kind == ResultKind.BAD_REQUEST

    def test_returns_no_content_when_delete_succeeds(self, handler, entity_id):
        result = handler.delete_entity(entity_id)

        assert result.kind == ResultKind.NO_CONTENT

    def test_returns_not_found_when_backend_reports_missing_entity(self, entity_id):
        handler = EntityRequestHandler(MissingEntityService)

        result = handler.delete_entity(entity_id)

        assert result.kind == ResultKind.NOT_FOUND


# =============================================================================
# Placeholder backend guards
# =============================================================================

class TestEntityServiceGuards:
    """The backend rejects what the handler filters out."""

    def test_get_entities_rejects_none(self):
        with pytest.raises(ValueError):
            EntityService.get_entities(None)

    @pytest.mark.parametrize("entity_id", [None, UUID(int=0)])
    def test_get_entity_rejects_missing_id(self, entity_id):
        with pytest.raises(ValueError):
            EntityService.get_entity(entity_id)

    def test_update_entity_rejects_none_request(self):
        with pytest.raises(ValueError):
            EntityService.update_entity(uuid4(), None)

    def test_patch_entity_rejects_none_document(self):
        with pytest.raises(ValueError):
            EntityService.patch_entity(uuid4(), None)

    def test_delete_entity_rejects_nil_id(self):
        with pytest.raises(ValueError):
            EntityService.delete_entity(UUID(int=0))

    def test_add_entity_does_not_take_id_from_payload(self):
        request = CreateEntityRequest(name="Acme", attributes={"id": "fixed"})

        entity = EntityService.add_entity(request)

        assert entity.name == "Acme"
        assert entity.attributes == {"id": "fixed"}
        assert str(entity.id) != "fixed"


class TestEntityServiceLogging:
    """Backend debug logs describe what a call asked for."""

    def test_list_logs_selected_fields(self, caplog):
        caplog.set_level(logging.DEBUG, logger="core.services.entity_service")

        EntityService.get_entities(GetEntitiesRequest(select="name, description"))

        assert "fields=['name', 'description']" in caplog.text

    def test_list_without_select_logs_all_fields(self, caplog):
        caplog.set_level(logging.DEBUG, logger="core.services.entity_service")

        EntityService.get_entities(GetEntitiesRequest())

        assert "fields=all" in caplog.text

    def test_patch_logs_target_fields(self, caplog, entity_id):
        caplog.set_level(logging.DEBUG, logger="core.services.entity_service")
        operations = [
            PatchOperation(op=PatchOperationType.REPLACE, path="/name", value="Dave"),
            PatchOperation(op=PatchOperationType.ADD, path="/attributes/region", value="emea"),
            PatchOperation(op=PatchOperationType.REMOVE, path="/name"),
        ]

        EntityService.patch_entity(entity_id, operations)

        assert "3 operation(s) on ['attributes', 'name']" in caplog.text
