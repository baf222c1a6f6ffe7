# =============================================================================
# core/models/entity.py - Entity Schemas
# =============================================================================
# These models define the API contract for entity operations:
# - GetEntitiesRequest: Query parameters for listing entities
# - CreateEntityRequest: Payload for creating an entity
# - UpdateEntityRequest: Payload for a full update (and target of a patch)
# - EntityResponse: Output when returning an entity to clients
#
# All request fields are optional: the API only checks that a request is
# present, never what it contains.
# =============================================================================

from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

# The all-zero UUID, used as the "no identifier supplied" sentinel
NIL_UUID = UUID(int=0)


def is_nil_uuid(value: UUID | None) -> bool:
    """Check whether an identifier is missing or the all-zero UUID."""
    return value is None or value == NIL_UUID


class SortDirection(str, Enum):
    """Sort order for list queries."""
    ASC = "asc"
    DESC = "desc"


class GetEntitiesRequest(BaseModel):
    """
    Query parameters for a page of entities.

    Carries paging, searching, filtering, sorting and shaping options.
    The placeholder backend accepts them but does not interpret them.

    Example:
        GET /api/v1.0/entities?page=2&page_size=25&search=acme&sort_by=name
    """

    page: int = Field(
        default=1,
        ge=1,
        description="Page number (1-based)"
    )

    page_size: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Entities per page"
    )

    search: str | None = Field(
        default=None,
        description="Free-text search term"
    )

    filter_by: str | None = Field(
        default=None,
        description="Filter expression"
    )

    sort_by: str | None = Field(
        default=None,
        description="Field to sort on"
    )

    sort_direction: SortDirection = Field(
        default=SortDirection.ASC,
        description="Sort order"
    )

    # Data shaping: which fields to return
    select: str | None = Field(
        default=None,
        description="Comma-separated list of fields to include in each entity"
    )

    @property
    def selected_fields(self) -> list[str]:
        """
        Parse `select` into a list of field names.

        Example: "name, description" -> ["name", "description"]
        """
        if not self.select:
            return []
        return [field.strip() for field in self.select.split(",") if field.strip()]


class CreateEntityRequest(BaseModel):
    """Payload for creating an entity."""

    name: str | None = Field(
        default=None,
        description="Optional human-readable name"
    )

    description: str | None = Field(
        default=None,
        description="Optional description"
    )

    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Free-form entity attributes"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"name": "Acme Ltd", "attributes": {"region": "emea"}},
                {},
            ]
        }
    }


class UpdateEntityRequest(BaseModel):
    """
    Payload for fully replacing an entity.

    Also the document a JSON Patch is applied to, so patch paths
    such as "/name" address these fields.
    """

    name: str | None = Field(
        default=None,
        description="Replacement name"
    )

    description: str | None = Field(
        default=None,
        description="Replacement description"
    )

    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Replacement attributes"
    )


class EntityResponse(BaseModel):
    """
    Schema for returning an entity to clients.

    Returned by:
    - GET /entities (as a list)
    - GET /entities/{id}
    - POST /entities
    - PUT /entities/{id}
    - PATCH /entities/{id}

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "name": "Acme Ltd",
            "description": null,
            "attributes": {}
        }
    """

    id: UUID = Field(
        ...,
        description="Unique entity identifier"
    )

    name: str | None = Field(
        default=None,
        description="Human-readable name"
    )

    description: str | None = Field(
        default=None,
        description="Description"
    )

    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Free-form entity attributes"
    )

    @field_validator("id")
    @classmethod
    def id_must_not_be_nil(cls, value: UUID) -> UUID:
        if value == NIL_UUID:
            raise ValueError("Entity id must not be the all-zero UUID")
        return value
