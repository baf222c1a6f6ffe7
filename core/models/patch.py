# =============================================================================
# core/models/patch.py - JSON Patch Schemas
# =============================================================================
# A patch document is an ordered list of RFC 6902 operations, e.g.
#
#   [
#       {"op": "replace", "path": "/name", "value": "Dave"},
#       {"op": "remove", "path": "/description"}
#   ]
#
# Only the shape of each operation is validated here. Whether an operation
# can be applied to a given entity is the backend's decision.
# =============================================================================

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PatchOperationType(str, Enum):
    """Operations defined by RFC 6902."""
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


# Operations that read from a second location
SOURCE_OPERATIONS = frozenset({PatchOperationType.MOVE, PatchOperationType.COPY})

# A JSON pointer: empty (whole document) or "/"-prefixed tokens
JSON_POINTER_PATTERN = r"^(/[^/]*)*$"


class PatchOperation(BaseModel):
    """One edit in a patch document."""

    op: PatchOperationType = Field(
        ...,
        description="Operation to perform"
    )

    path: str = Field(
        ...,
        pattern=JSON_POINTER_PATTERN,
        description="JSON pointer to the target location",
        examples=["/name"],
    )

    value: Any = Field(
        default=None,
        description="Value for add, replace and test"
    )

    from_: str | None = Field(
        default=None,
        alias="from",
        pattern=JSON_POINTER_PATTERN,
        description="Source location for move and copy"
    )

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def source_required_for_move_and_copy(self) -> "PatchOperation":
        if self.op in SOURCE_OPERATIONS and self.from_ is None:
            raise ValueError(f"'{self.op.value}' operations require 'from'")
        return self

    @property
    def target_field(self) -> str | None:
        """
        Top-level field addressed by the path.

        Example: "/attributes/region" -> "attributes"
        """
        if not self.path:
            return None
        return self.path.split("/")[1].replace("~1", "/").replace("~0", "~")


# Type alias for a whole patch document
PatchDocument = list[PatchOperation]
