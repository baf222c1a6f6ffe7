# =============================================================================
# core/models/result.py - Handler Result Schema
# =============================================================================
# Every entity request handler returns a HandlerResult: one variant per
# response the API can declare, plus the payload to send.
#
# The router layer turns it into an HTTP response:
#   result = handler.get_entity(entity_id)
#   result.status_code   -> 200 / 204 / 400
#   result.payload       -> EntityResponse or None
#
# not_found, unprocessable and server_error are part of the contract even
# though the placeholder backend never leads to them.
# =============================================================================

from enum import Enum
from http import HTTPStatus
from typing import Any

from pydantic import BaseModel, Field


class ResultKind(str, Enum):
    """
    Possible outcomes of an entity request.

    - ok: Success with a payload (200)
    - created: Entity created, payload plus location (201)
    - no_content: Success without a payload (204)
    - bad_request: Missing or malformed input (400)
    - not_found: No entity matched the identifier (404)
    - unprocessable: Patch document could not be applied (422)
    - server_error: Unhandled internal fault (500)
    """
    OK = "ok"
    CREATED = "created"
    NO_CONTENT = "no_content"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    UNPROCESSABLE = "unprocessable"
    SERVER_ERROR = "server_error"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES: dict[ResultKind, int] = {
    ResultKind.OK: HTTPStatus.OK,
    ResultKind.CREATED: HTTPStatus.CREATED,
    ResultKind.NO_CONTENT: HTTPStatus.NO_CONTENT,
    ResultKind.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
    ResultKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ResultKind.UNPROCESSABLE: HTTPStatus.UNPROCESSABLE_ENTITY,
    ResultKind.SERVER_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
}


class HandlerResult(BaseModel):
    """
    Outcome of one entity request.

    For `created` results, `location_action` names the operation that
    fetches the new entity and `location_params` holds its arguments.
    """

    kind: ResultKind = Field(
        ...,
        description="Which declared response this is"
    )

    payload: Any = Field(
        default=None,
        description="Entity or list of entities to return, if any"
    )

    location_action: str | None = Field(
        default=None,
        description="Operation name the Location header points to"
    )

    location_params: dict[str, str] = Field(
        default_factory=dict,
        description="Path parameters for the Location operation"
    )

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def ok(cls, payload: Any) -> "HandlerResult":
        return cls(kind=ResultKind.OK, payload=payload)

    @classmethod
    def created(cls, payload: Any, action: str, **params: Any) -> "HandlerResult":
        return cls(
            kind=ResultKind.CREATED,
            payload=payload,
            location_action=action,
            location_params={name: str(value) for name, value in params.items()},
        )

    @classmethod
    def no_content(cls) -> "HandlerResult":
        return cls(kind=ResultKind.NO_CONTENT)

    @classmethod
    def bad_request(cls) -> "HandlerResult":
        return cls(kind=ResultKind.BAD_REQUEST)

    @classmethod
    def not_found(cls) -> "HandlerResult":
        return cls(kind=ResultKind.NOT_FOUND)

    @classmethod
    def unprocessable(cls) -> "HandlerResult":
        return cls(kind=ResultKind.UNPROCESSABLE)

    @classmethod
    def server_error(cls) -> "HandlerResult":
        return cls(kind=ResultKind.SERVER_ERROR)

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @property
    def is_success(self) -> bool:
        return self.status_code < 400
