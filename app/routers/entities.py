# =============================================================================
# app/routers/entities.py - Entity CRUD Endpoints
# =============================================================================
# HTTP surface of the entity resource. Mounted in main.py under
# "/api/v{version}/entities".
#
# Routes are declared once in ENTITY_ROUTES (method, path, endpoint, name,
# declared status codes) and registered from that table. The endpoints only
# bind the request and hand it to EntityRequestHandler; to_response() turns
# the HandlerResult into the HTTP response.
# =============================================================================

from typing import Annotated, Any, Callable, NamedTuple
from uuid import UUID

from fastapi import APIRouter, Body, Path, Query, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.dependencies import EntityHandlerDep
from core.models.entity import (
    CreateEntityRequest,
    EntityResponse,
    GetEntitiesRequest,
    UpdateEntityRequest,
)
from core.models.patch import PatchOperation
from core.models.result import HandlerResult, ResultKind
from core.services.entity_handler import GET_ENTITY_ACTION

router = APIRouter()

EntityId = Annotated[UUID, Path(description="The unique identifier of the entity")]


# =============================================================================
# Result Mapping
# =============================================================================

def to_response(request: Request, result: HandlerResult) -> Response:
    """
    Convert a HandlerResult to an HTTP response.

    Created results get a Location header pointing at the get-by-id route
    of the same API version. Error results and results without a payload
    have no body.
    """
    headers: dict[str, str] = {}

    if result.kind is ResultKind.CREATED and result.location_action:
        location = request.url_for(
            result.location_action,
            version=request.path_params["version"],
            **result.location_params,
        )
        headers["Location"] = str(location)

    if not result.is_success or result.payload is None:
        return Response(status_code=result.status_code, headers=headers)

    return JSONResponse(
        status_code=result.status_code,
        content=jsonable_encoder(result.payload),
        headers=headers,
    )


# =============================================================================
# Endpoints
# =============================================================================

async def list_entities(
    request: Request,
    handler: EntityHandlerDep,
    query: Annotated[GetEntitiesRequest, Query()],
) -> Response:
    """
    Get a page of entities.

    Query parameters cover paging, searching, filtering, sorting and
    shaping. Returns 204 when no entity matched.
    """
    return to_response(request, handler.list_entities(query))


async def get_entity(
    request: Request,
    handler: EntityHandlerDep,
    entity_id: EntityId,
) -> Response:
    """
    Get an entity.

    Returns 204 when no entity matched the identifier.
    """
    return to_response(request, handler.get_entity(entity_id))


async def create_entity(
    request: Request,
    handler: EntityHandlerDep,
    body: Annotated[CreateEntityRequest | None, Body()] = None,
) -> Response:
    """
    Add an entity.

    The Location header holds the URI of the new entity.
    """
    return to_response(request, handler.create_entity(body))


async def replace_entity(
    request: Request,
    handler: EntityHandlerDep,
    entity_id: EntityId,
    body: Annotated[UpdateEntityRequest | None, Body()] = None,
) -> Response:
    """Fully update an entity."""
    return to_response(request, handler.replace_entity(entity_id, body))


async def patch_entity(
    request: Request,
    handler: EntityHandlerDep,
    entity_id: EntityId,
    operations: Annotated[list[PatchOperation] | None, Body()] = None,
) -> Response:
    """
    Fully or partially update an entity.

    The body is a JSON Patch document. Sample request (updates the
    entity's name):

        PATCH /api/v1.0/entities/{id}
        [
            {
                "op": "replace",
                "path": "/name",
                "value": "Dave"
            }
        ]
    """
    return to_response(request, handler.patch_entity(entity_id, operations))


async def delete_entity(
    request: Request,
    handler: EntityHandlerDep,
    entity_id: EntityId,
) -> Response:
    """Delete an entity."""
    return to_response(request, handler.delete_entity(entity_id))


# =============================================================================
# Route Table
# =============================================================================

RESPONSE_DESCRIPTIONS: dict[int, str] = {
    200: "Success - OK",
    201: "Success - Created - The entity was successfully created",
    204: "Success - No Content",
    400: "Error - Bad Request - It was not possible to bind the request",
    404: "Error - Not Found - No entity matched the given identifier",
    422: "Error - Unprocessable Entity - Unable to process the contained instructions",
    500: "Error - Internal Server Error",
}


class RouteDefinition(NamedTuple):
    """One entity route and the status codes it declares."""

    method: str
    path: str
    endpoint: Callable[..., Any]
    name: str
    summary: str
    status_code: int
    error_codes: tuple[int, ...]
    response_model: Any = None
    alternate_codes: tuple[int, ...] = ()

    @property
    def declared_codes(self) -> tuple[int, ...]:
        """Every status code the route can answer with, 500 included."""
        return (self.status_code, *self.alternate_codes, *self.error_codes, 500)

    def responses(self) -> dict[int | str, dict[str, Any]]:
        """OpenAPI responses for the codes besides the main one."""
        return {
            code: {"description": RESPONSE_DESCRIPTIONS[code]}
            for code in self.declared_codes
            if code != self.status_code
        }


ENTITY_ROUTES: tuple[RouteDefinition, ...] = (
    RouteDefinition(
        method="GET",
        path="",
        endpoint=list_entities,
        name="list_entities",
        summary="Get a page of entities",
        status_code=200,
        alternate_codes=(204,),
        error_codes=(400,),
        response_model=list[EntityResponse],
    ),
    RouteDefinition(
        method="GET",
        path="/{entity_id}",
        endpoint=get_entity,
        name=GET_ENTITY_ACTION,
        summary="Get an entity",
        status_code=200,
        alternate_codes=(204,),
        error_codes=(400,),
        response_model=EntityResponse,
    ),
    RouteDefinition(
        method="POST",
        path="",
        endpoint=create_entity,
        name="create_entity",
        summary="Add an entity",
        status_code=201,
        error_codes=(400,),
        response_model=EntityResponse,
    ),
    RouteDefinition(
        method="PUT",
        path="/{entity_id}",
        endpoint=replace_entity,
        name="replace_entity",
        summary="Fully update an entity",
        status_code=200,
        error_codes=(400, 404),
        response_model=EntityResponse,
    ),
    RouteDefinition(
        method="PATCH",
        path="/{entity_id}",
        endpoint=patch_entity,
        name="patch_entity",
        summary="Fully or partially update an entity",
        status_code=200,
        error_codes=(400, 404, 422),
        response_model=EntityResponse,
    ),
    RouteDefinition(
        method="DELETE",
        path="/{entity_id}",
        endpoint=delete_entity,
        name="delete_entity",
        summary="Delete an entity",
        status_code=204,
        error_codes=(400, 404),
    ),
)


for route in ENTITY_ROUTES:
    router.add_api_route(
        route.path,
        route.endpoint,
        methods=[route.method],
        name=route.name,
        summary=route.summary,
        status_code=route.status_code,
        response_model=route.response_model,
        response_description=RESPONSE_DESCRIPTIONS[route.status_code],
        responses=route.responses(),
    )
