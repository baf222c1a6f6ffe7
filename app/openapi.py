# =============================================================================
# app/openapi.py - Versioned OpenAPI Documents
# =============================================================================
# One OpenAPI document and one Swagger UI page per supported API version:
#   /swagger/v1/swagger.json   document for 1.0
#   /docs/v1                   Swagger UI for 1.0
#   /docs                      Swagger UI for the default version
#
# Each document lists the versioned routes with the version written into
# the path ("/api/v1/entities") instead of a "{version}" parameter.
# =============================================================================

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.openapi.utils import get_openapi
from fastapi.responses import HTMLResponse, JSONResponse

from app.config import settings
from app.versioning import ApiVersion, default_version, supported_versions

logger = logging.getLogger(__name__)

VERSION_PARAMETER = "version"

# Collapse the schema section of Swagger UI
SWAGGER_UI_PARAMETERS = {
    "defaultModelExpandDepth": 0,
    "defaultModelsExpandDepth": 0,
}


def document_url(version: ApiVersion) -> str:
    """URL of the OpenAPI document for a version."""
    return f"/swagger/{version.group_name}/swagger.json"


def docs_url(version: ApiVersion) -> str:
    """URL of the Swagger UI page for a version."""
    return f"{settings.DOCS_URL.rstrip('/')}/{version.group_name}"


def _is_version_parameter(parameter: dict[str, Any]) -> bool:
    return parameter.get("in") == "path" and parameter.get("name") == VERSION_PARAMETER


def substitute_version(schema: dict[str, Any], version: ApiVersion) -> dict[str, Any]:
    """
    Write the version into every versioned path of an OpenAPI schema.

    "/api/v{version}/entities" becomes "/api/v1/entities" and the
    "version" path parameter is dropped from its operations.
    """
    paths: dict[str, Any] = {}

    for path, path_item in schema.get("paths", {}).items():
        if f"{{{VERSION_PARAMETER}}}" not in path:
            paths[path] = path_item
            continue

        operations: dict[str, Any] = {}
        for method, operation in path_item.items():
            operation = dict(operation)
            parameters = [
                parameter
                for parameter in operation.get("parameters", [])
                if not _is_version_parameter(parameter)
            ]
            if parameters:
                operation["parameters"] = parameters
            else:
                operation.pop("parameters", None)
            operations[method] = operation

        paths[path.replace(f"{{{VERSION_PARAMETER}}}", version.url_segment)] = operations

    return {**schema, "paths": paths}


def build_openapi(app: FastAPI, version: ApiVersion) -> dict[str, Any]:
    """Generate the OpenAPI document of one API version."""
    schema = get_openapi(
        title=app.title,
        version=str(version),
        description=app.description,
        routes=app.routes,
        tags=app.openapi_tags,
    )
    return substitute_version(schema, version)


def _add_version_routes(
    app: FastAPI,
    version: ApiVersion,
    documents: dict[ApiVersion, dict[str, Any]],
) -> None:
    async def openapi_document() -> JSONResponse:
        if version not in documents:
            documents[version] = build_openapi(app, version)
        return JSONResponse(documents[version])

    async def swagger_ui() -> HTMLResponse:
        return get_swagger_ui_html(
            openapi_url=document_url(version),
            title=f"{app.title} - {version.group_name.upper()}",
            swagger_ui_parameters=SWAGGER_UI_PARAMETERS,
        )

    app.add_api_route(document_url(version), openapi_document, methods=["GET"], include_in_schema=False)
    app.add_api_route(docs_url(version), swagger_ui, methods=["GET"], include_in_schema=False)

    if version == default_version():
        app.add_api_route(settings.DOCS_URL, swagger_ui, methods=["GET"], include_in_schema=False)


def install_versioned_docs(app: FastAPI) -> None:
    """Register the document and Swagger UI routes of every supported version."""
    documents: dict[ApiVersion, dict[str, Any]] = {}

    for version in supported_versions():
        _add_version_routes(app, version, documents)
        logger.debug(f"OpenAPI document for {version}: {document_url(version)}")
