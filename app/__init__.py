# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - versioning.py: API version parsing and the versioned URL prefix
# - openapi.py: Per-version OpenAPI documents and Swagger UI pages
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# request handling to the core/ package.
# =============================================================================

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("entities-api")
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    __version__ = "0.0.0+unknown"
