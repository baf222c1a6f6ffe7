# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the request handling behind the HTTP layer:
# - models/: Pydantic schemas for entities, patch documents, handler results
# - services/: Entity backend and per-request entity handler
#
# Handlers and services never touch requests or responses; the only
# app-layer import is the exception hierarchy in app/exceptions.py, which
# backends raise to signal missing entities or inapplicable patches.
# =============================================================================
