# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides an HTTP test client and a request handler
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("API_VERSIONS", "1.0")
os.environ.setdefault("REPORT_API_VERSIONS", "true")
os.environ.setdefault("HTTPS_REDIRECT", "false")

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from core.models.entity import NIL_UUID
from core.services.entity_handler import EntityRequestHandler


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """HTTP client for the full application."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def entities_url():
    """Base URL of the entity resource in API version 1.0."""
    return "/api/v1.0/entities"


@pytest.fixture
def handler():
    """Entity request handler backed by the placeholder service."""
    return EntityRequestHandler()


@pytest.fixture
def entity_id():
    """A fresh non-zero entity id."""
    return uuid4()


@pytest.fixture
def nil_id():
    """The all-zero entity id."""
    return NIL_UUID
