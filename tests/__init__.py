# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Entities API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_entity_handler.py: Request handler and placeholder backend
# - test_entities_api.py: HTTP tests for the entity endpoints
# - test_versioning.py: API version parsing and resolution
# - test_config.py: Settings parsing
#
# Run tests with: poetry run pytest
# =============================================================================
