# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.API_VERSIONS)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Every value has a default, so the API starts with an empty environment.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, error details on 500)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # OpenAPI Document
    # -------------------------------------------------------------------------

    API_TITLE: str = Field(
        default="Entities API",
        min_length=1,
        description="Title shown in the OpenAPI document and Swagger UI"
    )

    API_DESCRIPTION: str = Field(
        default="Versioned CRUD operations over the entity resource.",
        description="Description shown in the OpenAPI document"
    )

    DOCS_URL: str = Field(
        default="/docs",
        pattern=r"^/",
        description="Path of the Swagger UI"
    )

    # -------------------------------------------------------------------------
    # API Versioning
    # -------------------------------------------------------------------------

    # Comma-separated "major[.minor]" list; the first entry is the default
    # version used to name the OpenAPI document.
    API_VERSIONS: str = Field(
        default="1.0",
        pattern=r"^\s*[vV]?\d+(\.\d+)?(\s*,\s*[vV]?\d+(\.\d+)?)*\s*$",
        description="Supported API versions (comma-separated)"
    )

    REPORT_API_VERSIONS: bool = Field(
        default=True,
        description="Add the api-supported-versions header to every response"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    HTTPS_REDIRECT: bool = Field(
        default=False,
        description="Redirect plain HTTP requests to HTTPS"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def api_versions_list(self) -> list[str]:
        """
        Parse API_VERSIONS string into a list of raw version strings.

        Example: "1.0, 2" -> ["1.0", "2"]
        """
        return [version.strip() for version in self.API_VERSIONS.split(",")]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
