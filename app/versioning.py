# =============================================================================
# app/versioning.py - URL Segment API Versioning
# =============================================================================
# Versioned routers are mounted under "/api/v{version}". The version segment
# is "major[.minor]"; a missing minor means ".0", so "v1" and "v1.0" address
# the same API version.
#
# Usage:
#   app.include_router(
#       router,
#       prefix=f"{VERSIONED_PREFIX}/entities",
#       dependencies=[Depends(resolve_api_version)],
#   )
# =============================================================================

import re
from typing import Annotated, NamedTuple

from fastapi import Path

from app.config import settings
from app.exceptions import UnsupportedApiVersionError

# Prefix shared by every versioned router
VERSIONED_PREFIX = "/api/v{version}"

# Name of the response header listing supported versions
SUPPORTED_VERSIONS_HEADER = "api-supported-versions"

_VERSION_PATTERN = re.compile(r"^[vV]?(?P<major>\d+)(?:\.(?P<minor>\d+))?$")


class ApiVersion(NamedTuple):
    """An API version such as 1.0 or 2.1."""

    major: int
    minor: int = 0

    @classmethod
    def parse(cls, text: str) -> "ApiVersion":
        """
        Parse "1", "1.0" or "v1.0" into an ApiVersion.

        Raises:
            ValueError: If text is not a version string
        """
        match = _VERSION_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Invalid API version: {text!r}")
        return cls(int(match["major"]), int(match["minor"] or 0))

    @property
    def url_segment(self) -> str:
        """Version as written in documented URLs: "1" for 1.0, "1.5" for 1.5."""
        if self.minor == 0:
            return str(self.major)
        return f"{self.major}.{self.minor}"

    @property
    def group_name(self) -> str:
        """Name of the documentation group: "v1" for 1.0, "v1.5" for 1.5."""
        return f"v{self.url_segment}"

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


def supported_versions() -> list[ApiVersion]:
    """Supported versions in configuration order, without duplicates."""
    versions: list[ApiVersion] = []
    for raw in settings.api_versions_list:
        version = ApiVersion.parse(raw)
        if version not in versions:
            versions.append(version)
    return versions


def default_version() -> ApiVersion:
    """The first configured version."""
    return supported_versions()[0]


def format_supported_versions() -> str:
    """Header value listing every supported version, lowest first."""
    return ", ".join(str(version) for version in sorted(supported_versions()))


def resolve_api_version(
    version: Annotated[str, Path(description="API version, e.g. 1.0")],
) -> ApiVersion:
    """
    Dependency resolving the version segment of a versioned URL.

    Raises:
        UnsupportedApiVersionError: If the segment is unparsable or not configured
    """
    supported = supported_versions()
    try:
        requested = ApiVersion.parse(version)
    except ValueError:
        raise UnsupportedApiVersionError(version, [str(v) for v in supported])

    if requested not in supported:
        raise UnsupportedApiVersionError(version, [str(v) for v in supported])

    return requested
