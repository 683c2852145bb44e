"""DevPack names and NuGet feed lookups."""

from .devpack import (
    AUTOMATION_DEVPACK_NUGET_DEPENDENCIES,
    AUTOMATION_DEVPACK_NUGET_DEPENDENCIES_INCLUDING_TRANSITIVE,
    COMMON_DEVPACK_NAME,
    COMMON_DEVPACK_NUGET_DEPENDENCIES,
    DEVPACK_NUGET_PACKAGES,
    DEVPACK_PREFIX,
    FILES_PREFIX,
    PROTOCOL_DEVPACK_NUGET_DEPENDENCIES,
    PROTOCOL_DEVPACK_NUGET_DEPENDENCIES_INCLUDING_TRANSITIVE,
    CaseInsensitiveNameSet,
    clear_cache,
    get_latest_revision_of_devpack,
)
from .exceptions import DevPackLookupError, NuGetError

__all__ = [
    "AUTOMATION_DEVPACK_NUGET_DEPENDENCIES",
    "AUTOMATION_DEVPACK_NUGET_DEPENDENCIES_INCLUDING_TRANSITIVE",
    "COMMON_DEVPACK_NAME",
    "COMMON_DEVPACK_NUGET_DEPENDENCIES",
    "DEVPACK_NUGET_PACKAGES",
    "DEVPACK_PREFIX",
    "FILES_PREFIX",
    "PROTOCOL_DEVPACK_NUGET_DEPENDENCIES",
    "PROTOCOL_DEVPACK_NUGET_DEPENDENCIES_INCLUDING_TRANSITIVE",
    "CaseInsensitiveNameSet",
    "clear_cache",
    "get_latest_revision_of_devpack",
    "DevPackLookupError",
    "NuGetError",
]
