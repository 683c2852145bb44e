"""
DevPack package names and the lookup of the latest DevPack revision on a NuGet feed.

A DevPack is published per DataMiner version as
"Skyline.DataMiner.Dev.Common <major>.<minor>.<build>.<revision>". The lookup
finds the highest released revision for the major/minor/build of a given
DataMiner version. Results are cached per requested version for a short time
(see ``dmcommon.config.get_devpack_cache_duration``).
"""

import logging
import threading
import time
from collections.abc import Set
from typing import Dict, Iterable, Iterator, Optional, Tuple

import requests
from packaging.version import InvalidVersion, Version

from dmcommon.config import get_devpack_cache_duration, get_nuget_index_url
from dmcommon.versioning import DataMinerVersion

from .exceptions import DevPackLookupError

logger = logging.getLogger(__name__)

DEVPACK_PREFIX = "Skyline.DataMiner.Dev."
FILES_PREFIX = "Skyline.DataMiner.Files."
COMMON_DEVPACK_NAME = "Skyline.DataMiner.Dev.Common"

REQUEST_TIMEOUT = 30


class CaseInsensitiveNameSet(Set):
    """Immutable set of package names where membership ignores case."""

    def __init__(self, names: Iterable[str] = ()):
        self._names: Dict[str, str] = {}
        for name in names:
            self._names.setdefault(name.casefold(), name)

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and name.casefold() in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names.values())

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._names.values())!r})"


DEVPACK_NUGET_PACKAGES = CaseInsensitiveNameSet(
    [
        "Skyline.DataMiner.Dev.Automation",
        COMMON_DEVPACK_NAME,
        "Skyline.DataMiner.Dev.Protocol",
    ]
)

COMMON_DEVPACK_NUGET_DEPENDENCIES = CaseInsensitiveNameSet(
    [
        "Skyline.DataMiner.Files.protobufnet",
        "Skyline.DataMiner.Files.Skyline.DataMiner.Storage.Types",
        "Skyline.DataMiner.Files.SLLoggerUtil",
        "Skyline.DataMiner.Files.SLNetTypes",
        "Skyline.DataMiner.Files.SLProtoBufLibrary",
    ]
)

# Without the Common DevPack dependencies
PROTOCOL_DEVPACK_NUGET_DEPENDENCIES = CaseInsensitiveNameSet(
    [
        "Skyline.DataMiner.Files.Interop.SLDms",
        "Skyline.DataMiner.Files.QActionHelperBaseClasses",
        "Skyline.DataMiner.Files.SLManagedScripting",
    ]
)

# Without the Common DevPack dependencies
AUTOMATION_DEVPACK_NUGET_DEPENDENCIES = CaseInsensitiveNameSet(
    [
        "Skyline.DataMiner.Files.SLAnalyticsTypes",
        "Skyline.DataMiner.Files.SLManagedAutomation",
    ]
)

PROTOCOL_DEVPACK_NUGET_DEPENDENCIES_INCLUDING_TRANSITIVE = (
    COMMON_DEVPACK_NUGET_DEPENDENCIES | PROTOCOL_DEVPACK_NUGET_DEPENDENCIES
)
AUTOMATION_DEVPACK_NUGET_DEPENDENCIES_INCLUDING_TRANSITIVE = (
    COMMON_DEVPACK_NUGET_DEPENDENCIES | AUTOMATION_DEVPACK_NUGET_DEPENDENCIES
)


# (major, minor, build) -> (result, monotonic retrieval time)
_cache: Dict[Tuple[int, int, int], Tuple[str, float]] = {}
_cache_lock = threading.Lock()


def clear_cache() -> None:
    """Forget all cached lookup results."""
    with _cache_lock:
        _cache.clear()


def _unexpected(url: str, what: str) -> DevPackLookupError:
    return DevPackLookupError(COMMON_DEVPACK_NAME, f"{url}: unexpected {what}")


def _get_json(http, url: str, params: Optional[dict] = None) -> dict:
    try:
        response = http.get(url, params=params, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        body = response.json()
    except (requests.RequestException, ValueError) as e:
        raise DevPackLookupError(COMMON_DEVPACK_NAME, f"{url}: {e}") from e
    if not isinstance(body, dict):
        raise _unexpected(url, f"response body of type {type(body).__name__}")
    return body


def _get_list(body: dict, key: str, url: str) -> list:
    value = body.get(key, [])
    if not isinstance(value, list):
        raise _unexpected(url, f"'{key}' of type {type(value).__name__}")
    return value


def _get_search_url(http, index_url: str) -> str:
    """Find the SearchQueryService endpoint in a NuGet v3 service index."""
    index = _get_json(http, index_url)
    for resource in _get_list(index, "resources", index_url):
        if not isinstance(resource, dict):
            raise _unexpected(index_url, "service index resource")
        if str(resource.get("@type", "")).startswith("SearchQueryService"):
            search_url = resource.get("@id")
            if not isinstance(search_url, str):
                raise _unexpected(index_url, "SearchQueryService without @id")
            return search_url
    raise DevPackLookupError(
        COMMON_DEVPACK_NAME, f"no SearchQueryService in service index {index_url}"
    )


def _is_release(version: Version) -> bool:
    # NuGet build metadata ("+abc") shows up as a local version and does not
    # make a version a prerelease.
    return not (
        version.is_prerelease or version.is_postrelease or version.is_devrelease
    )


def _find_max_revision(
    search_result: dict, version_to_check: DataMinerVersion, search_url: str
) -> int:
    max_revision = -1

    for package in _get_list(search_result, "data", search_url):
        if not isinstance(package, dict):
            raise _unexpected(search_url, "search result entry")
        if package.get("id") != COMMON_DEVPACK_NAME:
            continue

        for entry in _get_list(package, "versions", search_url):
            if not isinstance(entry, dict) or not isinstance(entry.get("version"), str):
                raise _unexpected(search_url, f"version entry {entry!r}")
            try:
                version = Version(entry["version"])
            except InvalidVersion:
                logger.debug(f"Skipping unparsable {COMMON_DEVPACK_NAME} entry {entry}")
                continue

            if not _is_release(version):
                continue

            if (version.major, version.minor, version.micro) != (
                version_to_check.major,
                version_to_check.minor,
                version_to_check.build,
            ):
                continue

            revision = version.release[3] if len(version.release) > 3 else 0
            max_revision = max(max_revision, revision)

    return max_revision


def get_latest_revision_of_devpack(
    version_to_check: DataMinerVersion,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Retrieve the latest revision of the DevPack packages for a DataMiner version.

    Args:
        version_to_check: The DataMiner version. Only major, minor and build are used.
        session: Optional requests session to use for the feed calls

    Returns:
        "<major>.<minor>.<build>.<revision>" where revision is the highest
        released revision on the feed, or -1 if there is none

    Raises:
        DevPackLookupError: If the feed cannot be reached or returns unexpected data
    """
    key = (version_to_check.major, version_to_check.minor, version_to_check.build)
    cache_seconds = get_devpack_cache_duration().total_seconds()

    with _cache_lock:
        cached = _cache.get(key)
    if cached is not None and time.monotonic() - cached[1] < cache_seconds:
        logger.debug(f"Using cached DevPack revision {cached[0]}")
        return cached[0]

    http = session or requests
    index_url = get_nuget_index_url()
    logger.debug(f"Looking up {COMMON_DEVPACK_NAME} for {version_to_check} on {index_url}")

    search_url = _get_search_url(http, index_url)
    search_result = _get_json(
        http,
        search_url,
        params={"q": COMMON_DEVPACK_NAME, "skip": 0, "take": 1, "prerelease": "false"},
    )
    max_revision = _find_max_revision(search_result, version_to_check, search_url)

    latest = f"{key[0]}.{key[1]}.{key[2]}.{max_revision}"
    with _cache_lock:
        _cache[key] = (latest, time.monotonic())

    return latest
