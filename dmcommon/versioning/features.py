"""
Feature gates based on the DataMiner version.
"""

from typing import Optional

from .version import (
    DataMinerVersion,
    MIN_SUPPORTED_FOR_APP_PACKAGE,
    MIN_SUPPORTED_FOR_PACKAGE_REGISTRY,
    greater_or_equal,
)


def is_supported(
    version: Optional[DataMinerVersion], minimum: DataMinerVersion
) -> bool:
    """
    Check whether a DataMiner version is at least the version that introduced a feature.

    Args:
        version: The DataMiner version to check. None is never supported.
        minimum: The first DataMiner version that offers the feature

    Returns:
        True if version is the same as or newer than minimum
    """
    if version is None:
        return False
    return greater_or_equal(version, minimum)


def supports_nuget(version: Optional[DataMinerVersion]) -> bool:
    """True if the DataMiner version can consume NuGet packages."""
    return is_supported(version, MIN_SUPPORTED_FOR_PACKAGE_REGISTRY)


def supports_app_packages(version: Optional[DataMinerVersion]) -> bool:
    """True if the DataMiner version can install app packages (.dmapp)."""
    return is_supported(version, MIN_SUPPORTED_FOR_APP_PACKAGE)
