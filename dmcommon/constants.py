from enum import Enum

from dmcommon.versioning import MIN_SUPPORTED_FOR_APP_PACKAGE


class ItemType(Enum):
    """DataMiner item types that can be part of an app package."""

    AUTOMATION = 1
    VISIO = 2
    DASHBOARD = 3
    # Protocols go into .dmprotocol packages, not into app packages.


# The DataMiner version that introduced app package support
MINIMUM_SUPPORTED_DATAMINER_VERSION_FOR_DMAPP = (
    MIN_SUPPORTED_FOR_APP_PACKAGE.to_strict_string()
)
