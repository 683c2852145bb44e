"""
Versioning module for dmcommon.

All DataMiner version handling lives here:

- version.py: DataMinerVersion, the immutable and totally ordered version
  value (dotted version plus optional iteration), its parsing and string
  forms, the null-aware comparison functions and the well-known versions.
- features.py: feature gates that compare a DataMiner version against the
  version that introduced a feature.
- exceptions.py: the exception hierarchy for version errors.

Example:
    >>> from dmcommon.versioning import DataMinerVersion
    >>> v = DataMinerVersion.parse("10.0.9.0-9312")
    >>> str(v), v.to_strict_string()
    ('10.0.9.0 - 9312', '10.0.9.0-9312')
"""

from .exceptions import (
    VersioningError,
    VersionFormatError,
    VersionNullInputError,
    VersionTypeError,
)
from .features import is_supported, supports_app_packages, supports_nuget
from .version import (
    CoreVersion,
    DataMinerVersion,
    MIN_SUPPORTED_FOR_APP_PACKAGE,
    MIN_SUPPORTED_FOR_PACKAGE_REGISTRY,
    ZERO,
    compare_versions,
    equals,
    greater_or_equal,
    greater_than,
    less_or_equal,
    less_than,
    not_equals,
    parse_version,
)

__all__ = [
    # Core version value
    "CoreVersion",
    "DataMinerVersion",
    "parse_version",
    "compare_versions",
    # Null-aware comparisons
    "equals",
    "not_equals",
    "less_than",
    "less_or_equal",
    "greater_than",
    "greater_or_equal",
    # Well-known versions
    "ZERO",
    "MIN_SUPPORTED_FOR_PACKAGE_REGISTRY",
    "MIN_SUPPORTED_FOR_APP_PACKAGE",
    # Feature gates
    "is_supported",
    "supports_nuget",
    "supports_app_packages",
    # Exceptions
    "VersioningError",
    "VersionFormatError",
    "VersionNullInputError",
    "VersionTypeError",
]
