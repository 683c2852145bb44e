"""
DataMiner version value type.

A DataMiner version is a dotted version (major.minor[.build[.revision]])
optionally followed by an iteration, the internal build counter that is
layered on top of the dotted version, e.g. "10.0.9.0-9312".
"""

import re
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union

from .exceptions import VersionFormatError, VersionNullInputError, VersionTypeError

INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1

# Marker for a build or revision that was not specified.
ABSENT = -1

_DIGITS = re.compile(r"[0-9]+")


def _parse_number(text: str, maximum: int) -> Optional[int]:
    text = text.strip()
    if not _DIGITS.fullmatch(text):
        return None
    # Leading zeros are allowed; anything longer than the maximum is out of range.
    text = text.lstrip("0") or "0"
    if len(text) > len(str(maximum)):
        return None
    value = int(text)
    if value > maximum:
        return None
    return value


def _check_int(name: str, value: int, minimum: int, maximum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
    if not minimum <= value <= maximum:
        raise ValueError(f"{name} must be between {minimum} and {maximum}, got {value}")


@dataclass(frozen=True, order=True)
class CoreVersion:
    """
    The dotted part of a DataMiner version.

    ``build`` and ``revision`` are -1 when absent. Since -1 is smaller than any
    specified value, the generated ordering already sorts an absent component
    below a present one.
    """

    major: int
    minor: int
    build: int = ABSENT
    revision: int = ABSENT

    def __post_init__(self):
        _check_int("major", self.major, 0, INT32_MAX)
        _check_int("minor", self.minor, 0, INT32_MAX)
        _check_int("build", self.build, ABSENT, INT32_MAX)
        _check_int("revision", self.revision, ABSENT, INT32_MAX)
        if self.revision != ABSENT and self.build == ABSENT:
            raise ValueError("revision cannot be specified without a build")

    def __str__(self) -> str:
        """Render only the components that are present, from the left."""
        parts = [self.major, self.minor]
        if self.build != ABSENT:
            parts.append(self.build)
            if self.revision != ABSENT:
                parts.append(self.revision)
        return ".".join(str(part) for part in parts)

    @classmethod
    def try_parse(cls, text: str) -> Optional["CoreVersion"]:
        """
        Parse a dotted version of 2 to 4 non-negative integer components.

        Args:
            text: Dotted version string, e.g. "10.0.9.0"

        Returns:
            The parsed CoreVersion, or None if the text is not a dotted version
        """
        parts = text.split(".")
        if not 2 <= len(parts) <= 4:
            return None

        components = []
        for part in parts:
            value = _parse_number(part, INT32_MAX)
            if value is None:
                return None
            components.append(value)

        return cls(*components)


class DataMinerVersion:
    """
    An immutable, totally ordered DataMiner version.

    Instances are ordered on the dotted version first and on the iteration
    second, so "10.0.9.0-9312" sorts after "10.0.9.0".
    """

    ZERO: ClassVar["DataMinerVersion"]
    MIN_SUPPORTED_FOR_PACKAGE_REGISTRY: ClassVar["DataMinerVersion"]
    MIN_SUPPORTED_FOR_APP_PACKAGE: ClassVar["DataMinerVersion"]

    def __init__(
        self, version: Union[CoreVersion, Tuple[int, ...]], iteration: int = 0
    ):
        """
        Initialize a DataMinerVersion.

        Args:
            version: The dotted version, either a CoreVersion or a tuple of
                2 to 4 integers
            iteration: The iteration (internal build number), 0 when unset

        Raises:
            ValueError: If a component or the iteration is out of range
        """
        if not isinstance(version, CoreVersion):
            version = tuple(version)
            if not 2 <= len(version) <= 4:
                raise ValueError(
                    f"A version needs 2 to 4 components, got {len(version)}"
                )
            version = CoreVersion(*version)
        _check_int("iteration", iteration, 0, UINT32_MAX)

        self._version = version
        self._iteration = iteration

    @classmethod
    def from_components(cls, major: int, minor: int, build: int) -> "DataMinerVersion":
        """Create a version from major, minor and build, without revision or iteration."""
        return cls(CoreVersion(major, minor, build))

    @property
    def version(self) -> CoreVersion:
        """The dotted version."""
        return self._version

    @property
    def iteration(self) -> int:
        """The iteration, 0 when unset."""
        return self._iteration

    @property
    def major(self) -> int:
        return self._version.major

    @property
    def minor(self) -> int:
        return self._version.minor

    @property
    def build(self) -> int:
        """Build component, -1 if undefined."""
        return self._version.build

    @property
    def revision(self) -> int:
        """Revision component, -1 if undefined."""
        return self._version.revision

    @classmethod
    def try_parse(cls, text: Optional[str]) -> Optional["DataMinerVersion"]:
        """
        Try to parse a DataMiner version string.

        Accepted formats are "x.y", "x.y.z" and "x.y.z.w", each optionally
        followed by "-<iteration>". Whitespace around either segment is ignored.

        Args:
            text: The string to parse

        Returns:
            The parsed DataMinerVersion, or None if the text is None, blank or
            not a valid DataMiner version
        """
        if not isinstance(text, str) or not text.strip():
            return None

        parts = text.split("-", 1)

        version = CoreVersion.try_parse(parts[0].strip())
        if version is None:
            return None

        if len(parts) == 1:
            return cls(version)

        iteration = _parse_number(parts[1], UINT32_MAX)
        if iteration is None:
            return None
        return cls(version, iteration)

    @classmethod
    def parse(cls, text: str) -> "DataMinerVersion":
        """
        Parse a DataMiner version string.

        Args:
            text: The string to parse

        Returns:
            The parsed DataMinerVersion

        Raises:
            VersionNullInputError: If text is None
            VersionFormatError: If text is not a valid DataMiner version
        """
        if text is None:
            raise VersionNullInputError("input")

        result = cls.try_parse(text)
        if result is None:
            raise VersionFormatError(text, "input")
        return result

    def compare_to(self, other: Optional["DataMinerVersion"]) -> int:
        """
        Compare this version to another one.

        Args:
            other: The version to compare with. None sorts before every version.

        Returns:
            -1 if this version sorts first, 1 if other sorts first, 0 if equal

        Raises:
            VersionTypeError: If other is not a DataMinerVersion
        """
        if other is None:
            return 1
        if not isinstance(other, DataMinerVersion):
            raise VersionTypeError(other)

        if self._version != other._version:
            return 1 if self._version > other._version else -1
        if self._iteration != other._iteration:
            return 1 if self._iteration > other._iteration else -1
        return 0

    def to_strict_string(self) -> str:
        """Return the compact form, "x.y.z.w" or "x.y.z.w-i", without spaces."""
        if self._iteration > 0:
            return f"{self._version}-{self._iteration}"
        return str(self._version)

    def __str__(self) -> str:
        """Return the display form, "x.y.z.w" or "x.y.z.w - i"."""
        if self._iteration > 0:
            return f"{self._version} - {self._iteration}"
        return str(self._version)

    def __repr__(self) -> str:
        return f"DataMinerVersion('{self.to_strict_string()}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, DataMinerVersion):
            return False
        return self._version == other._version and self._iteration == other._iteration

    def __hash__(self) -> int:
        return hash((self._version, self._iteration))

    # Comparing with None is never an ordering, not even "less or equal".
    def __lt__(self, other) -> bool:
        if other is None:
            return False
        if not isinstance(other, DataMinerVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        if other is None:
            return False
        if not isinstance(other, DataMinerVersion):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        if other is None:
            return False
        if not isinstance(other, DataMinerVersion):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        if other is None:
            return False
        if not isinstance(other, DataMinerVersion):
            return NotImplemented
        return self.compare_to(other) >= 0


ZERO = DataMinerVersion.from_components(0, 0, 0)
MIN_SUPPORTED_FOR_PACKAGE_REGISTRY = DataMinerVersion.from_components(10, 0, 10)
MIN_SUPPORTED_FOR_APP_PACKAGE = DataMinerVersion(CoreVersion(10, 0, 9, 0), 9312)

DataMinerVersion.ZERO = ZERO
DataMinerVersion.MIN_SUPPORTED_FOR_PACKAGE_REGISTRY = MIN_SUPPORTED_FOR_PACKAGE_REGISTRY
DataMinerVersion.MIN_SUPPORTED_FOR_APP_PACKAGE = MIN_SUPPORTED_FOR_APP_PACKAGE


def equals(
    v1: Optional[DataMinerVersion], v2: Optional[DataMinerVersion]
) -> bool:
    """True if both are None or both are equal versions."""
    if v1 is None:
        return v2 is None
    return v1 == v2


def not_equals(
    v1: Optional[DataMinerVersion], v2: Optional[DataMinerVersion]
) -> bool:
    return not equals(v1, v2)


def less_than(
    v1: Optional[DataMinerVersion], v2: Optional[DataMinerVersion]
) -> bool:
    """True if v1 sorts before v2. False whenever either side is None."""
    if v1 is None or v2 is None:
        return False
    return v1.compare_to(v2) < 0


def less_or_equal(
    v1: Optional[DataMinerVersion], v2: Optional[DataMinerVersion]
) -> bool:
    """
    True if v1 sorts before or equal to v2.

    Two None values are "equal" here, while a single None is unordered. This is
    not the complement of ``greater_than`` when None is involved.
    """
    if v1 is None and v2 is None:
        return True
    if v1 is None or v2 is None:
        return False
    return v1.compare_to(v2) <= 0


def greater_than(
    v1: Optional[DataMinerVersion], v2: Optional[DataMinerVersion]
) -> bool:
    """True if v1 sorts after v2. False whenever either side is None."""
    if v1 is None or v2 is None:
        return False
    return less_than(v2, v1)


def greater_or_equal(
    v1: Optional[DataMinerVersion], v2: Optional[DataMinerVersion]
) -> bool:
    """True if v1 sorts after or equal to v2, with the None rules of ``less_or_equal``."""
    return less_or_equal(v2, v1)


def parse_version(version_string: str) -> DataMinerVersion:
    """
    Parse a version string into a DataMinerVersion object.

    Args:
        version_string: Version string to parse

    Returns:
        DataMinerVersion object

    Raises:
        VersionNullInputError: If version_string is None
        VersionFormatError: If version_string is invalid
    """
    return DataMinerVersion.parse(version_string)


def compare_versions(version1: str, version2: str) -> int:
    """
    Compare two version strings.

    Args:
        version1: First version string
        version2: Second version string

    Returns:
        -1 if version1 < version2
         0 if version1 == version2
         1 if version1 > version2

    Raises:
        VersionFormatError: If either version string is invalid
    """
    return parse_version(version1).compare_to(parse_version(version2))
