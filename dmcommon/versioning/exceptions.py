"""
Exception classes for the versioning module.
"""


class VersioningError(Exception):
    """Base exception for all versioning-related errors."""

    pass


class VersionFormatError(VersioningError, ValueError):
    """Raised when a version string has an invalid format."""

    def __init__(self, version_string: str, argument: str = "input"):
        self.version_string = version_string
        self.argument = argument
        super().__init__(
            f"Input '{version_string}' is not a valid DataMiner version. "
            f"(Parameter '{argument}')"
        )


class VersionNullInputError(VersioningError, TypeError):
    """Raised when no version string was given at all."""

    def __init__(self, argument: str = "input"):
        self.argument = argument
        super().__init__(f"Value cannot be None. (Parameter '{argument}')")


class VersionTypeError(VersioningError, TypeError):
    """Raised when a version is compared against something that is not a version."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            "Argument must be of type DataMinerVersion, "
            f"got {type(value).__name__}."
        )
