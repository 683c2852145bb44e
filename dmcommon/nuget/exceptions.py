"""
Exception classes for the NuGet module.
"""


class NuGetError(Exception):
    """Base exception for all NuGet feed related errors."""

    pass


class DevPackLookupError(NuGetError):
    """Raised when the latest DevPack revision cannot be retrieved from the feed."""

    def __init__(self, package_id: str, message: str = ""):
        self.package_id = package_id
        if message:
            super().__init__(f"Could not look up {package_id}: {message}")
        else:
            super().__init__(f"Could not look up {package_id}")
