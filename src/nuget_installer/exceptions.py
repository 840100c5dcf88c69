"""Package installation exceptions.

Every failure raised out of an install is tagged with the stage it came from,
so callers can tell "this package/version is incompatible" apart from
"network or disk problem".
"""

from enum import Enum


class InstallStage(str, Enum):
    """Pipeline stage an installation error originated from."""

    FETCH = "fetch"
    EXTRACT = "extract"
    PROFILE = "profile"
    MIGRATE = "migrate"
    UNINSTALL = "uninstall"


class PackageError(Exception):
    """Base exception for package operations."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (paths, urls, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class PackageInstallError(PackageError):
    """Package installation failed at a known stage."""

    stage: InstallStage | None = None

    def __init__(self, message: str, context: dict | None = None, stage: InstallStage | None = None):
        super().__init__(message, context)
        if stage is not None:
            self.stage = stage


class FetchError(PackageInstallError):
    """Package archive could not be downloaded (transport or HTTP failure)."""

    stage = InstallStage.FETCH

    def __init__(self, message: str, status: int | None = None, url: str | None = None):
        super().__init__(message, context={"status": status, "url": url})
        self.status = status
        self.url = url


class ExtractError(PackageInstallError):
    """Package archive is corrupt or could not be unpacked."""

    stage = InstallStage.EXTRACT


class NoMatchingProfileError(PackageInstallError):
    """Package has no directory for any of the supported runtime profiles."""

    stage = InstallStage.PROFILE

    def __init__(self, package_id: str, package_version: str, candidates: list[str] | tuple[str, ...] = ()):
        candidates = list(candidates)
        super().__init__(
            f"Package {package_id} {package_version} doesn't support any of: {', '.join(candidates) or '(none)'}",
            context={"package_id": package_id, "package_version": package_version, "candidates": candidates},
        )
        self.package_id = package_id
        self.package_version = package_version
        self.candidates = candidates


class MigrateError(PackageInstallError):
    """Moving package files into the install directory failed."""

    stage = InstallStage.MIGRATE
