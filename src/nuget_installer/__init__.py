"""nuget-installer - Install NuGet package binaries into a project's Plugins folder.

Public API exports.

This is library mechanism: apps inject policy (data/cache roots, registry
config, fetcher, host notification hook).
"""

from .archive import extract_archive
from .discovery import PackageFiles
from .discovery import discover_package_files
from .discovery import select_profile
from .exceptions import ExtractError
from .exceptions import FetchError
from .exceptions import InstallStage
from .exceptions import MigrateError
from .exceptions import NoMatchingProfileError
from .exceptions import PackageError
from .exceptions import PackageInstallError
from .fetcher import HttpPackageFetcher
from .installer import install_package
from .installer import install_package_blocking
from .installer import uninstall_package
from .protocols import HostNotifier
from .protocols import PackageFetcherProtocol
from .resolver import build_download_url
from .resolver import resolve_paths
from .schema import InstallerConfig
from .schema import InstallMode
from .schema import InstallPaths
from .schema import InstallSummary
from .schema import PackageRequest
from .utils import cleanup_temp_artifacts
from .utils import migrate_files

__all__ = [
    # Data model
    "InstallMode",
    "PackageRequest",
    "InstallPaths",
    "InstallSummary",
    "InstallerConfig",
    # Path resolution
    "build_download_url",
    "resolve_paths",
    # Fetching
    "HttpPackageFetcher",
    "PackageFetcherProtocol",
    "HostNotifier",
    # Extraction and discovery
    "extract_archive",
    "select_profile",
    "discover_package_files",
    "PackageFiles",
    # Migration
    "migrate_files",
    "cleanup_temp_artifacts",
    # Installation
    "install_package",
    "install_package_blocking",
    "uninstall_package",
    # Exceptions
    "PackageError",
    "PackageInstallError",
    "InstallStage",
    "FetchError",
    "ExtractError",
    "NoMatchingProfileError",
    "MigrateError",
]

__version__ = "0.1.0"
