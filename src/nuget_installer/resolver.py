"""Package path resolver - download URL and local install/temp locations.

Roots are injected by the app (project data root, scratch/cache root); nothing
here reads the environment or touches the filesystem.
"""

from pathlib import Path

from .schema import DEFAULT_ARCHIVE_EXTENSION
from .schema import DEFAULT_URL_TEMPLATE
from .schema import InstallMode
from .schema import InstallPaths
from .schema import PackageRequest

PLUGINS_DIR = "Plugins"
EDITOR_DIR = "Editor"


def build_download_url(package_id: str, package_version: str, template: str = DEFAULT_URL_TEMPLATE) -> str:
    """
    Build the registry download URL for a package.

    Both placeholders are lower-cased; no other escaping is done, so ids and
    versions must already be registry-safe.

    Args:
        package_id: Registry package id (case-insensitive)
        package_version: Package version (case-insensitive)
        template: URL template with {id-lower} and {version-lower} placeholders

    Returns:
        Download URL

    Example:
        >>> build_download_url("Newtonsoft.Json", "13.0.3")
        'https://api.nuget.org/v3-flatcontainer/newtonsoft.json/13.0.3/newtonsoft.json.13.0.3.nupkg'
    """
    return template.replace("{id-lower}", package_id.lower()).replace("{version-lower}", package_version.lower())


def install_dir_for(package_id: str, data_root: Path, install_mode: InstallMode = InstallMode.STANDARD) -> Path:
    """Final install directory: data_root/Plugins[/Editor]/package_id."""
    plugins_dir = data_root / PLUGINS_DIR
    if install_mode == InstallMode.TOOLING_ONLY:
        plugins_dir = plugins_dir / EDITOR_DIR
    return plugins_dir / package_id


def resolve_paths(
    request: PackageRequest,
    data_root: Path,
    cache_root: Path,
    archive_extension: str = DEFAULT_ARCHIVE_EXTENSION,
) -> InstallPaths:
    """
    Resolve install and temp locations for a package request.

    Pure and deterministic: same inputs always give the same paths.

    Args:
        request: Package to install
        data_root: Project data root (install dir lives under data_root/Plugins)
        cache_root: Scratch root for the downloaded archive and its extraction
        archive_extension: File extension of the temp archive (without dot)

    Returns:
        InstallPaths
    """
    return InstallPaths(
        install_dir=install_dir_for(request.package_id, data_root, request.install_mode),
        temp_archive_path=cache_root / f"{request.key}.{archive_extension}",
        temp_extract_dir=cache_root / request.key,
    )
