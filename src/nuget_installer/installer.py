"""Package installation pipeline.

Paths and policy are injected by the app: data_root and cache_root decide
WHERE, InstallerConfig decides registry and layout conventions, and the
fetcher decides HOW archives are downloaded.

Pipeline (linear, no retries):
1. Ensure install dir exists (before any network activity)
2. Download archive to cache_root
3. Extract archive to cache_root
4. Select runtime profile directory
5. Move primary artifacts, then auxiliary files, into the install dir
6. Delete temp archive and extraction tree
7. Notify host (optional)

Any failure in steps 2-5 aborts immediately. Nothing is rolled back and temp
artifacts are left on disk for inspection.

Concurrent installs of the same package id + version are not synchronized;
they race on the temp paths and the install dir.

Extraction and file moves run synchronously, so the event loop is blocked
while a large archive is unpacked.
"""

import asyncio
import logging
import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .archive import extract_archive
from .discovery import discover_package_files
from .discovery import select_profile
from .exceptions import ExtractError
from .exceptions import FetchError
from .exceptions import InstallStage
from .exceptions import MigrateError
from .exceptions import PackageInstallError
from .fetcher import HttpPackageFetcher
from .protocols import HostNotifier
from .protocols import PackageFetcherProtocol
from .resolver import build_download_url
from .resolver import install_dir_for
from .resolver import resolve_paths
from .schema import InstallerConfig
from .schema import InstallMode
from .schema import InstallSummary
from .schema import PackageRequest
from .utils import cleanup_temp_artifacts
from .utils import migrate_files

logger = logging.getLogger(__name__)

_STAGE_ERRORS: dict[InstallStage, type[PackageInstallError]] = {
    InstallStage.FETCH: FetchError,
    InstallStage.EXTRACT: ExtractError,
    InstallStage.MIGRATE: MigrateError,
}


@contextmanager
def _stage(stage: InstallStage, description: str) -> Iterator[None]:
    """Tag any untyped failure inside the block with its pipeline stage."""
    try:
        yield
    except PackageInstallError:
        raise
    except Exception as e:
        raise _STAGE_ERRORS[stage](f"{description}: {e}") from e


async def install_package(
    package_id: str,
    package_version: str,
    *,
    data_root: Path,
    cache_root: Path,
    install_mode: InstallMode = InstallMode.STANDARD,
    notify_host_on_success: bool = True,
    on_installed: HostNotifier | None = None,
    config: InstallerConfig | None = None,
    fetcher: PackageFetcherProtocol | None = None,
) -> InstallSummary:
    """
    Install a package's binaries into the project, without its dependencies.

    Dependencies must be installed explicitly with their own calls.

    Args:
        package_id: Registry package id
        package_version: Package version
        data_root: Project data root (app policy)
        cache_root: Scratch root for temp archive and extraction (app policy)
        install_mode: STANDARD installs to Plugins/, TOOLING_ONLY to Plugins/Editor/
        notify_host_on_success: Whether to call on_installed after success
        on_installed: Host hook (e.g. asset database refresh); its failures
            propagate untouched
        config: Installer policy (defaults to nuget.org conventions)
        fetcher: Archive fetcher (defaults to HttpPackageFetcher)

    Returns:
        InstallSummary with moved/skipped counts and the install dir

    Raises:
        FetchError: Download failed
        ExtractError: Archive corrupt or unwritable destination
        NoMatchingProfileError: Package supports none of the profile candidates
        MigrateError: Moving files into the install dir failed
        OSError: Install dir could not be created

    Example:
        >>> summary = await install_package(
        ...     "Newtonsoft.Json",
        ...     "13.0.3",
        ...     data_root=Path("Assets"),
        ...     cache_root=Path("/tmp/nuget"),
        ... )
        >>> print(f"Installed {summary.total_moved} files to {summary.install_dir}")
    """
    config = config or InstallerConfig()
    fetcher = fetcher or HttpPackageFetcher(timeout=config.timeout)
    request = PackageRequest(package_id=package_id, package_version=package_version, install_mode=install_mode)
    paths = resolve_paths(request, data_root, cache_root, config.archive_extension)

    logger.info(f"Installing {package_id} {package_version} to {paths.install_dir}")

    # Step 1: Create install dir first; it exists even if the download fails
    paths.install_dir.mkdir(parents=True, exist_ok=True)

    # Step 2: Download
    url = build_download_url(package_id, package_version, config.url_template)
    with _stage(InstallStage.FETCH, f"Failed to download {url}"):
        await fetcher.download(url, paths.temp_archive_path)

    # Step 3: Extract (overwrites stale partial extractions)
    with _stage(InstallStage.EXTRACT, f"Failed to extract {paths.temp_archive_path}"):
        members = extract_archive(paths.temp_archive_path, paths.temp_extract_dir)
    logger.debug(f"Extracted {len(members)} archive members to {paths.temp_extract_dir}")

    # Step 4: Select runtime profile
    profile_dir = select_profile(
        paths.temp_extract_dir,
        package_id,
        package_version,
        config.profile_candidates,
    )
    profile = profile_dir.relative_to(paths.temp_extract_dir).as_posix()
    logger.debug(f"Selected profile {profile} for {request.key}")

    # Step 5: Move primary artifacts, then auxiliary files
    skipped: list[str] = []
    with _stage(InstallStage.MIGRATE, f"Failed to install files into {paths.install_dir}"):
        files = discover_package_files(
            paths.temp_extract_dir,
            profile_dir,
            config.artifact_extension,
            config.auxiliary_suffixes,
        )
        if not files.has_files():
            logger.debug(f"No files to install from {profile} in {request.key}")
        primary_moved = migrate_files(files.primary, paths.install_dir, skipped)
        auxiliary_moved = migrate_files(files.auxiliary, paths.install_dir, skipped)

    if skipped:
        logger.info(f"Kept {len(skipped)} existing file(s) in {paths.install_dir}: {', '.join(skipped)}")

    # Step 6: Cleanup (only reached on success)
    cleanup_temp_artifacts(paths.temp_archive_path, paths.temp_extract_dir)

    # Step 7: Notify host
    host_notified = False
    if notify_host_on_success and on_installed is not None:
        on_installed()
        host_notified = True

    logger.info(
        f"Successfully installed {package_id} {package_version}: "
        f"{primary_moved} artifact(s), {auxiliary_moved} auxiliary file(s)"
    )

    return InstallSummary(
        package_id=package_id,
        package_version=package_version,
        install_mode=install_mode,
        install_dir=paths.install_dir,
        profile=profile,
        primary_moved=primary_moved,
        auxiliary_moved=auxiliary_moved,
        skipped=skipped,
        host_notified=host_notified,
    )


def install_package_blocking(package_id: str, package_version: str, **kwargs) -> InstallSummary:
    """
    Synchronous install_package for hosts without a running event loop.

    Takes the same keyword arguments as install_package and blocks until the
    pipeline finished or failed.
    """
    return asyncio.run(install_package(package_id, package_version, **kwargs))


async def uninstall_package(
    package_id: str,
    *,
    data_root: Path,
    install_mode: InstallMode = InstallMode.STANDARD,
) -> Path:
    """
    Remove a package's install directory.

    Args:
        package_id: Registry package id
        data_root: Project data root (app policy)
        install_mode: Install location the package was installed with

    Returns:
        The removed directory

    Raises:
        PackageInstallError: If the package isn't installed or removal failed
    """
    install_dir = install_dir_for(package_id, data_root, install_mode)

    if not install_dir.exists():
        raise PackageInstallError(
            f"Package '{package_id}' not found at {install_dir}",
            context={"package_id": package_id, "install_dir": str(install_dir)},
            stage=InstallStage.UNINSTALL,
        )

    try:
        logger.info(f"Uninstalling package: {package_id}")
        shutil.rmtree(install_dir)
        logger.info(f"Successfully uninstalled: {package_id}")
    except OSError as e:
        raise PackageInstallError(
            f"Failed to uninstall package '{package_id}': {e}",
            stage=InstallStage.UNINSTALL,
        ) from e

    return install_dir
