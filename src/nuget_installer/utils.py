"""File migration and temp artifact cleanup."""

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def migrate_files(files: Iterable[Path], target_dir: Path, skipped: list[str] | None = None) -> int:
    """
    Move files flat into target_dir, skipping names that already exist there.

    A destination counts as existing even when it is a dangling symlink.
    A skipped file is left untouched on both sides: the installed copy is not
    overwritten and the source stays in place. No content or version check is
    done, so a stale file at the destination is never refreshed.

    Args:
        files: Absolute source paths
        target_dir: Destination directory (must exist)
        skipped: Optional list that collects the names of skipped files

    Returns:
        Number of files moved

    Raises:
        OSError: If a move fails (permissions, disk full)
    """
    moved = 0
    for source in files:
        destination = target_dir / source.name
        if destination.exists() or destination.is_symlink():
            logger.debug(f"Skipping {source.name}: already present in {target_dir}")
            if skipped is not None:
                skipped.append(source.name)
            continue

        shutil.move(str(source), str(destination))
        logger.debug(f"Moved {source.name} to {target_dir}")
        moved += 1

    return moved


def cleanup_temp_artifacts(temp_archive_path: Path, temp_extract_dir: Path) -> None:
    """
    Delete the downloaded archive and its extraction tree (best effort).

    Missing paths are fine; other failures are logged, not raised.

    Args:
        temp_archive_path: Downloaded archive file
        temp_extract_dir: Extraction root directory
    """
    try:
        temp_archive_path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Could not delete temp archive {temp_archive_path}: {e}")

    if temp_extract_dir.exists():
        try:
            shutil.rmtree(temp_extract_dir)
        except OSError as e:
            logger.warning(f"Could not delete temp directory {temp_extract_dir}: {e}")
