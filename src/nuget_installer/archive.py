"""Package archive extraction.

.nupkg files are plain zip archives. Extraction always overwrites files at
matching relative paths, so a stale partial extraction left by an earlier
failed run is repaired in place.
"""

import logging
import zipfile
from pathlib import Path

from .exceptions import ExtractError

logger = logging.getLogger(__name__)


def extract_archive(archive_path: Path, dest_dir: Path) -> list[str]:
    """
    Unpack a zip-compatible package archive into dest_dir.

    Args:
        archive_path: Downloaded archive
        dest_dir: Extraction root (created if needed)

    Returns:
        Names of the archive members

    Raises:
        ExtractError: If the archive is missing, corrupt or truncated, or the
            destination can't be written
    """
    logger.debug(f"Extracting {archive_path} to {dest_dir}")
    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(archive_path) as zf:
            members = zf.namelist()
            zf.extractall(dest_dir)
    except zipfile.BadZipFile as e:
        raise ExtractError(
            f"Corrupt package archive {archive_path}: {e}",
            context={"archive_path": str(archive_path)},
        ) from e
    except OSError as e:
        raise ExtractError(
            f"Failed to extract {archive_path} to {dest_dir}: {e}",
            context={"archive_path": str(archive_path), "dest_dir": str(dest_dir)},
        ) from e

    logger.debug(f"Extracted {len(members)} members from {archive_path.name}")
    return members
