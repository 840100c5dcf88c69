"""Runtime profile selection and package file discovery.

Convention over configuration: an extracted package keeps one directory of
binaries per runtime profile (lib/netstandard2.0/, lib/netstandard2.1/, ...)
and loose metadata files (readme, license, changelog) at its root.
"""

from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from .exceptions import NoMatchingProfileError
from .schema import DEFAULT_ARTIFACT_EXTENSION
from .schema import DEFAULT_AUXILIARY_SUFFIXES
from .schema import DEFAULT_PROFILE_CANDIDATES


class PackageFiles(BaseModel):
    """Files selected for migration out of an extracted package (immutable)."""

    model_config = ConfigDict(frozen=True)

    profile_dir: Path
    primary: list[Path] = Field(default_factory=list)
    auxiliary: list[Path] = Field(default_factory=list)

    def has_files(self) -> bool:
        return bool(self.primary or self.auxiliary)


def select_profile(
    extract_root: Path,
    package_id: str,
    package_version: str,
    candidates: Iterable[str] = DEFAULT_PROFILE_CANDIDATES,
) -> Path:
    """
    Pick the best-matching runtime profile directory.

    Candidates are checked in the given order (highest preference first); the
    first one that exists as a directory under extract_root wins. Directory
    listing order never matters.

    Args:
        extract_root: Root of the extracted package
        package_id: Package id (for the error)
        package_version: Package version (for the error)
        candidates: Relative profile directories in preference order

    Returns:
        Absolute path of the selected profile directory

    Raises:
        NoMatchingProfileError: If no candidate directory exists
    """
    candidates = list(candidates)
    for candidate in candidates:
        profile_dir = extract_root / candidate
        if profile_dir.is_dir():
            return profile_dir

    raise NoMatchingProfileError(package_id, package_version, candidates)


def discover_package_files(
    extract_root: Path,
    profile_dir: Path,
    artifact_extension: str = DEFAULT_ARTIFACT_EXTENSION,
    auxiliary_suffixes: Iterable[str] = DEFAULT_AUXILIARY_SUFFIXES,
) -> PackageFiles:
    """
    Find the files to install from an extracted package.

    Convention:
    - primary: files directly in profile_dir with artifact_extension
    - auxiliary: files directly in extract_root whose name ends with one of
      auxiliary_suffixes (e.g. README.md, notes.txt, LICENSE)

    Matching is case-insensitive and never recursive.

    Args:
        extract_root: Root of the extracted package
        profile_dir: Selected runtime profile directory
        artifact_extension: Extension of binary artifacts, with leading dot
        auxiliary_suffixes: Allow-listed name endings for root-level files

    Returns:
        PackageFiles, each list sorted by file name
    """
    extension = artifact_extension.lower()
    primary = sorted(
        (f for f in profile_dir.iterdir() if f.is_file() and f.suffix.lower() == extension),
        key=lambda p: p.name,
    )

    suffixes = tuple(s.lower() for s in auxiliary_suffixes)
    auxiliary = sorted(
        (f for f in extract_root.iterdir() if f.is_file() and f.name.lower().endswith(suffixes)),
        key=lambda p: p.name,
    )

    return PackageFiles(profile_dir=profile_dir, primary=primary, auxiliary=auxiliary)
