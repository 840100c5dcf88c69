"""Installer data model and configuration schema.

Requests and derived paths are immutable; nothing here touches the filesystem
except InstallerConfig.from_pyproject, which only reads.
"""

import tomllib
from enum import Enum
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

DEFAULT_URL_TEMPLATE = (
    "https://api.nuget.org/v3-flatcontainer/{id-lower}/{version-lower}/{id-lower}.{version-lower}.nupkg"
)
DEFAULT_ARCHIVE_EXTENSION = "nupkg"
DEFAULT_PROFILE_CANDIDATES = ("lib/netstandard2.0", "lib/netstandard2.1")
DEFAULT_ARTIFACT_EXTENSION = ".dll"
DEFAULT_AUXILIARY_SUFFIXES = (".txt", ".md", "license")


class InstallMode(str, Enum):
    """Where installed artifacts land inside the project's Plugins folder."""

    STANDARD = "standard"
    TOOLING_ONLY = "tooling_only"


class PackageRequest(BaseModel):
    """A single package id + version to install."""

    model_config = ConfigDict(frozen=True)

    package_id: str = Field(min_length=1)
    package_version: str = Field(min_length=1)
    install_mode: InstallMode = InstallMode.STANDARD

    @property
    def key(self) -> str:
        """Identifier used for temp file and directory names."""
        return f"{self.package_id}-{self.package_version}"


class InstallPaths(BaseModel):
    """Filesystem locations derived from a PackageRequest."""

    model_config = ConfigDict(frozen=True)

    install_dir: Path
    temp_archive_path: Path
    temp_extract_dir: Path


class InstallSummary(BaseModel):
    """Outcome of a successful installation."""

    model_config = ConfigDict(frozen=True)

    package_id: str
    package_version: str
    install_mode: InstallMode
    install_dir: Path
    profile: str
    primary_moved: int = 0
    auxiliary_moved: int = 0
    skipped: list[str] = Field(default_factory=list)
    host_notified: bool = False

    @property
    def total_moved(self) -> int:
        return self.primary_moved + self.auxiliary_moved


class InstallerConfig(BaseModel):
    """
    Installer policy: registry location, archive layout conventions, timeouts.

    Apps construct this directly or load overrides from a TOML file with a
    [tool.nuget-installer] table.
    """

    model_config = ConfigDict(frozen=True)

    url_template: str = DEFAULT_URL_TEMPLATE
    archive_extension: str = DEFAULT_ARCHIVE_EXTENSION
    profile_candidates: tuple[str, ...] = DEFAULT_PROFILE_CANDIDATES
    artifact_extension: str = DEFAULT_ARTIFACT_EXTENSION
    auxiliary_suffixes: tuple[str, ...] = DEFAULT_AUXILIARY_SUFFIXES
    timeout: float = Field(default=60.0, gt=0)

    @classmethod
    def from_pyproject(cls, pyproject_path: Path) -> "InstallerConfig":
        """
        Load installer configuration from a TOML file.

        Args:
            pyproject_path: Path to pyproject.toml (or any TOML file)

        Returns:
            InstallerConfig with defaults for every key not present

        Raises:
            FileNotFoundError: If the file doesn't exist
            tomllib.TOMLDecodeError: If invalid TOML
            pydantic.ValidationError: If a value has the wrong type
        """
        if not pyproject_path.exists():
            raise FileNotFoundError(f"Config file not found: {pyproject_path}")

        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)

        section = data.get("tool", {}).get("nuget-installer", {})

        # TOML keys use dashes, model fields use underscores
        return cls(**{key.replace("-", "_"): value for key, value in section.items()})
