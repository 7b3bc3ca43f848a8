"""Binary-related domain value objects.

This module contains value objects describing the host platform, the
macadam artifact required for it, and metadata about downloaded binaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from macadam.domain.exceptions import MacadamConfigError


@dataclass(frozen=True)
class Platform:
    """Platform value object representing OS and architecture.

    Values are normalized identifiers such as 'windows', 'darwin', 'linux'
    and 'amd64', 'arm64'. Unknown values are accepted here so that the
    PlatformResolver can report the offending pair.

    Attributes:
        os: Operating system identifier.
        arch: Architecture identifier.
    """

    os: str
    arch: str

    def __post_init__(self) -> None:
        """Validate platform configuration."""
        if not self.os or not self.os.strip():
            raise MacadamConfigError("os cannot be empty")
        if not self.arch or not self.arch.strip():
            raise MacadamConfigError("arch cannot be empty")

    @property
    def key(self) -> tuple[str, str]:
        """Return the (os, arch) lookup key."""
        return (self.os, self.arch)


class ArtifactKind(Enum):
    """How a macadam binary is obtained on a platform.

    Attributes:
        BUNDLED: Binary ships in the package binaries directory.
        INSTALLER: An installer package installs the binary system-wide.
        SYSTEM: Binary is a manual prerequisite at a fixed path.
    """

    BUNDLED = "bundled"
    INSTALLER = "installer"
    SYSTEM = "system"


@dataclass(frozen=True)
class BinaryArtifact:
    """The artifact required to run macadam on a platform.

    Attributes:
        kind: How the artifact is obtained.
        name: File name of the artifact (binary or installer package).
    """

    kind: ArtifactKind
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise MacadamConfigError("artifact name cannot be empty")


@dataclass(frozen=True)
class BinaryMetadata:
    """Metadata describing a downloaded artifact.

    Attributes:
        artifact: Name of the artifact that was downloaded.
        version: Release version the artifact belongs to.
        path: Local path the artifact was written to.
        checksum: Optional SHA256 hash of the content.
        size_bytes: Optional size of the content in bytes.
        downloaded_at: Optional timestamp of the download.
    """

    artifact: str
    version: str
    path: Path
    checksum: str | None = None
    size_bytes: int | None = None
    downloaded_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.size_bytes is not None and self.size_bytes < 0:
            raise MacadamConfigError(
                f"size_bytes must be non-negative, got: {self.size_bytes}"
            )
        if self.checksum is not None and not self.checksum:
            raise MacadamConfigError("checksum cannot be empty if provided")
