"""Platform resolver use case mapping a platform to the macadam artifact."""

from __future__ import annotations

from macadam.domain.binary import ArtifactKind, BinaryArtifact, Platform
from macadam.domain.exceptions import PlatformUnsupportedError
from macadam.domain.settings import BINARY_NAME, MacadamSettings

# Binaries shipped in the package binaries directory.
BUNDLED_BINARIES: dict[tuple[str, str], str] = {
    ("windows", "amd64"): "macadam-windows-amd64.exe",
    ("darwin", "arm64"): "macadam-darwin-arm64",
    ("darwin", "amd64"): "macadam-darwin-amd64",
}

# Universal installer packages, keyed by OS only.
INSTALLER_PACKAGES: dict[str, str] = {
    "darwin": "macadam-installer-macos-universal.pkg",
}

# Platforms where macadam is a manual prerequisite installed at the
# fixed install path.
SYSTEM_PLATFORMS: frozenset[tuple[str, str]] = frozenset(
    {
        ("linux", "amd64"),
        ("linux", "arm64"),
    }
)


class PlatformResolver:
    """Resolves which macadam artifact a platform requires.

    Pure table lookup with no I/O.
    """

    def __init__(self, settings: MacadamSettings) -> None:
        self._settings = settings

    def resolve(self, platform: Platform) -> BinaryArtifact:
        """Return the artifact required on platform.

        Raises:
            PlatformUnsupportedError: If no artifact exists for the pair.
        """
        if platform.key in SYSTEM_PLATFORMS:
            return BinaryArtifact(kind=ArtifactKind.SYSTEM, name=BINARY_NAME)

        if platform.key in BUNDLED_BINARIES:
            if self._settings.use_installer and platform.os in INSTALLER_PACKAGES:
                return BinaryArtifact(
                    kind=ArtifactKind.INSTALLER,
                    name=INSTALLER_PACKAGES[platform.os],
                )
            return BinaryArtifact(
                kind=ArtifactKind.BUNDLED,
                name=BUNDLED_BINARIES[platform.key],
            )

        raise PlatformUnsupportedError(platform.os, platform.arch)
