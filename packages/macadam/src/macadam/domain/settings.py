"""macadam settings domain entity."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from macadam.domain.exceptions import MacadamConfigError

DEFAULT_VERSION = "v0.1.1"
DEFAULT_INSTALL_DIR = Path("/opt/macadam/bin")
DEFAULT_BINARIES_DIR = Path(__file__).resolve().parent.parent / "binaries"
DEFAULT_RELEASE_URL = (
    "https://github.com/crc-org/macadam/releases/download/{version}/{artifact}"
)
BINARY_NAME = "macadam"

_SHA256_RE = re.compile(r"[0-9a-fA-F]{64}")


@dataclass(frozen=True)
class MacadamSettings:
    """Settings for locating and provisioning the macadam binary.

    Attributes:
        version: Expected macadam version; `macadam --version` output must
                end with this token.
        install_dir: Directory the macOS installer places the binary in,
                    and where Linux expects the prerequisite install.
        binaries_dir: Directory holding bundled binaries and installer packages.
        use_installer: On macOS, install system-wide from the universal
                      installer package instead of running a bundled binary.
        release_url: Template used to download a missing installer package.
                    Supports the {version} and {artifact} placeholders. None
                    disables downloads.
        checksums: Expected SHA256 hex digest per artifact name. Only
                  artifacts listed here are ever downloaded.
        helper_names: Helper executables macadam invokes at runtime.
        helper_platforms: Operating systems on which helpers are required.
    """

    version: str = DEFAULT_VERSION
    install_dir: Path = DEFAULT_INSTALL_DIR
    binaries_dir: Path = DEFAULT_BINARIES_DIR
    use_installer: bool = True
    release_url: str | None = DEFAULT_RELEASE_URL
    checksums: dict[str, str] = field(default_factory=dict)
    helper_names: tuple[str, ...] = ("vfkit", "gvproxy")
    helper_platforms: frozenset[str] = field(
        default_factory=lambda: frozenset({"darwin"})
    )

    def __post_init__(self) -> None:
        """Validate settings."""
        self._validate_version()
        self._validate_helper_names()
        self._validate_release_url()
        self._validate_checksums()

    def _validate_version(self) -> None:
        if not self.version or not self.version.strip():
            raise MacadamConfigError("version cannot be empty")
        if self.version != self.version.strip():
            raise MacadamConfigError(
                f"version cannot have leading/trailing whitespace, got: {self.version!r}"
            )

    def _validate_helper_names(self) -> None:
        for name in self.helper_names:
            if not name or not name.strip():
                raise MacadamConfigError("helper names cannot be empty")

    def _validate_release_url(self) -> None:
        if self.release_url is not None and "{artifact}" not in self.release_url:
            raise MacadamConfigError(
                f"release_url must contain an {{artifact}} placeholder, got: {self.release_url!r}"
            )

    def _validate_checksums(self) -> None:
        for artifact, checksum in self.checksums.items():
            if not _SHA256_RE.fullmatch(checksum):
                raise MacadamConfigError(
                    f"checksum for {artifact!r} must be a SHA256 hex digest, got: {checksum!r}"
                )

    @property
    def installed_binary(self) -> Path:
        """Return the fixed system-wide binary path."""
        return self.install_dir / BINARY_NAME

    def release_url_for(self, artifact: str) -> str | None:
        """Return the download URL of an artifact, or None if downloads are disabled."""
        if self.release_url is None:
            return None
        return self.release_url.format(version=self.version, artifact=artifact)

    def checksum_for(self, artifact: str) -> str | None:
        """Return the expected lower-case SHA256 of an artifact, if pinned."""
        checksum = self.checksums.get(artifact)
        return checksum.lower() if checksum is not None else None
