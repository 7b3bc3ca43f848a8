"""Binary provisioner use case.

Guarantees a runnable macadam binary exists, installing or upgrading it
on platforms that use an installer package, and locates the directory of
the helper executables macadam invokes at runtime.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from macadam.domain.binary import ArtifactKind, BinaryArtifact, Platform
from macadam.domain.exceptions import (
    BinaryDownloadError,
    BinaryNotFoundError,
    HelperLocationMismatchError,
    HelperNotFoundError,
    ProcessExecutionError,
)
from macadam.domain.process import RunOptions
from macadam.domain.settings import MacadamSettings
from macadam.usecases.platform_resolver import PlatformResolver

if TYPE_CHECKING:
    from macadam.adapters.ports import FileSystemPort, ProcessExecutorPort
    from macadam.usecases.binary_downloader import BinaryDownloader

logger = logging.getLogger(__name__)

MACOS_INSTALLER = Path("/usr/sbin/installer")


class BinaryProvisioner:
    """Use case for provisioning the macadam binary and its helpers.

    Behaviour per artifact kind:
    - BUNDLED: the binary shipped in the binaries directory is made executable.
    - SYSTEM: the fixed install path is returned as-is.
    - INSTALLER: the installer package runs, elevated, when the installed
      binary is missing, or when an upgrade is requested and the installed
      version does not match.

    Bundled binaries are never downloaded. A missing installer package is
    downloaded when a downloader is configured and a checksum is pinned for
    it, and is only installed once the checksum matches.
    """

    def __init__(
        self,
        resolver: PlatformResolver,
        filesystem: FileSystemPort,
        executor: ProcessExecutorPort,
        settings: MacadamSettings,
        downloader: BinaryDownloader | None = None,
    ) -> None:
        """Initialize the binary provisioner.

        Args:
            resolver: Maps the platform to the required artifact.
            filesystem: Port for existence checks, permissions and lookups.
            executor: Port for running the version check and the installer.
            settings: Locations and expected version.
            downloader: Optional downloader for a missing installer package.
        """
        self._resolver = resolver
        self._filesystem = filesystem
        self._executor = executor
        self._settings = settings
        self._downloader = downloader

    def ensure_binary(self, platform: Platform, upgrade: bool = False) -> Path:
        """Return the path of a runnable macadam binary for platform.

        Args:
            platform: Host platform.
            upgrade: Reinstall if the installed version is not the expected one.

        Returns:
            Absolute path to the macadam executable.

        Raises:
            PlatformUnsupportedError: If the platform has no artifact.
            BinaryNotFoundError: If a bundled binary or installer package is absent.
            BinaryDownloadError: If the installer package cannot be downloaded
                or fails verification.
            ProcessExecutionError: If the installer fails.
        """
        artifact = self._resolver.resolve(platform)

        if artifact.kind is ArtifactKind.SYSTEM:
            return self._settings.installed_binary

        if artifact.kind is ArtifactKind.BUNDLED:
            binary = self._settings.binaries_dir / artifact.name
            if not self._filesystem.exists(binary):
                raise BinaryNotFoundError(binary)
            self._filesystem.make_executable(binary)
            return binary

        target = self._settings.installed_binary
        if self._needs_install(target, upgrade):
            self._install(self._locate_installer(artifact))
        return target

    def ensure_helper_dir(self, platform: Platform) -> Path | None:
        """Return the directory holding the helper executables.

        Returns:
            The shared helper directory, or None if the platform needs no helpers.

        Raises:
            HelperNotFoundError: If a helper cannot be found.
            HelperLocationMismatchError: If helpers live in different directories.
        """
        if platform.os not in self._settings.helper_platforms:
            return None

        directories: list[Path] = []
        for name in self._settings.helper_names:
            found = self._filesystem.which(name, (self._settings.install_dir,))
            if found is None:
                raise HelperNotFoundError(name)
            if found.parent not in directories:
                directories.append(found.parent)

        if len(directories) > 1:
            raise HelperLocationMismatchError(directories)
        return directories[0] if directories else None

    def is_available(self, platform: Platform, check_version: bool = False) -> bool:
        """Return True if init() will not need to run the installer.

        Args:
            platform: Host platform.
            check_version: Also require the installed version to match.
        """
        artifact = self._resolver.resolve(platform)
        if artifact.kind is not ArtifactKind.INSTALLER:
            return True

        target = self._settings.installed_binary
        if not self._filesystem.exists(target):
            return False
        return not check_version or self.is_up_to_date(target)

    def is_up_to_date(self, binary: Path) -> bool:
        """Return True if `binary --version` reports the expected version.

        Execution failures count as out of date.
        """
        try:
            result = self._executor.exec(binary, ["--version"])
        except ProcessExecutionError as e:
            logger.debug("Version check of %s failed: %s", binary, e)
            return False
        return result.stdout.strip().endswith(self._settings.version)

    def _needs_install(self, target: Path, upgrade: bool) -> bool:
        if not self._filesystem.exists(target):
            logger.info("macadam not found at %s", target)
            return True
        if upgrade and not self.is_up_to_date(target):
            logger.info(
                "macadam at %s is not version %s", target, self._settings.version
            )
            return True
        return False

    def _install(self, package: Path) -> None:
        logger.info("Installing macadam from %s", package)
        self._executor.exec(
            MACOS_INSTALLER,
            ["-pkg", str(package), "-target", "/"],
            RunOptions(is_admin=True),
        )

    def _locate_installer(self, artifact: BinaryArtifact) -> Path:
        path = self._settings.binaries_dir / artifact.name
        if self._filesystem.exists(path):
            return path

        url = self._settings.release_url_for(artifact.name)
        if self._downloader is None or url is None:
            raise BinaryNotFoundError(path)

        expected = self._settings.checksum_for(artifact.name)
        if expected is None:
            raise BinaryDownloadError(
                f"no checksum configured for {artifact.name}, refusing to install "
                "an unverified download",
                url=url,
            )

        logger.info("Downloading %s from %s", artifact.name, url)
        result = self._downloader.download(url, path, expected_checksum=expected)
        if not result.success:
            raise BinaryDownloadError(
                f"failed to download {artifact.name}: {result.error}", url=url
            )
        return path
