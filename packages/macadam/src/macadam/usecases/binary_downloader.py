"""Binary downloader use case for orchestrating macadam artifact downloads."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from macadam.adapters.ports import BinaryDownloaderPort
    from macadam.domain.binary import BinaryMetadata

PARTIAL_SUFFIX = ".part"


@dataclass(frozen=True)
class BinaryDownloadResult:
    """Result of a binary download operation.

    Attributes:
        success: True if download succeeded, False otherwise.
        metadata: BinaryMetadata if download succeeded, None otherwise.
        error: Error message if download failed, None otherwise.
    """

    success: bool
    metadata: BinaryMetadata | None
    error: str | None

    @classmethod
    def create_success(cls, metadata: BinaryMetadata) -> BinaryDownloadResult:
        return cls(success=True, metadata=metadata, error=None)

    @classmethod
    def create_failure(cls, error: str) -> BinaryDownloadResult:
        return cls(success=False, metadata=None, error=error)


class BinaryDownloader:
    """Orchestrates macadam artifact downloads.

    The port writes to a sibling "<name>.part" file. The destination only
    appears once the transfer completed and, when an expected checksum is
    given, the content matched it. The partial file is always removed, so an
    interrupted download never leaves anything at the destination.
    """

    def __init__(self, port: BinaryDownloaderPort) -> None:
        self._port = port

    def download(
        self,
        url: str,
        destination: Path,
        expected_checksum: str | None = None,
    ) -> BinaryDownloadResult:
        """Download an artifact from url to destination.

        Creates the destination directory if needed.

        Args:
            url: Remote URL of the artifact.
            destination: Final path of the artifact.
            expected_checksum: SHA256 hex digest the content must match.

        Returns:
            BinaryDownloadResult containing success status, metadata (on
            success), or error message (on failure).
        """
        partial = partial_path(destination)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            metadata = self._port.download(url, partial)
            if expected_checksum is not None and (
                metadata.checksum is None
                or metadata.checksum.lower() != expected_checksum.lower()
            ):
                return BinaryDownloadResult.create_failure(
                    f"checksum mismatch for {destination.name}: "
                    f"expected {expected_checksum}, got {metadata.checksum}"
                )
            partial.replace(destination)
            return BinaryDownloadResult.create_success(
                dataclasses.replace(
                    metadata, artifact=destination.name, path=destination
                )
            )
        except Exception as e:
            return BinaryDownloadResult.create_failure(str(e))
        finally:
            partial.unlink(missing_ok=True)


def partial_path(destination: Path) -> Path:
    """Return the temporary path a download of destination is written to."""
    return destination.with_name(destination.name + PARTIAL_SUFFIX)
