"""HTTPX-based implementation of the BinaryDownloaderPort.

This adapter uses httpx to download macadam release artifacts.
"""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from pathlib import Path

import httpx

from macadam.adapters.ports import BinaryDownloaderPort
from macadam.domain.binary import BinaryMetadata


class HttpxBinaryDownloader:
    """HTTPX-based adapter for downloading macadam release artifacts.

    Streams the artifact to disk while computing its SHA256 checksum.
    GitHub release URLs redirect to a CDN, so redirects are followed.

    Attributes:
        version: Release version the downloaded artifacts belong to.
    """

    def __init__(
        self,
        version: str,
        client: httpx.Client | None = None,
        timeout: float = 60.0,
    ) -> None:
        """Initialize the HTTPX binary downloader.

        Args:
            version: Release version of the artifacts being downloaded.
            client: Optional httpx.Client for dependency injection (testing).
                   If not provided, a new client is created per request.
            timeout: Request timeout in seconds for self-created clients.
        """
        self.version = version
        self._client = client
        self._timeout = timeout

    def download(self, url: str, destination: Path) -> BinaryMetadata:
        """Download an artifact from url to destination.

        Args:
            url: Remote URL to download the artifact from.
            destination: Local filesystem path to save the artifact to.
                The parent directory must exist.

        Returns:
            BinaryMetadata with checksum, size and download timestamp.

        Raises:
            httpx.RequestError: For network failures.
            httpx.HTTPStatusError: For HTTP errors (4xx, 5xx).
            OSError: For filesystem errors (e.g., parent directory not found).
        """
        if self._client is not None:
            checksum, size = self._stream_to(self._client, url, destination)
        else:
            with httpx.Client(follow_redirects=True, timeout=self._timeout) as client:
                checksum, size = self._stream_to(client, url, destination)

        return BinaryMetadata(
            artifact=destination.name,
            version=self.version,
            path=destination,
            checksum=checksum,
            size_bytes=size,
            downloaded_at=datetime.now(timezone.utc),
        )

    @staticmethod
    def _stream_to(
        client: httpx.Client, url: str, destination: Path
    ) -> tuple[str, int]:
        digest = hashlib.sha256()
        size = 0
        with client.stream("GET", url) as response:
            response.raise_for_status()
            with destination.open("wb") as f:
                for chunk in response.iter_bytes():
                    f.write(chunk)
                    digest.update(chunk)
                    size += len(chunk)
        return digest.hexdigest(), size


# Runtime protocol check
assert isinstance(HttpxBinaryDownloader(version="v0.0.0"), BinaryDownloaderPort)
