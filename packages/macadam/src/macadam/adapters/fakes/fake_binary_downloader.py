"""Fake binary downloader for testing.

Provides a test double for BinaryDownloaderPort that returns
preconfigured values without network operations.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from macadam.domain.binary import BinaryMetadata


class FakeBinaryDownloader:
    """Fake implementation of BinaryDownloaderPort for testing.

    Records all calls and writes nothing unless write_content is set, in
    which case the content is written to the destination and its SHA256
    is reported in the metadata.

    Example:
        >>> fake = FakeBinaryDownloader()
        >>> fake.download("https://example.com/macadam", Path("/tmp/macadam")).version
        'v0.1.1'
    """

    def __init__(
        self,
        version: str = "v0.1.1",
        write_content: bytes | None = None,
    ) -> None:
        """Initialize the fake.

        Args:
            version: Version reported in returned metadata.
            write_content: Bytes written to the destination, or None to skip writing.
        """
        self._version = version
        self._write_content = write_content
        self._exception: BaseException | None = None
        self._calls: list[tuple[str, Path]] = []

    @property
    def calls(self) -> list[tuple[str, Path]]:
        """Return list of (url, destination) tuples from download() calls."""
        return list(self._calls)

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from download(), or None to clear."""
        self._exception = exception

    def download(self, url: str, destination: Path) -> BinaryMetadata:
        """Record the call, then raise or return metadata for destination."""
        self._calls.append((url, destination))

        if self._exception is not None:
            raise self._exception

        size = None
        checksum = None
        if self._write_content is not None:
            destination.write_bytes(self._write_content)
            size = len(self._write_content)
            checksum = hashlib.sha256(self._write_content).hexdigest()

        return BinaryMetadata(
            artifact=destination.name,
            version=self._version,
            path=destination,
            checksum=checksum,
            size_bytes=size,
        )
