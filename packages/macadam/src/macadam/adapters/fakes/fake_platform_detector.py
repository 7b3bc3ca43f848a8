"""Fake platform detector for testing.

This module provides a fake implementation of PlatformDetectorPort
that allows tests to control platform detection without relying on
actual OS/architecture detection.
"""

from __future__ import annotations

from macadam.domain.binary import Platform


class FakePlatformDetector:
    """Fake implementation of PlatformDetectorPort for testing.

    Example:
        >>> fake = FakePlatformDetector.from_tuple("darwin", "arm64")
        >>> fake.detect()
        Platform(os='darwin', arch='arm64')
    """

    def __init__(self, platform: Platform) -> None:
        """Initialize with the platform to return.

        Args:
            platform: The Platform value object to return from detect().
        """
        self._platform = platform

    @classmethod
    def from_tuple(cls, os: str, arch: str) -> FakePlatformDetector:
        """Create a FakePlatformDetector from OS and architecture strings."""
        return cls(Platform(os=os, arch=arch))

    def detect(self) -> Platform:
        """Return the configured platform."""
        return self._platform
