"""Platform detector adapter for detecting current OS and architecture.

This module provides an adapter that implements PlatformDetectorPort
by using Python's standard library platform module.
"""

from __future__ import annotations

import platform

from macadam.domain.binary import Platform

UNKNOWN = "unknown"


class OsPlatformDetector:
    """Adapter that detects the current platform using platform module.

    Known values are normalized; anything else is passed through lower-cased
    so that the PlatformResolver can reject it with the offending names.
    Values the platform module cannot determine are reported as "unknown".

    Machine type mappings:
        - x86_64, AMD64, x64 -> amd64
        - aarch64, arm64 -> arm64
    """

    # Mapping from platform.system() values to our normalized OS names
    _OS_MAP: dict[str, str] = {
        "linux": "linux",
        "darwin": "darwin",
        "windows": "windows",
    }

    # Mapping from platform.machine() values to our normalized arch names
    _ARCH_MAP: dict[str, str] = {
        "x86_64": "amd64",
        "amd64": "amd64",
        "x64": "amd64",
        "aarch64": "arm64",
        "arm64": "arm64",
    }

    def detect(self) -> Platform:
        """Detect the current platform.

        Returns:
            Platform value object with os and arch fields.
        """
        system = platform.system().lower() or UNKNOWN
        machine = platform.machine().lower() or UNKNOWN
        return Platform(
            os=self._OS_MAP.get(system, system),
            arch=self._ARCH_MAP.get(machine, machine),
        )
