"""Port interfaces for the macadam core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from macadam.domain.binary import BinaryMetadata, Platform
    from macadam.domain.process import ExecResult, RunOptions


@runtime_checkable
class PlatformDetectorPort(Protocol):
    """Port interface for detecting the host platform.

    Contract:
        - detect() returns the normalized OS and architecture
        - Results are consistent across calls
    """

    def detect(self) -> Platform:
        """Detect the current platform.

        Returns:
            Platform value object with os and arch fields.
        """
        ...


@runtime_checkable
class ProcessExecutorPort(Protocol):
    """Port interface for running external processes.

    Implementations spawn the executable with an argument vector (never
    through a shell), capture stdout/stderr and merge the requested
    environment over the inherited one.

    Contract:
        - exec() returns an ExecResult when the process succeeds
        - exec() raises ProcessExecutionError on non-zero exit status,
          non-empty stderr, launch failure or timeout
        - options.is_admin runs the process with elevated privileges
    """

    def exec(
        self,
        path: Path,
        args: Sequence[str],
        options: RunOptions | None = None,
    ) -> ExecResult:
        """Run an executable to completion.

        Args:
            path: Executable to run.
            args: Arguments passed verbatim.
            options: Working directory, elevation and environment overlay.

        Returns:
            ExecResult with captured output and the executed command line.

        Raises:
            ProcessExecutionError: If the process fails.
        """
        ...


@runtime_checkable
class FileSystemPort(Protocol):
    """Port interface for filesystem primitives.

    Contract:
        - exists(path) returns True if a file exists at path
        - make_executable(path) sets the executable permission bits
        - which(name, search_dirs) returns the first matching executable,
          looking in search_dirs before the PATH, or None
    """

    def exists(self, path: Path) -> bool:
        """Check if a file exists at path."""
        ...

    def make_executable(self, path: Path) -> None:
        """Set permissions of path to 0o755."""
        ...

    def which(self, name: str, search_dirs: Sequence[Path] = ()) -> Path | None:
        """Find an executable by name.

        Args:
            name: Executable name.
            search_dirs: Directories searched before the PATH.

        Returns:
            Path of the executable, or None if not found.
        """
        ...


@runtime_checkable
class BinaryDownloaderPort(Protocol):
    """Port interface for downloading release artifacts.

    Contract:
        - download(url, destination) writes the remote content to destination
        - Returns BinaryMetadata describing the written file
        - Raises on network, HTTP or filesystem failures
    """

    def download(self, url: str, destination: Path) -> BinaryMetadata:
        """Download url to destination.

        Args:
            url: Remote URL of the artifact.
            destination: Local path to write. The parent directory must exist.

        Returns:
            BinaryMetadata of the downloaded artifact.
        """
        ...


@runtime_checkable
class TimeProvider(Protocol):
    """Port interface for time operations.

    Contract:
        - get_time_seconds() returns current Unix timestamp as float
        - Successive calls must return non-decreasing values
    """

    def get_time_seconds(self) -> float:
        """Return current Unix timestamp in seconds."""
        ...


class RealTimeProvider:
    """Default implementation: provides real system time."""

    def get_time_seconds(self) -> float:
        """Return current Unix timestamp in seconds."""
        return time.time()
