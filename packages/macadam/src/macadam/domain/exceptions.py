"""Domain exceptions.

Exception hierarchy:
- MacadamError: Base exception for everything raised by this package.
  - MacadamConfigError: Invalid settings or value objects.
    - BinaryDownloadError: Release artifact could not be fetched.
  - PlatformUnsupportedError: No binary mapping for the OS/architecture.
  - BinaryNotFoundError: A required binary or installer is absent.
  - HelperNotFoundError: A helper executable is not on the search path.
  - HelperLocationMismatchError: Helper executables split across directories.
  - NotInitializedError: Lifecycle operation invoked before init().
  - InvariantViolationError: Name ownership contract broken (programmer error).
  - ProcessExecutionError: The macadam process failed.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class MacadamError(Exception):
    """Base class for all macadam-py errors."""

    pass


class MacadamConfigError(MacadamError):
    """Raised when macadam configuration is invalid.

    Raised by domain value objects (e.g., MacadamSettings, Platform) and by
    the SettingsParser use case when validation fails.
    """

    pass


class BinaryDownloadError(MacadamConfigError):
    """Raised when a release artifact download fails.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed to download (optional).
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.original_error = original_error


class PlatformUnsupportedError(MacadamError):
    """Raised when no macadam binary exists for the OS/architecture pair.

    Attributes:
        os: The offending operating system.
        arch: The offending architecture.
    """

    def __init__(self, os: str, arch: str) -> None:
        super().__init__(
            f"binary not found for platform {os} and architecture {arch}"
        )
        self.os = os
        self.arch = arch


class BinaryNotFoundError(MacadamError):
    """Raised when a binary or installer package expected on disk is absent."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"macadam artifact not found at {path}")
        self.path = path


class HelperNotFoundError(MacadamError):
    """Raised when a required helper executable cannot be located."""

    def __init__(self, name: str) -> None:
        super().__init__(f"helper executable {name!r} not found on search path")
        self.name = name


class HelperLocationMismatchError(MacadamError):
    """Raised when required helper executables live in different directories.

    Attributes:
        directories: The conflicting directories, in discovery order.
    """

    def __init__(self, directories: Sequence[Path]) -> None:
        joined = ", ".join(str(d) for d in directories)
        super().__init__(
            f"helper executables must be in the same directory, found: {joined}"
        )
        self.directories = tuple(directories)


class NotInitializedError(MacadamError):
    """Raised when a VM operation is invoked before MacadamClient.init()."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}: macadam is not initialized, call init() first")
        self.operation = operation


class InvariantViolationError(MacadamError):
    """Raised when an internal contract is broken.

    Signals a programming error rather than a user-facing condition.
    """

    pass


class ProcessExecutionError(MacadamError):
    """Raised when an executed process fails.

    A process fails when it cannot be launched, times out, exits with a
    non-zero status, or writes to stderr.

    Attributes:
        command: The full command line that was executed.
        exit_code: Process exit status, or None if it never completed.
        stdout: Captured standard output.
        stderr: Captured standard error.
    """

    def __init__(
        self,
        command: str,
        exit_code: int | None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        detail = stderr.strip() or f"exit status {exit_code}"
        super().__init__(f"command failed: {command}: {detail}")
        self.command = command
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
