"""Process execution value objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class RunOptions:
    """Options forwarded to the process executor.

    Attributes:
        cwd: Working directory of the process, or None to inherit.
        is_admin: Run the process with elevated privileges.
        env: Extra environment variables merged over the inherited environment.
    """

    cwd: Path | None = None
    is_admin: bool = False
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ExecResult:
    """Outcome of a successful process execution.

    Attributes:
        stdout: Captured standard output.
        stderr: Captured standard error (empty on success).
        command: The command line that was executed.
    """

    stdout: str
    stderr: str
    command: str
