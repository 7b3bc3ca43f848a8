"""Subprocess-based implementation of the ProcessExecutorPort.

Runs executables with an argument vector, never through a shell, and
treats a non-zero exit status or any stderr output as a failure.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from macadam.domain.exceptions import ProcessExecutionError
from macadam.domain.process import ExecResult, RunOptions

logger = logging.getLogger(__name__)


class SubprocessExecutor:
    """Adapter running processes with the subprocess module.

    Elevated execution goes through `osascript ... with administrator
    privileges` on macOS and `pkexec` on Linux. Elevation is not available
    on other platforms.

    Attributes:
        timeout: Seconds before a process is killed, or None for no limit.
    """

    def __init__(
        self,
        timeout: float | None = None,
        platform: str | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            timeout: Seconds before a process is killed, or None for no limit.
            platform: sys.platform value to build elevated commands for.
                     Defaults to the running interpreter's platform.
        """
        self.timeout = timeout
        self._platform = platform if platform is not None else sys.platform

    def exec(
        self,
        path: Path,
        args: Sequence[str],
        options: RunOptions | None = None,
    ) -> ExecResult:
        """Run path with args to completion.

        Raises:
            ProcessExecutionError: On launch failure, timeout, non-zero exit
                status or non-empty stderr.
        """
        options = options or RunOptions()
        argv = [str(path), *args]
        command = shlex.join(argv)

        if options.is_admin:
            argv = self._elevate(argv, options, command)

        env = {**os.environ, **options.env}
        logger.debug("Running %s", command)

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                cwd=options.cwd,
                env=env,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise ProcessExecutionError(
                command,
                exit_code=None,
                stderr=f"timed out after {e.timeout} seconds",
            ) from e
        except OSError as e:
            raise ProcessExecutionError(command, exit_code=None, stderr=str(e)) from e

        if completed.returncode != 0 or completed.stderr:
            raise ProcessExecutionError(
                command,
                exit_code=completed.returncode,
                stdout=completed.stdout,
                stderr=completed.stderr,
            )

        return ExecResult(
            stdout=completed.stdout,
            stderr=completed.stderr,
            command=command,
        )

    def _elevate(
        self,
        argv: list[str],
        options: RunOptions,
        command: str,
    ) -> list[str]:
        """Wrap argv so it runs with administrator privileges.

        Elevation helpers reset the environment, so the overlay is passed
        explicitly through env(1).
        """
        if options.env:
            argv = ["env", *(f"{k}={v}" for k, v in options.env.items()), *argv]

        if self._platform == "darwin":
            script = shlex.join(argv).replace("\\", "\\\\").replace('"', '\\"')
            return [
                "osascript",
                "-e",
                f'do shell script "{script}" with administrator privileges',
            ]

        if self._platform.startswith("linux"):
            return ["pkexec", *argv]

        raise ProcessExecutionError(
            command,
            exit_code=None,
            stderr=f"elevated execution is not supported on {self._platform}",
        )
