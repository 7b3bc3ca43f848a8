"""Fake process executor for testing.

Provides a test double for ProcessExecutorPort that returns
preconfigured output without spawning processes.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from macadam.domain.process import ExecResult, RunOptions


@dataclass(frozen=True)
class ExecCall:
    """Record of a single exec() call.

    Attributes:
        path: Executable that was run.
        args: Arguments passed to it.
        options: Run options, None if not provided.
    """

    path: Path
    args: tuple[str, ...]
    options: RunOptions | None


class FakeProcessExecutor:
    """Fake implementation of ProcessExecutorPort for testing.

    Responses and exceptions can be configured globally or per first
    argument (the macadam subcommand, '--version', '-pkg', ...). Per-argument
    configuration wins over the global one.

    Example:
        >>> fake = FakeProcessExecutor()
        >>> fake.add_response("--version", stdout="macadam version v0.1.1")
        >>> fake.exec(Path("/opt/macadam/bin/macadam"), ["--version"]).stdout
        'macadam version v0.1.1'
    """

    def __init__(self, stdout: str = "") -> None:
        """Initialize with the default stdout returned by exec()."""
        self._default_stdout = stdout
        self._responses: dict[str, str] = {}
        self._exceptions: dict[str, BaseException] = {}
        self._exception: BaseException | None = None
        self._calls: list[ExecCall] = []

    @property
    def calls(self) -> list[ExecCall]:
        """Return a copy of the recorded calls."""
        return list(self._calls)

    def calls_for(self, first_arg: str) -> list[ExecCall]:
        """Return recorded calls whose first argument is first_arg."""
        return [c for c in self._calls if c.args[:1] == (first_arg,)]

    def set_response(self, stdout: str) -> None:
        """Configure the default stdout."""
        self._default_stdout = stdout

    def add_response(self, first_arg: str, stdout: str) -> None:
        """Configure stdout for calls whose first argument is first_arg."""
        self._responses[first_arg] = stdout

    def set_exception(
        self,
        exception: BaseException | None,
        first_arg: str | None = None,
    ) -> None:
        """Configure an exception to raise, globally or for one first argument.

        Passing None clears the configured exception.
        """
        if first_arg is None:
            self._exception = exception
        elif exception is None:
            self._exceptions.pop(first_arg, None)
        else:
            self._exceptions[first_arg] = exception

    def clear_calls(self) -> None:
        """Clear the recorded calls list."""
        self._calls.clear()

    def exec(
        self,
        path: Path,
        args: Sequence[str],
        options: RunOptions | None = None,
    ) -> ExecResult:
        """Record the call, then raise or return the configured output."""
        args = tuple(args)
        self._calls.append(ExecCall(path=path, args=args, options=options))

        key = args[0] if args else ""
        if key in self._exceptions:
            raise self._exceptions[key]
        if self._exception is not None:
            raise self._exception

        return ExecResult(
            stdout=self._responses.get(key, self._default_stdout),
            stderr="",
            command=shlex.join([str(path), *args]),
        )
