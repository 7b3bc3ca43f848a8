"""Fake metrics adapter for testing.

Provides a test double for MetricsPort that records all metric updates
for assertion in tests.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandMetric:
    """Record of a single record_command() call.

    Attributes:
        operation: Operation name.
        success: Whether the invocation succeeded.
        duration_seconds: Reported duration.
    """

    operation: str
    success: bool
    duration_seconds: float


class FakeMetricsAdapter:
    """Fake implementation of MetricsPort for testing.

    Example:
        >>> fake = FakeMetricsAdapter()
        >>> fake.record_command("list", True, 0.5)
        >>> fake.commands
        [CommandMetric(operation='list', success=True, duration_seconds=0.5)]
    """

    def __init__(self) -> None:
        self._commands: list[CommandMetric] = []
        self._initialized: bool | None = None

    @property
    def commands(self) -> list[CommandMetric]:
        """Return a copy of recorded commands in invocation order."""
        return list(self._commands)

    @property
    def current_initialized(self) -> bool | None:
        """Return last set initialization state, or None if never set."""
        return self._initialized

    def record_command(
        self,
        operation: str,
        success: bool,
        duration_seconds: float,
    ) -> None:
        self._commands.append(CommandMetric(operation, success, duration_seconds))

    def set_initialized(self, initialized: bool) -> None:
        self._initialized = initialized

    def reset(self) -> None:
        """Reset all state and calls."""
        self._commands.clear()
        self._initialized = None
