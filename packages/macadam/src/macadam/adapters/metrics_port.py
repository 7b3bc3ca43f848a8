"""Port interface and no-op implementation for metrics collection.

Metrics ports follow fire-and-forget semantics: implementations may
buffer, sample, or drop metrics as needed. No exceptions should propagate.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsPort(Protocol):
    """Port interface for metrics collection.

    Contract:
        - All methods are fire-and-forget (no return value, no exceptions)
        - Thread safety is implementation-defined
        - Implementations may no-op if metrics are disabled
    """

    def record_command(
        self,
        operation: str,
        success: bool,
        duration_seconds: float,
    ) -> None:
        """Record one macadam invocation.

        Args:
            operation: Operation name (e.g. 'create', 'list').
            success: True if the process completed successfully.
            duration_seconds: Wall-clock duration of the invocation.
        """
        ...

    def set_initialized(self, initialized: bool) -> None:
        """Set the client initialization gauge.

        Args:
            initialized: True once init() succeeded (1), False otherwise (0).
        """
        ...


class NoOpMetricsAdapter:
    """No-operation metrics adapter for when metrics are disabled.

    Example:
        >>> adapter = NoOpMetricsAdapter()
        >>> adapter.record_command("list", True, 0.1)  # Does nothing
    """

    def record_command(
        self,
        operation: str,
        success: bool,
        duration_seconds: float,
    ) -> None:
        """No-op."""
        pass

    def set_initialized(self, initialized: bool) -> None:
        """No-op."""
        pass
