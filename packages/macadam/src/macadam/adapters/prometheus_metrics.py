"""Prometheus metrics adapter for macadam.

Implements MetricsPort using prometheus-client library.
Gracefully handles missing prometheus-client (raises ImportError at init).
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram


@dataclass(frozen=True)
class _Collectors:
    commands: Counter
    duration: Histogram
    initialized: Gauge


# Collectors can be registered only once per registry and name, so adapters
# for several clients in one process share them and differ by label.
_collectors: dict[tuple[CollectorRegistry, str], _Collectors] = {}
_collectors_lock = threading.Lock()


class PrometheusMetricsAdapter:
    """Prometheus implementation of MetricsPort.

    All metrics use a configurable prefix (default 'macadam_') and carry a
    `client` label holding the caller's type label, so any number of clients
    can export into the same registry.

    This adapter requires prometheus-client to be installed:
        pip install macadam-py[metrics]

    Example:
        >>> adapter = PrometheusMetricsAdapter(client="podman-desktop")
        >>> adapter.record_command("list", True, 0.25)
        >>> adapter.set_initialized(True)

    Raises:
        ImportError: If prometheus-client is not installed.
    """

    def __init__(
        self,
        prefix: str = "macadam",
        registry: CollectorRegistry | None = None,
        client: str = "default",
    ) -> None:
        """Initialize Prometheus collectors.

        Args:
            prefix: Metric name prefix. Defaults to "macadam".
            registry: Registry to register collectors in. Defaults to the
                     global prometheus-client registry.
            client: Value of the `client` label on every series.

        Raises:
            ImportError: If prometheus-client is not installed.
        """
        # Import here to make prometheus-client optional
        from prometheus_client import REGISTRY

        registry = registry if registry is not None else REGISTRY
        collectors = _collectors_for(registry, prefix)

        self._client = client
        self._commands = collectors.commands
        self._duration = collectors.duration
        self._initialized = collectors.initialized.labels(client=client)

    @property
    def client(self) -> str:
        return self._client

    def record_command(
        self,
        operation: str,
        success: bool,
        duration_seconds: float,
    ) -> None:
        """Count the invocation and observe its duration."""
        outcome = "success" if success else "failure"
        self._commands.labels(
            client=self._client, operation=operation, outcome=outcome
        ).inc()
        self._duration.labels(client=self._client, operation=operation).observe(
            duration_seconds
        )

    def set_initialized(self, initialized: bool) -> None:
        """Set initialization gauge to 1 or 0."""
        self._initialized.set(1 if initialized else 0)


def _collectors_for(registry: CollectorRegistry, prefix: str) -> _Collectors:
    from prometheus_client import Counter, Gauge, Histogram

    with _collectors_lock:
        key = (registry, prefix)
        if key not in _collectors:
            _collectors[key] = _Collectors(
                commands=Counter(
                    f"{prefix}_commands_total",
                    "macadam invocations by client, operation and outcome",
                    ["client", "operation", "outcome"],
                    registry=registry,
                ),
                duration=Histogram(
                    f"{prefix}_command_duration_seconds",
                    "Duration of macadam invocations",
                    ["client", "operation"],
                    registry=registry,
                ),
                initialized=Gauge(
                    f"{prefix}_initialized",
                    "Client initialization status: 1=ready, 0=not initialized",
                    ["client"],
                    registry=registry,
                ),
            )
        return _collectors[key]
