"""Factory functions for creating macadam clients.

Wires MacadamClient to the real adapters. Handles optional dependency
imports gracefully.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from macadam.adapters.httpx_binary_downloader import HttpxBinaryDownloader
from macadam.adapters.local_filesystem import LocalFileSystem
from macadam.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from macadam.adapters.platform_detector import OsPlatformDetector
from macadam.adapters.subprocess_executor import SubprocessExecutor
from macadam.client import MacadamClient
from macadam.domain.settings import MacadamSettings
from macadam.usecases.binary_downloader import BinaryDownloader
from macadam.usecases.binary_provisioner import BinaryProvisioner
from macadam.usecases.platform_resolver import PlatformResolver

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry


class PrometheusClientNotInstalledError(ImportError):
    """Raised when metrics are requested but prometheus-client is not installed.

    Install with: pip install macadam-py[metrics]
    """

    def __init__(self) -> None:
        super().__init__(
            "prometheus-client is not installed. "
            "Install with: pip install macadam-py[metrics]"
        )


def create_metrics_adapter(
    enabled: bool,
    prefix: str = "macadam",
    client: str = "default",
    registry: CollectorRegistry | None = None,
) -> MetricsPort:
    """Return a Prometheus adapter when enabled, a no-op adapter otherwise.

    Adapters created with the same prefix and registry share collectors and
    are told apart by their client label.

    Raises:
        PrometheusClientNotInstalledError: If enabled and prometheus-client
            is not installed.
    """
    if not enabled:
        return NoOpMetricsAdapter()

    try:
        from macadam.adapters.prometheus_metrics import PrometheusMetricsAdapter

        return PrometheusMetricsAdapter(prefix=prefix, registry=registry, client=client)
    except ImportError as exc:
        raise PrometheusClientNotInstalledError() from exc


def create_macadam_client(
    type_label: str,
    settings: MacadamSettings | None = None,
    *,
    enable_metrics: bool = False,
    metrics_registry: CollectorRegistry | None = None,
    timeout: float | None = None,
) -> MacadamClient:
    """Create a MacadamClient using the host platform, filesystem and processes.

    Args:
        type_label: Caller type label; VM names are prefixed with "<type_label>-".
        settings: Provisioning settings. Defaults to MacadamSettings().
        enable_metrics: Export Prometheus metrics for every invocation,
            labelled with type_label.
        metrics_registry: Prometheus registry to export into. Defaults to
            the global registry.
        timeout: Seconds before a macadam process is killed, or None for no limit.

    Returns:
        An uninitialized MacadamClient. Call init() before any VM operation.

    Example:
        >>> client = create_macadam_client("podman-desktop")
        >>> client.init(upgrade_binaries=True)
    """
    settings = settings if settings is not None else MacadamSettings()
    executor = SubprocessExecutor(timeout=timeout)
    downloader = (
        BinaryDownloader(HttpxBinaryDownloader(version=settings.version))
        if settings.release_url is not None
        else None
    )
    provisioner = BinaryProvisioner(
        resolver=PlatformResolver(settings),
        filesystem=LocalFileSystem(),
        executor=executor,
        settings=settings,
        downloader=downloader,
    )
    return MacadamClient(
        type_label,
        platform_detector=OsPlatformDetector(),
        provisioner=provisioner,
        executor=executor,
        metrics=create_metrics_adapter(
            enable_metrics, client=type_label, registry=metrics_registry
        ),
    )
