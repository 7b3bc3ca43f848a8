"""Interface adapters: Generic adapters for file I/O and subprocess execution."""

from macadam.adapters.ports import (
    BinaryDownloaderPort,
    FileSystemPort,
    PlatformDetectorPort,
    ProcessExecutorPort,
    RealTimeProvider,
    TimeProvider,
)
from macadam.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from macadam.adapters.local_filesystem import LocalFileSystem
from macadam.adapters.platform_detector import OsPlatformDetector
from macadam.adapters.subprocess_executor import SubprocessExecutor
from macadam.adapters.httpx_binary_downloader import HttpxBinaryDownloader

__all__ = [
    "BinaryDownloaderPort",
    "FileSystemPort",
    "PlatformDetectorPort",
    "ProcessExecutorPort",
    "RealTimeProvider",
    "TimeProvider",
    "MetricsPort",
    "NoOpMetricsAdapter",
    "LocalFileSystem",
    "OsPlatformDetector",
    "SubprocessExecutor",
    "HttpxBinaryDownloader",
]
