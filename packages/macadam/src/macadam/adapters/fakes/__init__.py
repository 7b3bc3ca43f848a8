"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from macadam.adapters.fakes.fake_binary_downloader import FakeBinaryDownloader
from macadam.adapters.fakes.fake_filesystem import FakeFileSystem
from macadam.adapters.fakes.fake_metrics import CommandMetric, FakeMetricsAdapter
from macadam.adapters.fakes.fake_platform_detector import FakePlatformDetector
from macadam.adapters.fakes.fake_process_executor import ExecCall, FakeProcessExecutor

__all__ = [
    "FakeBinaryDownloader",
    "FakeFileSystem",
    "CommandMetric",
    "FakeMetricsAdapter",
    "FakePlatformDetector",
    "ExecCall",
    "FakeProcessExecutor",
]
