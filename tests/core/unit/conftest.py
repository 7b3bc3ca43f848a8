"""Pytest configuration and shared fixtures for macadam core unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from macadam.adapters.fakes import (
    FakeFileSystem,
    FakeMetricsAdapter,
    FakePlatformDetector,
    FakeProcessExecutor,
)
from macadam.client import MacadamClient
from macadam.domain.settings import MacadamSettings
from macadam.usecases.binary_provisioner import BinaryProvisioner
from macadam.usecases.platform_resolver import PlatformResolver

BINARIES_DIR = Path("/path/to/extension/binaries")
INSTALL_DIR = Path("/opt/macadam/bin")
UTILITIES_DIR = Path("/path/to/utilities")


@pytest.fixture
def settings() -> MacadamSettings:
    """Settings with fixed directories and downloads disabled."""
    return MacadamSettings(
        version="v0.1.1",
        install_dir=INSTALL_DIR,
        binaries_dir=BINARIES_DIR,
        release_url=None,
    )


@pytest.fixture
def filesystem() -> FakeFileSystem:
    """Filesystem with the installed binary, the installer and both helpers."""
    return FakeFileSystem(
        files=[
            INSTALL_DIR / "macadam",
            BINARIES_DIR / "macadam-installer-macos-universal.pkg",
            BINARIES_DIR / "macadam-windows-amd64.exe",
        ],
        executables={
            "vfkit": UTILITIES_DIR / "vfkit",
            "gvproxy": UTILITIES_DIR / "gvproxy",
        },
    )


@pytest.fixture
def executor() -> FakeProcessExecutor:
    return FakeProcessExecutor()


@pytest.fixture
def metrics() -> FakeMetricsAdapter:
    return FakeMetricsAdapter()


@pytest.fixture
def provisioner(
    settings: MacadamSettings,
    filesystem: FakeFileSystem,
    executor: FakeProcessExecutor,
) -> BinaryProvisioner:
    return BinaryProvisioner(
        resolver=PlatformResolver(settings),
        filesystem=filesystem,
        executor=executor,
        settings=settings,
    )


@pytest.fixture
def client(
    provisioner: BinaryProvisioner,
    executor: FakeProcessExecutor,
    metrics: FakeMetricsAdapter,
) -> MacadamClient:
    """Uninitialized client of type 'mytype' on macOS arm64."""
    return MacadamClient(
        "mytype",
        platform_detector=FakePlatformDetector.from_tuple("darwin", "arm64"),
        provisioner=provisioner,
        executor=executor,
        metrics=metrics,
    )


@pytest.fixture
def ready_client(client: MacadamClient, executor: FakeProcessExecutor) -> MacadamClient:
    """Initialized client with the executor call log cleared."""
    client.init()
    executor.clear_calls()
    return client
