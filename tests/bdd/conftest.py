"""Shared fixtures and steps for BDD tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_bdd import given, parsers, then

from macadam.adapters.fakes import (
    FakeFileSystem,
    FakeMetricsAdapter,
    FakePlatformDetector,
    FakeProcessExecutor,
)
from macadam.client import MacadamClient
from macadam.domain.binary import Platform
from macadam.domain.settings import MacadamSettings
from macadam.usecases.binary_provisioner import BinaryProvisioner
from macadam.usecases.platform_resolver import PlatformResolver

BINARIES_DIR = Path("/path/to/extension/binaries")
INSTALL_DIR = Path("/opt/macadam/bin")
UTILITIES_DIR = Path("/path/to/utilities")


@pytest.fixture
def settings() -> MacadamSettings:
    return MacadamSettings(
        version="v0.1.1",
        install_dir=INSTALL_DIR,
        binaries_dir=BINARIES_DIR,
        release_url=None,
    )


@pytest.fixture
def filesystem() -> FakeFileSystem:
    """Host with bundled artifacts and both helpers, but no installed macadam."""
    return FakeFileSystem(
        files=[
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
def context(
    settings: MacadamSettings,
    filesystem: FakeFileSystem,
    executor: FakeProcessExecutor,
) -> dict:
    """Shared context for passing state between steps."""
    return {
        "settings": settings,
        "filesystem": filesystem,
        "executor": executor,
        "platform": Platform(os="darwin", arch="arm64"),
        "client": None,
        "result": None,
        "error": None,
    }


@pytest.fixture
def make_client(context: dict):
    """Return a factory building a client for the host described in context."""

    def factory(type_label: str = "mytype") -> MacadamClient:
        settings = context["settings"]
        provisioner = BinaryProvisioner(
            resolver=PlatformResolver(settings),
            filesystem=context["filesystem"],
            executor=context["executor"],
            settings=settings,
        )
        client = MacadamClient(
            type_label,
            platform_detector=FakePlatformDetector(context["platform"]),
            provisioner=provisioner,
            executor=context["executor"],
            metrics=FakeMetricsAdapter(),
        )
        context["client"] = client
        return client

    return factory


# ---------------------------------------------------------------------------
# Shared steps
# ---------------------------------------------------------------------------


@given(parsers.parse('a macOS host with macadam "{version}" installed'))
def macos_host_with_macadam(context: dict, version: str):
    """Install macadam at the fixed path reporting the given version."""
    context["platform"] = Platform(os="darwin", arch="arm64")
    context["filesystem"].add_file(INSTALL_DIR / "macadam")
    context["executor"].add_response("--version", f"macadam version {version}")


@then(parsers.parse("a {error_name} should be raised"))
def error_raised(context: dict, error_name: str):
    """Assert that the last action raised the named error."""
    assert context["error"] is not None, f"Expected {error_name} but none was raised"
    assert type(context["error"]).__name__ == error_name


@then(parsers.parse('the error message should contain "{text}"'))
def error_message_contains(context: dict, text: str):
    assert context["error"] is not None, "No error was raised"
    assert text in str(context["error"]), f"Expected '{text}' in '{context['error']}'"
