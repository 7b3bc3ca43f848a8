"""
Root conftest.py for the macadam-py test suite.

Pytest plugin that checks TRA (Test Responsibility Architecture) and Tier markers.
- Every test declares one responsibility with @pytest.mark.tra("...")
- Every test declares one tier with @pytest.mark.tier(n)
- Tier timeouts are applied when pytest-timeout is installed

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.BinaryProvisioner")
    def test_something():
        ...

Configuration:
    MARKER_ENFORCE=1     fail collection on violations (default: warn)
    MARKER_ENFORCE=0     disable marker checks
    TIER_TIMEOUT_MULTIPLIER scales the tier timeouts (default 1.0)
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


VALID_TRA_PREFIXES = frozenset(
    [
        "Domain.Invariant.",
        "Domain.Policy.",
        "UseCase.",
        "Port.",
        "Adapter.",
        "Contract.",
        "Factory.",
    ]
)

# Tier timeout limits in seconds, 0 means no limit
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,
    1: 2.0,
    2: 30.0,
    3: 300.0,
    4: 0,
}


def pytest_configure(config: Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Test Responsibility Anchor - the single responsibility this test protects. "
        "Must start with one of: Domain.Invariant, Domain.Policy, UseCase, Port, Adapter, Contract, Factory",
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier (0=instant, 1=fast, 2=standard, 3=slow, 4=manual).",
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests (no macadam binary, no network)"
    )
    config.addinivalue_line(
        "markers", "property: Property-based tests using Hypothesis"
    )


def _get_tier(item: Item) -> int | None:
    for marker in item.iter_markers(name="tier"):
        if marker.args:
            tier = marker.args[0]
            if isinstance(tier, int) and 0 <= tier <= 4:
                return tier
    return None


def _marker_errors(items: list[Item]) -> list[str]:
    errors: list[str] = []

    for item in items:
        tra_markers = list(item.iter_markers(name="tra"))
        if len(tra_markers) != 1:
            errors.append(
                f"{item.nodeid}: expected exactly one @tra marker, found {len(tra_markers)}"
            )
        else:
            anchor = tra_markers[0].args[0] if tra_markers[0].args else None
            if not isinstance(anchor, str) or not any(
                anchor.startswith(prefix) for prefix in VALID_TRA_PREFIXES
            ):
                errors.append(f"{item.nodeid}: invalid TRA anchor {anchor!r}")

        if len(list(item.iter_markers(name="tier"))) != 1 or _get_tier(item) is None:
            errors.append(f"{item.nodeid}: missing or invalid @tier marker")

    return errors


def _apply_tier_timeouts(items: list[Item]) -> None:
    """Add a timeout marker per tier if pytest-timeout is installed."""
    try:
        import pytest_timeout as _  # type: ignore[import-untyped]  # noqa: F401
    except ImportError:
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))

    for item in items:
        tier = _get_tier(item)
        if tier is None or any(item.iter_markers(name="timeout")):
            continue
        timeout = TIER_TIMEOUTS.get(tier, 0)
        if timeout > 0:
            item.add_marker(pytest.mark.timeout(timeout * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Check TRA and Tier markers at collection time."""
    mode = os.environ.get("MARKER_ENFORCE", "warn")
    if mode != "0":
        errors = _marker_errors(items)
        if errors and mode == "warn":
            print("\nTRA/Tier marker warnings:")
            for error in errors:
                print(f"  {error}")
        elif errors:
            pytest.fail(
                "TRA/Tier marker errors:\n" + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )

    _apply_tier_timeouts(items)


@pytest.hookimpl(trylast=True)
def pytest_report_header(config: Config) -> str:
    return f"TRA/Tier enforcement: {os.environ.get('MARKER_ENFORCE', 'warn')}"
