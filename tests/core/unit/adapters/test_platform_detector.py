"""Unit tests for OsPlatformDetector adapter."""

from unittest.mock import patch

import pytest

from macadam.adapters.platform_detector import OsPlatformDetector
from macadam.adapters.ports import PlatformDetectorPort
from macadam.domain.binary import Platform
from macadam.domain.exceptions import PlatformUnsupportedError
from macadam.domain.settings import MacadamSettings
from macadam.usecases.platform_resolver import PlatformResolver


@pytest.mark.tier(1)
@pytest.mark.unit
@pytest.mark.tra("Adapter.OsPlatformDetector")
class TestOsPlatformDetector:
    """Test OsPlatformDetector implementation."""

    def test_detect_returns_platform(self) -> None:
        """Test that detect() returns a Platform value object."""
        result = OsPlatformDetector().detect()
        assert isinstance(result, Platform)

    def test_satisfies_protocol(self) -> None:
        assert isinstance(OsPlatformDetector(), PlatformDetectorPort)

    def test_consistent_results_across_calls(self) -> None:
        detector = OsPlatformDetector()
        assert detector.detect() == detector.detect()

    @pytest.mark.parametrize(
        "system,machine,expected",
        [
            ("Linux", "x86_64", Platform(os="linux", arch="amd64")),
            ("Linux", "aarch64", Platform(os="linux", arch="arm64")),
            ("Darwin", "arm64", Platform(os="darwin", arch="arm64")),
            ("Darwin", "x86_64", Platform(os="darwin", arch="amd64")),
            ("Windows", "AMD64", Platform(os="windows", arch="amd64")),
            ("Windows", "ARM64", Platform(os="windows", arch="arm64")),
        ],
    )
    def test_normalizes_known_values(
        self, system: str, machine: str, expected: Platform
    ) -> None:
        with patch("platform.system", return_value=system), patch(
            "platform.machine", return_value=machine
        ):
            assert OsPlatformDetector().detect() == expected

    @patch("platform.system")
    @patch("platform.machine")
    def test_passes_unknown_values_through(
        self, mock_machine: patch, mock_system: patch
    ) -> None:
        """Test unknown values reach the resolver lower-cased."""
        mock_system.return_value = "FreeBSD"
        mock_machine.return_value = "RISCV64"

        result = OsPlatformDetector().detect()

        assert result == Platform(os="freebsd", arch="riscv64")

    @pytest.mark.parametrize(
        "system,machine,expected",
        [
            ("Linux", "", Platform(os="linux", arch="unknown")),
            ("", "x86_64", Platform(os="unknown", arch="amd64")),
            ("", "", Platform(os="unknown", arch="unknown")),
        ],
    )
    def test_undeterminable_values_are_unknown(
        self, system: str, machine: str, expected: Platform
    ) -> None:
        with patch("platform.system", return_value=system), patch(
            "platform.machine", return_value=machine
        ):
            assert OsPlatformDetector().detect() == expected

    def test_empty_machine_is_rejected_as_unsupported(self) -> None:
        with patch("platform.system", return_value="Darwin"), patch(
            "platform.machine", return_value=""
        ):
            detected = OsPlatformDetector().detect()

        with pytest.raises(PlatformUnsupportedError) as exc_info:
            PlatformResolver(MacadamSettings()).resolve(detected)
        assert (exc_info.value.os, exc_info.value.arch) == ("darwin", "unknown")
