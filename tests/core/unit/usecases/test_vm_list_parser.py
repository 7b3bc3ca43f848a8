"""Unit tests for VmListParser use case."""

import json
import logging
from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from macadam.domain.naming import VmNamespace
from macadam.usecases.vm_list_parser import VmListParser


def element(name: Any, **overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "Name": name,
        "Image": "/images/fedora.raw",
        "Running": False,
        "Starting": False,
        "CPUs": 2,
        "Memory": "4294967296",
        "DiskSize": "21474836480",
        "Port": 49378,
        "RemoteUsername": "core",
        "IdentityPath": "/home/me/.ssh/machine",
        "VMType": "applehv",
    }
    data.update(overrides)
    return data


@pytest.fixture
def parser() -> VmListParser:
    return VmListParser(VmNamespace.for_type("mytype"))


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.VmListParser")
class TestVmListParser:
    """Test filtering, renaming and lenient decoding of list output."""

    def test_keeps_only_owned_records_renamed(self, parser: VmListParser) -> None:
        stdout = json.dumps(
            [element("mytype-vm1"), element("othertype-vm1"), element("mytype-vm2")]
        )

        records = parser(stdout)

        assert [r.name for r in records] == ["vm1", "vm2"]

    def test_preserves_other_fields(self, parser: VmListParser) -> None:
        stdout = json.dumps([element("mytype-vm1", Running=True, Port=2222)])

        (record,) = parser(stdout)

        assert record.running is True
        assert record.port == 2222
        assert record.vm_type == "applehv"

    def test_drops_elements_missing_fields(self, parser: VmListParser) -> None:
        incomplete = element("mytype-broken")
        del incomplete["VMType"]
        stdout = json.dumps([incomplete, element("mytype-vm1"), "garbage", 7])

        assert [r.name for r in parser(stdout)] == ["vm1"]

    def test_drops_non_string_names(self, parser: VmListParser) -> None:
        stdout = json.dumps([element(42), element(None), element("mytype-vm1")])
        assert [r.name for r in parser(stdout)] == ["vm1"]

    @pytest.mark.parametrize("stdout", ["", "   ", "\n"])
    def test_empty_output_is_empty_list(self, parser: VmListParser, stdout: str) -> None:
        assert parser(stdout) == []

    @pytest.mark.parametrize("stdout", ["{}", '{"Name": "mytype-vm1"}', "null", "3"])
    def test_non_array_output_is_empty_list(
        self, parser: VmListParser, stdout: str
    ) -> None:
        assert parser(stdout) == []

    def test_empty_array(self, parser: VmListParser) -> None:
        assert parser("[]") == []

    def test_undecodable_output_logs_warning(
        self, parser: VmListParser, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="macadam.usecases.vm_list_parser"):
            assert parser("not json [") == []
        assert "undecodable" in caplog.text

    def test_prefix_alone_yields_empty_display_name(self, parser: VmListParser) -> None:
        (record,) = parser(json.dumps([element("mytype-")]))
        assert record.name == ""


@pytest.mark.unit
@pytest.mark.tier(3)
@pytest.mark.property
@pytest.mark.tra("UseCase.VmListParser")
class TestVmListParserProperties:
    """Property-based tests for namespace isolation of listings."""

    @given(
        names=st.lists(
            st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789-", max_size=20),
            max_size=15,
        )
    )
    @settings(max_examples=200)
    def test_output_is_owned_subset_in_order(self, names: list[str]) -> None:
        namespace = VmNamespace.for_type("mytype")
        parser = VmListParser(namespace)

        records = parser(json.dumps([element(n) for n in names]))

        expected = [n[len("mytype-") :] for n in names if n.startswith("mytype-")]
        assert [r.name for r in records] == expected
