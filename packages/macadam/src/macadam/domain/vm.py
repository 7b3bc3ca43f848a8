"""VM domain value objects.

VmRecord mirrors one element of `macadam list --format json`. The
remaining classes describe per-call options and the client lifecycle.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from macadam.domain.exceptions import MacadamConfigError
from macadam.domain.naming import VmNamespace
from macadam.domain.process import RunOptions

# JSON key -> VmRecord attribute. Every key must be present for a record
# to be accepted.
VM_RECORD_FIELDS: dict[str, str] = {
    "Name": "name",
    "Image": "image",
    "Running": "running",
    "Starting": "starting",
    "CPUs": "cpus",
    "Memory": "memory",
    "DiskSize": "disk_size",
    "Port": "port",
    "RemoteUsername": "remote_username",
    "IdentityPath": "identity_path",
    "VMType": "vm_type",
}


class ContainerProvider(str, Enum):
    """Virtualization backend selectable through CONTAINERS_MACHINE_PROVIDER."""

    APPLEHV = "applehv"
    LIBKRUN = "libkrun"
    VFKIT = "vfkit"


@dataclass(frozen=True)
class VmRecord:
    """One VM as reported by the macadam tool.

    Values are kept as decoded from JSON; macadam reports memory and disk
    size as strings of bytes.
    """

    name: str
    image: str
    running: bool
    starting: bool
    cpus: int
    memory: Any
    disk_size: Any
    port: int
    remote_username: str
    identity_path: str
    vm_type: str

    @staticmethod
    def is_valid(element: object) -> bool:
        """Return True if a decoded JSON element carries every record field."""
        if not isinstance(element, Mapping):
            return False
        return all(key in element for key in VM_RECORD_FIELDS)

    @classmethod
    def from_json(cls, element: Mapping[str, Any]) -> VmRecord:
        """Build a record from a structurally valid JSON object.

        Unknown keys are ignored.
        """
        return cls(**{attr: element[key] for key, attr in VM_RECORD_FIELDS.items()})


@dataclass(frozen=True)
class OperationOptions:
    """Per-call options shared by every VM operation.

    Attributes:
        container_provider: Backend provider to select, or None for the default.
        run_options: Process execution options to merge with computed ones.
    """

    container_provider: ContainerProvider | None = None
    run_options: RunOptions | None = None


@dataclass(frozen=True)
class CreateVmOptions:
    """Options for creating a VM.

    Attributes:
        image_path: Disk image the VM boots from.
        name: Display name of the VM (unprefixed).
        ssh_identity_path: Optional SSH private key used to reach the VM.
        username: Optional remote login username.
        container_provider: Backend provider to select, or None for the default.
        run_options: Process execution options to merge with computed ones.
    """

    image_path: str
    name: str
    ssh_identity_path: str | None = None
    username: str | None = None
    container_provider: ContainerProvider | None = None
    run_options: RunOptions | None = None

    def __post_init__(self) -> None:
        if not self.image_path:
            raise MacadamConfigError("image_path cannot be empty")
        if not self.name:
            raise MacadamConfigError("name cannot be empty")


class ClientState(Enum):
    """Lifecycle of a MacadamClient."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


@dataclass(frozen=True)
class ClientSnapshot:
    """Immutable result of MacadamClient.init().

    Attributes:
        binary_path: Absolute path to the macadam executable.
        helper_dir: Directory holding helper executables, if the platform needs them.
        namespace: Namespace of the caller's VMs.
    """

    binary_path: Path
    helper_dir: Path | None
    namespace: VmNamespace
