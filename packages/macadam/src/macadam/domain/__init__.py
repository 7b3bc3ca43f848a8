"""Domain layer: Entities with zero external dependencies."""

from macadam.domain.binary import ArtifactKind, BinaryArtifact, Platform
from macadam.domain.exceptions import (
    MacadamError,
    MacadamConfigError,
    NotInitializedError,
    PlatformUnsupportedError,
    ProcessExecutionError,
)
from macadam.domain.naming import VmNamespace
from macadam.domain.process import ExecResult, RunOptions
from macadam.domain.settings import MacadamSettings
from macadam.domain.vm import (
    ClientState,
    ContainerProvider,
    CreateVmOptions,
    OperationOptions,
    VmRecord,
)

__all__ = [
    "ArtifactKind",
    "BinaryArtifact",
    "Platform",
    "MacadamError",
    "MacadamConfigError",
    "NotInitializedError",
    "PlatformUnsupportedError",
    "ProcessExecutionError",
    "VmNamespace",
    "ExecResult",
    "RunOptions",
    "MacadamSettings",
    "ClientState",
    "ContainerProvider",
    "CreateVmOptions",
    "OperationOptions",
    "VmRecord",
]
