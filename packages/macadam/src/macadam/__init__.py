"""macadam-py: Python lifecycle manager for macadam virtual machines."""

__version__ = "0.1.0"

from macadam.client import MacadamClient
from macadam.domain.exceptions import (
    MacadamError,
    MacadamConfigError,
    NotInitializedError,
    PlatformUnsupportedError,
    ProcessExecutionError,
)
from macadam.domain.process import ExecResult, RunOptions
from macadam.domain.settings import MacadamSettings
from macadam.domain.vm import (
    ContainerProvider,
    CreateVmOptions,
    OperationOptions,
    VmRecord,
)
from macadam.factories import create_macadam_client

__all__ = [
    "MacadamClient",
    "MacadamError",
    "MacadamConfigError",
    "NotInitializedError",
    "PlatformUnsupportedError",
    "ProcessExecutionError",
    "ExecResult",
    "RunOptions",
    "MacadamSettings",
    "ContainerProvider",
    "CreateVmOptions",
    "OperationOptions",
    "VmRecord",
    "create_macadam_client",
]
