"""MacadamClient: lifecycle manager for one caller type's VMs.

The client shares the host-wide macadam installation with other callers
while only ever seeing and acting on the VMs it created. All VM operations
require a prior, explicit call to init().
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from macadam.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from macadam.adapters.ports import RealTimeProvider, TimeProvider
from macadam.domain.exceptions import NotInitializedError
from macadam.domain.naming import VmNamespace
from macadam.domain.process import ExecResult, RunOptions
from macadam.domain.vm import (
    ClientSnapshot,
    ClientState,
    CreateVmOptions,
    OperationOptions,
    VmRecord,
)
from macadam.usecases.command_builder import CommandBuilder, MacadamCommand
from macadam.usecases.vm_list_parser import VmListParser

if TYPE_CHECKING:
    from macadam.adapters.ports import PlatformDetectorPort, ProcessExecutorPort
    from macadam.usecases.binary_provisioner import BinaryProvisioner

logger = logging.getLogger(__name__)


class MacadamClient:
    """Orchestrates VM lifecycle operations through the macadam tool.

    Example:
        >>> client = create_macadam_client("podman-desktop")
        >>> client.init()
        >>> client.create_vm(CreateVmOptions(image_path="/images/fedora.raw", name="dev"))
        >>> [vm.name for vm in client.list_vms()]
        ['dev']
    """

    def __init__(
        self,
        type_label: str,
        platform_detector: PlatformDetectorPort,
        provisioner: BinaryProvisioner,
        executor: ProcessExecutorPort,
        metrics: MetricsPort | None = None,
        time_provider: TimeProvider | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            type_label: Caller type; fixes the VM name prefix "<type_label>-".
            platform_detector: Port for detecting the host platform.
            provisioner: Provisions the macadam binary and helpers.
            executor: Port for running macadam.
            metrics: Optional metrics sink. Defaults to a no-op adapter.
            time_provider: Clock used to time invocations.

        Raises:
            MacadamConfigError: If type_label is empty.
        """
        self._namespace = VmNamespace.for_type(type_label)
        self._platform_detector = platform_detector
        self._provisioner = provisioner
        self._executor = executor
        self._metrics = metrics if metrics is not None else NoOpMetricsAdapter()
        self._time = time_provider if time_provider is not None else RealTimeProvider()
        self._state = ClientState.UNINITIALIZED
        self._snapshot: ClientSnapshot | None = None

    @property
    def state(self) -> ClientState:
        return self._state

    @property
    def name_prefix(self) -> str:
        return self._namespace.prefix

    @property
    def binary_path(self) -> Path | None:
        return self._snapshot.binary_path if self._snapshot else None

    @property
    def helper_dir(self) -> Path | None:
        return self._snapshot.helper_dir if self._snapshot else None

    def init(self, upgrade_binaries: bool = False) -> None:
        """Provision macadam and make the client ready.

        Re-running init() replaces the previous snapshot. Concurrent calls
        on the same client must be serialized by the caller.

        Args:
            upgrade_binaries: Reinstall macadam when the installed version
                             is not the expected one.

        Raises:
            PlatformUnsupportedError, BinaryNotFoundError, HelperNotFoundError,
            HelperLocationMismatchError, ProcessExecutionError: On provisioning
                failure. The client is left uninitialized.
        """
        self._state = ClientState.INITIALIZING
        self._snapshot = None
        ready = False
        try:
            platform = self._platform_detector.detect()
            binary_path = self._provisioner.ensure_binary(
                platform, upgrade=upgrade_binaries
            )
            helper_dir = self._provisioner.ensure_helper_dir(platform)
            ready = True
        finally:
            if not ready:
                self._state = ClientState.UNINITIALIZED
                self._metrics.set_initialized(False)

        self._snapshot = ClientSnapshot(
            binary_path=binary_path,
            helper_dir=helper_dir,
            namespace=self._namespace,
        )
        self._state = ClientState.READY
        self._metrics.set_initialized(True)
        logger.info(
            "macadam initialized: binary=%s helpers=%s", binary_path, helper_dir
        )

    def are_binaries_available(self, check_version: bool = False) -> bool:
        """Return True if init() will not need to install macadam.

        May be called before init().

        Args:
            check_version: Also require the installed version to match.
        """
        platform = self._platform_detector.detect()
        return self._provisioner.is_available(platform, check_version=check_version)

    def create_vm(self, options: CreateVmOptions) -> ExecResult:
        """Create a VM named options.name in the caller's namespace."""
        snapshot = self._require_ready("create_vm")
        command = self._builder(snapshot).create(
            options, _run_env(options.run_options)
        )
        return self._run(snapshot, "create", command, options.run_options)

    def list_vms(self, options: OperationOptions | None = None) -> list[VmRecord]:
        """Return the caller's VMs with display names, in macadam's order."""
        snapshot = self._require_ready("list_vms")
        options = options or OperationOptions()
        command = self._builder(snapshot).list(
            _run_env(options.run_options), options.container_provider
        )
        result = self._run(snapshot, "list", command, options.run_options)
        return VmListParser(snapshot.namespace)(result.stdout)

    def remove_vm(
        self, name: str, options: OperationOptions | None = None
    ) -> ExecResult:
        """Force-remove the VM with display name name."""
        snapshot = self._require_ready("remove_vm")
        options = options or OperationOptions()
        command = self._builder(snapshot).remove(
            name, _run_env(options.run_options), options.container_provider
        )
        return self._run(snapshot, "remove", command, options.run_options)

    def start_vm(
        self, name: str, options: OperationOptions | None = None
    ) -> ExecResult:
        """Start the VM with display name name."""
        snapshot = self._require_ready("start_vm")
        options = options or OperationOptions()
        command = self._builder(snapshot).start(
            name, _run_env(options.run_options), options.container_provider
        )
        return self._run(snapshot, "start", command, options.run_options)

    def stop_vm(
        self, name: str, options: OperationOptions | None = None
    ) -> ExecResult:
        """Stop the VM with display name name."""
        snapshot = self._require_ready("stop_vm")
        options = options or OperationOptions()
        command = self._builder(snapshot).stop(
            name, _run_env(options.run_options), options.container_provider
        )
        return self._run(snapshot, "stop", command, options.run_options)

    def execute_command(
        self,
        name: str,
        command: str,
        args: Sequence[str] = (),
        options: OperationOptions | None = None,
    ) -> ExecResult:
        """Run command with args over SSH inside the VM.

        command and args are passed through unescaped.
        """
        snapshot = self._require_ready("execute_command")
        options = options or OperationOptions()
        ssh = self._builder(snapshot).ssh(
            name,
            command,
            args,
            _run_env(options.run_options),
            options.container_provider,
        )
        return self._run(snapshot, "ssh", ssh, options.run_options)

    def _require_ready(self, operation: str) -> ClientSnapshot:
        if self._state is not ClientState.READY or self._snapshot is None:
            raise NotInitializedError(operation)
        return self._snapshot

    @staticmethod
    def _builder(snapshot: ClientSnapshot) -> CommandBuilder:
        return CommandBuilder(snapshot.namespace, snapshot.helper_dir)

    def _run(
        self,
        snapshot: ClientSnapshot,
        operation: str,
        command: MacadamCommand,
        run_options: RunOptions | None,
    ) -> ExecResult:
        run_options = run_options or RunOptions()
        options = RunOptions(
            cwd=run_options.cwd,
            is_admin=run_options.is_admin,
            env=command.env,
        )
        started = self._time.get_time_seconds()
        success = False
        try:
            result = self._executor.exec(snapshot.binary_path, command.args, options)
            success = True
            return result
        finally:
            self._metrics.record_command(
                operation, success, self._time.get_time_seconds() - started
            )


def _run_env(run_options: RunOptions | None) -> dict[str, str]:
    return dict(run_options.env) if run_options is not None else {}
