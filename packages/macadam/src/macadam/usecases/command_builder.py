"""Command builder use case assembling macadam invocations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from macadam.domain.naming import VmNamespace
from macadam.domain.vm import ContainerProvider, CreateVmOptions

PROVIDER_ENV = "CONTAINERS_MACHINE_PROVIDER"
HELPER_DIR_ENV = "CONTAINERS_HELPER_BINARY_DIR"


@dataclass(frozen=True)
class MacadamCommand:
    """Argument vector and environment overlay of one macadam invocation.

    Attributes:
        args: Arguments following the macadam executable.
        env: Environment variables merged over the inherited environment.
    """

    args: tuple[str, ...]
    env: dict[str, str] = field(default_factory=dict)


class CommandBuilder:
    """Builds macadam commands for one caller namespace.

    Display names are translated to real names through the namespace.
    """

    def __init__(self, namespace: VmNamespace, helper_dir: Path | None) -> None:
        self._namespace = namespace
        self._helper_dir = helper_dir

    def environment(
        self,
        base: Mapping[str, str] | None = None,
        container_provider: ContainerProvider | None = None,
    ) -> dict[str, str]:
        """Merge the environment overlay.

        Priority, lowest first: caller env, provider selection, helper directory.
        """
        env = dict(base or {})
        if container_provider is not None:
            env[PROVIDER_ENV] = ContainerProvider(container_provider).value
        if self._helper_dir is not None:
            env[HELPER_DIR_ENV] = str(self._helper_dir)
        return env

    def create(
        self,
        options: CreateVmOptions,
        env: Mapping[str, str] | None = None,
    ) -> MacadamCommand:
        args = [
            "init",
            options.image_path,
            "--name",
            self._namespace.to_real(options.name),
        ]
        if options.ssh_identity_path:
            args += ["--ssh-identity-path", options.ssh_identity_path]
        if options.username:
            args += ["--username", options.username]
        return MacadamCommand(
            tuple(args), self.environment(env, options.container_provider)
        )

    def list(
        self,
        env: Mapping[str, str] | None = None,
        container_provider: ContainerProvider | None = None,
    ) -> MacadamCommand:
        # Filtering by owner happens client-side.
        return MacadamCommand(
            ("list", "--format", "json"),
            self.environment(env, container_provider),
        )

    def remove(
        self,
        name: str,
        env: Mapping[str, str] | None = None,
        container_provider: ContainerProvider | None = None,
    ) -> MacadamCommand:
        return MacadamCommand(
            ("rm", "-f", self._namespace.to_real(name)),
            self.environment(env, container_provider),
        )

    def start(
        self,
        name: str,
        env: Mapping[str, str] | None = None,
        container_provider: ContainerProvider | None = None,
    ) -> MacadamCommand:
        return MacadamCommand(
            ("start", self._namespace.to_real(name)),
            self.environment(env, container_provider),
        )

    def stop(
        self,
        name: str,
        env: Mapping[str, str] | None = None,
        container_provider: ContainerProvider | None = None,
    ) -> MacadamCommand:
        return MacadamCommand(
            ("stop", self._namespace.to_real(name)),
            self.environment(env, container_provider),
        )

    def ssh(
        self,
        name: str,
        command: str,
        args: Sequence[str] = (),
        env: Mapping[str, str] | None = None,
        container_provider: ContainerProvider | None = None,
    ) -> MacadamCommand:
        """Build an ssh command.

        command and args are passed through unescaped; callers are
        responsible for their shell safety on the guest.
        """
        return MacadamCommand(
            ("ssh", self._namespace.to_real(name), command, *args),
            self.environment(env, container_provider),
        )
