"""VM name namespacing.

The macadam tool keeps one flat namespace of VMs per host. Each caller
type gets its own prefix so that independent callers never see or act on
each other's machines.
"""

from __future__ import annotations

from dataclasses import dataclass

from macadam.domain.exceptions import InvariantViolationError, MacadamConfigError


@dataclass(frozen=True)
class VmNamespace:
    """Maps between display names and real, host-wide VM names.

    Attributes:
        prefix: Prefix prepended to every VM name owned by the caller.
    """

    prefix: str

    @classmethod
    def for_type(cls, type_label: str) -> VmNamespace:
        """Build the namespace of a caller type label.

        Raises:
            MacadamConfigError: If the type label is empty.
        """
        if not type_label or not type_label.strip():
            raise MacadamConfigError("type label cannot be empty")
        return cls(prefix=f"{type_label}-")

    def owns(self, real_name: str) -> bool:
        """Return True if the real VM name belongs to this namespace."""
        return real_name.startswith(self.prefix)

    def to_real(self, display_name: str) -> str:
        """Return the real VM name for a display name."""
        return f"{self.prefix}{display_name}"

    def to_display(self, real_name: str) -> str:
        """Return the display name for an owned real VM name.

        Raises:
            InvariantViolationError: If the name is not owned by this namespace.
                Callers must filter with owns() first.
        """
        if not self.owns(real_name):
            raise InvariantViolationError(
                f"VM name {real_name!r} is not owned by prefix {self.prefix!r}"
            )
        return real_name[len(self.prefix) :]
