"""Fake filesystem for testing.

Provides an in-memory test double for FileSystemPort.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path


class FakeFileSystem:
    """Fake implementation of FileSystemPort for testing.

    Tracks existing files and executables found by which() in memory,
    and records every make_executable() call.

    Example:
        >>> fake = FakeFileSystem(files=[Path("/opt/macadam/bin/macadam")])
        >>> fake.exists(Path("/opt/macadam/bin/macadam"))
        True
    """

    def __init__(
        self,
        files: Iterable[Path] = (),
        executables: Mapping[str, Path] | None = None,
    ) -> None:
        """Initialize with existing files and executables on the search path.

        Args:
            files: Paths that exist.
            executables: Executable name -> path returned by which().
        """
        self._files: set[Path] = set(files)
        self._executables: dict[str, Path] = dict(executables or {})
        self._made_executable: list[Path] = []
        self._which_calls: list[tuple[str, tuple[Path, ...]]] = []

    @property
    def made_executable(self) -> list[Path]:
        """Return paths passed to make_executable(), in call order."""
        return list(self._made_executable)

    @property
    def which_calls(self) -> list[tuple[str, tuple[Path, ...]]]:
        """Return (name, search_dirs) tuples passed to which()."""
        return list(self._which_calls)

    def add_file(self, path: Path) -> None:
        self._files.add(path)

    def remove_file(self, path: Path) -> None:
        self._files.discard(path)

    def add_executable(self, name: str, path: Path) -> None:
        """Make which(name) return path."""
        self._executables[name] = path
        self._files.add(path)

    def exists(self, path: Path) -> bool:
        return path in self._files

    def make_executable(self, path: Path) -> None:
        self._made_executable.append(path)

    def which(self, name: str, search_dirs: Sequence[Path] = ()) -> Path | None:
        self._which_calls.append((name, tuple(search_dirs)))
        return self._executables.get(name)
