"""Local filesystem adapter.

Implements FileSystemPort on top of pathlib and shutil.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Sequence
from pathlib import Path


class LocalFileSystem:
    """Adapter exposing the host filesystem primitives macadam needs."""

    def exists(self, path: Path) -> bool:
        """Check if a file exists at path."""
        return path.exists()

    def make_executable(self, path: Path) -> None:
        """Set permissions of path to 0o755.

        Raises:
            OSError: If the permissions cannot be changed.
        """
        path.chmod(0o755)

    def which(self, name: str, search_dirs: Sequence[Path] = ()) -> Path | None:
        """Find an executable, looking in search_dirs before the PATH.

        Returns:
            Absolute path to the executable, or None if not found.
        """
        entries = [str(d) for d in search_dirs]
        path_env = os.environ.get("PATH", "")
        if path_env:
            entries.append(path_env)

        found = shutil.which(name, path=os.pathsep.join(entries) or None)
        if found is None:
            return None
        return Path(found).absolute()
