"""Filesystem abstraction for testability.

The RealFileSystem implementation wraps standard library operations.
"""

from __future__ import annotations

import shutil
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def append_text(self, path: Path, content: str) -> None:
        """Append text to a file, creating it (and its parents) if absent."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(content)

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)
