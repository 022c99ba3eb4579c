"""Protocol definitions for the installer's external capabilities.

Strategies and the orchestrator never spawn processes, touch the network or
write files directly; they go through these interfaces so tests can inject
fakes without patching module internals.

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gcloud_installer.process import ProcessResult
    from gcloud_installer.types import InstallOutcome


@runtime_checkable
class ProcessRunner(Protocol):
    """Protocol for running external commands."""

    def run(
        self, command: str, args: list[str] | None = None, capture: bool = False
    ) -> ProcessResult:
        """Run a command to completion.

        Args:
            command: Executable name or path.
            args: Arguments passed to the executable.
            capture: Capture stdout and stderr instead of showing them.

        Returns:
            ProcessResult with the exit status and captured output.

        Raises:
            OSError: If the executable cannot be started.
        """
        ...


@runtime_checkable
class ArchiveFetcher(Protocol):
    """Protocol for downloading and unpacking the SDK archive."""

    def fetch(self, url: str) -> bytes:
        """Download a remote archive.

        Args:
            url: Archive URL.

        Returns:
            Raw archive bytes.
        """
        ...

    def extract(self, archive: bytes, destination: Path) -> None:
        """Extract a zip archive into a directory.

        Args:
            archive: Raw archive bytes, as returned by fetch().
            destination: Directory to extract into.
        """
        ...

    def clear_directory(self, destination: Path) -> None:
        """Delete a directory tree. No-op if it does not exist.

        Args:
            destination: Directory to delete.
        """
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the filesystem writes done during PATH registration."""

    def append_text(self, path: Path, content: str) -> None:
        """Append text to a file, creating it if absent.

        Args:
            path: Path to the file.
            content: Text to append.
        """
        ...

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        ...


@runtime_checkable
class InstallStrategy(Protocol):
    """Protocol for a platform-specific install strategy.

    Each supported platform family has exactly one implementation.
    """

    name: str

    def is_installed(self) -> bool:
        """Check whether gcloud is already reachable on PATH.

        Returns:
            True if the locate probe exits with status zero.
        """
        ...

    def install(self) -> InstallOutcome:
        """Install the SDK binaries and register them on PATH.

        Returns:
            InstallOutcome once both steps have settled.

        Raises:
            FatalInstallError: If installing the binaries failed.
        """
        ...
