"""Child process execution."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from enum import Enum

from gcloud_installer.errors import ProcessError

logger = logging.getLogger(__name__)


class StdioMode(str, Enum):
    """How child process output reaches the user."""

    INHERIT = "inherit"
    ERRORS_ONLY = "errors-only"
    SILENT = "silent"


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a finished child process.

    Attributes:
        command: The full command line that was run.
        returncode: Exit status.
        stdout: Captured standard output ("" when not captured).
        stderr: Captured standard error ("" when not captured).
    """

    command: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """True if the process exited with status zero."""
        return self.returncode == 0

    def check(self) -> ProcessResult:
        """Raise if the process failed.

        Returns:
            This result, for chaining.

        Raises:
            ProcessError: If the exit status is non-zero.
        """
        if not self.ok:
            raise ProcessError(self.command, self.returncode, self.stderr)
        return self


class SubprocessRunner:
    """Runs commands with subprocess.

    Satisfies the ProcessRunner protocol structurally.
    """

    def __init__(self, stdio: StdioMode = StdioMode.INHERIT) -> None:
        """Initialize the runner.

        Args:
            stdio: Where child output goes. INHERIT shares the parent's
                streams, ERRORS_ONLY discards stdout, SILENT discards both.
        """
        self.stdio = stdio

    def _streams(self) -> tuple[int | None, int | None]:
        if self.stdio is StdioMode.SILENT:
            return subprocess.DEVNULL, subprocess.DEVNULL
        if self.stdio is StdioMode.ERRORS_ONLY:
            return subprocess.DEVNULL, None
        return None, None

    def run(
        self, command: str, args: list[str] | None = None, capture: bool = False
    ) -> ProcessResult:
        """Run a command to completion without raising on failure.

        Args:
            command: Executable name or path.
            args: Arguments passed to the executable.
            capture: Capture stdout and stderr instead of applying the
                configured stdio mode.

        Returns:
            ProcessResult with the exit status and any captured output.

        Raises:
            OSError: If the executable cannot be started.
        """
        argv = [command, *(args or [])]
        if capture:
            stdout = stderr = subprocess.PIPE
        else:
            stdout, stderr = self._streams()

        logger.debug("Running command: %s", argv)
        completed = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=stdout,
            stderr=stderr,
            text=True,
            check=False,
        )
        logger.debug("Command %s exited with status %d", argv[0], completed.returncode)
        return ProcessResult(
            command=argv,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
