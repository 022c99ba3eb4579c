"""Shared data types for the gcloud installer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["PlatformFamily", "StepResult", "InstallOutcome"]


class PlatformFamily(str, Enum):
    """Operating system families, each with its own install strategy."""

    UNIX = "unix"
    WINDOWS = "windows"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class StepResult:
    """Result of one installation step.

    Attributes:
        name: Step name, used in log messages.
        error: Exception raised by the step (None on success).
    """

    name: str
    error: BaseException | None = None

    @property
    def success(self) -> bool:
        """True if the step completed without raising."""
        return self.error is None


@dataclass(frozen=True)
class InstallOutcome:
    """Settled results of the two concurrent installation steps.

    Attributes:
        binaries: Result of downloading and running the SDK installer.
        path: Result of registering the SDK on the shell PATH.
    """

    binaries: StepResult
    path: StepResult

    @property
    def success(self) -> bool:
        """True unless the binary installation failed.

        PATH registration failures do not affect success.
        """
        return self.binaries.success
