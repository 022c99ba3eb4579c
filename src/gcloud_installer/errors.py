"""Exception hierarchy for the gcloud installer."""

from __future__ import annotations

FATAL_INSTALL_PREFIX = "Fatal: error installing the SDK: "
FATAL_UPDATE_PREFIX = "Fatal: error updating the SDK: "
PATH_WARNING_PREFIX = "Warning: error adding SDK to PATH: "


class InstallerError(Exception):
    """Base class for installer errors."""

    pass


class UnsupportedPlatformError(InstallerError):
    """The host operating system is not one of the supported families."""

    def __init__(self, os_name: str) -> None:
        super().__init__("This platform is not supported.\nPlease install gcloud manually.")
        self.os_name = os_name


class FatalInstallError(InstallerError):
    """Installing the SDK binaries failed. Aborts the run."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{FATAL_INSTALL_PREFIX}{cause}")
        self.cause = cause


class UpdateError(InstallerError):
    """Updating an existing SDK installation failed. Aborts the run."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{FATAL_UPDATE_PREFIX}{cause}")
        self.cause = cause


class PathRegistrationError(InstallerError):
    """Adding the SDK to the shell PATH failed. Logged, never fatal."""

    pass


class ShellResolutionError(PathRegistrationError):
    """The current shell or its rc file could not be determined."""

    pass


class ProcessError(InstallerError):
    """A child process exited with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        message = f"Command {' '.join(command)!r} exited with status {returncode}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class ArchiveError(InstallerError):
    """Downloading or extracting the SDK archive failed."""

    pass
