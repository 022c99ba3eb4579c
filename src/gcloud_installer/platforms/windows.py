"""Windows install strategy."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from gcloud_installer.fetcher import HttpArchiveFetcher
from gcloud_installer.platforms.base import BaseStrategy

if TYPE_CHECKING:
    from gcloud_installer.config import InstallerConfig
    from gcloud_installer.protocols import ArchiveFetcher, ProcessRunner

logger = logging.getLogger(__name__)

PATH_ENV_VAR = "PATH"
PATH_SEPARATOR = ";"


def _powershell_quote(value: str) -> str:
    """Escape a value for a single-quoted PowerShell string."""
    return value.replace("'", "''")


class WindowsStrategy(BaseStrategy):
    """Installs from the versioned zip archive and sets the user PATH."""

    name = "windows"
    display_name = "Windows"

    def __init__(
        self,
        config: InstallerConfig,
        runner: ProcessRunner,
        fetcher: ArchiveFetcher | None = None,
    ) -> None:
        """Initialize the Windows strategy.

        Args:
            config: Settings for this run.
            runner: Process runner for the probe, installer and PowerShell.
            fetcher: Archive fetcher for the SDK zip.
        """
        super().__init__(config, runner)
        self.fetcher = fetcher if fetcher is not None else HttpArchiveFetcher()

    @property
    def sdk_dir(self) -> Path:
        """Top-level directory inside the extracted archive."""
        return self.config.sdk_root / "google-cloud-sdk"

    @property
    def installer_path(self) -> Path:
        """Path to the non-interactive installer batch file."""
        return self.sdk_dir / "install.bat"

    @property
    def bin_dir(self) -> Path:
        """Directory holding the gcloud executables."""
        return self.sdk_dir / "bin"

    def locate_command(self) -> tuple[str, list[str]]:
        """Get the command that finds gcloud on PATH."""
        return "where", ["/q", "gcloud"]

    def install_binaries(self) -> None:
        """Download, unpack and run the SDK installer.

        Raises:
            ArchiveError: If the download or extraction fails.
            ProcessError: If the installer exits non-zero.
        """
        sdk_root = self.config.sdk_root
        self.fetcher.clear_directory(sdk_root)
        archive = self.fetcher.fetch(self.config.windows_archive_url)
        self.fetcher.extract(archive, sdk_root)

        logger.debug("Running installer %s", self.installer_path)
        self.runner.run(str(self.installer_path), ["-q"]).check()

    def path_value(self) -> str:
        """Compute the new user PATH with the SDK bin directory appended."""
        current = self.config.environ.get(PATH_ENV_VAR, "")
        if current and not current.endswith(PATH_SEPARATOR):
            current += PATH_SEPARATOR
        return f"{current}{self.bin_dir}"

    def register_path(self) -> None:
        """Persist the SDK bin directory on the user-scope PATH.

        Raises:
            ProcessError: If PowerShell fails to set the variable.
        """
        value = self.path_value()
        logger.debug("Setting environment variable path to %s via Windows PowerShell", value)
        script = (
            "[Environment]::SetEnvironmentVariable("
            f"'path', '{_powershell_quote(value)}', 'user')"
        )
        self.runner.run("powershell", ["-NoProfile", "-Command", script]).check()
        logger.info("Added %s to the user PATH.", self.bin_dir)
