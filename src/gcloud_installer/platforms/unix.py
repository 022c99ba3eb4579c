"""UNIX-family (macOS, Linux) install strategy."""

from __future__ import annotations

import logging
import shlex
from typing import TYPE_CHECKING

from gcloud_installer.filesystem import RealFileSystem
from gcloud_installer.platforms.base import BaseStrategy
from gcloud_installer.shell import (
    detect_shell,
    include_script_path,
    resolve_rc_path,
    source_snippet,
)

if TYPE_CHECKING:
    from gcloud_installer.config import InstallerConfig
    from gcloud_installer.protocols import FileSystem, ProcessRunner

logger = logging.getLogger(__name__)


class UnixStrategy(BaseStrategy):
    """Installs via the bootstrap script and sources it from the shell rc file."""

    name = "unix"
    display_name = "UNIX (OSX/Linux)"

    def __init__(
        self,
        config: InstallerConfig,
        runner: ProcessRunner,
        filesystem: FileSystem | None = None,
    ) -> None:
        """Initialize the UNIX strategy.

        Args:
            config: Settings for this run.
            runner: Process runner for the probe and the install script.
            filesystem: Filesystem used to append to the rc file.
        """
        super().__init__(config, runner)
        self.fs = filesystem if filesystem is not None else RealFileSystem()

    def locate_command(self) -> tuple[str, list[str]]:
        """Get the command that finds gcloud on PATH."""
        return "which", ["gcloud"]

    def install_command(self) -> str:
        """Build the shell pipeline that downloads and runs the installer."""
        return (
            f"set -o pipefail; curl -fsSL {self.config.unix_installer_url}"
            " | bash -s -- --disable-prompts"
            f" --install-dir={shlex.quote(str(self.config.install_dir))}"
        )

    def install_binaries(self) -> None:
        """Run the bootstrap installer into the install directory.

        Raises:
            ProcessError: If the download or install script fails.
        """
        sdk_root = self.config.sdk_root
        if self.fs.exists(sdk_root):
            logger.debug("Deleting stale SDK directory %s", sdk_root)
            self.fs.rmtree(sdk_root)

        install_cmd = self.install_command()
        logger.debug("Running install command: %s", install_cmd)
        self.runner.run("bash", ["-c", install_cmd]).check()

    def register_path(self) -> None:
        """Append a line sourcing the SDK's include script to the shell rc file.

        The shell is detected once and reused for both the include script
        and the rc file.

        Raises:
            ShellResolutionError: If the shell or its rc file is unknown.
        """
        shell = detect_shell(self.config.environ)
        rc_path = resolve_rc_path(shell, self.config.environ, self.config.os_name)
        include_path = include_script_path(self.config.sdk_root, shell)

        logger.debug("Appending source line for %s to %s", include_path, rc_path)
        self.fs.append_text(rc_path, source_snippet(include_path))
        logger.info("Added 'gcloud' alias to %s.", rc_path)
