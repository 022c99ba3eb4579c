"""Platform strategy selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gcloud_installer.errors import UnsupportedPlatformError
from gcloud_installer.types import PlatformFamily

from .base import BaseStrategy
from .unix import UnixStrategy
from .windows import WindowsStrategy

if TYPE_CHECKING:
    from gcloud_installer.config import InstallerConfig
    from gcloud_installer.protocols import ArchiveFetcher, FileSystem, ProcessRunner

__all__ = [
    "BaseStrategy",
    "UnixStrategy",
    "WindowsStrategy",
    "get_strategy",
]


def get_strategy(
    config: InstallerConfig,
    runner: ProcessRunner,
    fetcher: ArchiveFetcher | None = None,
    filesystem: FileSystem | None = None,
) -> BaseStrategy:
    """Get the install strategy for the configured platform.

    Nothing is probed, downloaded or written here.

    Args:
        config: Settings for this run.
        runner: Process runner handed to the strategy.
        fetcher: Archive fetcher for the Windows strategy.
        filesystem: Filesystem for the UNIX strategy.

    Returns:
        The strategy for config.platform.

    Raises:
        UnsupportedPlatformError: If the platform family is unsupported.
    """
    if config.platform is PlatformFamily.UNIX:
        return UnixStrategy(config, runner, filesystem=filesystem)
    if config.platform is PlatformFamily.WINDOWS:
        return WindowsStrategy(config, runner, fetcher=fetcher)
    raise UnsupportedPlatformError(config.os_name)
