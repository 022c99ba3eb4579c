"""Application context for dependency injection.

Separates object creation from object use: the CLI builds one context at
startup and everything downstream receives its collaborators from it.
Dependencies are typed using Protocols so test doubles can be injected
without inheritance.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from gcloud_installer.config import InstallerConfig
from gcloud_installer.protocols import ArchiveFetcher, FileSystem, ProcessRunner


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from gcloud_installer.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class AppContext:
    """Container for one run's configuration and capabilities."""

    config: InstallerConfig
    runner: ProcessRunner
    fetcher: ArchiveFetcher
    filesystem: FileSystem = field(default_factory=_default_filesystem)


def create_context(
    environ: Mapping[str, str] | None = None,
    os_name: str | None = None,
    machine: str | None = None,
) -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.

    Args:
        environ: Environment override (defaults to os.environ).
        os_name: OS identifier override (defaults to sys.platform).
        machine: Machine type override (defaults to platform.machine()).

    Returns:
        Configured AppContext.
    """
    from gcloud_installer.fetcher import HttpArchiveFetcher
    from gcloud_installer.filesystem import RealFileSystem
    from gcloud_installer.logging_config import stdio_mode
    from gcloud_installer.process import SubprocessRunner

    config = InstallerConfig.from_environ(environ, os_name=os_name, machine=machine)
    filesystem = RealFileSystem()

    return AppContext(
        config=config,
        runner=SubprocessRunner(stdio=stdio_mode(config.log_level)),
        fetcher=HttpArchiveFetcher(filesystem=filesystem),
        filesystem=filesystem,
    )
