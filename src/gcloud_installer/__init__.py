"""Post-install hook that installs or updates the Google Cloud SDK."""

__version__ = "0.1.0"

# Export protocol interfaces for type hints and dependency injection
from gcloud_installer.protocols import (
    ArchiveFetcher,
    FileSystem,
    InstallStrategy,
    ProcessRunner,
)

__all__ = [
    "__version__",
    "ArchiveFetcher",
    "FileSystem",
    "InstallStrategy",
    "ProcessRunner",
]
