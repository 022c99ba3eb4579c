"""Download and extraction of the SDK archive."""

from __future__ import annotations

import logging
import ssl
import tempfile
import urllib.error
import urllib.request
import zipfile
from pathlib import Path

from gcloud_installer.errors import ArchiveError
from gcloud_installer.filesystem import RealFileSystem
from gcloud_installer.protocols import FileSystem

logger = logging.getLogger(__name__)


class HttpArchiveFetcher:
    """Fetches zip archives over HTTPS and unpacks them.

    Satisfies the ArchiveFetcher protocol structurally.
    """

    def __init__(self, filesystem: FileSystem | None = None) -> None:
        """Initialize the fetcher.

        Args:
            filesystem: Filesystem used to clear destination directories.
        """
        self.fs = filesystem if filesystem is not None else RealFileSystem()

    def fetch(self, url: str) -> bytes:
        """Download a remote archive into memory.

        Args:
            url: Archive URL.

        Returns:
            Raw archive bytes.

        Raises:
            ArchiveError: If the download fails.
        """
        logger.debug("Downloading file from %s", url)
        try:
            with urllib.request.urlopen(url, context=ssl.create_default_context()) as response:
                data = response.read()
        except (urllib.error.URLError, OSError) as e:
            raise ArchiveError(f"Download of {url} failed: {e}") from e
        logger.debug("Downloaded %d bytes from %s", len(data), url)
        return data

    def extract(self, archive: bytes, destination: Path) -> None:
        """Extract a zip archive into a directory.

        The archive is staged in a temporary file next to the destination and
        removed once extraction finishes.

        Args:
            archive: Raw zip bytes.
            destination: Directory to extract into. Created if missing.

        Raises:
            ArchiveError: If the archive is not a valid zip file.
        """
        destination.mkdir(parents=True, exist_ok=True)
        logger.debug("Extracting archive to %s", destination)
        with tempfile.NamedTemporaryFile(
            dir=destination.parent, prefix=f"{destination.name}-", suffix=".zip", delete=False
        ) as staged:
            staged.write(archive)
        staged_path = Path(staged.name)
        try:
            with zipfile.ZipFile(staged_path) as zf:
                zf.extractall(destination)
        except zipfile.BadZipFile as e:
            raise ArchiveError(f"Invalid archive: {e}") from e
        finally:
            staged_path.unlink(missing_ok=True)

    def clear_directory(self, destination: Path) -> None:
        """Delete a directory tree. No-op if it does not exist.

        Args:
            destination: Directory to delete.
        """
        if not self.fs.exists(destination):
            return
        logger.debug("Deleting directory %s", destination)
        self.fs.rmtree(destination)
