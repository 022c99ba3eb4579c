"""Tests for the Windows install strategy."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, call

import pytest

from gcloud_installer.config import InstallerConfig
from gcloud_installer.errors import ArchiveError, FatalInstallError
from gcloud_installer.fetcher import HttpArchiveFetcher
from gcloud_installer.platforms import WindowsStrategy
from gcloud_installer.process import ProcessResult

ARCHIVE_URL = (
    "https://dl.google.com/dl/cloudsdk/channels/rapid/downloads/"
    "google-cloud-sdk-158.0.0-windows-x86_64-bundled-python.zip"
)


@pytest.fixture
def windows_config(make_config: Callable[..., InstallerConfig]) -> InstallerConfig:
    """Windows configuration with a simple PATH."""
    return make_config("win32", environ={"PATH": r"C:\Windows;C:\Tools"})


def _powershell_calls(runner: MagicMock) -> list:
    return [c for c in runner.run.call_args_list if c.args[0] == "powershell"]


class TestWindowsStrategy:
    """Tests for WindowsStrategy."""

    def test_locate_command(self, windows_config: InstallerConfig, mock_runner: MagicMock) -> None:
        """Test where is used to find gcloud."""
        strategy = WindowsStrategy(windows_config, mock_runner)
        assert strategy.locate_command() == ("where", ["/q", "gcloud"])

    def test_layout(
        self, windows_config: InstallerConfig, mock_runner: MagicMock, install_dir: Path
    ) -> None:
        """Test installer and bin paths inside the extracted archive."""
        strategy = WindowsStrategy(windows_config, mock_runner)
        sdk_dir = install_dir / "google-cloud-sdk" / "google-cloud-sdk"
        assert strategy.installer_path == sdk_dir / "install.bat"
        assert strategy.bin_dir == sdk_dir / "bin"

    def test_clear_fetch_extract_order(
        self,
        windows_config: InstallerConfig,
        mock_runner: MagicMock,
        mock_fetcher: MagicMock,
        install_dir: Path,
    ) -> None:
        """Test the root is cleared, then the archive fetched and extracted there."""
        sdk_root = install_dir / "google-cloud-sdk"

        WindowsStrategy(windows_config, mock_runner, fetcher=mock_fetcher).install()

        assert mock_fetcher.mock_calls == [
            call.clear_directory(sdk_root),
            call.fetch(ARCHIVE_URL),
            call.extract(b"archive-bytes", sdk_root),
        ]

    def test_runs_installer_quietly(
        self, windows_config: InstallerConfig, mock_runner: MagicMock, mock_fetcher: MagicMock
    ) -> None:
        """Test install.bat is run with -q."""
        strategy = WindowsStrategy(windows_config, mock_runner, fetcher=mock_fetcher)

        strategy.install()

        mock_runner.run.assert_any_call(str(strategy.installer_path), ["-q"])

    def test_sets_user_path(
        self, windows_config: InstallerConfig, mock_runner: MagicMock, mock_fetcher: MagicMock
    ) -> None:
        """Test PowerShell persists the extended PATH at user scope."""
        strategy = WindowsStrategy(windows_config, mock_runner, fetcher=mock_fetcher)

        strategy.install()

        (powershell,) = _powershell_calls(mock_runner)
        script = powershell.args[1][-1]
        assert script == (
            "[Environment]::SetEnvironmentVariable("
            f"'path', 'C:\\Windows;C:\\Tools;{strategy.bin_dir}', 'user')"
        )

    def test_path_value_keeps_trailing_separator(
        self, make_config: Callable[..., InstallerConfig], mock_runner: MagicMock
    ) -> None:
        """Test no doubled separator when PATH already ends in one."""
        strategy = WindowsStrategy(make_config("win32", environ={"PATH": "C:\\A;"}), mock_runner)
        assert strategy.path_value() == f"C:\\A;{strategy.bin_dir}"

    def test_path_value_quotes_for_powershell(
        self,
        make_config: Callable[..., InstallerConfig],
        mock_runner: MagicMock,
        mock_fetcher: MagicMock,
    ) -> None:
        """Test single quotes in PATH are escaped."""
        config = make_config("win32", environ={"PATH": "C:\\Bob's Tools"})

        WindowsStrategy(config, mock_runner, fetcher=mock_fetcher).install()

        (powershell,) = _powershell_calls(mock_runner)
        assert "'C:\\Bob''s Tools;" in powershell.args[1][-1]

    def test_download_failure_is_fatal(
        self, windows_config: InstallerConfig, mock_runner: MagicMock, mock_fetcher: MagicMock
    ) -> None:
        """Test a failed download aborts and skips extraction."""
        mock_fetcher.fetch.side_effect = ArchiveError("Download failed")

        with pytest.raises(FatalInstallError, match="^Fatal: error installing the SDK: Download failed"):
            WindowsStrategy(windows_config, mock_runner, fetcher=mock_fetcher).install()
        mock_fetcher.extract.assert_not_called()

    def test_installer_failure_is_fatal(
        self, windows_config: InstallerConfig, mock_fetcher: MagicMock
    ) -> None:
        """Test a non-zero installer exit aborts the run."""
        runner = MagicMock()
        runner.run.side_effect = lambda command, args=None, capture=False: ProcessResult(
            command=[command, *(args or [])],
            returncode=1 if command.endswith("install.bat") else 0,
        )

        with pytest.raises(FatalInstallError, match="install.bat"):
            WindowsStrategy(windows_config, runner, fetcher=mock_fetcher).install()

    def test_path_failure_is_warning(
        self,
        windows_config: InstallerConfig,
        mock_fetcher: MagicMock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test a PowerShell failure is only a warning."""
        runner = MagicMock()
        runner.run.side_effect = lambda command, args=None, capture=False: ProcessResult(
            command=[command, *(args or [])],
            returncode=1 if command == "powershell" else 0,
            stderr="Access denied" if command == "powershell" else "",
        )

        with caplog.at_level(logging.WARNING, logger="gcloud_installer"):
            outcome = WindowsStrategy(windows_config, runner, fetcher=mock_fetcher).install()

        assert outcome.success
        assert not outcome.path.success
        assert "Warning: error adding SDK to PATH:" in caplog.text
        assert "Access denied" in caplog.text

    def test_reinstall_over_populated_root(
        self,
        windows_config: InstallerConfig,
        mock_runner: MagicMock,
        install_dir: Path,
        sdk_zip: bytes,
    ) -> None:
        """Test installing twice succeeds and leaves no stale content."""
        fetcher = HttpArchiveFetcher()
        fetcher.fetch = MagicMock(return_value=sdk_zip)
        strategy = WindowsStrategy(windows_config, mock_runner, fetcher=fetcher)

        strategy.install()
        stale = install_dir / "google-cloud-sdk" / "stale.txt"
        stale.write_text("left over")
        strategy.install()

        assert not stale.exists()
        assert strategy.installer_path.is_file()
