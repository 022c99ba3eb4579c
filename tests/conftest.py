"""Shared test fixtures."""

from __future__ import annotations

import io
import logging
import zipfile
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from gcloud_installer.config import InstallerConfig, detect_platform
from gcloud_installer.context import AppContext
from gcloud_installer.process import ProcessResult


@pytest.fixture(autouse=True)
def reset_package_logger() -> Any:
    """Undo logging configuration done by a test."""
    package_logger = logging.getLogger("gcloud_installer")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


@pytest.fixture
def install_dir(tmp_path: Path) -> Path:
    """Directory the SDK is installed under."""
    path = tmp_path / "install"
    path.mkdir()
    return path


@pytest.fixture
def temp_home(tmp_path: Path) -> Path:
    """Fake HOME directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def make_config(install_dir: Path, temp_home: Path) -> Callable[..., InstallerConfig]:
    """Factory for InstallerConfig with test-friendly defaults."""

    def _make(
        os_name: str = "linux",
        environ: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> InstallerConfig:
        if environ is None:
            environ = {"SHELL": "/bin/zsh", "HOME": str(temp_home), "PATH": "/usr/bin"}
        return InstallerConfig(
            os_name=os_name,
            platform=detect_platform(os_name),
            install_dir=kwargs.pop("install_dir", install_dir),
            environ=environ,
            **kwargs,
        )

    return _make


def ok_result(*command: str, stdout: str = "") -> ProcessResult:
    """Build a successful ProcessResult."""
    return ProcessResult(command=list(command) or ["cmd"], returncode=0, stdout=stdout)


@pytest.fixture
def mock_runner() -> MagicMock:
    """Process runner whose commands all succeed."""
    runner = MagicMock()
    runner.run.side_effect = lambda command, args=None, capture=False: ok_result(
        command, *(args or [])
    )
    return runner


@pytest.fixture
def mock_fetcher() -> MagicMock:
    """Archive fetcher that returns a fixed archive."""
    fetcher = MagicMock()
    fetcher.fetch.return_value = b"archive-bytes"
    return fetcher


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Filesystem that records writes without touching disk."""
    fs = MagicMock()
    fs.exists.return_value = False
    return fs


@pytest.fixture
def make_context(
    make_config: Callable[..., InstallerConfig],
    mock_runner: MagicMock,
    mock_fetcher: MagicMock,
    mock_filesystem: MagicMock,
) -> Callable[..., AppContext]:
    """Factory for AppContext wired with mocks."""

    def _make(os_name: str = "linux", **kwargs: Any) -> AppContext:
        return AppContext(
            config=make_config(os_name, **kwargs),
            runner=mock_runner,
            fetcher=mock_fetcher,
            filesystem=mock_filesystem,
        )

    return _make


@pytest.fixture
def sdk_zip() -> bytes:
    """A small zip laid out like the Windows SDK archive."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        zf.writestr("google-cloud-sdk/install.bat", "@echo off\r\n")
        zf.writestr("google-cloud-sdk/bin/gcloud.cmd", "@echo gcloud\r\n")
    return buffer.getvalue()
