"""Startup configuration.

All host facts (OS, architecture, environment, install location) are read
once here and handed to the strategies, which never consult process-wide
state themselves.
"""

from __future__ import annotations

import os
import platform
import sys
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from gcloud_installer.types import PlatformFamily

DEFAULT_SDK_VERSION = "158.0.0"

# The SDK is unpacked next to the installed package
DEFAULT_INSTALL_DIR = Path(__file__).resolve().parent

SDK_DIR_NAME = "google-cloud-sdk"

UNIX_INSTALLER_URL = (
    "https://dl.google.com/dl/cloudsdk/channels/rapid/install_google_cloud_sdk.bash"
)
WINDOWS_ARCHIVE_URL = (
    "https://dl.google.com/dl/cloudsdk/channels/rapid/downloads/"
    "google-cloud-sdk-{version}-windows-{arch}-bundled-python.zip"
)

ENV_SDK_VERSION = "GCLOUD_INSTALLER_SDK_VERSION"
ENV_INSTALL_DIR = "GCLOUD_INSTALLER_INSTALL_DIR"
ENV_LOG_LEVEL = "GCLOUD_INSTALLER_LOGLEVEL"
# Exported by npm to lifecycle scripts
ENV_NPM_LOG_LEVEL = "npm_config_loglevel"

DEFAULT_LOG_LEVEL = "warn"

PLATFORM_FAMILIES: dict[str, PlatformFamily] = {
    "darwin": PlatformFamily.UNIX,
    "linux": PlatformFamily.UNIX,
    "win32": PlatformFamily.WINDOWS,
}

X86_64_MACHINES = {"x86_64", "amd64", "x64"}


def detect_platform(os_name: str) -> PlatformFamily:
    """Map a sys.platform value to a platform family.

    Args:
        os_name: Raw OS identifier such as "darwin", "linux" or "win32".

    Returns:
        The matching PlatformFamily, or PlatformFamily.UNSUPPORTED.
    """
    return PLATFORM_FAMILIES.get(os_name, PlatformFamily.UNSUPPORTED)


def detect_architecture(machine: str) -> str:
    """Map a machine name to the architecture used in SDK archive names."""
    return "x86_64" if machine.lower() in X86_64_MACHINES else "x86"


class InstallerConfig(BaseModel):
    """Immutable settings for one installer run."""

    model_config = ConfigDict(frozen=True)

    os_name: str
    platform: PlatformFamily
    architecture: str = "x86_64"
    sdk_version: str = DEFAULT_SDK_VERSION
    install_dir: Path = DEFAULT_INSTALL_DIR
    environ: dict[str, str] = Field(default_factory=dict)
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def sdk_root(self) -> Path:
        """Directory the SDK is unpacked into."""
        return self.install_dir / SDK_DIR_NAME

    @property
    def unix_installer_url(self) -> str:
        """URL of the UNIX bootstrap install script."""
        return UNIX_INSTALLER_URL

    @property
    def windows_archive_url(self) -> str:
        """URL of the versioned Windows SDK archive for this architecture."""
        return WINDOWS_ARCHIVE_URL.format(version=self.sdk_version, arch=self.architecture)

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        os_name: str | None = None,
        machine: str | None = None,
    ) -> InstallerConfig:
        """Build the configuration from the host environment.

        Args:
            environ: Environment mapping. Defaults to os.environ.
            os_name: OS identifier. Defaults to sys.platform.
            machine: Machine type. Defaults to platform.machine().

        Returns:
            Configured InstallerConfig.
        """
        env = dict(os.environ if environ is None else environ)
        os_name = os_name if os_name is not None else sys.platform
        machine = machine if machine is not None else platform.machine()

        install_dir = env.get(ENV_INSTALL_DIR)
        log_level = env.get(ENV_LOG_LEVEL) or env.get(ENV_NPM_LOG_LEVEL) or DEFAULT_LOG_LEVEL

        return cls(
            os_name=os_name,
            platform=detect_platform(os_name),
            architecture=detect_architecture(machine),
            sdk_version=env.get(ENV_SDK_VERSION) or DEFAULT_SDK_VERSION,
            install_dir=Path(install_dir) if install_dir else DEFAULT_INSTALL_DIR,
            environ=env,
            log_level=log_level.strip().lower(),
        )
