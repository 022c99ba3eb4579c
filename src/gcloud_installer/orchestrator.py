"""Top-level install-or-update flow."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from gcloud_installer.errors import ProcessError, UpdateError
from gcloud_installer.platforms import get_strategy

if TYPE_CHECKING:
    from gcloud_installer.context import AppContext
    from gcloud_installer.protocols import InstallStrategy, ProcessRunner
    from gcloud_installer.types import InstallOutcome

logger = logging.getLogger(__name__)

UPDATE_COMMAND = ("gcloud", ["components", "update", "--quiet"])


class RunAction(str, Enum):
    """What a run did."""

    INSTALLED = "installed"
    UPDATED = "updated"


@dataclass(frozen=True)
class RunReport:
    """Summary of a completed run.

    Attributes:
        action: Whether the SDK was freshly installed or updated.
        outcome: Install step results (None for updates).
    """

    action: RunAction
    outcome: InstallOutcome | None = None

    @property
    def path_registered(self) -> bool:
        """False only if an install could not add the SDK to PATH."""
        return self.outcome is None or self.outcome.path.success


def update_gcloud(runner: ProcessRunner) -> None:
    """Update an existing gcloud installation.

    Args:
        runner: Process runner used to invoke gcloud.

    Raises:
        UpdateError: If gcloud cannot be run or exits non-zero.
    """
    logger.info("Updating existing gcloud installation...")
    command, args = UPDATE_COMMAND
    try:
        runner.run(command, list(args)).check()
    except (ProcessError, OSError) as e:
        raise UpdateError(e) from e


def run(ctx: AppContext, strategy: InstallStrategy | None = None) -> RunReport:
    """Install gcloud, or update it if it is already on PATH.

    Args:
        ctx: Application context for this run.
        strategy: Strategy override. Selected from ctx.config when None.

    Returns:
        RunReport describing what was done.

    Raises:
        UnsupportedPlatformError: If the host platform is unsupported.
        FatalInstallError: If installing the SDK binaries failed.
        UpdateError: If updating an existing installation failed.
    """
    if strategy is None:
        strategy = get_strategy(
            ctx.config, ctx.runner, fetcher=ctx.fetcher, filesystem=ctx.filesystem
        )
    logger.debug("Using %s install strategy", strategy.name)

    if strategy.is_installed():
        update_gcloud(ctx.runner)
        return RunReport(action=RunAction.UPDATED)

    outcome = strategy.install()
    return RunReport(action=RunAction.INSTALLED, outcome=outcome)
