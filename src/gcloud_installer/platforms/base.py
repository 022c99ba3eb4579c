"""Base install strategy with the shared probe and install flow.

Every platform installs in two independent steps: putting the SDK binaries
on disk and registering them on the user's PATH. The steps touch disjoint
resources, so they run concurrently and are joined before either result is
inspected. A binary installation failure is fatal; a PATH registration
failure is only logged, since the SDK is usable without it.

Pattern: Template Method - the base class owns probing and the concurrent
join, subclasses provide the locate command and the two steps.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from gcloud_installer.errors import PATH_WARNING_PREFIX, FatalInstallError
from gcloud_installer.types import InstallOutcome, StepResult

if TYPE_CHECKING:
    from gcloud_installer.config import InstallerConfig
    from gcloud_installer.protocols import ProcessRunner

logger = logging.getLogger(__name__)

BINARY_STEP = "install binaries"
PATH_STEP = "register PATH"


class BaseStrategy(ABC):
    """Base class for platform install strategies."""

    name: str
    display_name: str

    def __init__(self, config: InstallerConfig, runner: ProcessRunner) -> None:
        """Initialize the strategy.

        Args:
            config: Settings for this run.
            runner: Process runner for probes and installers.
        """
        self.config = config
        self.runner = runner

    @abstractmethod
    def locate_command(self) -> tuple[str, list[str]]:
        """Get the command that finds gcloud on PATH."""
        ...

    @abstractmethod
    def install_binaries(self) -> None:
        """Download the SDK and run its installer non-interactively."""
        ...

    @abstractmethod
    def register_path(self) -> None:
        """Make the SDK binaries reachable from future shell sessions."""
        ...

    def is_installed(self) -> bool:
        """Check whether gcloud is already reachable on PATH.

        A failed lookup is a normal negative result; this never raises.

        Returns:
            True if the locate command exits with status zero.
        """
        command, args = self.locate_command()
        try:
            result = self.runner.run(command, args, capture=True)
        except OSError as e:
            logger.debug("Could not run %s: %s", command, e)
            return False

        if result.ok:
            logger.debug("Found installed gcloud binary at %s", result.stdout.strip())
            return True
        logger.debug("No gcloud installation found")
        return False

    def install(self) -> InstallOutcome:
        """Install the SDK binaries and register them on PATH.

        Both steps always run to completion before this returns or raises.

        Returns:
            InstallOutcome with both step results.

        Raises:
            FatalInstallError: If installing the binaries failed.
        """
        logger.info("Installing gcloud SDK for %s...", self.display_name)

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="gcloud-install") as pool:
            binaries = pool.submit(_settle, BINARY_STEP, self.install_binaries)
            path = pool.submit(_settle, PATH_STEP, self.register_path)
            outcome = InstallOutcome(binaries=binaries.result(), path=path.result())

        if not outcome.path.success:
            logger.error("%s%s", PATH_WARNING_PREFIX, outcome.path.error)
        if outcome.binaries.error is not None:
            raise FatalInstallError(outcome.binaries.error) from outcome.binaries.error
        return outcome


def _settle(name: str, step: Callable[[], None]) -> StepResult:
    """Run a step and capture its failure instead of raising it."""
    try:
        step()
    except Exception as e:
        logger.debug("Step '%s' failed: %s", name, e)
        return StepResult(name=name, error=e)
    return StepResult(name=name)
