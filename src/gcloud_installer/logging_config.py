"""Logging setup driven by the host package manager's log level."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from gcloud_installer.process import StdioMode

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "gcloud_installer"

# Disables all output, including errors
SILENT = logging.CRITICAL + 10

LOG_LEVELS: dict[str, int] = {
    "silly": logging.DEBUG,
    "verbose": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "silent": SILENT,
}

FALLBACK_LEVEL_NAME = "warn"


def resolve_log_level(name: str) -> int | None:
    """Map a package-manager log level name to a logging level.

    Args:
        name: Level name such as "verbose" or "warn".

    Returns:
        The logging level, or None if the name is not recognized.
    """
    return LOG_LEVELS.get(name.strip().lower())


def stdio_mode(name: str) -> StdioMode:
    """Choose how child process output is shown for a log level name."""
    name = name.strip().lower()
    if name == "silent":
        return StdioMode.SILENT
    if name == "warn":
        return StdioMode.ERRORS_ONLY
    return StdioMode.INHERIT


def configure_logging(level_name: str, console: Console | None = None) -> int:
    """Install a rich handler on the package logger.

    Unknown level names fall back to "warn" with a warning.

    Args:
        level_name: Package-manager log level name.
        console: Console to log to. Defaults to a stderr console.

    Returns:
        The logging level that was applied.
    """
    level = resolve_log_level(level_name)
    unsupported = level is None
    if level is None:
        level = LOG_LEVELS[FALLBACK_LEVEL_NAME]

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    package_logger.addHandler(handler)
    package_logger.setLevel(level)

    if unsupported:
        logger.warning(
            "Log level '%s' is unsupported; using default of '%s'",
            level_name,
            FALLBACK_LEVEL_NAME,
        )
    return level
