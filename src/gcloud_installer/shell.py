"""Shell detection and rc-file resolution for UNIX-family systems."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

from gcloud_installer.errors import ShellResolutionError

logger = logging.getLogger(__name__)

SHELL_ENV_VAR = "SHELL"
HOME_ENV_VAR = "HOME"

UNKNOWN_SHELL_MESSAGE = (
    "Unknown shell type.\n"
    "The gcloud installer supports zsh, fish, and bash.\n"
    "You will have to add a 'gcloud' alias yourself."
)
UNKNOWN_RC_MESSAGE = (
    "Could not find the .rc file for the current shell.\n"
    "You will have to add a 'gcloud' alias yourself."
)


class Shell(str, Enum):
    """Interactive shells with a gcloud PATH include script."""

    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    NONE = "none"


# rc file for each shell, relative to HOME
RC_FILES: dict[Shell, str] = {
    Shell.BASH: ".bashrc",
    Shell.ZSH: ".zshrc",
    Shell.FISH: ".config/fish/config.fish",
}

# macOS terminals start login shells, which read .bash_profile
DARWIN_BASH_RC_FILE = ".bash_profile"


def detect_shell(environ: Mapping[str, str]) -> Shell:
    """Classify the user's shell from the SHELL environment variable.

    Args:
        environ: Environment mapping to read SHELL from.

    Returns:
        The detected Shell, or Shell.NONE if unset or unsupported.
    """
    shell_path = environ.get(SHELL_ENV_VAR) or ""
    result = Shell.NONE
    for shell in (Shell.BASH, Shell.FISH, Shell.ZSH):
        if shell_path.endswith(f"/{shell.value}"):
            result = shell
            break

    logger.debug("Detected shell type: %s", result.value)
    return result


def validate_shell(shell: Shell) -> Shell:
    """Ensure a shell is supported.

    Args:
        shell: Shell returned by detect_shell().

    Returns:
        The same shell.

    Raises:
        ShellResolutionError: If the shell is Shell.NONE.
    """
    if shell is Shell.NONE:
        raise ShellResolutionError(UNKNOWN_SHELL_MESSAGE)
    return shell


def resolve_rc_path(shell: Shell, environ: Mapping[str, str], os_name: str = "linux") -> Path:
    """Get the full path to a shell's rc file.

    No existence check is made; the file is created on first append.

    Args:
        shell: A supported shell.
        environ: Environment mapping to read HOME from.
        os_name: Raw OS identifier; bash uses .bash_profile on "darwin".

    Returns:
        Path to the rc file under HOME.

    Raises:
        ShellResolutionError: If the shell is unsupported or HOME is unset.
    """
    validate_shell(shell)
    rc_file = RC_FILES[shell]
    if shell is Shell.BASH and os_name == "darwin":
        rc_file = DARWIN_BASH_RC_FILE

    home = environ.get(HOME_ENV_VAR)
    if not home:
        raise ShellResolutionError(UNKNOWN_RC_MESSAGE)

    result = Path(home) / rc_file
    logger.debug("Detected rc file at %s", result)
    return result


def include_script_path(sdk_root: Path, shell: Shell) -> Path:
    """Get the SDK's PATH include script for a shell.

    Args:
        sdk_root: Root directory of the unpacked SDK.
        shell: A supported shell.

    Returns:
        Path such as <sdk_root>/path.zsh.inc.
    """
    validate_shell(shell)
    return sdk_root / f"path.{shell.value}.inc"


def source_snippet(include_path: Path) -> str:
    """Build the text appended to an rc file.

    Args:
        include_path: Path returned by include_script_path().

    Returns:
        The rc-file snippet that sources the include script.
    """
    return f"\n\n# gcloud sdk\nsource {include_path}"
