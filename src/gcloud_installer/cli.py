"""Post-install hook entry point using Typer."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape

from gcloud_installer import __version__
from gcloud_installer.console import StatusConsole
from gcloud_installer.context import create_context
from gcloud_installer.errors import InstallerError
from gcloud_installer.logging_config import configure_logging
from gcloud_installer.orchestrator import RunAction, run

app = typer.Typer(
    name="gcloud-installer",
    help="Install the Google Cloud SDK, or update an existing installation",
    add_completion=False,
)

status = StatusConsole()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        status.console.print(f"gcloud-installer v{__version__}")
        raise typer.Exit()


@app.command()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    _context=None,
) -> None:
    """Install or update the Google Cloud SDK."""
    ctx = _context or create_context()
    configure_logging(ctx.config.log_level)

    try:
        report = run(ctx)
    except InstallerError as e:
        status.show_error(escape(str(e)))
        raise typer.Exit(1) from e

    if report.action is RunAction.UPDATED:
        status.show_success("Updated existing gcloud installation")
    elif report.path_registered:
        status.show_success(f"Installed gcloud SDK to {escape(str(ctx.config.sdk_root))}")
    else:
        status.show_warning(
            f"Installed gcloud SDK to {escape(str(ctx.config.sdk_root))}, "
            "but it is not on your PATH yet"
        )


if __name__ == "__main__":
    app()
