"""Allow running the installer with ``python -m gcloud_installer``."""

from gcloud_installer.cli import app

app(prog_name="gcloud-installer")
