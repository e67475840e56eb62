"""Allow ``python -m tech_radar``."""

from tech_radar.cli.app import app

app()
