"""
CLI: ``tech-radar serve`` — start the API server.
"""

from __future__ import annotations

import os

import typer
import uvicorn

from tech_radar.cli.utils import console

app = typer.Typer(no_args_is_help=True)


@app.command("start")
def start(
    host: str = typer.Option("0.0.0.0", "--host", "-h", help="Bind address"),
    port: int = typer.Option(5000, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on changes"),
    seed_file: str | None = typer.Option(None, "--seed-file", "-s", help="YAML seed file to serve"),
    log_level: str = typer.Option("info", "--log-level"),
) -> None:
    """Start the tech-radar REST API server."""
    if seed_file:
        # create_app reads settings from the environment in the server process
        os.environ["RADAR_SEED_FILE"] = seed_file

    console.print(f"[bold green]Starting tech-radar API[/bold green] on {host}:{port}")
    uvicorn.run(
        "tech_radar.api:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )
