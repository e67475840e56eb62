"""
Root Typer application for the tech-radar CLI.

Every command builds its own seeded in-memory store, so nothing persists
between invocations.
"""

from __future__ import annotations

import typer
from typer import Typer

app = Typer(
    name="tech-radar",
    help="tech-radar — browse a technology radar catalog and serve its API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from tech_radar import __version__

        typer.echo(f"tech-radar {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="RADAR_LOG_LEVEL", help="Log level"),
) -> None:
    """tech-radar CLI — technologies, projects, the radar, and the API server."""
    from tech_radar.logging import configure_logging

    configure_logging(level=log_level, force=True)


# ── Sub-command registration ─────────────────────────────────────────────

from tech_radar.cli.catalog import quadrants_app, rings_app  # noqa: E402
from tech_radar.cli.links import app as links_app  # noqa: E402
from tech_radar.cli.projects import app as projects_app  # noqa: E402
from tech_radar.cli.radar import app as radar_app  # noqa: E402
from tech_radar.cli.seed import app as seed_app  # noqa: E402
from tech_radar.cli.serve import app as serve_app  # noqa: E402
from tech_radar.cli.technologies import app as technologies_app  # noqa: E402

app.add_typer(technologies_app, name="technologies", help="Technology catalog.")
app.add_typer(quadrants_app, name="quadrants", help="Radar quadrants.")
app.add_typer(rings_app, name="rings", help="Radar rings.")
app.add_typer(projects_app, name="projects", help="Projects and their technologies.")
app.add_typer(links_app, name="links", help="Technology-project links.")
app.add_typer(radar_app, name="radar", help="The resolved radar view.")
app.add_typer(seed_app, name="seed", help="Seed file tools.")
app.add_typer(serve_app, name="serve", help="Start the API server.")
