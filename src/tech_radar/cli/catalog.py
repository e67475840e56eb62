"""
CLI: ``tech-radar quadrants`` and ``tech-radar rings`` — the radar axes.
"""

from __future__ import annotations

import typer

from tech_radar.cli.utils import SEED_FILE_HELP, make_context, output_paged

quadrants_app = typer.Typer(no_args_is_help=True)
rings_app = typer.Typer(no_args_is_help=True)


@quadrants_app.command("list")
def list_quadrants(
    seed_file: str | None = typer.Option(None, "--seed-file", "-s", envvar="RADAR_SEED_FILE", help=SEED_FILE_HELP),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List quadrants in position order."""
    from tech_radar.ops.classification import list_quadrants as _list

    output_paged(_list(make_context(seed_file)), as_json=json_out, title="Quadrants")


@rings_app.command("list")
def list_rings(
    seed_file: str | None = typer.Option(None, "--seed-file", "-s", envvar="RADAR_SEED_FILE", help=SEED_FILE_HELP),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List rings, innermost first."""
    from tech_radar.ops.classification import list_rings as _list

    output_paged(_list(make_context(seed_file)), as_json=json_out, title="Rings")
