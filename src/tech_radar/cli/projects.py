"""
CLI: ``tech-radar projects`` — projects and the technologies they use.
"""

from __future__ import annotations

import typer

from tech_radar.cli.utils import SEED_FILE_HELP, make_context, output_paged, output_result

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_projects(
    limit: int | None = typer.Option(None, "--limit", "-n"),
    offset: int = typer.Option(0, "--offset"),
    seed_file: str | None = typer.Option(None, "--seed-file", "-s", envvar="RADAR_SEED_FILE", help=SEED_FILE_HELP),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List projects."""
    from tech_radar.ops.projects import list_projects as _list
    from tech_radar.ops.requests import ListRequest

    ctx = make_context(seed_file)
    output_paged(_list(ctx, ListRequest(limit=limit, offset=offset)), as_json=json_out, title="Projects")


@app.command("get")
def get_project(
    project_id: int = typer.Argument(..., help="Project ID"),
    seed_file: str | None = typer.Option(None, "--seed-file", "-s", envvar="RADAR_SEED_FILE", help=SEED_FILE_HELP),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show one project."""
    from tech_radar.ops.projects import get_project as _get

    output_result(_get(make_context(seed_file), project_id), as_json=json_out, title="Project")


@app.command("technologies")
def project_technologies(
    project_id: int = typer.Argument(..., help="Project ID"),
    seed_file: str | None = typer.Option(None, "--seed-file", "-s", envvar="RADAR_SEED_FILE", help=SEED_FILE_HELP),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Technologies a project uses."""
    from tech_radar.ops.projects import list_project_technologies

    ctx = make_context(seed_file)
    output_result(list_project_technologies(ctx, project_id), as_json=json_out, title="Technologies")
