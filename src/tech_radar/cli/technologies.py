"""
CLI: ``tech-radar technologies`` — browse the catalog.
"""

from __future__ import annotations

import typer

from tech_radar.cli.utils import SEED_FILE_HELP, make_context, output_paged, output_result

app = typer.Typer(no_args_is_help=True)

_COLUMNS = ["id", "name", "quadrant", "ring", "tags"]


@app.command("list")
def list_technologies(
    quadrant: int | None = typer.Option(None, "--quadrant", "-q", help="Quadrant position"),
    ring: int | None = typer.Option(None, "--ring", "-r", help="Ring position"),
    limit: int | None = typer.Option(None, "--limit", "-n"),
    offset: int = typer.Option(0, "--offset"),
    seed_file: str | None = typer.Option(None, "--seed-file", "-s", envvar="RADAR_SEED_FILE", help=SEED_FILE_HELP),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List technologies, optionally filtered by quadrant and ring."""
    from tech_radar.ops.requests import ListTechnologiesRequest
    from tech_radar.ops.technologies import list_technologies as _list

    ctx = make_context(seed_file)
    result = _list(ctx, ListTechnologiesRequest(quadrant=quadrant, ring=ring, limit=limit, offset=offset))
    output_paged(result, as_json=json_out, title="Technologies")


@app.command("search")
def search_technologies(
    query: str = typer.Argument(..., help="Text matched against name, description and tags"),
    seed_file: str | None = typer.Option(None, "--seed-file", "-s", envvar="RADAR_SEED_FILE", help=SEED_FILE_HELP),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Case-insensitive search over name, description and tags."""
    from tech_radar.ops.requests import ListTechnologiesRequest
    from tech_radar.ops.technologies import list_technologies as _list

    ctx = make_context(seed_file)
    result = _list(ctx, ListTechnologiesRequest(query=query))
    output_paged(result, as_json=json_out, title=f"Technologies matching {query!r}")


@app.command("get")
def get_technology(
    technology_id: int = typer.Argument(..., help="Technology ID"),
    seed_file: str | None = typer.Option(None, "--seed-file", "-s", envvar="RADAR_SEED_FILE", help=SEED_FILE_HELP),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show one technology."""
    from tech_radar.ops.technologies import get_technology as _get

    ctx = make_context(seed_file)
    output_result(_get(ctx, technology_id), as_json=json_out, title="Technology")


@app.command("projects")
def technology_projects(
    technology_id: int = typer.Argument(..., help="Technology ID"),
    seed_file: str | None = typer.Option(None, "--seed-file", "-s", envvar="RADAR_SEED_FILE", help=SEED_FILE_HELP),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Projects that use a technology."""
    from tech_radar.ops.technologies import list_technology_projects

    ctx = make_context(seed_file)
    output_result(list_technology_projects(ctx, technology_id), as_json=json_out, title="Projects")
