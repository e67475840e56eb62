"""
CLI: ``tech-radar links`` — technology-project links.
"""

from __future__ import annotations

import typer

from tech_radar.cli.utils import SEED_FILE_HELP, make_context, output_paged

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_links(
    technology_id: int | None = typer.Option(None, "--technology", "-t", help="Only links for this technology ID"),
    project_id: int | None = typer.Option(None, "--project", "-p", help="Only links for this project ID"),
    seed_file: str | None = typer.Option(None, "--seed-file", "-s", envvar="RADAR_SEED_FILE", help=SEED_FILE_HELP),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List technology-project links."""
    from tech_radar.ops.links import list_links as _list
    from tech_radar.ops.requests import ListLinksRequest

    ctx = make_context(seed_file)
    result = _list(ctx, ListLinksRequest(technology_id=technology_id, project_id=project_id))
    output_paged(result, as_json=json_out, title="Links")
