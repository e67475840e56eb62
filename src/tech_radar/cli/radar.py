"""
CLI: ``tech-radar radar`` — print the resolved radar.
"""

from __future__ import annotations

import typer

from tech_radar.cli.utils import SEED_FILE_HELP, console, make_context, output_result, print_table

app = typer.Typer(no_args_is_help=True)


@app.command("show")
def show(
    quadrant: int | None = typer.Option(None, "--quadrant", "-q", help="Only this quadrant position"),
    seed_file: str | None = typer.Option(None, "--seed-file", "-s", envvar="RADAR_SEED_FILE", help=SEED_FILE_HELP),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show every technology with its resolved quadrant and ring."""
    from tech_radar.ops.radar import get_radar

    result = get_radar(make_context(seed_file), quadrant=quadrant)
    if json_out or not result.success:
        output_result(result, as_json=json_out)
        return

    blips = result.data.blips
    if not blips:
        console.print("[dim]No items.[/dim]")
        return
    print_table(
        blips,
        title="Tech Radar",
        columns=["technology_id", "name", "quadrant_name", "ring_name", "resolved"],
    )
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")
