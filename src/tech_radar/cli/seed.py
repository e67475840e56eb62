"""
CLI: ``tech-radar seed`` — check seed files before serving them.
"""

from __future__ import annotations

import typer

from tech_radar.cli.utils import console, fail

app = typer.Typer(no_args_is_help=True)


@app.command("validate")
def validate(
    path: str = typer.Argument(..., help="YAML seed file"),
) -> None:
    """Parse a seed file and load it into a scratch store."""
    from tech_radar.core.errors import RadarError
    from tech_radar.core.seed import SeedData, seed_store
    from tech_radar.core.store import RadarStore

    try:
        counts = seed_store(RadarStore(), SeedData.from_yaml_file(path))
    except RadarError as e:
        fail(e.message, code=e.category.value.upper())

    console.print(f"[green]✓[/green] {path} is valid")
    for name, count in counts.items():
        console.print(f"  [cyan]{name}[/cyan]: {count}")
