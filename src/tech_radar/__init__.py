"""
tech-radar — a technology radar catalog.

Technologies are placed on a radar by quadrant (domain) and ring (adoption
maturity) and linked to the projects that use them.  The catalog lives in an
in-memory :class:`~tech_radar.core.store.RadarStore` and is served by a
FastAPI application and a Typer CLI.
"""

__version__ = "0.1.0"
