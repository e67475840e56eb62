"""
Radar read model.

Resolves every technology's positional quadrant/ring reference into the
names and colors the visualization needs.  Resolution is lenient: a position
with no matching quadrant or ring produces a blip with ``resolved=False`` and
the fallback color instead of an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tech_radar.core.store import RadarStore

# Default ring palette, innermost first.  Used when a ring has no color.
RING_COLORS: tuple[str, ...] = ("#5ba300", "#009eb0", "#c7ba00", "#e09b96")

FALLBACK_COLOR = "#64748b"


@dataclass(frozen=True, slots=True)
class RadarQuadrant:
    position: int
    id: int
    name: str
    color: str


@dataclass(frozen=True, slots=True)
class RadarRing:
    position: int
    id: int
    name: str
    color: str


@dataclass(frozen=True, slots=True)
class Blip:
    """One technology as plotted on the radar."""

    technology_id: int
    name: str
    quadrant: int
    ring: int
    quadrant_name: str | None
    ring_name: str | None
    color: str
    resolved: bool


@dataclass(frozen=True, slots=True)
class RadarView:
    quadrants: list[RadarQuadrant] = field(default_factory=list)
    rings: list[RadarRing] = field(default_factory=list)
    blips: list[Blip] = field(default_factory=list)

    @property
    def unresolved(self) -> list[Blip]:
        return [b for b in self.blips if not b.resolved]


def ring_color(position: int, color: str | None) -> str:
    """A ring's own color, else the palette entry for its position."""
    if color:
        return color
    if 0 <= position < len(RING_COLORS):
        return RING_COLORS[position]
    return FALLBACK_COLOR


def build_radar(store: RadarStore, quadrant: int | None = None) -> RadarView:
    """Build the radar view, optionally limited to one quadrant position."""
    quadrants = [
        RadarQuadrant(position=i, id=q.id, name=q.name, color=q.color or FALLBACK_COLOR)
        for i, q in enumerate(store.list_quadrants())
    ]
    rings = [
        RadarRing(position=i, id=r.id, name=r.name, color=ring_color(i, r.color))
        for i, r in enumerate(store.list_rings())
    ]

    blips = []
    for tech in store.filter_technologies(quadrant=quadrant):
        q = quadrants[tech.quadrant] if 0 <= tech.quadrant < len(quadrants) else None
        r = rings[tech.ring] if 0 <= tech.ring < len(rings) else None
        blips.append(
            Blip(
                technology_id=tech.id,
                name=tech.name,
                quadrant=tech.quadrant,
                ring=tech.ring,
                quadrant_name=q.name if q else None,
                ring_name=r.name if r else None,
                color=r.color if r else FALLBACK_COLOR,
                resolved=q is not None and r is not None,
            )
        )

    return RadarView(quadrants=quadrants, rings=rings, blips=blips)
