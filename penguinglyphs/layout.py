"""Grid layout and legend derivation for glyph plots.

Glyphs are tiled row-major into unit cells, top row first. Cell centers
sit at half-integer offsets and y grows upward, so for a grid of
``nrows`` rows:

    x = col + 0.5
    y = (nrows - row - 1) + 0.5

The plot region is exactly ``[0, ncols] x [0, nrows]``. Placement depends
only on the glyph count and column count, never on glyph content.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import structlog

from .normalize import is_missing
from .primitives import GridPlacement, LegendEntry, LegendSpec
from .styles import species_color

logger = structlog.get_logger(__name__)

# Anchor keywords a legend can be placed at
LEGEND_LOCATIONS = (
    "top-left",
    "top",
    "top-right",
    "left",
    "center",
    "right",
    "bottom-left",
    "bottom",
    "bottom-right",
)


def layout(n: int, ncols: int) -> GridPlacement:
    """Compute the grid position of each of ``n`` glyphs.

    Args:
        n: Number of glyphs.
        ncols: Number of grid columns (at least 1).

    Returns:
        GridPlacement with one center per glyph index, in index order.

    Raises:
        ValueError: If ``ncols`` is less than 1 or ``n`` is negative.
    """
    if ncols < 1:
        raise ValueError(f"ncols must be at least 1, got {ncols}")
    if n < 0:
        raise ValueError(f"Glyph count must be non-negative, got {n}")

    nrows = math.ceil(n / ncols)
    centers = []
    for i in range(n):
        row, col = divmod(i, ncols)
        centers.append((col + 0.5, (nrows - row - 1) + 0.5))

    return GridPlacement(centers=tuple(centers), ncols=ncols, nrows=nrows)


def build_legend(
    species_values: Iterable[object],
    location: str = "top-left",
    horizontal: bool = True,
    title: str = "Species",
) -> LegendSpec:
    """Derive the species legend from the observed values.

    Each distinct species appears once, in order of first appearance,
    with its palette color. Unrecognized species get the neutral color.
    Missing values add no entry, although their glyphs are still drawn in
    the neutral color; the legend only names observed categories.

    Raises:
        ValueError: If ``location`` is not a known anchor keyword.
    """
    if location not in LEGEND_LOCATIONS:
        valid = ", ".join(LEGEND_LOCATIONS)
        raise ValueError(f"Unknown legend location '{location}'. Valid locations: {valid}")

    seen: dict[str, None] = {}
    for value in species_values:
        if is_missing(value):
            continue
        seen.setdefault(str(value), None)

    entries = tuple(LegendEntry(label=s, fill=species_color(s)) for s in seen)
    logger.debug("legend_built", entries=len(entries), location=location)
    return LegendSpec(entries=entries, location=location, horizontal=horizontal, title=title)
