"""End-to-end glyph plot pipeline.

Turns a table of rows into a GlyphPlot:
1. Check that every mapped column exists in the input
2. Normalize each numeric column once into scale factors
3. Compute the grid placement
4. Build one glyph per row, in row order
5. Derive the species legend
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from .config import FieldMapping, PlotConfig
from .geometry import GlyphBuilder
from .layout import build_legend, layout
from .normalize import is_missing, normalize
from .primitives import GlyphPlot, ScaleFactors

logger = structlog.get_logger(__name__)

Row = Mapping[str, Any]


def _category(value: Any) -> str | None:
    """Categorical cell as a string, or None when missing."""
    return None if is_missing(value) else str(value)


def check_columns(rows: list[Row], mapping: FieldMapping) -> None:
    """Ensure each mapped column is present in at least one row.

    Raises:
        ValueError: Naming the mapping key and the absent column.
    """
    if not rows:
        return
    for key, column in mapping.required_fields().items():
        if not any(column in row for row in rows):
            raise ValueError(f"Column '{column}' (mapped by {key}) not found in input rows")


def _is_complete(row: Row, mapping: FieldMapping) -> bool:
    columns = mapping.required_fields(include_id=False).values()
    return not any(is_missing(row.get(c)) for c in columns)


def penguin_glyphs(
    rows: Iterable[Row],
    mapping: FieldMapping | None = None,
    config: PlotConfig | None = None,
) -> GlyphPlot:
    """Build a grid of penguin glyphs from a table of rows.

    Args:
        rows: Ordered rows, each mapping column name to value.
        mapping: Column names for each channel (defaults to FieldMapping()).
        config: Plot appearance (defaults to PlotConfig()).

    Returns:
        GlyphPlot with one positioned glyph per row, plus legend and title.

    Raises:
        ValueError: If a mapped column is absent from every row.
    """
    mapping = mapping or FieldMapping()
    config = config or PlotConfig()
    table = list(rows)
    check_columns(table, mapping)

    # Keep 1-based positions in the original table for default labels
    numbered = list(enumerate(table, start=1))
    if config.drop_incomplete:
        numbered = [(pos, row) for pos, row in numbered if _is_complete(row, mapping)]
        logger.debug("incomplete_rows_dropped", dropped=len(table) - len(numbered))

    columns = {
        name: normalize([row.get(col) for _, row in numbered], config.scale_min, config.scale_max)
        for name, col in mapping.numeric_fields().items()
    }

    placement = layout(len(numbered), config.ncols)
    builder = GlyphBuilder(config.style)

    glyphs = []
    for i, (pos, row) in enumerate(numbered):
        label = None
        if config.show_labels:
            label = str(pos) if mapping.id_field is None else _category(row.get(mapping.id_field))
        scales = ScaleFactors(
            bill_length=columns["bill_length"][i],
            bill_depth=columns["bill_depth"][i],
            flipper_length=columns["flipper_length"][i],
            body=columns["body"][i],
        )
        glyphs.append(
            builder.build(
                placement.centers[i],
                scales=scales,
                species=_category(row.get(mapping.species_field)),
                sex=_category(row.get(mapping.sex_field)),
                label=label,
                base_size=config.base_size,
            )
        )

    legend = build_legend(
        (g.species for g in glyphs),
        location=config.legend.location,
        horizontal=config.legend.horizontal,
    )

    logger.debug(
        "glyphs_laid_out",
        glyph_count=len(glyphs),
        ncols=placement.ncols,
        nrows=placement.nrows,
        style=builder.style.name,
    )

    return GlyphPlot(
        placement=placement,
        glyphs=tuple(glyphs),
        legend=legend,
        title=config.title,
        style=builder.style.name,
    )
