"""Value objects for penguin glyph plots.

A glyph is described declaratively as an ordered tuple of shape
primitives. Later primitives are drawn on top of earlier ones. Every
object here is immutable and built fresh for each render call.

Coordinates are in plot units with y growing upward; a renderer is
responsible for mapping them onto its own device space.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

Point = tuple[float, float]


@dataclass(frozen=True)
class Polygon:
    """A closed polygon.

    Attributes:
        points: Vertices in drawing order.
        fill: Fill color (hex), or None for no fill.
        stroke: Outline color (hex), or None for no outline.
        stroke_width: Outline width in device units.
        role: Glyph part this polygon draws (e.g. "body", "bill").
    """

    points: tuple[Point, ...]
    fill: str | None = None
    stroke: str | None = "#000000"
    stroke_width: float = 1.5
    role: str = ""


@dataclass(frozen=True)
class Ellipse:
    """An axis-aligned ellipse; a circle when ``rx == ry``."""

    center: Point
    rx: float
    ry: float
    fill: str | None = None
    stroke: str | None = "#000000"
    stroke_width: float = 1.5
    role: str = ""


@dataclass(frozen=True)
class Segment:
    """A straight line segment."""

    start: Point
    end: Point
    stroke: str = "#000000"
    stroke_width: float = 2.0
    role: str = ""


@dataclass(frozen=True)
class Text:
    """A text label centered on ``anchor``.

    Attributes:
        anchor: Center point of the label.
        text: Label string.
        size: Font size relative to one grid cell.
        role: Glyph part, normally "label".
    """

    anchor: Point
    text: str
    size: float = 0.12
    role: str = "label"


Shape = Union[Polygon, Ellipse, Segment, Text]


@dataclass(frozen=True)
class ScaleFactors:
    """Per-feature multipliers for one glyph, as produced by normalization."""

    bill_length: float = 1.0
    bill_depth: float = 1.0
    flipper_length: float = 1.0
    body: float = 1.0


@dataclass(frozen=True)
class GlyphSpec:
    """The geometric description of one glyph.

    Attributes:
        center: Anchor point the glyph was built around.
        shapes: Primitives in back-to-front draw order.
        fill: Body color selected from the species.
        species: Species value the glyph encodes (None if missing).
        sex: Sex value the glyph encodes (None if missing).
        label: Optional display label.
        style: Name of the proportion style used.
    """

    center: Point
    shapes: tuple[Shape, ...]
    fill: str
    species: str | None = None
    sex: str | None = None
    label: str | None = None
    style: str = "realistic"

    def by_role(self, role: str) -> list[Shape]:
        """All primitives drawing the given glyph part, in draw order."""
        return [s for s in self.shapes if s.role == role]


@dataclass(frozen=True)
class GridPlacement:
    """Cell centers for a grid of glyphs plus the overall plot bounds.

    The plot region spans ``[0, width] x [0, height]``.
    """

    centers: tuple[Point, ...]
    ncols: int
    nrows: int

    @property
    def width(self) -> float:
        return float(self.ncols)

    @property
    def height(self) -> float:
        return float(self.nrows)

    def __len__(self) -> int:
        return len(self.centers)


@dataclass(frozen=True)
class LegendEntry:
    """One legend swatch."""

    label: str
    fill: str


@dataclass(frozen=True)
class LegendSpec:
    """Category-to-color legend plus its placement."""

    entries: tuple[LegendEntry, ...]
    location: str = "top-left"
    horizontal: bool = True
    title: str = "Species"

    @property
    def labels(self) -> list[str]:
        return [e.label for e in self.entries]


@dataclass(frozen=True)
class GlyphPlot:
    """Everything a rendering surface needs for one glyph plot.

    Attributes:
        placement: Grid placement the glyphs were positioned with.
        glyphs: One GlyphSpec per input row, in row order.
        legend: Species legend.
        title: Optional plot title.
        style: Name of the proportion style used.
    """

    placement: GridPlacement
    glyphs: tuple[GlyphSpec, ...] = field(default_factory=tuple)
    legend: LegendSpec = field(default_factory=lambda: LegendSpec(entries=()))
    title: str | None = None
    style: str = "realistic"

    @property
    def width(self) -> float:
        return self.placement.width

    @property
    def height(self) -> float:
        return self.placement.height
