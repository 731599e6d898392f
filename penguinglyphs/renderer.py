"""SVG and PNG rendering for penguin glyph plots.

Consumes the declarative output of the layout and geometry engines and
draws it:

- plot coordinates (y up, one unit per grid cell) are mapped to SVG
  pixels (y down) with a margin around the grid
- the title, when present, sits in a band above the grid
- glyph primitives are emitted in their own order, so later shapes
  occlude earlier ones
- the legend is anchored at one of the nine location keywords and laid
  out in a row or a column
"""

from __future__ import annotations

from xml.sax.saxutils import escape

import structlog

from .primitives import Ellipse, GlyphPlot, GlyphSpec, LegendSpec, Point, Polygon, Segment, Shape, Text

logger = structlog.get_logger(__name__)

DEFAULT_CELL_SIZE = 120

# Layout constants in grid cells
MARGIN = 0.35
TITLE_BAND = 0.45
TITLE_FONT = 0.22
LEGEND_FONT = 0.14
LEGEND_SWATCH = 0.14
LEGEND_GAP = 0.08
LEGEND_INSET = 0.1
CHAR_WIDTH = 0.6  # average glyph width as a fraction of font size

# Fractional (x, y) position of the legend box in its region; y=0 is the top
LEGEND_ANCHORS: dict[str, tuple[float, float]] = {
    "top-left": (0.0, 0.0),
    "top": (0.5, 0.0),
    "top-right": (1.0, 0.0),
    "left": (0.0, 0.5),
    "center": (0.5, 0.5),
    "right": (1.0, 0.5),
    "bottom-left": (0.0, 1.0),
    "bottom": (0.5, 1.0),
    "bottom-right": (1.0, 1.0),
}


class _Canvas:
    """Maps plot units to SVG pixels."""

    def __init__(self, scale: float, origin_x: float, top: float, height: float) -> None:
        self.scale = scale
        self.origin_x = origin_x
        self.top = top
        self.height = height

    def point(self, p: Point) -> tuple[float, float]:
        x, y = p
        return ((self.origin_x + x) * self.scale, (self.top + self.height - y) * self.scale)

    def length(self, v: float) -> float:
        return v * self.scale

    def stroke(self, width: float) -> float:
        return width * self.scale / DEFAULT_CELL_SIZE


def _paint(color: str | None) -> str:
    return color if color is not None else "none"


def _shape_svg(shape: Shape, canvas: _Canvas) -> str:
    """Render one primitive as an SVG element."""
    if isinstance(shape, Polygon):
        points_str = " ".join(f"{x:.1f},{y:.1f}" for x, y in map(canvas.point, shape.points))
        return (
            f'  <polygon points="{points_str}" '
            f'fill="{_paint(shape.fill)}" '
            f'stroke="{_paint(shape.stroke)}" '
            f'stroke-width="{canvas.stroke(shape.stroke_width):.2f}" '
            f'class="{shape.role}"/>'
        )
    if isinstance(shape, Ellipse):
        cx, cy = canvas.point(shape.center)
        return (
            f'  <ellipse cx="{cx:.1f}" cy="{cy:.1f}" '
            f'rx="{canvas.length(shape.rx):.1f}" ry="{canvas.length(shape.ry):.1f}" '
            f'fill="{_paint(shape.fill)}" '
            f'stroke="{_paint(shape.stroke)}" '
            f'stroke-width="{canvas.stroke(shape.stroke_width):.2f}" '
            f'class="{shape.role}"/>'
        )
    if isinstance(shape, Segment):
        x1, y1 = canvas.point(shape.start)
        x2, y2 = canvas.point(shape.end)
        return (
            f'  <line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" '
            f'stroke="{shape.stroke}" '
            f'stroke-width="{canvas.stroke(shape.stroke_width):.2f}" '
            f'stroke-linecap="round" class="{shape.role}"/>'
        )
    if isinstance(shape, Text):
        x, y = canvas.point(shape.anchor)
        return (
            f'  <text x="{x:.1f}" y="{y:.1f}" '
            f'font-size="{canvas.length(shape.size):.1f}" '
            f'font-family="sans-serif" text-anchor="middle" dominant-baseline="central" '
            f'class="{shape.role}">{escape(shape.text)}</text>'
        )
    raise TypeError(f"Unsupported shape type: {type(shape).__name__}")


def _text_width(text: str, font: float) -> float:
    return len(text) * font * CHAR_WIDTH


def _legend_svg(legend: LegendSpec, region: tuple[float, float, float, float], scale: float) -> list[str]:
    """Render the legend inside ``region`` (x, y, width, height in pixels)."""
    if not legend.entries:
        return []

    font = LEGEND_FONT * scale
    swatch = LEGEND_SWATCH * scale
    gap = LEGEND_GAP * scale
    inset = LEGEND_INSET * scale
    row_h = max(font, swatch) + gap

    # Entry widths: swatch, gap, label
    widths = [swatch + gap + _text_width(e.label, font) for e in legend.entries]
    title_w = _text_width(legend.title, font) if legend.title else 0.0

    if legend.horizontal:
        box_w = title_w + (gap * 2 if legend.title else 0.0) + sum(widths) + gap * 2 * (len(widths) - 1)
        box_h = row_h
    else:
        box_w = max([title_w, *widths])
        box_h = row_h * (len(widths) + (1 if legend.title else 0))

    rx, ry, rw, rh = region
    fx, fy = LEGEND_ANCHORS[legend.location]
    x0 = rx + inset + fx * max(rw - 2 * inset - box_w, 0.0)
    y0 = ry + inset + fy * max(rh - 2 * inset - box_h, 0.0)

    parts = [f'  <g class="legend" data-location="{legend.location}">']
    x, y = x0, y0
    if legend.title:
        parts.append(
            f'    <text x="{x:.1f}" y="{y + row_h / 2:.1f}" font-size="{font:.1f}" '
            f'font-family="sans-serif" font-weight="bold" dominant-baseline="central">'
            f"{escape(legend.title)}</text>"
        )
        if legend.horizontal:
            x += title_w + gap * 2
        else:
            y += row_h

    for entry, width in zip(legend.entries, widths):
        sy = y + (row_h - swatch) / 2
        parts.append(
            f'    <rect x="{x:.1f}" y="{sy:.1f}" width="{swatch:.1f}" height="{swatch:.1f}" '
            f'fill="{entry.fill}" stroke="#000000" stroke-width="0.5"/>'
        )
        parts.append(
            f'    <text x="{x + swatch + gap:.1f}" y="{y + row_h / 2:.1f}" font-size="{font:.1f}" '
            f'font-family="sans-serif" dominant-baseline="central">{escape(entry.label)}</text>'
        )
        if legend.horizontal:
            x += width + gap * 2
        else:
            y += row_h

    parts.append("  </g>")
    return parts


def render_svg(plot: GlyphPlot, cell_size: int = DEFAULT_CELL_SIZE) -> str:
    """Render a glyph plot as an SVG string.

    Args:
        plot: Positioned glyphs, legend and title.
        cell_size: Pixels per grid cell.

    Returns:
        Complete SVG document as a string.
    """
    title_band = TITLE_BAND if plot.title else 0.0
    width = int(round((plot.width + 2 * MARGIN) * cell_size))
    height = int(round((plot.height + 2 * MARGIN + title_band) * cell_size))
    canvas = _Canvas(cell_size, MARGIN, title_band + MARGIN, plot.height)

    svg_parts: list[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="0 0 {width} {height}" '
        f'width="{width}" height="{height}">',
        f'  <rect width="{width}" height="{height}" fill="white"/>',
    ]

    if plot.title:
        svg_parts.append(
            f'  <text x="{width / 2:.1f}" y="{title_band * cell_size * 0.75:.1f}" '
            f'font-size="{TITLE_FONT * cell_size:.1f}" font-family="sans-serif" '
            f'font-weight="bold" text-anchor="middle" class="title">{escape(plot.title)}</text>'
        )

    for glyph in plot.glyphs:
        species_attr = escape(glyph.species or "", {'"': "&quot;"})
        svg_parts.append(f'  <g class="glyph" data-species="{species_attr}">')
        svg_parts.extend("  " + _shape_svg(s, canvas) for s in glyph.shapes)
        svg_parts.append("  </g>")

    legend_region = (0.0, title_band * cell_size, float(width), height - title_band * cell_size)
    svg_parts.extend(_legend_svg(plot.legend, legend_region, cell_size))

    svg_parts.append("</svg>")
    svg_content = "\n".join(svg_parts)

    logger.debug(
        "svg_rendered",
        glyph_count=len(plot.glyphs),
        width=width,
        height=height,
        style=plot.style,
    )

    return svg_content


def _bounds(shapes: tuple[Shape, ...]) -> tuple[float, float, float, float]:
    """Bounding box (min_x, min_y, max_x, max_y) of a glyph's primitives."""
    xs: list[float] = []
    ys: list[float] = []
    for s in shapes:
        if isinstance(s, Polygon):
            xs.extend(p[0] for p in s.points)
            ys.extend(p[1] for p in s.points)
        elif isinstance(s, Ellipse):
            xs.extend((s.center[0] - s.rx, s.center[0] + s.rx))
            ys.extend((s.center[1] - s.ry, s.center[1] + s.ry))
        elif isinstance(s, Segment):
            xs.extend((s.start[0], s.end[0]))
            ys.extend((s.start[1], s.end[1]))
        elif isinstance(s, Text):
            xs.append(s.anchor[0])
            ys.append(s.anchor[1])
    return min(xs), min(ys), max(xs), max(ys)


def render_glyph_svg(spec: GlyphSpec, size: int = 256) -> str:
    """Render a single glyph, scaled to fit a square canvas.

    Args:
        spec: The glyph to draw.
        size: Output size in pixels (width = height).

    Returns:
        Complete SVG document as a string.
    """
    min_x, min_y, max_x, max_y = _bounds(spec.shapes)
    # 10% padding on each side
    extent = max(max_x - min_x, max_y - min_y) * 1.2 or 1.0
    scale = size / extent
    mid_x = (min_x + max_x) / 2
    mid_y = (min_y + max_y) / 2
    canvas = _Canvas(scale, extent / 2 - mid_x, 0.0, extent / 2 + mid_y)

    svg_parts: list[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="0 0 {size} {size}" '
        f'width="{size}" height="{size}">',
        f'  <rect width="{size}" height="{size}" fill="white"/>',
    ]
    svg_parts.extend(_shape_svg(s, canvas) for s in spec.shapes)
    svg_parts.append("</svg>")

    logger.debug("glyph_svg_rendered", species=spec.species, style=spec.style, size=size)
    return "\n".join(svg_parts)


def render_png(plot: GlyphPlot, cell_size: int = DEFAULT_CELL_SIZE) -> bytes:
    """Render a glyph plot as a PNG image.

    Generates SVG first, then converts to PNG via CairoSVG.

    Args:
        plot: Positioned glyphs, legend and title.
        cell_size: Pixels per grid cell.

    Returns:
        PNG image bytes.
    """
    import cairosvg

    svg = render_svg(plot, cell_size)
    png_bytes = cairosvg.svg2png(bytestring=svg.encode("utf-8"))

    logger.debug("png_rendered", glyph_count=len(plot.glyphs), bytes=len(png_bytes))
    return png_bytes
