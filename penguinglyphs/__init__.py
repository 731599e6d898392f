"""Penguin Glyphs -- Chernoff-style glyph plots for tabular measurements.

Each row of a dataset becomes one schematic penguin whose bill, flippers,
body size, color and eye shape are deterministic functions of that row's
values. Glyphs are tiled into a grid with a species legend and rendered
as SVG or PNG.

The geometry is declarative: the layout and geometry engines produce
immutable shape primitives, and a separate renderer turns them into an
image.
"""

__version__ = "0.1.0"
