#!/usr/bin/env python3
"""Basic usage example for Penguin Glyphs.

Builds glyph plots from a handful of Palmer penguins and writes them as
SVG and PNG files to the current directory.

Usage:
    python examples/basic_usage.py
"""

import sys
import os

# Add parent directory to path for direct script execution
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from penguinglyphs.config import FieldMapping, LegendConfig, PlotConfig
from penguinglyphs.geometry import build_glyph
from penguinglyphs.plot import penguin_glyphs
from penguinglyphs.primitives import ScaleFactors
from penguinglyphs.renderer import render_glyph_svg, render_png, render_svg

# A few rows in palmerpenguins column naming
PENGUINS = [
    ("Adelie", "male", 39.1, 18.7, 181, 3750),
    ("Adelie", "female", 39.5, 17.4, 186, 3800),
    ("Adelie", None, None, None, None, None),
    ("Chinstrap", "female", 46.5, 17.9, 192, 3500),
    ("Chinstrap", "male", 50.0, 19.5, 196, 3900),
    ("Gentoo", "female", 46.1, 13.2, 211, 4500),
    ("Gentoo", "male", 50.0, 16.3, 230, 5700),
    ("Gentoo", "female", 48.7, 14.1, 210, 4450),
]

ROWS = [
    {
        "species": species,
        "sex": sex,
        "bill_length_mm": bill_length,
        "bill_depth_mm": bill_depth,
        "flipper_length_mm": flipper_length,
        "body_mass_g": body_mass,
    }
    for species, sex, bill_length, bill_depth, flipper_length, body_mass in PENGUINS
]


def example_single_glyph():
    """Draw one penguin from explicit scale factors."""
    print("=" * 60)
    print("Example 1: Single Glyph")
    print("=" * 60)

    spec = build_glyph(
        (0.0, 0.0),
        ScaleFactors(bill_length=1.2, body=1.4),
        species="Gentoo",
        sex="female",
    )
    print(f"  Primitives:  {len(spec.shapes)}")
    print(f"  Body color:  {spec.fill}")

    with open("single_penguin.svg", "w") as f:
        f.write(render_glyph_svg(spec, size=256))
    print("  Wrote single_penguin.svg")
    print()


def example_grid():
    """Plot every row as a realistic glyph grid."""
    print("=" * 60)
    print("Example 2: Realistic Grid")
    print("=" * 60)

    plot = penguin_glyphs(ROWS, FieldMapping.palmerpenguins(), PlotConfig(ncols=4, title="Palmer Penguins"))
    print(f"  Glyphs:      {len(plot.glyphs)}")
    print(f"  Grid:        {plot.width:.0f} x {plot.height:.0f}")
    print(f"  Legend:      {', '.join(plot.legend.labels)}")

    with open("penguin_glyphs.svg", "w") as f:
        f.write(render_svg(plot))
    print("  Wrote penguin_glyphs.svg")
    print()


def example_cartoon():
    """Plot complete rows only, in the cartoon style, as PNG."""
    print("=" * 60)
    print("Example 3: Cartoon Grid")
    print("=" * 60)

    config = PlotConfig(
        ncols=4,
        style="cartoon",
        title="Cartoon Penguin Glyphs",
        drop_incomplete=True,
        legend=LegendConfig(location="top-right", horizontal=True),
    )
    plot = penguin_glyphs(ROWS, FieldMapping.palmerpenguins(), config)
    print(f"  Glyphs:      {len(plot.glyphs)} (incomplete rows dropped)")

    png_bytes = render_png(plot)
    with open("penguin_glyphs_cartoon.png", "wb") as f:
        f.write(png_bytes)
    print(f"  PNG size:    {len(png_bytes)} bytes")
    print()


if __name__ == "__main__":
    example_single_glyph()
    example_grid()
    example_cartoon()
