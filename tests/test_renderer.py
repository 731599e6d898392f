"""Tests for SVG/PNG rendering of glyph plots."""

import pytest

from penguinglyphs.config import LegendConfig, PlotConfig
from penguinglyphs.geometry import build_glyph
from penguinglyphs.plot import penguin_glyphs
from penguinglyphs.renderer import render_glyph_svg, render_png, render_svg

ROWS = [
    {"species": "Adelie", "sex": "male", "bill_len": 39.1, "bill_dep": 18.7, "flipper_len": 181, "body_mass": 3750},
    {"species": "Gentoo", "sex": "female", "bill_len": 46.1, "bill_dep": 13.2, "flipper_len": 211, "body_mass": 4500},
    {"species": "Chinstrap", "sex": None, "bill_len": 46.5, "bill_dep": 17.9, "flipper_len": 192, "body_mass": 3500},
]


class TestRenderSVG:
    def test_render_svg_produces_valid_svg(self):
        svg = render_svg(penguin_glyphs(ROWS))
        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")
        assert "xmlns" in svg

    def test_render_svg_contains_all_primitive_kinds(self):
        svg = render_svg(penguin_glyphs(ROWS))
        assert "<polygon" in svg
        assert "<ellipse" in svg
        assert "<line" in svg
        assert "<text" in svg

    def test_one_group_per_glyph(self):
        svg = render_svg(penguin_glyphs(ROWS))
        assert svg.count('<g class="glyph"') == 3

    def test_species_colors_used(self):
        svg = render_svg(penguin_glyphs(ROWS))
        for color in ["#FF6B35", "#73C05B", "#9A78B8"]:
            assert color in svg

    def test_title_rendered(self):
        svg = render_svg(penguin_glyphs(ROWS, config=PlotConfig(title="Palmer Penguins")))
        assert "Palmer Penguins" in svg

    def test_no_title(self):
        svg = render_svg(penguin_glyphs(ROWS, config=PlotConfig(title=None)))
        assert 'class="title"' not in svg

    def test_size_follows_grid(self):
        plot = penguin_glyphs(ROWS, config=PlotConfig(ncols=3, title=None))
        svg = render_svg(plot, cell_size=100)
        # 3x1 grid plus a 0.35 cell margin on each side
        assert 'width="370"' in svg
        assert 'height="170"' in svg

    def test_legend_rendered(self):
        svg = render_svg(penguin_glyphs(ROWS))
        assert 'class="legend"' in svg
        assert "Species" in svg
        for label in ["Adelie", "Gentoo", "Chinstrap"]:
            assert label in svg

    @pytest.mark.parametrize("horizontal", [True, False])
    def test_legend_location_recorded(self, horizontal):
        config = PlotConfig(legend=LegendConfig(location="bottom-right", horizontal=horizontal))
        svg = render_svg(penguin_glyphs(ROWS, config=config))
        assert 'data-location="bottom-right"' in svg

    def test_labels_escaped(self):
        rows = [dict(ROWS[0], name="<b>&")]
        from penguinglyphs.config import FieldMapping

        svg = render_svg(penguin_glyphs(rows, FieldMapping(id_field="name")))
        assert "&lt;b&gt;&amp;" in svg
        assert "<b>" not in svg

    def test_empty_plot(self):
        svg = render_svg(penguin_glyphs([]))
        assert svg.startswith("<svg")
        assert 'class="legend"' not in svg


class TestRenderGlyphSVG:
    def test_single_glyph(self):
        svg = render_glyph_svg(build_glyph((0, 0), species="Gentoo", sex="female"))
        assert svg.startswith("<svg")
        assert 'width="256"' in svg
        assert "#73C05B" in svg

    def test_single_glyph_respects_size(self):
        svg = render_glyph_svg(build_glyph((5, 5), style="cartoon"), size=128)
        assert 'height="128"' in svg


class TestRenderPNG:
    def test_render_png_produces_png(self):
        png_bytes = render_png(penguin_glyphs(ROWS))
        assert png_bytes[:4] == b"\x89PNG"

    def test_render_png_cartoon(self):
        png_bytes = render_png(penguin_glyphs(ROWS, config=PlotConfig(style="cartoon")), cell_size=64)
        assert png_bytes[:4] == b"\x89PNG"

    def test_render_png_respects_size(self):
        plot = penguin_glyphs(ROWS)
        small = render_png(plot, cell_size=40)
        large = render_png(plot, cell_size=200)
        assert len(large) > len(small)
