"""Tests for penguin glyph geometry."""

import pytest

from penguinglyphs.geometry import GlyphBuilder, build_glyph
from penguinglyphs.primitives import Ellipse, Polygon, ScaleFactors, Segment, Text
from penguinglyphs.styles import CARTOON, NEUTRAL_COLOR, REALISTIC, SPECIES_COLORS

DRAW_ORDER = ["body", "belly", "head", "bill", "flipper", "eye", "pupil", "foot", "label"]


def _roles(spec):
    """Distinct roles in order of first appearance."""
    seen = []
    for shape in spec.shapes:
        if shape.role not in seen:
            seen.append(shape.role)
    return seen


def _xs(polygon):
    return [x for x, _ in polygon.points]


def _ys(polygon):
    return [y for _, y in polygon.points]


class TestComposition:
    @pytest.mark.parametrize("style", [REALISTIC, CARTOON])
    def test_draw_order(self, style):
        spec = build_glyph((0.5, 0.5), species="Adelie", sex="male", label="1", style=style)
        assert _roles(spec) == DRAW_ORDER

    @pytest.mark.parametrize("style", [REALISTIC, CARTOON])
    def test_roles_are_contiguous(self, style):
        spec = build_glyph((0.5, 0.5), sex="female", label="7", style=style)
        roles = [s.role for s in spec.shapes]
        for role in set(roles):
            idx = [i for i, r in enumerate(roles) if r == role]
            assert idx == list(range(idx[0], idx[-1] + 1))

    def test_no_label_when_none(self):
        spec = build_glyph((0.5, 0.5))
        assert spec.by_role("label") == []
        assert not any(isinstance(s, Text) for s in spec.shapes)

    def test_label_centered(self):
        spec = build_glyph((2.5, 1.5), label="42")
        (text,) = spec.by_role("label")
        assert text.anchor == (2.5, 1.5)
        assert text.text == "42"

    def test_belly_has_no_stroke(self):
        (belly,) = build_glyph((0, 0)).by_role("belly")
        assert belly.stroke is None
        assert belly.fill == "#FFFFFF"

    def test_two_flippers_two_eyes_two_pupils(self):
        spec = build_glyph((0, 0))
        assert len(spec.by_role("flipper")) == 2
        assert len(spec.by_role("eye")) == 2
        assert len(spec.by_role("pupil")) == 2

    def test_spec_is_immutable(self):
        spec = build_glyph((0, 0))
        with pytest.raises(AttributeError):
            spec.fill = "#000000"


class TestProportions:
    def test_realistic_body_half_width(self):
        spec = build_glyph((0, 0), ScaleFactors(body=1.2), base_size=0.8, style=REALISTIC)
        (body,) = spec.by_role("body")
        assert max(_xs(body)) == pytest.approx(0.4 * 1.2 * 0.8)
        assert max(_ys(body)) == pytest.approx(0.5 * 1.2 * 0.8, rel=1e-3)

    def test_body_centered_on_anchor(self):
        spec = build_glyph((3.5, 2.5), base_size=1.0)
        (body,) = spec.by_role("body")
        assert (max(_xs(body)) + min(_xs(body))) / 2 == pytest.approx(3.5)

    def test_base_size_defaults_to_style(self):
        default = build_glyph((0, 0), style=CARTOON)
        explicit = build_glyph((0, 0), base_size=CARTOON.default_base_size, style=CARTOON)
        assert default.shapes == explicit.shapes

    def test_base_size_magnifies(self):
        small = build_glyph((0, 0), base_size=0.5)
        large = build_glyph((0, 0), base_size=1.0)
        assert max(_xs(large.by_role("body")[0])) == pytest.approx(
            2 * max(_xs(small.by_role("body")[0]))
        )

    def test_bill_length_drives_horizontal_extent(self):
        short = build_glyph((0, 0), ScaleFactors(bill_length=0.7)).by_role("bill")[0]
        long = build_glyph((0, 0), ScaleFactors(bill_length=1.3)).by_role("bill")[0]
        assert max(_xs(long)) > max(_xs(short))
        assert _ys(long) == pytest.approx(_ys(short))

    def test_bill_depth_drives_vertical_extent(self):
        thin = build_glyph((0, 0), ScaleFactors(bill_depth=0.7)).by_role("bill")[0]
        thick = build_glyph((0, 0), ScaleFactors(bill_depth=1.3)).by_role("bill")[0]
        assert max(_ys(thick)) - min(_ys(thick)) > max(_ys(thin)) - min(_ys(thin))
        assert _xs(thick) == pytest.approx(_xs(thin))

    def test_bill_points_right_from_head(self):
        spec = build_glyph((0, 0))
        (bill,) = spec.by_role("bill")
        (head,) = spec.by_role("head")
        assert min(_xs(bill)) >= head.center[0]
        assert sum(_ys(bill)) / 4 == pytest.approx(head.center[1])

    @pytest.mark.parametrize("style", [REALISTIC, CARTOON])
    def test_flippers_mirrored(self, style):
        spec = build_glyph((1.5, 0.5), style=style)
        left, right = spec.by_role("flipper")
        for (lx, ly), (rx, ry) in zip(left.points, right.points):
            assert lx - 1.5 == pytest.approx(-(rx - 1.5))
            assert ly == pytest.approx(ry)

    def test_flipper_length_drives_reach(self):
        short = build_glyph((0, 0), ScaleFactors(flipper_length=0.7)).by_role("flipper")[1]
        long = build_glyph((0, 0), ScaleFactors(flipper_length=1.3)).by_role("flipper")[1]
        assert max(_xs(long)) > max(_xs(short))

    def test_flippers_beside_body(self):
        spec = build_glyph((0, 0))
        left, right = spec.by_role("flipper")
        assert max(_xs(left)) < 0
        assert min(_xs(right)) > 0

    def test_head_above_body(self):
        spec = build_glyph((0, 0))
        (head,) = spec.by_role("head")
        assert head.center[1] > 0

    @pytest.mark.parametrize("style", [REALISTIC, CARTOON])
    def test_feet_independent_of_data(self, style):
        a = build_glyph((0, 0), ScaleFactors(bill_length=0.5, bill_depth=1.5, flipper_length=0.6), style=style)
        b = build_glyph((0, 0), ScaleFactors(bill_length=1.5, bill_depth=0.5, flipper_length=1.4), style=style)
        assert a.by_role("foot") == b.by_role("foot")

    def test_realistic_feet_are_claws(self):
        feet = build_glyph((0, 0), style=REALISTIC).by_role("foot")
        assert len(feet) == 6
        assert all(isinstance(f, Segment) for f in feet)

    def test_cartoon_feet_are_webbed(self):
        feet = build_glyph((0, 0), style=CARTOON).by_role("foot")
        assert len(feet) == 2
        assert all(isinstance(f, Polygon) and len(f.points) == 3 for f in feet)


class TestSpeciesColor:
    def test_species_fill_body_head_and_flippers(self):
        spec = build_glyph((0, 0), species="Gentoo")
        assert spec.fill == SPECIES_COLORS["Gentoo"]
        for role in ("body", "head", "flipper"):
            assert all(s.fill == spec.fill for s in spec.by_role(role))

    def test_unrecognized_species_uses_neutral_color(self):
        spec = build_glyph((0, 0), species="Mars")
        assert spec.fill == NEUTRAL_COLOR
        assert spec.fill not in SPECIES_COLORS.values()
        assert spec.by_role("body")[0].fill == NEUTRAL_COLOR

    def test_missing_species_uses_neutral_color(self):
        assert build_glyph((0, 0), species=None).fill == NEUTRAL_COLOR


class TestEyes:
    @pytest.mark.parametrize("style", [REALISTIC, CARTOON])
    def test_female_has_round_eyes(self, style):
        eyes = build_glyph((0, 0), sex="female", style=style).by_role("eye")
        assert all(isinstance(e, Ellipse) and e.rx == e.ry for e in eyes)

    @pytest.mark.parametrize("style", [REALISTIC, CARTOON])
    @pytest.mark.parametrize("sex", ["male", None, "Female", "unknown"])
    def test_everything_else_has_angular_eyes(self, style, sex):
        eyes = build_glyph((0, 0), sex=sex, style=style).by_role("eye")
        assert all(isinstance(e, Polygon) and len(e.points) == 4 for e in eyes)

    @pytest.mark.parametrize("sex", ["female", "male", None])
    def test_pupils_are_solid_dots(self, sex):
        pupils = build_glyph((0, 0), sex=sex).by_role("pupil")
        assert all(isinstance(p, Ellipse) and p.fill == "#000000" and p.stroke is None for p in pupils)

    def test_pupils_centered_in_eyes(self):
        spec = build_glyph((0, 0), sex="female")
        eye_centers = [e.center for e in spec.by_role("eye")]
        pupil_centers = [p.center for p in spec.by_role("pupil")]
        assert eye_centers == pupil_centers

    def test_eyes_symmetric_about_center(self):
        left, right = build_glyph((2.0, 0.0), sex="female").by_role("eye")
        assert left.center[0] - 2.0 == pytest.approx(-(right.center[0] - 2.0))


class TestGlyphBuilder:
    def test_builder_accepts_style_name(self):
        assert GlyphBuilder("cartoon").style is CARTOON

    def test_unknown_style_raises(self):
        with pytest.raises(ValueError, match="Unknown style"):
            build_glyph((0, 0), style="sketchy")

    def test_styles_share_contract_but_differ_in_geometry(self):
        realistic = build_glyph((0, 0), style="realistic")
        cartoon = build_glyph((0, 0), style="cartoon")
        assert _roles(realistic) == _roles(cartoon)
        assert realistic.by_role("bill") != cartoon.by_role("bill")
        assert cartoon.style == "cartoon"

    def test_build_is_deterministic(self):
        scales = ScaleFactors(0.8, 1.1, 1.2, 0.9)
        a = build_glyph((1, 1), scales, "Chinstrap", "female", "3")
        b = build_glyph((1, 1), scales, "Chinstrap", "female", "3")
        assert a == b
