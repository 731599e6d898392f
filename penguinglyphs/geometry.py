"""Glyph geometry for penguin glyphs.

Builds the shape primitives for one penguin from its scale factors and
categorical attributes. The visual encoding is:

- bill length -> horizontal extent of the bill
- bill depth -> vertical thickness of the bill
- flipper length -> length of both flippers
- body mass -> size of body and head
- species -> body color
- sex -> eye shape (round for "female", angular otherwise)

Primitives are emitted back to front:
body, belly, head, bill, flippers, eyes, pupils, feet, label.

A GlyphBuilder only computes geometry; drawing is left to a renderer.
"""

from __future__ import annotations

import math

from .primitives import Ellipse, GlyphSpec, Point, Polygon, ScaleFactors, Segment, Shape, Text
from .styles import (
    BELLY_COLOR,
    EYE_COLOR,
    OUTLINE_COLOR,
    PUPIL_COLOR,
    REALISTIC,
    GlyphStyle,
    select_style,
    species_color,
)

# Vertices used to approximate the body and belly ovals
OVAL_SEGMENTS = 100

# Only this value selects round eyes; everything else is angular
ROUND_EYE_SEX = "female"


def _oval(cx: float, cy: float, rx: float, ry: float, n: int = OVAL_SEGMENTS) -> tuple[Point, ...]:
    """Vertices of an axis-aligned oval, counter-clockwise from angle 0."""
    return tuple(
        (cx + rx * math.cos(2 * math.pi * i / n), cy + ry * math.sin(2 * math.pi * i / n))
        for i in range(n)
    )


class GlyphBuilder:
    """Builds penguin glyphs from one style's proportion table.

    Args:
        style: Proportion table, or its name.
    """

    def __init__(self, style: GlyphStyle | str = REALISTIC) -> None:
        self.style = select_style(style)

    def build(
        self,
        center: Point,
        scales: ScaleFactors | None = None,
        species: str | None = None,
        sex: str | None = None,
        label: str | None = None,
        base_size: float | None = None,
    ) -> GlyphSpec:
        """Build one glyph anchored at ``center``.

        Args:
            center: Glyph center in plot units.
            scales: Per-feature scale factors (all 1.0 if omitted).
            species: Species name; unknown or missing uses the neutral color.
            sex: "female" selects round eyes; any other value is angular.
            label: Optional text drawn at the center.
            base_size: Overall magnification (style default if omitted).

        Returns:
            GlyphSpec with primitives in back-to-front order.
        """
        st = self.style
        sf = scales or ScaleFactors()
        bs = st.default_base_size if base_size is None else base_size
        cx, cy = center
        fill = species_color(species)

        body_w = st.body_width * sf.body * bs
        body_h = st.body_height * sf.body * bs
        head_r = st.head_radius * sf.body * bs
        head_y = cy + body_h * st.head_rise_body + head_r * st.head_rise_head

        shapes: list[Shape] = []
        shapes.append(
            Polygon(
                _oval(cx, cy, body_w, body_h),
                fill=fill,
                stroke=OUTLINE_COLOR,
                stroke_width=st.stroke_width,
                role="body",
            )
        )
        shapes.append(self._belly(cx, cy, body_w, body_h, bs))
        shapes.append(
            Ellipse(
                (cx, head_y),
                head_r,
                head_r,
                fill=fill,
                stroke=OUTLINE_COLOR,
                stroke_width=st.stroke_width,
                role="head",
            )
        )
        shapes.append(self._bill(cx, head_y, head_r, sf, bs))
        shapes.extend(self._flippers(cx, cy, body_w, body_h, fill, sf, bs))

        eyes, pupils = self._eyes(cx, head_y, head_r, sex, bs)
        shapes.extend(eyes)
        shapes.extend(pupils)
        shapes.extend(self._feet(cx, cy, body_h, bs))

        if label is not None:
            shapes.append(Text((cx, cy), str(label), size=st.label_size))

        return GlyphSpec(
            center=(cx, cy),
            shapes=tuple(shapes),
            fill=fill,
            species=species,
            sex=sex,
            label=label,
            style=st.name,
        )

    def _belly(self, cx: float, cy: float, body_w: float, body_h: float, bs: float) -> Polygon:
        st = self.style
        belly_y = cy - st.belly_drop * bs - st.belly_drop_body * body_h
        return Polygon(
            _oval(cx, belly_y, body_w * st.belly_width, body_h * st.belly_height),
            fill=BELLY_COLOR,
            stroke=None,
            stroke_width=0.0,
            role="belly",
        )

    def _bill(self, cx: float, head_y: float, head_r: float, sf: ScaleFactors, bs: float) -> Polygon:
        st = self.style
        length = st.bill_length * sf.bill_length * bs
        half_depth = st.bill_depth * sf.bill_depth * bs / 2
        tip_half = half_depth * st.bill_tip_ratio
        base_x = cx + head_r * st.bill_offset
        tip_x = base_x + length
        return Polygon(
            (
                (base_x, head_y + half_depth),
                (tip_x, head_y + tip_half),
                (tip_x, head_y - tip_half),
                (base_x, head_y - half_depth),
            ),
            fill=st.bill_color,
            stroke=OUTLINE_COLOR,
            stroke_width=1.5,
            role="bill",
        )

    def _flippers(
        self,
        cx: float,
        cy: float,
        body_w: float,
        body_h: float,
        fill: str,
        sf: ScaleFactors,
        bs: float,
    ) -> list[Polygon]:
        st = self.style
        length = st.flipper_length * sf.flipper_length * bs
        width = st.flipper_width * bs
        offsets = [
            (a * body_w + b * length, c * width + d * body_h)
            for a, b, c, d in st.flipper_profile
        ]
        flippers = []
        for side in (-1, 1):
            flippers.append(
                Polygon(
                    tuple((cx + side * dx, cy + dy) for dx, dy in offsets),
                    fill=fill,
                    stroke=OUTLINE_COLOR,
                    stroke_width=st.stroke_width,
                    role="flipper",
                )
            )
        return flippers

    def _eyes(
        self,
        cx: float,
        head_y: float,
        head_r: float,
        sex: str | None,
        bs: float,
    ) -> tuple[list[Shape], list[Ellipse]]:
        st = self.style
        spacing = st.eye_spacing * bs + st.eye_spacing_head * head_r
        size = st.eye_size * bs + st.eye_size_head * head_r
        eye_y = head_y + head_r * st.eye_rise
        centers = [(cx - spacing, eye_y), (cx + spacing, eye_y)]

        eyes: list[Shape] = []
        for ex, ey in centers:
            if sex == ROUND_EYE_SEX:
                eyes.append(
                    Ellipse((ex, ey), size, size, fill=EYE_COLOR, stroke=OUTLINE_COLOR, role="eye")
                )
            else:
                eyes.append(
                    Polygon(
                        tuple((ex + dx * size, ey + dy * size) for dx, dy in st.angular_eye),
                        fill=EYE_COLOR,
                        stroke=OUTLINE_COLOR,
                        role="eye",
                    )
                )

        pupil_r = size * st.pupil_ratio
        pupils = [
            Ellipse(c, pupil_r, pupil_r, fill=PUPIL_COLOR, stroke=None, stroke_width=0.0, role="pupil")
            for c in centers
        ]
        return eyes, pupils

    def _feet(self, cx: float, cy: float, body_h: float, bs: float) -> list[Shape]:
        st = self.style
        anchor_y = cy - body_h * st.foot_drop
        size = st.foot_size * bs
        feet: list[Shape] = []
        for side in (-1, 1):
            pts = [(cx + side * dx * bs, anchor_y + dy * size) for dx, dy in st.foot_points]
            if st.foot_kind == "webbed":
                feet.append(
                    Polygon(
                        tuple(pts),
                        fill=st.foot_color,
                        stroke=OUTLINE_COLOR,
                        stroke_width=1.5,
                        role="foot",
                    )
                )
            else:
                # Leg from the body, then toes fanning out from the ankle
                feet.append(Segment(pts[0], pts[1], stroke=st.foot_color, role="foot"))
                for toe in pts[2:]:
                    feet.append(Segment(pts[1], toe, stroke=st.foot_color, role="foot"))
        return feet


def build_glyph(
    center: Point,
    scales: ScaleFactors | None = None,
    species: str | None = None,
    sex: str | None = None,
    label: str | None = None,
    base_size: float | None = None,
    style: GlyphStyle | str = REALISTIC,
) -> GlyphSpec:
    """Build one penguin glyph with the given style.

    Convenience wrapper around ``GlyphBuilder(style).build(...)``.

    Raises:
        ValueError: If ``style`` names an unknown style.
    """
    return GlyphBuilder(style).build(
        center,
        scales=scales,
        species=species,
        sex=sex,
        label=label,
        base_size=base_size,
    )
