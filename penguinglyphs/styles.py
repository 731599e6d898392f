"""Proportion styles and colors for penguin glyphs.

A style is a table of proportion constants. Every glyph feature size is
``constant * scale_factor * base_size``, so two styles share the same
drawing logic and differ only in their tables.

Two styles are provided:
- realistic: large head on a tall body, modest bill and flippers
- cartoon: compact body with a smaller head, a longer and thicker bill
  and long outstretched flippers, so body mass does not dominate
"""

from __future__ import annotations

from dataclasses import dataclass

# Body colors by species
SPECIES_COLORS: dict[str, str] = {
    "Adelie": "#FF6B35",  # orange
    "Chinstrap": "#9A78B8",  # purple
    "Gentoo": "#73C05B",  # green
}

# Body color for any species not in the palette
NEUTRAL_COLOR = "#666666"

OUTLINE_COLOR = "#000000"
BELLY_COLOR = "#FFFFFF"
EYE_COLOR = "#FFFFFF"
PUPIL_COLOR = "#000000"


def species_color(species: str | None) -> str:
    """Body color for a species, falling back to the neutral color."""
    if species is None:
        return NEUTRAL_COLOR
    return SPECIES_COLORS.get(species, NEUTRAL_COLOR)


@dataclass(frozen=True)
class GlyphStyle:
    """Proportion constants for one glyph style.

    Lengths marked (base) are multiplied by ``base_size``; body, head,
    bill and flipper lengths are also multiplied by their scale factor.

    Attributes:
        name: Style name.
        default_base_size: Magnification used when the caller gives none.
        stroke_width: Outline width for body, head and flippers.
        body_width: Body half-width (base).
        body_height: Body half-height (base).
        belly_width: Belly half-width as a fraction of body half-width.
        belly_height: Belly half-height as a fraction of body half-height.
        belly_drop: Downward belly offset (base).
        belly_drop_body: Downward belly offset as a fraction of body half-height.
        head_radius: Head radius (base).
        head_rise_body: Head center height above the body center, in body half-heights.
        head_rise_head: Additional head center height, in head radii.
        bill_length: Bill length (base).
        bill_depth: Bill depth at its base (base).
        bill_tip_ratio: Bill depth at the tip as a fraction of its base depth.
        bill_offset: Bill base x offset from the glyph center, in head radii.
        bill_color: Bill fill color.
        flipper_length: Flipper length (base).
        flipper_width: Flipper width (base).
        flipper_profile: Left flipper outline. Each vertex is
            ``(body_w, flipper_l, flipper_w, body_h)`` coefficients giving
            ``x = cx - body_w * body_half_width - flipper_l * flipper_length`` and
            ``y = cy + flipper_w * flipper_width + body_h * body_half_height``.
            The right flipper is its mirror image.
        eye_spacing: Eye x offset from the center (base).
        eye_spacing_head: Additional eye x offset, in head radii.
        eye_size: Eye radius (base).
        eye_size_head: Additional eye radius, in head radii.
        eye_rise: Eye height above the head center, in head radii.
        angular_eye: Angular eye outline as ``(dx, dy)`` in eye radii.
        pupil_ratio: Pupil radius as a fraction of eye radius.
        foot_kind: "claw" (line segments) or "webbed" (filled triangle).
        foot_points: Right foot vertices as ``(dx, dy)`` with dx in base
            units and dy in foot sizes. The left foot is its mirror image.
            Claws draw the first point to the second, then the second to
            each remaining point.
        foot_drop: Foot anchor depth below center, in body half-heights.
        foot_size: Foot height (base).
        foot_color: Foot color.
        label_size: Label font size in plot units.
    """

    name: str
    default_base_size: float
    stroke_width: float
    body_width: float
    body_height: float
    belly_width: float
    belly_height: float
    belly_drop: float
    belly_drop_body: float
    head_radius: float
    head_rise_body: float
    head_rise_head: float
    bill_length: float
    bill_depth: float
    bill_tip_ratio: float
    bill_offset: float
    bill_color: str
    flipper_length: float
    flipper_width: float
    flipper_profile: tuple[tuple[float, float, float, float], ...]
    eye_spacing: float
    eye_spacing_head: float
    eye_size: float
    eye_size_head: float
    eye_rise: float
    angular_eye: tuple[tuple[float, float], ...]
    pupil_ratio: float
    foot_kind: str
    foot_points: tuple[tuple[float, float], ...]
    foot_drop: float
    foot_size: float
    foot_color: str
    label_size: float

    @property
    def head_to_body(self) -> float:
        """Head radius relative to body half-height."""
        return self.head_radius / self.body_height


REALISTIC = GlyphStyle(
    name="realistic",
    default_base_size=0.8,
    stroke_width=1.5,
    body_width=0.4,
    body_height=0.5,
    belly_width=0.6,
    belly_height=0.56,
    belly_drop=0.05,
    belly_drop_body=0.0,
    head_radius=0.15,
    head_rise_body=1.0,
    head_rise_head=0.6,
    bill_length=0.40,
    bill_depth=0.20,
    bill_tip_ratio=2 / 3,
    bill_offset=0.0,
    bill_color="#ADD8E6",
    flipper_length=0.35,
    flipper_width=0.12,
    flipper_profile=(
        (0.7, 0.0, 0.0, 0.0),
        (0.9, 0.5, -1.0, 0.0),
        (0.9, 1.0, -0.5, 0.0),
        (0.8, 0.0, 0.3, 0.0),
    ),
    eye_spacing=0.06,
    eye_spacing_head=0.0,
    eye_size=0.05,
    eye_size_head=0.0,
    eye_rise=0.2,
    angular_eye=((-1.0, -0.7), (1.0, -0.7), (1.0, 1.0), (-1.0, 1.0)),
    pupil_ratio=0.4,
    foot_kind="claw",
    foot_points=((0.10, 0.0), (0.15, -1.0), (0.20, -0.7), (0.10, -0.7)),
    foot_drop=1.0,
    foot_size=0.08,
    foot_color="#000000",
    label_size=0.15,
)

CARTOON = GlyphStyle(
    name="cartoon",
    default_base_size=0.35,
    stroke_width=2.0,
    body_width=0.6,
    body_height=0.9,
    belly_width=0.7,
    belly_height=0.8,
    belly_drop=0.0,
    belly_drop_body=0.05,
    head_radius=0.25,
    head_rise_body=0.5,
    head_rise_head=0.0,
    bill_length=0.5,
    bill_depth=0.24,
    bill_tip_ratio=0.3,
    bill_offset=0.5,
    bill_color="#FFA500",
    flipper_length=0.7,
    flipper_width=0.15,
    flipper_profile=(
        (0.7, 0.0, 0.3, 0.15),
        (0.7, 0.8, 0.5, 0.15),
        (0.7, 1.0, 0.0, 0.15),
        (0.7, 0.8, -0.5, 0.15),
        (0.7, 0.0, -0.3, 0.15),
    ),
    eye_spacing=0.0,
    eye_spacing_head=0.35,
    eye_size=0.0,
    eye_size_head=0.25,
    eye_rise=0.2,
    angular_eye=((-0.8, 0.0), (0.0, 0.8), (0.8, 0.0), (0.0, -0.8)),
    pupil_ratio=0.4,
    foot_kind="webbed",
    foot_points=((0.18, 0.0), (0.24, -1.0), (0.12, -1.0)),
    foot_drop=0.85,
    foot_size=0.2,
    foot_color="#FF8C00",
    label_size=0.12,
)

STYLES: list[GlyphStyle] = [REALISTIC, CARTOON]

STYLE_INDEX: dict[str, GlyphStyle] = {s.name: s for s in STYLES}


def select_style(style: str | GlyphStyle) -> GlyphStyle:
    """Select a glyph style by name.

    Args:
        style: Style name ("realistic" or "cartoon"), or a GlyphStyle
            which is returned unchanged.

    Returns:
        GlyphStyle for the requested style.

    Raises:
        ValueError: If the style name is not recognized.
    """
    if isinstance(style, GlyphStyle):
        return style
    key = style.lower()
    if key not in STYLE_INDEX:
        valid = ", ".join(STYLE_INDEX.keys())
        raise ValueError(f"Unknown style '{style}'. Valid styles: {valid}")
    return STYLE_INDEX[key]
