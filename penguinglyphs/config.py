"""Configuration models for glyph plots.

Callers describe where each visual channel comes from with a
FieldMapping, and how the plot looks with a PlotConfig. Both are pydantic
models, so invalid values fail with a ValidationError (a ValueError)
before any geometry is built.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .layout import LEGEND_LOCATIONS
from .normalize import DEFAULT_SCALE_MAX, DEFAULT_SCALE_MIN
from .styles import select_style


class FieldMapping(BaseModel):
    """Column names for each visual channel."""

    bill_length_field: str = Field(default="bill_len", description="Column driving bill length")
    bill_depth_field: str = Field(default="bill_dep", description="Column driving bill depth")
    flipper_length_field: str = Field(
        default="flipper_len", description="Column driving flipper length"
    )
    body_mass_field: str = Field(default="body_mass", description="Column driving body size")
    species_field: str = Field(default="species", description="Column selecting body color")
    sex_field: str = Field(default="sex", description="Column selecting eye shape")
    id_field: str | None = Field(
        default=None,
        description="Column with display labels; row numbers are used when unset",
    )

    @classmethod
    def palmerpenguins(cls, id_field: str | None = None) -> FieldMapping:
        """Mapping for the column names used by the palmerpenguins dataset."""
        return cls(
            bill_length_field="bill_length_mm",
            bill_depth_field="bill_depth_mm",
            flipper_length_field="flipper_length_mm",
            body_mass_field="body_mass_g",
            id_field=id_field,
        )

    def numeric_fields(self) -> dict[str, str]:
        """Scale factor name -> column name for the four numeric channels."""
        return {
            "bill_length": self.bill_length_field,
            "bill_depth": self.bill_depth_field,
            "flipper_length": self.flipper_length_field,
            "body": self.body_mass_field,
        }

    def required_fields(self, include_id: bool = True) -> dict[str, str]:
        """Mapping key -> column name for every column the input must have."""
        fields = {
            "bill_length_field": self.bill_length_field,
            "bill_depth_field": self.bill_depth_field,
            "flipper_length_field": self.flipper_length_field,
            "body_mass_field": self.body_mass_field,
            "species_field": self.species_field,
            "sex_field": self.sex_field,
        }
        if include_id and self.id_field is not None:
            fields["id_field"] = self.id_field
        return fields


class LegendConfig(BaseModel):
    """Legend placement."""

    location: str = Field(
        default="top-left",
        description="Anchor keyword: " + ", ".join(LEGEND_LOCATIONS),
    )
    horizontal: bool = Field(default=True, description="Lay entries out in a single row")

    @field_validator("location")
    @classmethod
    def _check_location(cls, v: str) -> str:
        if v not in LEGEND_LOCATIONS:
            valid = ", ".join(LEGEND_LOCATIONS)
            raise ValueError(f"Unknown legend location '{v}'. Valid locations: {valid}")
        return v


class PlotConfig(BaseModel):
    """Appearance of a glyph plot."""

    ncols: int = Field(default=5, ge=1, description="Number of grid columns")
    style: str = Field(default="realistic", description="Glyph style: realistic or cartoon")
    base_size: float | None = Field(
        default=None,
        gt=0,
        description="Glyph magnification; the style default when unset",
    )
    scale_min: float = Field(default=DEFAULT_SCALE_MIN, description="Scale factor for column minima")
    scale_max: float = Field(default=DEFAULT_SCALE_MAX, description="Scale factor for column maxima")
    title: str | None = Field(default="Penguin Glyphs", description="Plot title")
    show_labels: bool = Field(default=True, description="Draw a label inside each glyph")
    drop_incomplete: bool = Field(
        default=False,
        description="Drop rows with any missing mapped value before plotting",
    )
    legend: LegendConfig = Field(default_factory=LegendConfig)

    @field_validator("style")
    @classmethod
    def _check_style(cls, v: str) -> str:
        return select_style(v).name
