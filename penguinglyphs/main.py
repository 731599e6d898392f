"""Penguin Glyphs microservice -- FastAPI application.

Endpoints:
    POST /render        -- Render a table of rows as a PNG glyph plot
    POST /render/svg    -- Render a table of rows as an SVG glyph plot
    POST /glyph/svg     -- Render a single glyph from explicit scale factors
    GET  /health        -- Health check
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from . import __version__
from .config import FieldMapping, PlotConfig
from .geometry import build_glyph
from .plot import penguin_glyphs
from .primitives import ScaleFactors
from .renderer import render_glyph_svg, render_png, render_svg

structlog.configure(
    processors=[
        structlog.dev.ConsoleRenderer(),
    ],
)

logger = structlog.get_logger(__name__)

app = FastAPI(
    title="penguin-glyphs",
    description="Chernoff-style penguin glyph plots for tabular measurements",
    version=__version__,
)


# --------------------------------------------------------------------------
# Request / Response models
# --------------------------------------------------------------------------


class RenderRequest(PlotConfig):
    """Request body for /render and /render/svg."""

    rows: list[dict[str, Any]] = Field(
        ...,
        description="Ordered table rows, each mapping column name to value",
        examples=[
            [
                {"species": "Adelie", "sex": "male", "bill_len": 39.1, "bill_dep": 18.7,
                 "flipper_len": 181, "body_mass": 3750},
            ]
        ],
    )
    mapping: FieldMapping = Field(
        default_factory=FieldMapping,
        description="Column names for each visual channel",
    )
    cell_size: int = Field(
        default=120,
        ge=16,
        le=512,
        description="Pixels per grid cell",
    )

    def plot_config(self) -> PlotConfig:
        return PlotConfig(**self.model_dump(include=set(PlotConfig.model_fields)))


class GlyphRequest(BaseModel):
    """Request body for /glyph/svg."""

    bill_length: float = Field(default=1.0, gt=0, description="Bill length scale factor")
    bill_depth: float = Field(default=1.0, gt=0, description="Bill depth scale factor")
    flipper_length: float = Field(default=1.0, gt=0, description="Flipper length scale factor")
    body: float = Field(default=1.0, gt=0, description="Body size scale factor")
    species: str | None = Field(default="Adelie", examples=["Adelie", "Chinstrap", "Gentoo"])
    sex: str | None = Field(default="male", examples=["male", "female"])
    label: str | None = Field(default=None, description="Text drawn inside the glyph")
    style: str = Field(default="realistic", description="Glyph style: realistic or cartoon")
    size: int = Field(
        default=256,
        ge=64,
        le=2048,
        description="Output image size in pixels (square)",
    )


class HealthResponse(BaseModel):
    """Response body for /health."""

    status: str
    service: str
    version: str


# --------------------------------------------------------------------------
# Endpoints
# --------------------------------------------------------------------------


@app.post(
    "/render",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}, "description": "PNG glyph plot"},
        422: {"description": "Invalid input"},
    },
)
async def render_png_endpoint(request: RenderRequest) -> Response:
    """Render a table of rows as a PNG glyph plot."""
    try:
        plot = penguin_glyphs(request.rows, request.mapping, request.plot_config())
        png_bytes = render_png(plot, request.cell_size)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("render_png_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Rendering failed")

    return Response(content=png_bytes, media_type="image/png")


@app.post(
    "/render/svg",
    response_class=Response,
    responses={
        200: {
            "content": {"image/svg+xml": {}},
            "description": "SVG glyph plot",
        },
        422: {"description": "Invalid input"},
    },
)
async def render_svg_endpoint(request: RenderRequest) -> Response:
    """Render a table of rows as an SVG glyph plot."""
    try:
        plot = penguin_glyphs(request.rows, request.mapping, request.plot_config())
        svg_content = render_svg(plot, request.cell_size)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("render_svg_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Rendering failed")

    return Response(content=svg_content, media_type="image/svg+xml")


@app.post(
    "/glyph/svg",
    response_class=Response,
    responses={
        200: {
            "content": {"image/svg+xml": {}},
            "description": "SVG of a single glyph",
        },
        422: {"description": "Invalid input"},
    },
)
async def glyph_svg_endpoint(request: GlyphRequest) -> Response:
    """Render one glyph from explicit scale factors."""
    scales = ScaleFactors(
        bill_length=request.bill_length,
        bill_depth=request.bill_depth,
        flipper_length=request.flipper_length,
        body=request.body,
    )
    try:
        spec = build_glyph(
            (0.0, 0.0),
            scales,
            species=request.species,
            sex=request.sex,
            label=request.label,
            style=request.style,
        )
        svg_content = render_glyph_svg(spec, request.size)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("glyph_svg_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Rendering failed")

    return Response(content=svg_content, media_type="image/svg+xml")


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for Docker and load balancer probes."""
    return HealthResponse(
        status="healthy",
        service="penguin-glyphs",
        version=__version__,
    )
