"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    converters_registered: int = 0


class BoundsModel(BaseModel):
    xmin: float
    ymin: float
    xmax: float
    ymax: float


class ShapeModel(BaseModel):
    fill: str | None = Field(default=None, description="#RRGGBBAA, null when not painted")
    stroke: str | None = Field(default=None, description="#RRGGBBAA, null when not painted")
    stroke_width: float = 0.0
    stroke_cap: str = "butt"
    stroke_join: str = "miter"
    path: str = Field(default="", description="Path data, e.g. 'M10,20 L30,40 Z'")
    transform: list[float] = Field(default_factory=lambda: [1.0, 0.0, 0.0, 1.0, 0.0, 0.0])
    bounds: BoundsModel


class DiagnosticModel(BaseModel):
    severity: str
    message: str
    element_path: str = ""


class ParseResponse(BaseModel):
    shapes: list[ShapeModel] = Field(default_factory=list)
    shapes_data: str = ""
    bounds: BoundsModel | None = None
    diagnostics: list[DiagnosticModel] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class DecodeResponse(BaseModel):
    shapes: list[ShapeModel] = Field(default_factory=list)
