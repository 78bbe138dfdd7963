"""POST /api/parse and /api/decode — SVG → shapes and back."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException

from svgshapes.config import Settings
from svgshapes.dependencies import get_settings
from svgshapes.engine.diagnostics import Diagnostic, StrictModeError, log_diagnostic
from svgshapes.models.requests import DecodeRequest, ParseRequest
from svgshapes.models.responses import (
    BoundsModel,
    DecodeResponse,
    DiagnosticModel,
    ParseResponse,
    ShapeModel,
)
from svgshapes.models.shape import Bounds, Shape
from svgshapes.svg.parser import parse_document
from svgshapes.svg.path_parser import format_path_data
from svgshapes.svg.serializer import decode_shapes, encode_shapes

router = APIRouter()


def _bounds_model(bounds: Bounds) -> BoundsModel:
    return BoundsModel(xmin=bounds.xmin, ymin=bounds.ymin, xmax=bounds.xmax, ymax=bounds.ymax)


def shape_to_model(shape: Shape) -> ShapeModel:
    return ShapeModel(
        fill=shape.fill.to_hex() if shape.fill is not None else None,
        stroke=shape.stroke.to_hex() if shape.stroke is not None else None,
        stroke_width=shape.stroke_width,
        stroke_cap=shape.stroke_cap.value,
        stroke_join=shape.stroke_join.value,
        path=format_path_data(list(shape.commands)),
        transform=list(shape.transform),
        bounds=_bounds_model(shape.bounds),
    )


def _diagnostic_model(diagnostic: Diagnostic) -> DiagnosticModel:
    return DiagnosticModel(
        severity=diagnostic.severity.value,
        message=diagnostic.message,
        element_path=diagnostic.element_path,
    )


@router.post("/parse", response_model=ParseResponse)
async def parse(req: ParseRequest, settings: Settings = Depends(get_settings)) -> ParseResponse:
    start = time.perf_counter()
    options = settings.parse_options(req.strict_mode, req.verbose_logging)

    try:
        result = parse_document(req.svg, options, sink=log_diagnostic)
    except StrictModeError as e:
        raise HTTPException(status_code=422, detail=str(e.diagnostic)) from e

    elapsed = (time.perf_counter() - start) * 1000
    bounds = result.bounds

    return ParseResponse(
        shapes=[shape_to_model(s) for s in result.shapes],
        shapes_data=encode_shapes(result.shapes),
        bounds=_bounds_model(bounds) if bounds is not None else None,
        diagnostics=[_diagnostic_model(d) for d in result.diagnostics],
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/decode", response_model=DecodeResponse)
async def decode(req: DecodeRequest) -> DecodeResponse:
    return DecodeResponse(shapes=[shape_to_model(s) for s in decode_shapes(req.data)])
