"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from svgshapes import __version__
from svgshapes.engine import get_registry
from svgshapes.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        converters_registered=get_registry().count,
    )
