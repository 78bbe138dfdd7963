"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    strict_mode: bool | None = Field(
        default=None,
        description="Fail on malformed numeric attributes (defaults to server setting)",
    )
    verbose_logging: bool | None = Field(
        default=None,
        description="Report <use> resolution failures and empty elements",
    )


class DecodeRequest(BaseModel):
    data: str = Field(..., description="Encoded shape list as produced by /api/parse")
