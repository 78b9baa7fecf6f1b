"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgcode.engine.state import Dimension


class NormalizeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    width: Dimension | None = Field(default=None, description="Output width (defaults from settings)")
    height: Dimension | None = Field(default=None, description="Output height (defaults from settings)")
    color: str | None = Field(default=None, description="Fill color; unset uses the detected color")


class ConfigChangeRequest(BaseModel):
    width: Dimension = Field(..., description="Output width")
    height: Dimension = Field(..., description="Output height")
    color: str | None = Field(default=None, description="Fill color")
