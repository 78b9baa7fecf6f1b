"""API response models."""

from __future__ import annotations

from pydantic import BaseModel

from svgcode.engine.state import Dimension


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class NormalizeResponse(BaseModel):
    svg: str
    detected_color: str | None = None
    width: Dimension
    height: Dimension
    color: str


class SessionResponse(BaseModel):
    session_id: str
    phase: str
    svg: str | None = None
    detected_color: str | None = None
    width: Dimension
    height: Dimension
    color: str | None = None
    error: str | None = None
