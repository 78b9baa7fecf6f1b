"""POST /api/normalize — one-shot normalization of a raw SVG."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from svgcode.config import Settings
from svgcode.dependencies import get_settings
from svgcode.engine.pipeline import normalize_text, resolve_color
from svgcode.engine.state import NormalizationConfig
from svgcode.errors import NormalizationError
from svgcode.models.requests import NormalizeRequest
from svgcode.models.responses import NormalizeResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize_svg(
    req: NormalizeRequest,
    settings: Settings = Depends(get_settings),
) -> NormalizeResponse:
    config = NormalizationConfig(
        width=req.width if req.width is not None else settings.default_width,
        height=req.height if req.height is not None else settings.default_height,
        color=req.color,
    )

    try:
        state, text = normalize_text(req.svg, config, settings.default_color)
    except NormalizationError as e:
        logger.info("Rejected SVG: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return NormalizeResponse(
        svg=text,
        detected_color=state.detected_color,
        width=config.width,
        height=config.height,
        color=resolve_color(config, state.detected_color, settings.default_color),
    )
