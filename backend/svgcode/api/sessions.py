"""/api/sessions/* — editor sessions: upload, tweak size/color, fetch or download the result."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile

from svgcode.config import Settings
from svgcode.dependencies import get_session_store, get_settings
from svgcode.engine.pipeline import NormalizerSession
from svgcode.engine.sessions import SessionStore
from svgcode.models.requests import ConfigChangeRequest
from svgcode.models.responses import SessionResponse

router = APIRouter(prefix="/sessions")
logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"


def _view(session_id: str, session: NormalizerSession) -> SessionResponse:
    return SessionResponse(
        session_id=session_id,
        phase=session.phase.value,
        svg=session.normalized_text,
        detected_color=session.detected_color,
        width=session.config.width,
        height=session.config.height,
        color=session.config.color,
        error=session.last_error,
    )


def _get_session(session_id: str, store: SessionStore) -> NormalizerSession:
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session {session_id}")
    return session


@router.post("", response_model=SessionResponse, status_code=201)
async def create_session(store: SessionStore = Depends(get_session_store)) -> SessionResponse:
    session_id, session = store.create()
    return _view(session_id, session)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str, store: SessionStore = Depends(get_session_store)) -> SessionResponse:
    return _view(session_id, _get_session(session_id, store))


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str, store: SessionStore = Depends(get_session_store)) -> Response:
    if not store.delete(session_id):
        raise HTTPException(status_code=404, detail=f"Unknown session {session_id}")
    return Response(status_code=204)


@router.post("/{session_id}/upload", response_model=SessionResponse)
async def upload_svg(
    session_id: str,
    file: UploadFile = File(...),
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> SessionResponse:
    session = _get_session(session_id, store)

    if file.content_type != SVG_MEDIA_TYPE:
        raise HTTPException(status_code=415, detail="Please upload a valid SVG file.")

    data = await file.read()
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail=f"SVG larger than {settings.max_upload_bytes} bytes")

    try:
        svg_text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=400, detail=f"SVG is not valid UTF-8: {e}") from e

    logger.info("Session %s: upload %s (%d bytes)", session_id, file.filename, len(data))
    result = session.on_upload(svg_text)
    if not result.ok:
        raise HTTPException(status_code=422, detail=result.error)
    return _view(session_id, session)


@router.put("/{session_id}/config", response_model=SessionResponse)
async def change_config(
    session_id: str,
    req: ConfigChangeRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    session = _get_session(session_id, store)
    result = session.on_config_change(req.width, req.height, req.color)
    if not result.ok:
        raise HTTPException(status_code=422, detail=result.error)
    return _view(session_id, session)


@router.get("/{session_id}/download")
async def download_svg(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> Response:
    session = _get_session(session_id, store)
    text = session.normalized_text
    if text is None:
        raise HTTPException(status_code=404, detail="No SVG uploaded yet")

    return Response(
        content=text,
        media_type=SVG_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{settings.download_filename}"'},
    )
