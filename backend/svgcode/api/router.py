"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from svgcode.api import health, normalize, sessions

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(normalize.router)
api_router.include_router(sessions.router)
