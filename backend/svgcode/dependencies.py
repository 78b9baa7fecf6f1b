"""FastAPI dependency injection."""

from __future__ import annotations

from svgcode.config import Settings, settings
from svgcode.engine.sessions import SessionStore
from svgcode.engine.state import NormalizationConfig

_store = SessionStore(
    config=NormalizationConfig(width=settings.default_width, height=settings.default_height),
    default_color=settings.default_color,
    max_sessions=settings.max_sessions,
)


def get_settings() -> Settings:
    return settings


def get_session_store() -> SessionStore:
    return _store
