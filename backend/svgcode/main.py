"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from svgcode import __version__
from svgcode.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgcode_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="SVG to Code",
        description="Normalize SVG icons to a single fill color, fixed size and compact markup",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from svgcode.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
