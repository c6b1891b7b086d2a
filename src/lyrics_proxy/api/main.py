"""
FastAPI application entry point.

Run with ``lyrics-proxy serve`` or ``uvicorn lyrics_proxy.api.main:app``.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__, config
from ..utils.logging import setup_logging
from .routers import health, lyrics


def create_app(log_level: Optional[str] = None) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Package logging is set to ``log_level``, or LYRICS_PROXY_LOG_LEVEL when
    none is given.
    """
    setup_logging(level=log_level or config.LOG_LEVEL)

    app = FastAPI(
        title="lyrics-proxy",
        description="Best-effort song lyrics lookup",
        version=__version__,
    )

    # Browser frontends call the endpoint directly
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(lyrics.router, prefix="/api/lyrics", tags=["lyrics"])

    return app


app = create_app()
