"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import Depends, FastAPI

from app import __version__
from app.config import Settings, get_settings
from app.logging import configure_logging
from app.routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create application resources during startup and clean up on shutdown."""

    settings = get_settings()
    logger.info(
        "Starting letter refinement service",
        extra={"refinement": _refinement_mode(settings), "environment": settings.environment},
    )

    async with httpx.AsyncClient() as client:
        app.state.http_client = client
        yield
        del app.state.http_client


def create_app() -> FastAPI:
    """Application factory."""

    settings = get_settings()
    configure_logging(settings.log_level, service="letter-refiner")

    app = FastAPI(
        title="Letter Tone Refinement Service",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/version")
    async def version(settings: Settings = Depends(get_settings)) -> dict[str, str]:
        return {
            "version": __version__,
            "environment": settings.environment,
            "refinement": _refinement_mode(settings),
        }

    app.include_router(router)

    return app


def _refinement_mode(settings: Settings) -> str:
    return "enabled" if settings.refinement_enabled else "disabled"


app = create_app()
