from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import router
from logging_config import configure_logging
from services.predictor import build_default_predictor


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    # Configuration defects such as a zero sensor count surface here, not per request.
    build_default_predictor()
    try:
        yield
    finally:
        build_default_predictor.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Urban Fusion Engine",
        description="Deterministic sensor fusion and short-horizon temperature forecasts.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(router)
    return app

app = create_app()
