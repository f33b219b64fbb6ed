from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api import router
from logging_config import configure_logging
from services.weather_client import build_default_client


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    try:
        yield
    finally:
        if build_default_client.cache_info().currsize:
            build_default_client().close()
        build_default_client.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Fire Watch",
        description="Current-weather fire risk checks backed by OpenWeatherMap.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    return app


app = create_app()
