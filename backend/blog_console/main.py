"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_console.config import get_settings
from blog_console.infrastructure.database import Base, engine
from blog_console.infrastructure.logging.log_config import setup_logging
from blog_console.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging and create tables."""
    settings = get_settings()
    setup_logging()
    if settings.uses_default_jwt_secret:
        logger.warning(
            "JWT_SECRET is not set; tokens are checked against the development key"
        )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(
        "%s %s started (env=%s, locale=%s)",
        settings.app_title, settings.app_version, settings.app_env, settings.locale,
    )

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blog_console.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
