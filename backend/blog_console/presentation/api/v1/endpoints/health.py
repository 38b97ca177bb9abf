"""Health check endpoint: no authentication, no database access."""

from fastapi import APIRouter

from blog_console.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Reports that the console is up, with its version, environment and locale."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
        "locale": settings.locale,
    }
