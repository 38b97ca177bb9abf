from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings

_PACKAGE_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _PACKAGE_DIR.parent
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)
DEFAULT_JWT_SECRET = "change-me"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Blog Console API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./blog_console.db"
    cors_origins: list[str] = ["http://localhost:3020"]

    # Bearer-token authentication
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"

    # Console messages
    locale: str = "en_US"
    messages_dir: str = str(_PACKAGE_DIR / "infrastructure" / "i18n" / "messages")

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_console: str = "INFO"          # article lifecycle + console services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def uses_default_jwt_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET

    @model_validator(mode="after")
    def require_real_secret_outside_development(self) -> "Settings":
        if self.app_env != "development" and self.uses_default_jwt_secret:
            raise ValueError(
                f"JWT_SECRET must be set when APP_ENV is {self.app_env!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
