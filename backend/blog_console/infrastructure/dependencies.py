"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from blog_console.config import get_settings
from blog_console.application.interfaces import Localizer, PrincipalResolver
from blog_console.application.services import (
    ArticleConsoleService,
    ArticleLifecycleService,
    EnvelopeBuilder,
)
from blog_console.domain.access import require_authenticated
from blog_console.domain.entities import Principal
from blog_console.domain.exceptions import AuthenticationError
from blog_console.infrastructure.auth.jwt_principal_resolver import JWTPrincipalResolver
from blog_console.infrastructure.database.session import get_db_session
from blog_console.infrastructure.database.repositories import SQLAlchemyArticleRepository
from blog_console.infrastructure.i18n.yaml_localizer import YamlLocalizer


@lru_cache
def get_localizer() -> Localizer:
    """Message catalog for the configured locale, loaded once."""
    settings = get_settings()
    return YamlLocalizer.from_directory(settings.messages_dir, settings.locale)


def get_principal_resolver() -> PrincipalResolver:
    settings = get_settings()
    return JWTPrincipalResolver(secret=settings.jwt_secret, algorithm=settings.jwt_algorithm)


def get_current_principal(
    authorization: str | None = Header(None),
    resolver: PrincipalResolver = Depends(get_principal_resolver),
) -> Principal:
    """Resolve the acting principal; anonymous requests are rejected with 401."""
    try:
        return require_authenticated(resolver.resolve(authorization))
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_article_console_service(
    session: AsyncSession = Depends(get_db_session),
    localizer: Localizer = Depends(get_localizer),
) -> AsyncGenerator[ArticleConsoleService, None]:
    """Provides an ArticleConsoleService with its repository and envelope builder wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleConsoleService(
        lifecycle=ArticleLifecycleService(repository),
        repository=repository,
        envelopes=EnvelopeBuilder(localizer),
    )
