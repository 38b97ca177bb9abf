"""Article console endpoints.

Every route needs a bearer token (401 otherwise) and answers with an
envelope; business failures are reported inside the envelope, not as
HTTP errors.
"""

from fastapi import APIRouter, Depends

from blog_console.application.schemas import (
    ArticleCreatedEnvelope,
    ArticleEnvelope,
    ArticleListEnvelope,
    ArticleRequest,
    ResultEnvelope,
)
from blog_console.application.services import ArticleConsoleService
from blog_console.domain.entities import Principal
from blog_console.infrastructure.dependencies import (
    get_article_console_service,
    get_current_principal,
)

router = APIRouter(prefix="/console/articles", tags=["Console Articles"])


@router.get(
    "/status/{status}/{page}/{page_size}/{window_size}",
    response_model=ArticleListEnvelope,
)
async def list_articles(
    status: str,
    page: str,
    page_size: str,
    window_size: str,
    principal: Principal = Depends(get_current_principal),
    service: ArticleConsoleService = Depends(get_article_console_service),
) -> ArticleListEnvelope:
    """List ``published`` or ``draft`` articles, one page at a time.

    Segments are passed through as text so that an unknown status or a
    non-numeric page comes back as an ``invalid_pagination`` envelope.
    """
    return await service.list_articles(
        principal,
        published=status,
        page=page,
        page_size=page_size,
        window_size=window_size,
    )


@router.get("/{article_id}", response_model=ArticleEnvelope)
async def get_article(
    article_id: str,
    principal: Principal = Depends(get_current_principal),
    service: ArticleConsoleService = Depends(get_article_console_service),
) -> ArticleEnvelope:
    """Retrieve a single article for editing."""
    return await service.get_article(principal, article_id)


@router.post("", response_model=ArticleCreatedEnvelope)
async def create_article(
    data: ArticleRequest,
    principal: Principal = Depends(get_current_principal),
    service: ArticleConsoleService = Depends(get_article_console_service),
) -> ArticleCreatedEnvelope:
    """Create a new article authored by the caller."""
    return await service.create_article(principal, data.article)


@router.put("/{article_id}", response_model=ResultEnvelope)
async def update_article(
    article_id: str,
    data: ArticleRequest,
    principal: Principal = Depends(get_current_principal),
    service: ArticleConsoleService = Depends(get_article_console_service),
) -> ResultEnvelope:
    return await service.update_article(principal, article_id, data.article)


@router.delete("/{article_id}", response_model=ResultEnvelope)
async def remove_article(
    article_id: str,
    principal: Principal = Depends(get_current_principal),
    service: ArticleConsoleService = Depends(get_article_console_service),
) -> ResultEnvelope:
    return await service.remove_article(principal, article_id)


@router.put("/publish/{article_id}", response_model=ResultEnvelope)
async def publish_article(
    article_id: str,
    principal: Principal = Depends(get_current_principal),
    service: ArticleConsoleService = Depends(get_article_console_service),
) -> ResultEnvelope:
    return await service.publish_article(principal, article_id)


@router.put("/unpublish/{article_id}", response_model=ResultEnvelope)
async def cancel_publish_article(
    article_id: str,
    principal: Principal = Depends(get_current_principal),
    service: ArticleConsoleService = Depends(get_article_console_service),
) -> ResultEnvelope:
    """Move an article back to drafts."""
    return await service.publish_cancel(principal, article_id)


@router.put("/puttop/{article_id}", response_model=ResultEnvelope)
async def put_top_article(
    article_id: str,
    principal: Principal = Depends(get_current_principal),
    service: ArticleConsoleService = Depends(get_article_console_service),
) -> ResultEnvelope:
    """Pin an article to the top of listings (admins only)."""
    return await service.put_top(principal, article_id)


@router.put("/canceltop/{article_id}", response_model=ResultEnvelope)
async def cancel_top_article(
    article_id: str,
    principal: Principal = Depends(get_current_principal),
    service: ArticleConsoleService = Depends(get_article_console_service),
) -> ResultEnvelope:
    """Unpin an article (admins only)."""
    return await service.cancel_top(principal, article_id)
