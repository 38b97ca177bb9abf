"""Application service (use case) for the article lifecycle.

Every transition authenticates the principal, authorizes it through the
access gate, applies the state change on the entity and hands the article
back to the repository. Transitions are idempotent: repeating one never
fails and only refreshes ``updated_at``.
"""

import logging

from blog_console.application.interfaces import ArticleRepository
from blog_console.application.messages import MessageKey
from blog_console.application.schemas import ArticlePayload
from blog_console.domain.access import require_access, require_admin, require_authenticated
from blog_console.domain.entities import NO_SIGN_ID, Article, Principal, parse_tags
from blog_console.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)


def normalize_sign_id(sign_id: str | None) -> str:
    """Substitute the "no sign" sentinel when no template is referenced."""
    if sign_id is None or not sign_id.strip():
        return NO_SIGN_ID
    return sign_id.strip()


def normalize_permalink(permalink: str | None) -> str:
    if permalink is None or not permalink.strip():
        return ""
    permalink = permalink.strip()
    return permalink if permalink.startswith("/") else f"/{permalink}"


def _validate(data: ArticlePayload) -> None:
    if not data.title.strip():
        raise InvalidArgumentError(MessageKey.TITLE_REQUIRED.value, "Article title must not be blank")
    if not data.content.strip():
        raise InvalidArgumentError(MessageKey.CONTENT_REQUIRED.value, "Article content must not be blank")


class ArticleLifecycleService:
    """Drives articles through draft/published/topped. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def _load(self, article_id: str) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def _load_accessible(
        self, principal: Principal | None, article_id: str, action: str
    ) -> Article:
        principal = require_authenticated(principal)
        article = await self._load(article_id)
        require_access(principal, article, action)
        return article

    async def _ensure_permalink_free(self, permalink: str, article_id: str | None) -> None:
        existing = await self._repository.get_by_permalink(permalink)
        if existing is not None and existing.id != article_id:
            raise DuplicateEntityError("Article", "permalink", permalink)

    async def _save(self, article: Article) -> Article:
        saved = await self._repository.update(article)
        await self._repository.commit()
        return saved

    async def get(self, principal: Principal | None, article_id: str) -> Article:
        return await self._load_accessible(principal, article_id, "view")

    async def create(self, principal: Principal | None, data: ArticlePayload) -> Article:
        """Create an article authored by ``principal``; any authenticated user may."""
        principal = require_authenticated(principal)
        _validate(data)

        permalink = normalize_permalink(data.permalink)
        if permalink:
            await self._ensure_permalink_free(permalink, None)

        article = Article(
            title=data.title.strip(),
            abstract=data.abstract,
            content=data.content,
            author_email=principal.email,
            permalink=permalink,
            tags=parse_tags(data.tags),
            sign_id=normalize_sign_id(data.sign_id),
            view_password=data.view_password,
            commentable=data.commentable,
        )
        if data.is_published:
            article.publish()

        created = await self._repository.create(article)
        if not created.permalink:
            created.permalink = created.default_permalink()
            created = await self._repository.update(created)
        await self._repository.commit()

        logger.info(
            "Article %s created by %s (published=%s)",
            created.id, principal.email, created.published,
        )
        return created

    async def update(
        self, principal: Principal | None, article_id: str, data: ArticlePayload
    ) -> Article:
        """Apply editor changes; publish state only changes when ``is_published`` is sent."""
        article = await self._load_accessible(principal, article_id, "update")
        _validate(data)

        permalink = normalize_permalink(data.permalink)
        if permalink and permalink != article.permalink:
            await self._ensure_permalink_free(permalink, article.id)

        article.update(
            title=data.title.strip(),
            abstract=data.abstract,
            content=data.content,
            permalink=permalink or None,
            tags=parse_tags(data.tags),
            sign_id=normalize_sign_id(data.sign_id),
            view_password=data.view_password,
            commentable=data.commentable,
        )
        if data.is_published is True:
            article.publish()
        elif data.is_published is False:
            article.unpublish()

        logger.info("Article %s updated", article.id)
        return await self._save(article)

    async def remove(self, principal: Principal | None, article_id: str) -> None:
        await self._load_accessible(principal, article_id, "remove")
        await self._repository.delete(article_id)
        await self._repository.commit()
        logger.info("Article %s removed", article_id)

    async def publish(self, principal: Principal | None, article_id: str) -> Article:
        article = await self._load_accessible(principal, article_id, "publish")
        article.publish()
        logger.info("Article %s published", article_id)
        return await self._save(article)

    async def unpublish(self, principal: Principal | None, article_id: str) -> Article:
        article = await self._load_accessible(principal, article_id, "unpublish")
        article.unpublish()
        logger.info("Article %s unpublished", article_id)
        return await self._save(article)

    async def put_top(self, principal: Principal | None, article_id: str) -> Article:
        # Admin only, checked before the lookup.
        principal = require_authenticated(principal)
        require_admin(principal, "put articles on top")
        article = await self._load(article_id)
        article.top()
        logger.info("Article %s put on top", article_id)
        return await self._save(article)

    async def cancel_top(self, principal: Principal | None, article_id: str) -> Article:
        principal = require_authenticated(principal)
        require_admin(principal, "cancel top articles")
        article = await self._load(article_id)
        article.untop()
        logger.info("Article %s no longer on top", article_id)
        return await self._save(article)
