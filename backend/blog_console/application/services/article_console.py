"""Console-facing article operations.

Each operation returns exactly one envelope. Business failures
(forbidden, not found, invalid input, duplicate permalink) and storage
failures become failure envelopes here; ``AuthenticationError`` is left to
propagate because an unidentified caller gets a transport-level rejection.
"""

import logging

from blog_console.application.interfaces import ArticleRepository
from blog_console.application.messages import MessageKey
from blog_console.application.schemas import (
    ArticleCreatedEnvelope,
    ArticleEnvelope,
    ArticleListEnvelope,
    ArticlePayload,
    ArticleResponse,
    ArticleSummary,
    PaginationSchema,
    ResultEnvelope,
)
from blog_console.application.services.article_lifecycle import ArticleLifecycleService
from blog_console.application.services.result_envelope import E, EnvelopeBuilder
from blog_console.domain.access import require_authenticated
from blog_console.domain.entities import Principal
from blog_console.domain.exceptions import (
    AuthorizationError,
    CollaboratorError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from blog_console.domain.pagination import PaginationRequest

logger = logging.getLogger(__name__)

_HANDLED_ERRORS = (
    AuthorizationError,
    EntityNotFoundError,
    InvalidArgumentError,
    DuplicateEntityError,
    CollaboratorError,
)


_LIST_STATUSES = {"published": True, "draft": False}


def _status_flag(status: bool | str) -> bool:
    if isinstance(status, bool):
        return status
    try:
        return _LIST_STATUSES[status]
    except KeyError:
        raise InvalidArgumentError(
            MessageKey.INVALID_PAGINATION.value, f"Unknown article status {status!r}"
        ) from None


class ArticleConsoleService:
    """One method per console operation, all taking the resolved principal."""

    def __init__(
        self,
        lifecycle: ArticleLifecycleService,
        repository: ArticleRepository,
        envelopes: EnvelopeBuilder,
    ) -> None:
        self._lifecycle = lifecycle
        self._repository = repository
        self._envelopes = envelopes

    def _failure(
        self,
        error: Exception,
        fallback: MessageKey,
        envelope: type[E] = ResultEnvelope,
    ) -> E:
        """Log and convert a handled error. Must be called from an ``except`` block."""
        if isinstance(error, CollaboratorError):
            logger.exception("Console operation failed: %s", fallback.value)
        elif isinstance(error, AuthorizationError):
            logger.warning("Forbidden: %s", error)
        else:
            logger.info("Rejected (%s): %s", fallback.value, error)
        return self._envelopes.from_error(error, fallback, envelope)

    # ── Queries ──────────────────────────────────────────────────────

    async def get_article(
        self, principal: Principal | None, article_id: str
    ) -> ArticleEnvelope:
        try:
            article = await self._lifecycle.get(principal, article_id)
        except _HANDLED_ERRORS as e:
            return self._failure(e, MessageKey.GET_FAILED, ArticleEnvelope)
        return self._envelopes.success(
            MessageKey.GET_SUCCEEDED,
            ArticleEnvelope,
            article=ArticleResponse.model_validate(article, from_attributes=True),
        )

    async def list_articles(
        self,
        principal: Principal | None,
        published: bool | str,
        page: int | str,
        page_size: int | str,
        window_size: int | str,
    ) -> ArticleListEnvelope:
        """List one page of articles with the given status.

        ``published`` is either a flag or the ``published``/``draft`` path
        segment; the page numbers may arrive as raw path strings. Admins see
        every article; other principals only their own.
        """
        principal = require_authenticated(principal)
        try:
            published = _status_flag(published)
            request = PaginationRequest.parse(page, page_size, window_size)
            articles, total = await self._repository.list_by_status(
                published=published,
                author_email=None if principal.is_admin else principal.email,
                skip=request.offset,
                limit=request.page_size,
            )
            window = request.window(total)
        except _HANDLED_ERRORS as e:
            return self._failure(e, MessageKey.GET_FAILED, ArticleListEnvelope)

        return self._envelopes.success(
            MessageKey.GET_SUCCEEDED,
            ArticleListEnvelope,
            pagination=PaginationSchema(
                page_count=window.page_count, page_nums=window.page_nums
            ),
            articles=[
                ArticleSummary.model_validate(a, from_attributes=True) for a in articles
            ],
        )

    # ── Commands ─────────────────────────────────────────────────────

    async def create_article(
        self, principal: Principal | None, data: ArticlePayload
    ) -> ArticleCreatedEnvelope:
        principal = require_authenticated(principal)
        try:
            article = await self._lifecycle.create(principal, data)
        except _HANDLED_ERRORS as e:
            return self._failure(e, MessageKey.ADD_FAILED, ArticleCreatedEnvelope)
        return self._envelopes.success(
            MessageKey.ADD_SUCCEEDED, ArticleCreatedEnvelope, id=article.id
        )

    async def update_article(
        self, principal: Principal | None, article_id: str, data: ArticlePayload
    ) -> ResultEnvelope:
        principal = require_authenticated(principal)
        try:
            await self._lifecycle.update(principal, article_id, data)
        except _HANDLED_ERRORS as e:
            return self._failure(e, MessageKey.UPDATE_FAILED)
        return self._envelopes.success(MessageKey.UPDATE_SUCCEEDED)

    async def remove_article(
        self, principal: Principal | None, article_id: str
    ) -> ResultEnvelope:
        principal = require_authenticated(principal)
        try:
            await self._lifecycle.remove(principal, article_id)
        except _HANDLED_ERRORS as e:
            return self._failure(e, MessageKey.REMOVE_FAILED)
        return self._envelopes.success(MessageKey.REMOVE_SUCCEEDED)

    async def publish_article(
        self, principal: Principal | None, article_id: str
    ) -> ResultEnvelope:
        principal = require_authenticated(principal)
        try:
            await self._lifecycle.publish(principal, article_id)
        except _HANDLED_ERRORS as e:
            return self._failure(e, MessageKey.PUBLISH_FAILED)
        return self._envelopes.success(MessageKey.PUBLISH_SUCCEEDED)

    async def publish_cancel(
        self, principal: Principal | None, article_id: str
    ) -> ResultEnvelope:
        principal = require_authenticated(principal)
        try:
            await self._lifecycle.unpublish(principal, article_id)
        except _HANDLED_ERRORS as e:
            return self._failure(e, MessageKey.UNPUBLISH_FAILED)
        return self._envelopes.success(MessageKey.UNPUBLISH_SUCCEEDED)

    async def put_top(
        self, principal: Principal | None, article_id: str
    ) -> ResultEnvelope:
        principal = require_authenticated(principal)
        try:
            await self._lifecycle.put_top(principal, article_id)
        except _HANDLED_ERRORS as e:
            return self._failure(e, MessageKey.PUT_TOP_FAILED)
        return self._envelopes.success(MessageKey.PUT_TOP_SUCCEEDED)

    async def cancel_top(
        self, principal: Principal | None, article_id: str
    ) -> ResultEnvelope:
        principal = require_authenticated(principal)
        try:
            await self._lifecycle.cancel_top(principal, article_id)
        except _HANDLED_ERRORS as e:
            return self._failure(e, MessageKey.CANCEL_TOP_FAILED)
        return self._envelopes.success(MessageKey.CANCEL_TOP_SUCCEEDED)
