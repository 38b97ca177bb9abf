"""Unit tests for the ArticleLifecycleService."""

import pytest

from blog_console.application.schemas import ArticlePayload
from blog_console.application.services import ArticleLifecycleService
from blog_console.domain.entities import NO_SIGN_ID, Article, Principal
from blog_console.domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)
from tests.fakes import FakeArticleRepository

ADMIN = Principal(email="admin@example.com", name="Admin", is_admin=True)
OWNER = Principal(email="owner@example.com", name="Owner")
STRANGER = Principal(email="stranger@example.com", name="Stranger")


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def service(repository: FakeArticleRepository) -> ArticleLifecycleService:
    return ArticleLifecycleService(repository)


@pytest.fixture
def draft(repository: FakeArticleRepository) -> Article:
    return repository.add(
        Article(title="Draft", content="Body", author_email=OWNER.email)
    )


def _payload(**kwargs) -> ArticlePayload:
    defaults = {"title": "Hello", "content": "World"}
    defaults.update(kwargs)
    return ArticlePayload(**defaults)


# ── create ───────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_create_assigns_author_and_id(service: ArticleLifecycleService):
    article = await service.create(STRANGER, _payload(tags="a,b"))
    assert article.id is not None
    assert article.author_email == STRANGER.email
    assert [t.title for t in article.tags] == ["a", "b"]
    assert not article.published


@pytest.mark.asyncio
async def test_create_without_sign_persists_no_sign(
    service: ArticleLifecycleService, repository: FakeArticleRepository
):
    article = await service.create(OWNER, _payload())
    assert repository.stored(article.id).sign_id == NO_SIGN_ID


@pytest.mark.asyncio
async def test_create_keeps_given_sign(
    service: ArticleLifecycleService, repository: FakeArticleRepository
):
    article = await service.create(OWNER, _payload(sign_id="sign-2"))
    assert repository.stored(article.id).sign_id == "sign-2"


@pytest.mark.asyncio
async def test_create_published_marks_had_been_published(service: ArticleLifecycleService):
    article = await service.create(OWNER, _payload(is_published=True))
    assert article.published
    assert article.had_been_published


@pytest.mark.asyncio
async def test_create_derives_permalink(
    service: ArticleLifecycleService, repository: FakeArticleRepository
):
    article = await service.create(OWNER, _payload())
    stored = repository.stored(article.id)
    assert stored.permalink == stored.default_permalink()
    assert stored.permalink.endswith(f"/{article.id}.html")


@pytest.mark.asyncio
async def test_create_normalizes_permalink(service: ArticleLifecycleService):
    article = await service.create(OWNER, _payload(permalink="hello-world"))
    assert article.permalink == "/hello-world"


@pytest.mark.asyncio
async def test_create_rejects_duplicate_permalink(service: ArticleLifecycleService):
    await service.create(OWNER, _payload(permalink="/taken"))
    with pytest.raises(DuplicateEntityError):
        await service.create(STRANGER, _payload(permalink="/taken"))


@pytest.mark.asyncio
async def test_create_requires_title_and_content(service: ArticleLifecycleService):
    with pytest.raises(InvalidArgumentError) as exc_info:
        await service.create(OWNER, _payload(title="   "))
    assert exc_info.value.message_key == "title_required"

    with pytest.raises(InvalidArgumentError) as exc_info:
        await service.create(OWNER, _payload(content=""))
    assert exc_info.value.message_key == "content_required"


@pytest.mark.asyncio
async def test_create_requires_principal(service: ArticleLifecycleService):
    with pytest.raises(AuthenticationError):
        await service.create(None, _payload())


# ── publish / unpublish ──────────────────────────────────────────────

@pytest.mark.asyncio
async def test_publish_then_unpublish_keeps_marker(
    service: ArticleLifecycleService, draft: Article
):
    await service.publish(OWNER, draft.id)
    article = await service.unpublish(OWNER, draft.id)
    assert not article.published
    assert article.had_been_published


@pytest.mark.asyncio
async def test_unpublish_draft_is_a_noop(service: ArticleLifecycleService, draft: Article):
    article = await service.unpublish(OWNER, draft.id)
    assert not article.published
    assert not article.had_been_published


@pytest.mark.asyncio
async def test_publish_twice_is_idempotent(
    service: ArticleLifecycleService, repository: FakeArticleRepository, draft: Article
):
    first = await service.publish(OWNER, draft.id)
    second = await service.publish(ADMIN, draft.id)
    assert second.published and second.had_been_published
    assert second.updated_at >= first.updated_at
    assert repository.update_calls == 2


@pytest.mark.asyncio
async def test_stranger_cannot_unpublish(
    service: ArticleLifecycleService, repository: FakeArticleRepository, draft: Article
):
    await service.publish(OWNER, draft.id)
    with pytest.raises(AuthorizationError):
        await service.unpublish(STRANGER, draft.id)
    assert repository.stored(draft.id).published


@pytest.mark.asyncio
async def test_publish_missing_article(service: ArticleLifecycleService):
    with pytest.raises(EntityNotFoundError):
        await service.publish(ADMIN, "missing")


# ── top / untop ──────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_owner_cannot_put_top(
    service: ArticleLifecycleService, repository: FakeArticleRepository, draft: Article
):
    with pytest.raises(AuthorizationError):
        await service.put_top(OWNER, draft.id)
    assert not repository.stored(draft.id).put_top


@pytest.mark.asyncio
async def test_non_admin_denied_before_lookup(service: ArticleLifecycleService):
    with pytest.raises(AuthorizationError):
        await service.cancel_top(STRANGER, "missing")


@pytest.mark.asyncio
async def test_admin_tops_someone_elses_article(
    service: ArticleLifecycleService, repository: FakeArticleRepository, draft: Article
):
    await service.put_top(ADMIN, draft.id)
    assert repository.stored(draft.id).put_top

    await service.cancel_top(ADMIN, draft.id)
    assert not repository.stored(draft.id).put_top


# ── update / remove ──────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_update_without_publish_flag_keeps_state(
    service: ArticleLifecycleService, draft: Article
):
    await service.publish(OWNER, draft.id)
    article = await service.update(OWNER, draft.id, _payload(title="Renamed"))
    assert article.title == "Renamed"
    assert article.published


@pytest.mark.asyncio
async def test_update_with_publish_flag_transitions(
    service: ArticleLifecycleService, draft: Article
):
    article = await service.update(OWNER, draft.id, _payload(is_published=True))
    assert article.published and article.had_been_published

    article = await service.update(OWNER, draft.id, _payload(is_published=False))
    assert not article.published
    assert article.had_been_published


@pytest.mark.asyncio
async def test_update_resets_missing_sign(
    service: ArticleLifecycleService, repository: FakeArticleRepository, draft: Article
):
    await service.update(OWNER, draft.id, _payload(sign_id="sign-1"))
    assert repository.stored(draft.id).sign_id == "sign-1"
    await service.update(OWNER, draft.id, _payload())
    assert repository.stored(draft.id).sign_id == NO_SIGN_ID


@pytest.mark.asyncio
async def test_update_keeps_permalink_when_blank(
    service: ArticleLifecycleService, draft: Article
):
    await service.update(OWNER, draft.id, _payload(permalink="/mine"))
    article = await service.update(OWNER, draft.id, _payload(permalink=""))
    assert article.permalink == "/mine"


@pytest.mark.asyncio
async def test_update_by_stranger_is_forbidden(
    service: ArticleLifecycleService, repository: FakeArticleRepository, draft: Article
):
    with pytest.raises(AuthorizationError):
        await service.update(STRANGER, draft.id, _payload(title="Hijacked"))
    assert repository.stored(draft.id).title == "Draft"


@pytest.mark.asyncio
async def test_remove(service: ArticleLifecycleService, draft: Article):
    with pytest.raises(AuthorizationError):
        await service.remove(STRANGER, draft.id)

    await service.remove(OWNER, draft.id)
    with pytest.raises(EntityNotFoundError):
        await service.get(ADMIN, draft.id)
