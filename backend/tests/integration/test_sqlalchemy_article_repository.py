"""Integration tests for SQLAlchemyArticleRepository on in-memory SQLite."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blog_console.domain.entities import Article, parse_tags
from blog_console.domain.exceptions import CollaboratorError
from blog_console.infrastructure.database import Base
from blog_console.infrastructure.database.repositories import SQLAlchemyArticleRepository


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as s:
        yield s
    await engine.dispose()


@pytest.fixture
def repository(session: AsyncSession) -> SQLAlchemyArticleRepository:
    return SQLAlchemyArticleRepository(session)


def _article(title: str, author: str = "owner@example.com", **kwargs) -> Article:
    return Article(title=title, content="Body", author_email=author, **kwargs)


@pytest.mark.asyncio
async def test_create_assigns_id_and_round_trips_tags(repository: SQLAlchemyArticleRepository):
    created = await repository.create(_article("Hello", tags=parse_tags("a,b")))
    assert created.id is not None

    loaded = await repository.get_by_id(created.id)
    assert loaded.title == "Hello"
    assert [t.title for t in loaded.tags] == ["a", "b"]
    assert loaded.tags[0].id == created.tags[0].id
    assert loaded.sign_id == "0"


@pytest.mark.asyncio
async def test_update_persists_lifecycle_flags(repository: SQLAlchemyArticleRepository):
    created = await repository.create(_article("Hello"))
    created.publish()
    created.unpublish()
    created.top()
    await repository.update(created)

    loaded = await repository.get_by_id(created.id)
    assert not loaded.published
    assert loaded.had_been_published
    assert loaded.put_top


@pytest.mark.asyncio
async def test_get_by_permalink(repository: SQLAlchemyArticleRepository):
    created = await repository.create(_article("Hello", permalink="/hello"))
    found = await repository.get_by_permalink("/hello")
    assert found.id == created.id
    assert await repository.get_by_permalink("/missing") is None


@pytest.mark.asyncio
async def test_list_by_status_orders_and_counts(repository: SQLAlchemyArticleRepository):
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for i in range(4):
        article = _article(f"P{i}", published=True, updated_at=base + timedelta(days=i))
        await repository.create(article)
    await repository.create(_article("Pinned", published=True, put_top=True, updated_at=base))
    await repository.create(_article("Draft"))
    await repository.create(_article("Other", author="other@example.com", published=True))

    items, total = await repository.list_by_status(
        published=True, author_email="owner@example.com", skip=0, limit=3
    )
    assert total == 5
    assert [a.title for a in items] == ["Pinned", "P3", "P2"]

    items, total = await repository.list_by_status(published=False)
    assert total == 1
    assert items[0].title == "Draft"


@pytest.mark.asyncio
async def test_delete(repository: SQLAlchemyArticleRepository):
    created = await repository.create(_article("Bye"))
    assert await repository.delete(created.id) is True
    assert await repository.delete(created.id) is False
    assert await repository.get_by_id(created.id) is None


@pytest.mark.asyncio
async def test_database_errors_become_collaborator_errors():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as s:
        repository = SQLAlchemyArticleRepository(s)
        with pytest.raises(CollaboratorError):
            await repository.get_by_id("no-table-yet")
    await engine.dispose()


@pytest.mark.asyncio
async def test_commit_makes_writes_visible_to_a_new_session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as first:
        repository = SQLAlchemyArticleRepository(first)
        created = await repository.create(_article("Kept"))
        await repository.commit()

    async with factory() as second:
        loaded = await SQLAlchemyArticleRepository(second).get_by_id(created.id)
    assert loaded is not None
    assert loaded.title == "Kept"
    await engine.dispose()
