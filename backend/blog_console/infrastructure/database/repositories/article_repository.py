"""Concrete repository implementation backed by SQLAlchemy."""

import random
from collections.abc import Iterator
from contextlib import contextmanager
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_console.application.interfaces import ArticleRepository
from blog_console.domain.entities import Article, Tag
from blog_console.domain.exceptions import CollaboratorError
from blog_console.infrastructure.database.models import ArticleModel


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as ``CollaboratorError`` (original chained)."""
    try:
        yield
    except SQLAlchemyError as exc:
        raise CollaboratorError("database", operation) from exc


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            abstract=model.abstract,
            content=model.content,
            permalink=model.permalink,
            tags=[Tag(id=t["id"], title=t["title"]) for t in model.tags or []],
            sign_id=model.sign_id,
            view_password=model.view_password,
            commentable=model.commentable,
            published=model.published,
            had_been_published=model.had_been_published,
            put_top=model.put_top,
            author_email=model.author_email,
            view_count=model.view_count,
            comment_count=model.comment_count,
            random_double=model.random_double,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _apply(entity: Article, model: ArticleModel) -> None:
        """Copy the fields the console may change onto ``model``."""
        model.title = entity.title
        model.abstract = entity.abstract
        model.content = entity.content
        model.permalink = entity.permalink
        model.tags = [{"id": t.id, "title": t.title} for t in entity.tags]
        model.sign_id = entity.sign_id
        model.view_password = entity.view_password
        model.commentable = entity.commentable
        model.published = entity.published
        model.had_been_published = entity.had_been_published
        model.put_top = entity.put_top
        model.updated_at = entity.updated_at

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        model = ArticleModel(
            id=entity.id or str(uuid4()),
            author_email=entity.author_email,
            view_count=0,
            comment_count=0,
            random_double=random.random(),
            created_at=entity.created_at,
        )
        self._apply(entity, model)
        return model

    async def get_by_id(self, article_id: str) -> Article | None:
        with _storage_errors("get article"):
            result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_by_permalink(self, permalink: str) -> Article | None:
        stmt = select(ArticleModel).where(ArticleModel.permalink == permalink).limit(1)
        with _storage_errors("get article by permalink"):
            result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def list_by_status(
        self,
        *,
        published: bool,
        author_email: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[list[Article], int]:
        conditions = [ArticleModel.published == published]
        if author_email is not None:
            conditions.append(ArticleModel.author_email == author_email)

        count_stmt = select(func.count()).select_from(ArticleModel).where(*conditions)
        stmt = (
            select(ArticleModel)
            .where(*conditions)
            .order_by(ArticleModel.put_top.desc(), ArticleModel.updated_at.desc())
            .offset(skip)
            .limit(limit)
        )
        with _storage_errors("list articles"):
            total = (await self._session.execute(count_stmt)).scalar_one()
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()], total

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        with _storage_errors("create article"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        with _storage_errors("update article"):
            model = await self._session.get(ArticleModel, article.id)
            if model is None:
                raise ValueError(f"Article {article.id} not found in database")
            self._apply(article, model)
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, article_id: str) -> bool:
        with _storage_errors("delete article"):
            model = await self._session.get(ArticleModel, article_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True

    async def commit(self) -> None:
        with _storage_errors("commit"):
            await self._session.commit()
