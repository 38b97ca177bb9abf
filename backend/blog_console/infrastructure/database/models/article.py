"""SQLAlchemy ORM model for the Article entity."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog_console.infrastructure.database.base import Base


class ArticleModel(Base):
    """ORM model: maps to the 'articles' table."""

    __tablename__ = "articles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    abstract: Mapped[str] = mapped_column(Text, nullable=False, default="")
    content: Mapped[str] = mapped_column(Text, nullable=False)
    permalink: Mapped[str] = mapped_column(String(255), nullable=False, default="", index=True)
    # Ordered list of {"id": ..., "title": ...}
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    sign_id: Mapped[str] = mapped_column(String(36), nullable=False, default="0")
    view_password: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    commentable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    had_been_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    put_top: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    author_email: Mapped[str] = mapped_column(String(255), nullable=False)
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    comment_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    random_double: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_articles_listing", "published", "put_top", "updated_at"),
        Index("ix_articles_author", "author_email"),
    )

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id}, title='{self.title}', published={self.published})>"
