"""Response envelopes: every console operation returns exactly one of these."""

from pydantic import BaseModel, Field

from blog_console.application.schemas.article import ArticleResponse, ArticleSummary


class ResultEnvelope(BaseModel):
    """Uniform success/failure shape shared by all console responses."""

    success: bool
    message_key: str
    message: str


class ArticleEnvelope(ResultEnvelope):
    article: ArticleResponse | None = None


class ArticleCreatedEnvelope(ResultEnvelope):
    id: str | None = None


class PaginationSchema(BaseModel):
    page_count: int
    page_nums: list[int] = Field(default_factory=list)


class ArticleListEnvelope(ResultEnvelope):
    pagination: PaginationSchema | None = None
    articles: list[ArticleSummary] = Field(default_factory=list)
