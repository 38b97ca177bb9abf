from .article import (
    ArticlePayload,
    ArticleRequest,
    ArticleResponse,
    ArticleSummary,
    TagSchema,
)
from .envelope import (
    ArticleCreatedEnvelope,
    ArticleEnvelope,
    ArticleListEnvelope,
    PaginationSchema,
    ResultEnvelope,
)

__all__ = [
    "ArticlePayload",
    "ArticleRequest",
    "ArticleResponse",
    "ArticleSummary",
    "TagSchema",
    "ArticleCreatedEnvelope",
    "ArticleEnvelope",
    "ArticleListEnvelope",
    "PaginationSchema",
    "ResultEnvelope",
]
