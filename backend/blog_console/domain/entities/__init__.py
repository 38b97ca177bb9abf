from .article import NO_SIGN_ID, Article, ArticleState, Tag, parse_tags
from .principal import Principal

__all__ = [
    "NO_SIGN_ID",
    "Article",
    "ArticleState",
    "Tag",
    "parse_tags",
    "Principal",
]
