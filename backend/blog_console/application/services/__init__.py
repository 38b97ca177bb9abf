from .article_console import ArticleConsoleService
from .article_lifecycle import ArticleLifecycleService
from .result_envelope import EnvelopeBuilder

__all__ = [
    "ArticleConsoleService",
    "ArticleLifecycleService",
    "EnvelopeBuilder",
]
