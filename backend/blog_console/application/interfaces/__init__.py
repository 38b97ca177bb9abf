from .article_repository import ArticleRepository
from .localizer import Localizer
from .principal_resolver import PrincipalResolver

__all__ = [
    "ArticleRepository",
    "Localizer",
    "PrincipalResolver",
]
