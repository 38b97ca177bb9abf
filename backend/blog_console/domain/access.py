"""Access gate: who may view or mutate an article.

Two policies cover every console operation:

- *owner or admin* for per-article reads, edits, removal and (un)publishing;
- *admin only* for putting an article on top and cancelling it.
"""

from blog_console.domain.entities import Article, Principal
from blog_console.domain.exceptions import AuthenticationError, AuthorizationError


def require_authenticated(principal: Principal | None) -> Principal:
    """Return the principal, or raise when the request is anonymous."""
    if principal is None:
        raise AuthenticationError()
    return principal


def can_access(principal: Principal, article: Article) -> bool:
    return principal.is_admin or principal.email == article.author_email


def require_admin(principal: Principal, action: str = "perform admin actions") -> None:
    if not principal.is_admin:
        raise AuthorizationError(principal.email, action)


def require_access(principal: Principal, article: Article, action: str = "access") -> None:
    if not can_access(principal, article):
        raise AuthorizationError(principal.email, action, article.id)
