"""Bearer-token principal resolver backed by PyJWT.

Expected claims:
    sub / email   the principal's email (author identity)
    name          display name (optional)
    role          "admin" grants admin rights; ``admin: true`` is accepted too
"""

import logging
from typing import Any

import jwt

from blog_console.application.interfaces import PrincipalResolver
from blog_console.domain.entities import Principal

logger = logging.getLogger(__name__)

_BEARER_PREFIX = "Bearer "


def encode_token(claims: dict[str, Any], secret: str, algorithm: str = "HS256") -> str:
    """Sign ``claims`` into a token the resolver accepts."""
    return jwt.encode(claims, secret, algorithm=algorithm)


class JWTPrincipalResolver(PrincipalResolver):
    def __init__(self, secret: str, algorithm: str = "HS256"):
        self._secret = secret
        self._algorithm = algorithm

    def resolve(self, authorization: str | None) -> Principal | None:
        if not authorization or not authorization.startswith(_BEARER_PREFIX):
            return None
        token = authorization[len(_BEARER_PREFIX):].strip()
        try:
            claims = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.PyJWTError as exc:
            logger.info("Rejected bearer token: %s", exc)
            return None

        email = claims.get("email") or claims.get("sub")
        if not email:
            logger.info("Bearer token carries no subject")
            return None
        return Principal(
            email=email,
            name=claims.get("name", ""),
            is_admin=claims.get("role") == "admin" or claims.get("admin") is True,
        )
