"""Domain entity for the authenticated actor of a console request."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """The authenticated user performing an operation.

    Ownership is not stored here: a principal owns an article when its
    email matches the article's ``author_email``.
    """

    email: str
    name: str = ""
    is_admin: bool = False
