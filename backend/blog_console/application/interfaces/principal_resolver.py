"""Port for resolving the acting principal of a console request."""

from abc import ABC, abstractmethod

from blog_console.domain.entities import Principal


class PrincipalResolver(ABC):
    """Maps request credentials to a ``Principal`` (or ``None`` when anonymous)."""

    @abstractmethod
    def resolve(self, authorization: str | None) -> Principal | None:
        """Resolve the principal from the raw ``Authorization`` header value."""
        ...
