"""Abstract repository interfaces (ports): define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog_console.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence: implemented in the infrastructure layer.

    Implementations raise ``CollaboratorError`` when the backing store fails.
    """

    @abstractmethod
    async def get_by_id(self, article_id: str) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_by_permalink(self, permalink: str) -> Article | None:
        """Retrieve the article published under ``permalink``, if any."""
        ...

    @abstractmethod
    async def list_by_status(
        self,
        *,
        published: bool,
        author_email: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[list[Article], int]:
        """Return one page of articles with the given status and the total count.

        Topped articles come first, then the most recently updated.
        ``author_email`` restricts the listing to one author.
        """
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Update an existing article."""
        ...

    @abstractmethod
    async def delete(self, article_id: str) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make the writes of the current unit of work durable."""
        ...
