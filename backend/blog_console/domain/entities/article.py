"""Domain entities: pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import NAMESPACE_URL, uuid5

# Sign/template reference used when an article has no sign.
NO_SIGN_ID = "0"

_TAG_NAMESPACE = uuid5(NAMESPACE_URL, "blog-console:tag")


class ArticleState(str, Enum):
    """Lifecycle states derived from the published/top flags."""

    DRAFT = "draft"
    PUBLISHED = "published"
    TOPPED = "topped"


@dataclass(frozen=True)
class Tag:
    """A tag reference attached to an article."""

    id: str
    title: str

    @classmethod
    def from_title(cls, title: str) -> "Tag":
        """Build a tag whose id is stable for the same (case-folded) title."""
        title = title.strip()
        return cls(id=str(uuid5(_TAG_NAMESPACE, title.casefold())), title=title)


def parse_tags(raw: str | list[str] | None) -> list[Tag]:
    """Turn ``"tag1, tag2"`` (or a list of titles) into ordered, unique tags."""
    if not raw:
        return []
    titles = raw.split(",") if isinstance(raw, str) else raw
    tags: list[Tag] = []
    seen: set[str] = set()
    for title in titles:
        if not title or not title.strip():
            continue
        tag = Tag.from_title(title)
        if tag.id in seen:
            continue
        seen.add(tag.id)
        tags.append(tag)
    return tags


@dataclass
class Article:
    """Core domain entity representing a blog article.

    ``had_been_published`` only ever goes from False to True.
    """

    title: str
    content: str
    author_email: str = ""
    id: str | None = None
    abstract: str = ""
    permalink: str = ""
    tags: list[Tag] = field(default_factory=list)
    sign_id: str = NO_SIGN_ID
    view_password: str = ""
    commentable: bool = True
    published: bool = False
    had_been_published: bool = False
    put_top: bool = False
    view_count: int = 0
    comment_count: int = 0
    random_double: float = 0.0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def state(self) -> ArticleState:
        if self.put_top:
            return ArticleState.TOPPED
        if self.published:
            return ArticleState.PUBLISHED
        return ArticleState.DRAFT

    @property
    def tag_titles(self) -> str:
        return ",".join(tag.title for tag in self.tags)

    def publish(self) -> None:
        """Mark the article published; repeat calls only refresh updated_at."""
        self.published = True
        self.had_been_published = True
        self._touch()

    def unpublish(self) -> None:
        """Return the article to draft. had_been_published is left alone."""
        self.published = False
        self._touch()

    def top(self) -> None:
        self.put_top = True
        self._touch()

    def untop(self) -> None:
        self.put_top = False
        self._touch()

    def update(
        self,
        title: str | None = None,
        abstract: str | None = None,
        content: str | None = None,
        permalink: str | None = None,
        tags: list[Tag] | None = None,
        sign_id: str | None = None,
        view_password: str | None = None,
        commentable: bool | None = None,
    ) -> None:
        """Update content fields and refresh the updated_at timestamp."""
        if title is not None:
            self.title = title
        if abstract is not None:
            self.abstract = abstract
        if content is not None:
            self.content = content
        if permalink is not None:
            self.permalink = permalink
        if tags is not None:
            self.tags = list(tags)
        if sign_id is not None:
            self.sign_id = sign_id
        if view_password is not None:
            self.view_password = view_password
        if commentable is not None:
            self.commentable = commentable
        self._touch()

    def default_permalink(self) -> str:
        """Permalink derived from the creation date and id."""
        return f"/articles/{self.created_at:%Y/%m/%d}/{self.id}.html"

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
