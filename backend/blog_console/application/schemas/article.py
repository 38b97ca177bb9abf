"""Pydantic DTOs (Data Transfer Objects) for the Article console."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field


class ArticlePayload(BaseModel):
    """Article fields accepted on create and update.

    ``tags`` is the comma-separated tag string the console editor sends.
    Omitting ``sign_id`` selects the "no sign" template.
    A missing title or content is left blank and rejected by the lifecycle
    with its own message key.
    """

    title: str = Field("", max_length=255, examples=["Hello Solo"])
    abstract: str = ""
    content: str = Field("", examples=["First post."])
    tags: str = Field("", examples=["python,blog"])
    permalink: str | None = None
    is_published: bool | None = None
    sign_id: str | None = None
    commentable: bool = True
    view_password: str = ""


class ArticleRequest(BaseModel):
    """Request body wrapping the article payload."""

    article: ArticlePayload


class TagSchema(BaseModel):
    id: str
    title: str

    model_config = {"from_attributes": True}


class ArticleResponse(BaseModel):
    """Full article as returned to the editor."""

    id: str
    title: str
    abstract: str
    content: str
    permalink: str
    tags: list[TagSchema]
    sign_id: str
    view_password: str
    commentable: bool
    published: bool
    had_been_published: bool
    put_top: bool
    author_email: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ArticleSummary(BaseModel):
    """Lightweight article representation for list views."""

    id: str
    title: str
    tags: str = Field(..., validation_alias=AliasChoices("tag_titles", "tags"))
    comment_count: int
    view_count: int
    created_at: datetime
    put_top: bool
    published: bool

    model_config = {"from_attributes": True}
