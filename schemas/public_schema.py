from datetime import datetime
from pydantic import BaseModel


class OwnerSummary(BaseModel):
    id: str
    name: str | None = None

    model_config = {"from_attributes": True}


class PublicChapter(BaseModel):
    id: str
    title: str
    index: int
    content_html: str | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class PublicProject(BaseModel):
    """Reader-facing projection: published chapters only."""
    id: str
    title: str
    synopsis: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    owner: OwnerSummary
    published_chapter_count: int
    like_count: int
    comment_count: int
    chapters: list[PublicChapter]
