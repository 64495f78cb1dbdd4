from datetime import datetime
from typing import Any
from pydantic import AliasChoices, BaseModel, Field, model_validator

from models.chapter import ChapterStatus
from schemas.common_schema import Title

# The editor sends its document either as "content" or "contentJson"
_CONTENT_ALIASES = AliasChoices("content", "contentJson", "content_json")


class ChapterCreate(BaseModel):
    project_id: str = Field(min_length=1, validation_alias=AliasChoices("projectId", "project_id"))
    title: Title
    content: dict[str, Any] | None = Field(default=None, validation_alias=_CONTENT_ALIASES)
    status: ChapterStatus | None = None


class ChapterUpdate(BaseModel):
    title: Title | None = None
    content: dict[str, Any] | None = Field(default=None, validation_alias=_CONTENT_ALIASES)
    status: ChapterStatus | None = None

    @model_validator(mode="after")
    def _at_least_one_field(self):
        if not self.model_fields_set:
            raise ValueError("No fields to update")
        return self


class ChapterReorder(BaseModel):
    project_id: str = Field(min_length=1, validation_alias=AliasChoices("projectId", "project_id"))
    ordered_chapter_ids: list[str] = Field(
        validation_alias=AliasChoices("orderedChapterIds", "ordered_chapter_ids"),
    )


class ChapterResponse(BaseModel):
    id: str
    project_id: str
    index: int
    title: str
    content_json: dict[str, Any] | None = None
    content_html: str | None = None
    content_text: str | None = None
    status: ChapterStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class ChapterList(BaseModel):
    items: list[ChapterResponse]
