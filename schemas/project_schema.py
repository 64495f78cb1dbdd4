from datetime import datetime
from pydantic import BaseModel, Field

from models.project import Visibility
from schemas.common_schema import Title


class ProjectBase(BaseModel):
    title: Title
    synopsis: str | None = Field(default=None, max_length=10_000)
    visibility: Visibility | None = None


class ProjectCreate(ProjectBase):
    """Client payload for creating a project. Owner is inferred from auth."""
    pass


class ProjectUpdate(BaseModel):
    title: Title | None = None
    synopsis: str | None = Field(default=None, max_length=10_000)
    visibility: Visibility | None = None


class ProjectResponse(BaseModel):
    id: str
    owner_id: str
    title: str
    synopsis: str | None = None
    visibility: Visibility
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class ProjectList(BaseModel):
    items: list[ProjectResponse]
