from datetime import datetime
from pydantic import BaseModel

from schemas.user_schema import UserSummary


class CommentCreate(BaseModel):
    content: str


class CommentResponse(BaseModel):
    id: str
    content: str
    user_id: str
    project_id: str
    chapter_id: str | None = None
    created_at: datetime | None = None
    user: UserSummary

    model_config = {"from_attributes": True}
