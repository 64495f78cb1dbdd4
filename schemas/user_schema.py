from datetime import datetime
from pydantic import BaseModel, Field

from schemas.common_schema import Title

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserBase(BaseModel):
    email: str
    name: str | None = None


class UserCreate(BaseModel):
    email: str = Field(pattern=EMAIL_PATTERN, max_length=255)
    password: str = Field(min_length=6, max_length=128)
    name: Title


class UserResponse(UserBase):
    id: str
    created_at: datetime | None = None

    model_config = {
        "from_attributes": True,
    }


class UserSummary(BaseModel):
    """Author details shown next to comments."""
    id: str
    name: str | None = None
    email: str

    model_config = {"from_attributes": True}
