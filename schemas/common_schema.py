from typing import Annotated
from pydantic import AfterValidator, BaseModel, Field


class OkResponse(BaseModel):
    ok: bool = True


def non_blank(value: str) -> str:
    """Trim a text field and reject it when nothing is left."""
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


Title = Annotated[str, Field(max_length=255), AfterValidator(non_blank)]
