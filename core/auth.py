from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from core.database import get_db
from core.errors import UnauthenticatedError
from crud.session_crud import get_session_by_token
from crud.user_crud import get_user


def _extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def get_bearer_token(authorization: Optional[str] = Header(None)) -> str:
    token = _extract_bearer_token(authorization)
    if not token:
        raise UnauthenticatedError()
    return token


def get_current_user(
    token: str = Depends(get_bearer_token),
    db: Session = Depends(get_db),
):
    """Resolve the caller from the bearer token of the current request."""
    s = get_session_by_token(db, token)
    if not s:
        raise UnauthenticatedError("Invalid token")

    # Check expiry
    now = datetime.now(timezone.utc)
    exp = s.expires_at
    if exp.tzinfo is None:
        exp = exp.replace(tzinfo=timezone.utc)
    if exp < now:
        raise UnauthenticatedError("Token expired")

    user = get_user(db, s.user_id)
    if not user:
        raise UnauthenticatedError("User not found")
    return user
