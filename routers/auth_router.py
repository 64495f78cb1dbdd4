from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from core.auth import get_bearer_token, get_current_user
from core.database import get_db
from core.errors import UnauthenticatedError
from crud.session_crud import create_session, delete_session_by_token
from crud.user_crud import authenticate, create_user
from schemas.auth_schema import AuthTokenResponse, LoginRequest
from schemas.common_schema import OkResponse
from schemas.user_schema import UserCreate, UserResponse

router = APIRouter(tags=["Authentication"])


@router.post("/register", response_model=UserResponse, status_code=201)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    return create_user(db, payload)


@router.post("/auth/login", response_model=AuthTokenResponse)
def login(body: LoginRequest, request: Request, db: Session = Depends(get_db)):
    """
    Verify e-mail and password and issue a bearer token.
    """
    user = authenticate(db, body.email, body.password)
    if not user:
        raise UnauthenticatedError("Invalid email or password")

    ip = request.client.host if request.client else None
    ua = request.headers.get("user-agent")
    session = create_session(db, user_id=user.id, ip_address=ip, user_agent=ua)
    return AuthTokenResponse(access_token=session.token, user=user)


@router.post("/auth/logout", response_model=OkResponse)
def logout(
    token: str = Depends(get_bearer_token),
    db: Session = Depends(get_db),
    current_user = Depends(get_current_user),
):
    delete_session_by_token(db, token)
    return OkResponse()


@router.get("/auth/me", response_model=UserResponse)
def get_me(current_user = Depends(get_current_user)):
    return current_user
