from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.database import get_db
from core.targets import ChapterTarget, ProjectTarget
from crud.like_crud import toggle_like
from schemas.like_schema import LikeToggleResponse
from core.auth import get_current_user


router = APIRouter(tags=["Likes"])


@router.post("/projects/{project_id}/likes", response_model=LikeToggleResponse)
def toggle_project_like(project_id: str, db: Session = Depends(get_db), current_user = Depends(get_current_user)):
    liked = toggle_like(db, current_user.id, ProjectTarget(project_id))
    return LikeToggleResponse(liked=liked)


@router.post("/chapters/{chapter_id}/likes", response_model=LikeToggleResponse)
def toggle_chapter_like(chapter_id: str, db: Session = Depends(get_db), current_user = Depends(get_current_user)):
    liked = toggle_like(db, current_user.id, ChapterTarget(chapter_id))
    return LikeToggleResponse(liked=liked)
