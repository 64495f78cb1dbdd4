from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.database import get_db
from core.targets import ChapterTarget, ProjectTarget
from crud.comment_crud import create_comment, list_comments
from schemas.comment_schema import CommentCreate, CommentResponse
from core.auth import get_current_user


router = APIRouter(tags=["Comments"])


@router.get("/projects/{project_id}/comments", response_model=list[CommentResponse])
def list_project_comments(project_id: str, db: Session = Depends(get_db)):
    return list_comments(db, ProjectTarget(project_id))


@router.post("/projects/{project_id}/comments", response_model=CommentResponse, status_code=201)
def create_project_comment(
    project_id: str,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    current_user = Depends(get_current_user),
):
    return create_comment(db, current_user.id, ProjectTarget(project_id), payload.content)


@router.get("/chapters/{chapter_id}/comments", response_model=list[CommentResponse])
def list_chapter_comments(chapter_id: str, db: Session = Depends(get_db)):
    return list_comments(db, ChapterTarget(chapter_id))


@router.post("/chapters/{chapter_id}/comments", response_model=CommentResponse, status_code=201)
def create_chapter_comment(
    chapter_id: str,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    current_user = Depends(get_current_user),
):
    return create_comment(db, current_user.id, ChapterTarget(chapter_id), payload.content)
