from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from core.database import get_db
from crud.chapter_crud import (
    create_chapter,
    delete_chapter,
    get_chapter,
    list_chapters,
    reorder_chapters,
    update_chapter,
)
from schemas.chapter_schema import ChapterCreate, ChapterList, ChapterReorder, ChapterResponse, ChapterUpdate
from schemas.common_schema import OkResponse
from core.auth import get_current_user


router = APIRouter(prefix="/chapters", tags=["Chapters"])


@router.get("", response_model=ChapterList)
def list_all(
    project_id: str = Query(..., alias="projectId"),
    db: Session = Depends(get_db),
    current_user = Depends(get_current_user),
):
    return {"items": list_chapters(db, project_id, user_id=current_user.id)}


@router.post("", response_model=ChapterResponse, status_code=201)
def create(payload: ChapterCreate, db: Session = Depends(get_db), current_user = Depends(get_current_user)):
    return create_chapter(db, payload, user_id=current_user.id)


# Declared before /{chapter_id} so "reorder" is not taken for an id
@router.put("/reorder", response_model=OkResponse)
def reorder(payload: ChapterReorder, db: Session = Depends(get_db), current_user = Depends(get_current_user)):
    reorder_chapters(db, payload.project_id, payload.ordered_chapter_ids, user_id=current_user.id)
    return OkResponse()


@router.get("/{chapter_id}", response_model=ChapterResponse)
def read_one(chapter_id: str, db: Session = Depends(get_db), current_user = Depends(get_current_user)):
    return get_chapter(db, chapter_id, user_id=current_user.id)


@router.put("/{chapter_id}", response_model=ChapterResponse)
def update(
    chapter_id: str,
    payload: ChapterUpdate,
    db: Session = Depends(get_db),
    current_user = Depends(get_current_user),
):
    return update_chapter(db, chapter_id, payload, user_id=current_user.id)


@router.delete("/{chapter_id}", response_model=OkResponse)
def delete(chapter_id: str, db: Session = Depends(get_db), current_user = Depends(get_current_user)):
    delete_chapter(db, chapter_id, user_id=current_user.id)
    return OkResponse()
