from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.database import get_db
from crud.public_crud import get_public_project_view, list_public_projects
from schemas.public_schema import PublicProject


router = APIRouter(prefix="/public", tags=["Public"])


@router.get("", response_model=list[PublicProject])
def list_all(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return list_public_projects(db, skip=skip, limit=limit)


@router.get("/{project_id}", response_model=PublicProject)
def read_one(project_id: str, db: Session = Depends(get_db)):
    return get_public_project_view(db, project_id)
