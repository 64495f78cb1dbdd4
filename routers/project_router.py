from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.database import get_db
from crud.project_crud import list_projects, get_project, create_project, update_project, delete_project
from schemas.common_schema import OkResponse
from schemas.project_schema import ProjectCreate, ProjectList, ProjectResponse, ProjectUpdate
from core.auth import get_current_user


router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=ProjectList)
def list_all(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user = Depends(get_current_user),
):
    return {"items": list_projects(db, user_id=current_user.id, skip=skip, limit=limit)}


@router.get("/{project_id}", response_model=ProjectResponse)
def read_one(project_id: str, db: Session = Depends(get_db), current_user = Depends(get_current_user)):
    return get_project(db, project_id, user_id=current_user.id)


@router.post("", response_model=ProjectResponse, status_code=201)
def create(payload: ProjectCreate, db: Session = Depends(get_db), current_user = Depends(get_current_user)):
    return create_project(db, payload, user_id=current_user.id)


@router.put("/{project_id}", response_model=ProjectResponse)
def update(
    project_id: str,
    payload: ProjectUpdate,
    db: Session = Depends(get_db),
    current_user = Depends(get_current_user),
):
    return update_project(db, project_id, payload, user_id=current_user.id)


@router.delete("/{project_id}", response_model=OkResponse)
def delete(project_id: str, db: Session = Depends(get_db), current_user = Depends(get_current_user)):
    delete_project(db, project_id, user_id=current_user.id)
    return OkResponse()
