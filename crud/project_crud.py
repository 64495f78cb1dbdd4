import logging

from sqlalchemy.orm import Session
from sqlalchemy import desc

from core.database import atomic
from crud.access import get_owned_project
from models.project import Project, Visibility
from schemas.project_schema import ProjectCreate, ProjectUpdate

logger = logging.getLogger("uwrite")


def get_project(db: Session, project_id: str, user_id: str):
    return get_owned_project(db, project_id, user_id)


def list_projects(db: Session, user_id: str, skip: int = 0, limit: int = 100):
    q = db.query(Project).filter(Project.owner_id == user_id)
    return q.order_by(desc(Project.updated_at)).offset(skip).limit(limit).all()


def create_project(db: Session, payload: ProjectCreate, user_id: str):
    proj = Project(
        owner_id=user_id,
        title=payload.title,
        synopsis=payload.synopsis,
        visibility=payload.visibility or Visibility.PRIVATE,
    )
    with atomic(db):
        db.add(proj)
    db.refresh(proj)
    logger.info("Created project %s for user %s", proj.id, user_id)
    return proj


def update_project(db: Session, project_id: str, payload: ProjectUpdate, user_id: str):
    proj = get_owned_project(db, project_id, user_id)
    with atomic(db):
        if payload.title is not None:
            proj.title = payload.title
        if "synopsis" in payload.model_fields_set:
            proj.synopsis = payload.synopsis
        if payload.visibility is not None:
            proj.visibility = payload.visibility
    db.refresh(proj)
    return proj


def delete_project(db: Session, project_id: str, user_id: str) -> bool:
    proj = get_owned_project(db, project_id, user_id)
    # Chapters, likes and comments go with it through ON DELETE CASCADE
    with atomic(db):
        db.delete(proj)
    logger.info("Deleted project %s", project_id)
    return True
