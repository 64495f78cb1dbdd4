"""Ownership and visibility gates.

Owner routes answer *forbidden* for projects the caller does not own.
Reader routes (public browse, likes, comments) answer *not found* for
anything that is not publicly visible, so private work cannot be told
apart from missing work.
"""
from sqlalchemy.orm import Session

from core.errors import ForbiddenError, NotFoundError
from core.targets import ChapterTarget, ProjectTarget, Target
from models.chapter import Chapter, ChapterStatus
from models.project import Project, Visibility


def get_owned_project(db: Session, project_id: str, user_id: str, lock: bool = False):
    q = db.query(Project).filter(Project.id == project_id)
    if lock:
        q = q.with_for_update()
    proj = q.first()
    if not proj or proj.owner_id != user_id:
        raise ForbiddenError()
    return proj


def lock_project(db: Session, project_id: str):
    """Take the row lock that serializes writes to a project's chapter order."""
    return db.query(Project).filter(Project.id == project_id).with_for_update().first()


def get_owned_chapter(db: Session, chapter_id: str, user_id: str):
    ch = db.query(Chapter).filter(Chapter.id == chapter_id).first()
    if not ch:
        raise NotFoundError("Chapter not found")
    if ch.project.owner_id != user_id:
        raise ForbiddenError("Chapter belongs to another user's project")
    return ch


def get_public_project(db: Session, project_id: str):
    proj = (
        db.query(Project)
        .filter(Project.id == project_id, Project.visibility == Visibility.PUBLIC)
        .first()
    )
    if not proj:
        raise NotFoundError("Project not found")
    return proj


def get_public_chapter(db: Session, chapter_id: str):
    ch = (
        db.query(Chapter)
        .join(Project, Chapter.project_id == Project.id)
        .filter(
            Chapter.id == chapter_id,
            Chapter.status == ChapterStatus.PUBLISHED,
            Project.visibility == Visibility.PUBLIC,
        )
        .first()
    )
    if not ch:
        raise NotFoundError("Chapter not found")
    return ch


def resolve_public_target(db: Session, target: Target) -> tuple[str, str | None]:
    """Return ``(project_id, chapter_id)`` for a publicly visible target."""
    if isinstance(target, ChapterTarget):
        ch = get_public_chapter(db, target.chapter_id)
        return ch.project_id, ch.id
    if isinstance(target, ProjectTarget):
        return get_public_project(db, target.project_id).id, None
    raise TypeError(f"unsupported target {target!r}")
