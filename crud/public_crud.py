from sqlalchemy import desc, func
from sqlalchemy.orm import Session, joinedload

from crud.access import get_public_project
from models.chapter import Chapter, ChapterStatus
from models.comment import Comment
from models.like import Like
from models.project import Project, Visibility


def _published_chapters(db: Session, project_ids: list[str]) -> dict[str, list[Chapter]]:
    grouped: dict[str, list[Chapter]] = {pid: [] for pid in project_ids}
    if not project_ids:
        return grouped
    rows = (
        db.query(Chapter)
        .filter(Chapter.project_id.in_(project_ids), Chapter.status == ChapterStatus.PUBLISHED)
        .order_by(Chapter.project_id, Chapter.index)
        .all()
    )
    for ch in rows:
        grouped[ch.project_id].append(ch)
    return grouped


def _counts(db: Session, column, project_ids: list[str]) -> dict[str, int]:
    if not project_ids:
        return {}
    model = column.class_
    rows = (
        db.query(column, func.count(model.id))
        .filter(column.in_(project_ids))
        .group_by(column)
        .all()
    )
    return {pid: count for pid, count in rows}


def _project_view(proj: Project, chapters: list[Chapter], likes: int, comments: int) -> dict:
    return {
        "id": proj.id,
        "title": proj.title,
        "synopsis": proj.synopsis,
        "created_at": proj.created_at,
        "updated_at": proj.updated_at,
        "owner": proj.owner,
        "published_chapter_count": len(chapters),
        "like_count": likes,
        "comment_count": comments,
        "chapters": chapters,
    }


def _build_views(db: Session, projects: list[Project]) -> list[dict]:
    ids = [p.id for p in projects]
    chapters = _published_chapters(db, ids)
    likes = _counts(db, Like.project_id, ids)
    comments = _counts(db, Comment.project_id, ids)
    return [
        _project_view(p, chapters[p.id], likes.get(p.id, 0), comments.get(p.id, 0))
        for p in projects
    ]


def list_public_projects(db: Session, skip: int = 0, limit: int = 100) -> list[dict]:
    projects = (
        db.query(Project)
        .options(joinedload(Project.owner))
        .filter(Project.visibility == Visibility.PUBLIC)
        .order_by(desc(Project.updated_at))
        .offset(skip)
        .limit(limit)
        .all()
    )
    return _build_views(db, projects)


def get_public_project_view(db: Session, project_id: str) -> dict:
    proj = get_public_project(db, project_id)
    return _build_views(db, [proj])[0]
