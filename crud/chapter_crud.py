"""Chapter storage and the ordering rules of a project's chapter list.

Within a project the chapter ``index`` values are always exactly
``0..n-1``. Every write that can change them (create, reorder, delete)
runs in one transaction holding the project row lock, so readers never
see a gap or a duplicate.
"""
import logging

from sqlalchemy.orm import Session

from core.content import html_to_plain_text, json_to_html
from core.database import atomic
from core.errors import NotFoundError, ValidationError
from crud.access import get_owned_chapter, get_owned_project, lock_project
from models.chapter import Chapter, ChapterStatus
from schemas.chapter_schema import ChapterCreate, ChapterUpdate

logger = logging.getLogger("uwrite")


def _apply_content(ch: Chapter, document: dict | None) -> None:
    ch.content_json = document
    if document is None:
        ch.content_html = None
        ch.content_text = None
        return
    html = json_to_html(document)
    ch.content_html = html
    ch.content_text = html_to_plain_text(html)


def _project_chapters(db: Session, project_id: str):
    # Locking reads see the latest committed rows, not the snapshot the
    # request opened with its identity lookup
    return db.query(Chapter).filter(Chapter.project_id == project_id).with_for_update()


def _last_index_query(db: Session, project_id: str):
    return (
        db.query(Chapter.index)
        .filter(Chapter.project_id == project_id)
        .order_by(Chapter.index.desc())
        .limit(1)
        .with_for_update()
    )


def _chapter_for_write(db: Session, chapter_id: str):
    return db.query(Chapter).filter(Chapter.id == chapter_id).with_for_update()


def _next_index(db: Session, project_id: str) -> int:
    current = _last_index_query(db, project_id).scalar()
    return 0 if current is None else current + 1


def list_chapters(db: Session, project_id: str, user_id: str):
    get_owned_project(db, project_id, user_id)
    return (
        db.query(Chapter)
        .filter(Chapter.project_id == project_id)
        .order_by(Chapter.index)
        .all()
    )


def get_chapter(db: Session, chapter_id: str, user_id: str):
    return get_owned_chapter(db, chapter_id, user_id)


def create_chapter(db: Session, payload: ChapterCreate, user_id: str):
    """Append a chapter at the end of the project's list."""
    with atomic(db):
        get_owned_project(db, payload.project_id, user_id, lock=True)
        ch = Chapter(
            project_id=payload.project_id,
            index=_next_index(db, payload.project_id),
            title=payload.title,
            status=payload.status or ChapterStatus.DRAFT,
        )
        if payload.content is not None:
            _apply_content(ch, payload.content)
        db.add(ch)
    db.refresh(ch)
    logger.info("Created chapter %s at index %d in project %s", ch.id, ch.index, ch.project_id)
    return ch


def update_chapter(db: Session, chapter_id: str, payload: ChapterUpdate, user_id: str):
    ch = get_owned_chapter(db, chapter_id, user_id)
    with atomic(db):
        if payload.title is not None:
            ch.title = payload.title
        if payload.status is not None:
            ch.status = payload.status
        if "content" in payload.model_fields_set:
            _apply_content(ch, payload.content)
    db.refresh(ch)
    return ch


def order_problems(current_ids, ordered_ids: list[str]) -> dict | None:
    """Describe how ``ordered_ids`` differs from a permutation of ``current_ids``."""
    current = set(current_ids)
    seen: set[str] = set()
    duplicates: list[str] = []
    for chapter_id in ordered_ids:
        if chapter_id in seen and chapter_id not in duplicates:
            duplicates.append(chapter_id)
        seen.add(chapter_id)

    problems = {}
    missing = sorted(current - seen)
    unknown = sorted(seen - current)
    if missing:
        problems["missing"] = missing
    if unknown:
        problems["unknown"] = unknown
    if duplicates:
        problems["duplicates"] = duplicates
    return problems or None


def reorder_chapters(db: Session, project_id: str, ordered_ids: list[str], user_id: str) -> None:
    """Give each chapter the position it has in ``ordered_ids``.

    ``ordered_ids`` must list every chapter of the project exactly once;
    anything else is rejected as ``INVALID_ORDER`` and nothing is written.
    """
    with atomic(db):
        get_owned_project(db, project_id, user_id, lock=True)
        chapters = _project_chapters(db, project_id).populate_existing().all()
        by_id = {ch.id: ch for ch in chapters}

        problems = order_problems(by_id.keys(), ordered_ids)
        if problems:
            raise ValidationError(
                "Chapter ids must match the project's chapters exactly",
                code="INVALID_ORDER",
                detail=problems,
            )

        for position, chapter_id in enumerate(ordered_ids):
            by_id[chapter_id].index = position
    logger.info("Reordered %d chapters in project %s", len(ordered_ids), project_id)


def delete_chapter(db: Session, chapter_id: str, user_id: str) -> bool:
    """Delete a chapter and close the gap it leaves in the order."""
    ch = get_owned_chapter(db, chapter_id, user_id)
    project_id = ch.project_id
    with atomic(db):
        lock_project(db, project_id)
        # Re-read under the lock; a concurrent reorder may have moved it
        ch = _chapter_for_write(db, chapter_id).populate_existing().first()
        if not ch:
            raise NotFoundError("Chapter not found")
        removed_index = ch.index
        db.delete(ch)
        db.flush()
        (
            db.query(Chapter)
            .filter(Chapter.project_id == project_id, Chapter.index > removed_index)
            .update({Chapter.index: Chapter.index - 1}, synchronize_session=False)
        )
    logger.info("Deleted chapter %s from project %s (index %d)", chapter_id, project_id, removed_index)
    return True
