import logging

from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload

from core.database import atomic
from core.errors import ValidationError
from core.targets import ChapterTarget, Target
from crud.access import resolve_public_target
from models.comment import Comment

logger = logging.getLogger("uwrite")


def create_comment(db: Session, user_id: str, target: Target, content: str | None):
    text = (content or "").strip()
    if not text:
        raise ValidationError("Comment cannot be empty")
    project_id, chapter_id = resolve_public_target(db, target)

    comment = Comment(user_id=user_id, project_id=project_id, chapter_id=chapter_id, content=text)
    with atomic(db):
        db.add(comment)
    db.refresh(comment)
    logger.info("User %s commented on %s", user_id, target)
    return comment


def list_comments(db: Session, target: Target):
    """Comments on a public target, newest first.

    A project's feed holds only project-level comments; chapter comments
    are listed on their chapter.
    """
    project_id, chapter_id = resolve_public_target(db, target)
    q = db.query(Comment).options(joinedload(Comment.user))
    if isinstance(target, ChapterTarget):
        q = q.filter(Comment.chapter_id == chapter_id)
    else:
        q = q.filter(Comment.project_id == project_id, Comment.chapter_id.is_(None))
    return q.order_by(desc(Comment.created_at)).all()
