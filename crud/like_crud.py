import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import atomic
from core.targets import ChapterTarget, ProjectTarget, Target
from crud.access import resolve_public_target
from models.like import Like

logger = logging.getLogger("uwrite")


def _target_clause(target: Target):
    if isinstance(target, ChapterTarget):
        return Like.chapter_id == target.chapter_id
    return Like.project_id == target.project_id


def _find_like(db: Session, user_id: str, target: Target):
    # Locking read, so a like committed by a concurrent request is visible
    return (
        db.query(Like)
        .filter(Like.user_id == user_id, _target_clause(target))
        .with_for_update()
        .first()
    )


def _new_like(user_id: str, target: Target) -> Like:
    if isinstance(target, ChapterTarget):
        return Like(user_id=user_id, chapter_id=target.chapter_id)
    return Like(user_id=user_id, project_id=target.project_id)


def toggle_like(db: Session, user_id: str, target: Target) -> bool:
    """Flip the caller's like on a public target and return the new state.

    Two concurrent toggles can both find no like; the unique constraint
    on (user, target) lets one insert win and the loser is reported as
    liked, which is the state the data ends up in.
    """
    resolve_public_target(db, target)

    existing = _find_like(db, user_id, target)
    if existing is not None:
        with atomic(db):
            db.delete(existing)
        logger.info("User %s unliked %s", user_id, target)
        return False

    try:
        with db.begin_nested():
            db.add(_new_like(user_id, target))
    except IntegrityError:
        # Only a like that now exists settles it; anything else propagates
        if _find_like(db, user_id, target) is None:
            resolve_public_target(db, target)
            db.rollback()
            raise
        db.commit()
        logger.warning("Duplicate like by user %s on %s absorbed", user_id, target)
        return True
    db.commit()
    logger.info("User %s liked %s", user_id, target)
    return True
