import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from models.base import Base, utcnow
from core.targets import ChapterTarget, ProjectTarget, Target


class Comment(Base):
    __tablename__ = "comments"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    # Always set, also for chapter comments, so the project feed can find them
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    chapter_id = Column(String(64), ForeignKey("chapters.id", ondelete="CASCADE"), nullable=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    user = relationship("User")

    @property
    def target(self) -> Target:
        if self.chapter_id is not None:
            return ChapterTarget(self.chapter_id)
        return ProjectTarget(self.project_id)

Index("idx_comments_project_created_at", Comment.project_id, Comment.created_at.desc())
Index("idx_comments_chapter_created_at", Comment.chapter_id, Comment.created_at.desc())
