import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, CheckConstraint, UniqueConstraint
from models.base import Base, utcnow
from core.targets import Target, target_from_columns


class Like(Base):
    __tablename__ = "likes"
    __table_args__ = (
        CheckConstraint(
            "(project_id IS NULL) <> (chapter_id IS NULL)",
            name="ck_likes_exactly_one_target",
        ),
        UniqueConstraint("user_id", "project_id", name="uq_likes_user_project"),
        UniqueConstraint("user_id", "chapter_id", name="uq_likes_user_chapter"),
    )

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=True)
    chapter_id = Column(String(64), ForeignKey("chapters.id", ondelete="CASCADE"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    @property
    def target(self) -> Target:
        return target_from_columns(self.project_id, self.chapter_id)
