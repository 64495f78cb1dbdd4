import enum
import uuid
from sqlalchemy import Column, String, Integer, Text, ForeignKey, Index, Enum, JSON
from sqlalchemy.orm import relationship
from models.base import Base, TimestampMixin


class ChapterStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"


class Chapter(Base, TimestampMixin):
    __tablename__ = "chapters"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(64), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    # Zero-based, gapless position within the project. Not unique at the
    # table level: reorder and renumber rewrite it inside one transaction.
    index = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    content_json = Column(JSON, nullable=True)
    content_html = Column(Text, nullable=True)
    content_text = Column(Text, nullable=True)
    status = Column(Enum(ChapterStatus, name="chapter_status"), nullable=False, default=ChapterStatus.DRAFT)

    project = relationship("Project", back_populates="chapters")
    likes = relationship("Like", cascade="all, delete-orphan", passive_deletes=True)
    comments = relationship("Comment", cascade="all, delete-orphan", passive_deletes=True)

Index("idx_chapters_project_index", Chapter.project_id, Chapter.index)
