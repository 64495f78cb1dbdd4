import enum
import uuid
from sqlalchemy import Column, String, Text, ForeignKey, Index, Enum
from sqlalchemy.orm import relationship
from models.base import Base, TimestampMixin


class Visibility(str, enum.Enum):
    PRIVATE = "PRIVATE"
    PUBLIC = "PUBLIC"


class Project(Base, TimestampMixin):
    __tablename__ = "projects"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String(64), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False)
    synopsis = Column(Text, nullable=True)
    visibility = Column(Enum(Visibility, name="project_visibility"), nullable=False, default=Visibility.PRIVATE)

    owner = relationship("User")
    chapters = relationship(
        "Chapter",
        back_populates="project",
        order_by="Chapter.index",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    # Children go before the project itself when the ORM deletes it
    likes = relationship("Like", cascade="all, delete-orphan", passive_deletes=True)
    comments = relationship("Comment", cascade="all, delete-orphan", passive_deletes=True)

Index("idx_projects_owner_id_updated_at", Project.owner_id, Project.updated_at.desc())
Index("idx_projects_visibility", Project.visibility)
