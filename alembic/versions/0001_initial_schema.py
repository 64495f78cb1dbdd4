"""Initial schema: users, sessions, projects, chapters, likes, comments

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_user_email", "user", ["email"], unique=True)

    op.create_table(
        "session",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("token", sa.String(512), nullable=False, unique=True),
        sa.Column("ip_address", sa.String(128), nullable=True),
        sa.Column("user_agent", sa.String(512), nullable=True),
        sa.Column("user_id", sa.String(64), sa.ForeignKey("user.id", ondelete="CASCADE"), nullable=False),
        *_timestamps(),
    )
    op.create_index("idx_session_user_id", "session", ["user_id"])

    op.create_table(
        "projects",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("owner_id", sa.String(64), sa.ForeignKey("user.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("synopsis", sa.Text(), nullable=True),
        sa.Column(
            "visibility",
            sa.Enum("PRIVATE", "PUBLIC", name="project_visibility"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("idx_projects_owner_id_updated_at", "projects", ["owner_id", sa.text("updated_at DESC")])
    op.create_index("idx_projects_visibility", "projects", ["visibility"])

    op.create_table(
        "chapters",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("project_id", sa.String(64), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("index", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content_json", sa.JSON(), nullable=True),
        sa.Column("content_html", sa.Text(), nullable=True),
        sa.Column("content_text", sa.Text(), nullable=True),
        sa.Column(
            "status",
            sa.Enum("DRAFT", "PUBLISHED", name="chapter_status"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("idx_chapters_project_index", "chapters", ["project_id", "index"])

    op.create_table(
        "likes",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(64), sa.ForeignKey("user.id", ondelete="CASCADE"), nullable=False),
        sa.Column("project_id", sa.String(64), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=True),
        sa.Column("chapter_id", sa.String(64), sa.ForeignKey("chapters.id", ondelete="CASCADE"), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "(project_id IS NULL) <> (chapter_id IS NULL)",
            name="ck_likes_exactly_one_target",
        ),
        sa.UniqueConstraint("user_id", "project_id", name="uq_likes_user_project"),
        sa.UniqueConstraint("user_id", "chapter_id", name="uq_likes_user_chapter"),
    )

    op.create_table(
        "comments",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(64), sa.ForeignKey("user.id", ondelete="CASCADE"), nullable=False),
        sa.Column("project_id", sa.String(64), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("chapter_id", sa.String(64), sa.ForeignKey("chapters.id", ondelete="CASCADE"), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("idx_comments_project_created_at", "comments", ["project_id", sa.text("created_at DESC")])
    op.create_index("idx_comments_chapter_created_at", "comments", ["chapter_id", sa.text("created_at DESC")])


def downgrade() -> None:
    op.drop_table("comments")
    op.drop_table("likes")
    op.drop_table("chapters")
    op.drop_table("projects")
    op.drop_table("session")
    op.drop_table("user")
    sa.Enum(name="chapter_status").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="project_visibility").drop(op.get_bind(), checkfirst=True)
