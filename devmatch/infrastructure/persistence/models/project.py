"""Project database model.

Architecture:
    - Value objects stored as their primitive (normalized) values
    - Status and lifecycle stored as lowercase strings
    - owner_id references a user by id only (users belong to another context)
"""

from uuid import UUID

from sqlalchemy import Boolean, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from devmatch.infrastructure.persistence.base import BaseMutableModel


class ProjectModel(BaseMutableModel):
    """Project row.

    Indexes:
        - ix_projects_owner_id: Owner listings and quota counts
        - ix_projects_status: Filter by status
        - idx_projects_owner_lifecycle: Owner + lifecycle (count_by_owner_id)
    """

    __tablename__ = "projects"

    title: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Project title (5-100 chars)",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Project description (20-2000 chars)",
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        index=True,
        comment="open, in_progress, completed, cancelled, under_review",
    )

    owner_id: Mapped[UUID] = mapped_column(
        nullable=False,
        index=True,
        comment="User who created the project",
    )

    repo_url: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Normalized GitHub/GitLab/Bitbucket URL",
    )

    cover_image_url: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="HTTPS image URL",
    )

    estimated_duration_weeks: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Estimated duration (1-104 weeks)",
    )

    max_team_size: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Maximum non-owner members (1-20)",
    )

    is_public: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Visible to users other than the owner",
    )

    lifecycle: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="active",
        comment="active, deactivated, deleted",
    )

    __table_args__ = (
        Index("idx_projects_owner_lifecycle", "owner_id", "lifecycle"),
    )

    def __repr__(self) -> str:
        return f"<ProjectModel(id={self.id}, title={self.title!r}, status={self.status!r})>"
