"""Project member database model.

One row per (project, user): the unique constraint is what guarantees a
user never holds two memberships in the same project.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from devmatch.infrastructure.persistence.base import BaseModel


class ProjectMemberModel(BaseModel):
    """Team membership row.

    Constraints:
        - uq_project_members_project_user: one membership per user per project
    """

    __tablename__ = "project_members"

    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to projects table",
    )

    user_id: Mapped[UUID] = mapped_column(
        nullable=False,
        index=True,
        comment="Member's user id",
    )

    member_role: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Role label (LEADER, DEVELOPER, ...)",
    )

    is_owner: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Owner membership (never counts toward capacity)",
    )

    joined_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    left_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    lifecycle: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="active",
        comment="active, deactivated, deleted",
    )

    __table_args__ = (
        UniqueConstraint(
            "project_id",
            "user_id",
            name="uq_project_members_project_user",
        ),
    )
