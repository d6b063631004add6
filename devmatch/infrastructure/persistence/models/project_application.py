"""Project application database model."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from devmatch.infrastructure.persistence.base import BaseMutableModel


class ProjectApplicationModel(BaseMutableModel):
    """Application row.

    Constraints:
        - uq_project_applications_project_user: a user applies to a
          project at most once
    """

    __tablename__ = "project_applications"

    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to projects table",
    )

    user_id: Mapped[UUID] = mapped_column(
        nullable=False,
        index=True,
        comment="Applicant's user id",
    )

    motivation_message: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Why the applicant wants to join (10-1000 chars)",
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
        comment="pending, accepted, rejected",
    )

    seen_by_owner: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    resolved_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Set when accepted or rejected",
    )

    lifecycle: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="active",
        comment="active, deactivated (cancelled), deleted",
    )

    __table_args__ = (
        UniqueConstraint(
            "project_id",
            "user_id",
            name="uq_project_applications_project_user",
        ),
    )
