"""create_project_tables

Revision ID: 3b7e1c9a4d21
Revises:
Create Date: 2026-10-19 12:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3b7e1c9a4d21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_and_created_at() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create users, projects, project_members and project_applications."""
    op.create_table(
        "users",
        *_id_and_created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=True),
        sa.Column("last_name", sa.String(length=100), nullable=True),
        sa.Column(
            "profile_types",
            sa.JSON(),
            nullable=False,
            comment="Profile type labels, primary first",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "projects",
        *_id_and_created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "title",
            sa.String(length=100),
            nullable=False,
            comment="Project title (5-100 chars)",
        ),
        sa.Column(
            "description",
            sa.Text(),
            nullable=False,
            comment="Project description (20-2000 chars)",
        ),
        sa.Column(
            "status",
            sa.String(length=20),
            nullable=False,
            comment="open, in_progress, completed, cancelled, under_review",
        ),
        sa.Column(
            "owner_id",
            sa.Uuid(),
            nullable=False,
            comment="User who created the project",
        ),
        sa.Column(
            "repo_url",
            sa.String(length=255),
            nullable=True,
            comment="Normalized GitHub/GitLab/Bitbucket URL",
        ),
        sa.Column(
            "cover_image_url",
            sa.String(length=255),
            nullable=True,
            comment="HTTPS image URL",
        ),
        sa.Column(
            "estimated_duration_weeks",
            sa.Integer(),
            nullable=True,
            comment="Estimated duration (1-104 weeks)",
        ),
        sa.Column(
            "max_team_size",
            sa.Integer(),
            nullable=True,
            comment="Maximum non-owner members (1-20)",
        ),
        sa.Column(
            "is_public",
            sa.Boolean(),
            nullable=False,
            comment="Visible to users other than the owner",
        ),
        sa.Column(
            "lifecycle",
            sa.String(length=20),
            nullable=False,
            comment="active, deactivated, deleted",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_projects_owner_id"), "projects", ["owner_id"])
    op.create_index(op.f("ix_projects_status"), "projects", ["status"])
    op.create_index(
        "idx_projects_owner_lifecycle", "projects", ["owner_id", "lifecycle"]
    )

    op.create_table(
        "project_members",
        *_id_and_created_at(),
        sa.Column(
            "project_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to projects table",
        ),
        sa.Column(
            "user_id",
            sa.Uuid(),
            nullable=False,
            comment="Member's user id",
        ),
        sa.Column(
            "member_role",
            sa.String(length=50),
            nullable=False,
            comment="Role label (LEADER, DEVELOPER, ...)",
        ),
        sa.Column(
            "is_owner",
            sa.Boolean(),
            nullable=False,
            comment="Owner membership (never counts toward capacity)",
        ),
        sa.Column("joined_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("left_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "lifecycle",
            sa.String(length=20),
            nullable=False,
            comment="active, deactivated, deleted",
        ),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "project_id", "user_id", name="uq_project_members_project_user"
        ),
    )
    op.create_index(
        op.f("ix_project_members_project_id"), "project_members", ["project_id"]
    )
    op.create_index(op.f("ix_project_members_user_id"), "project_members", ["user_id"])

    op.create_table(
        "project_applications",
        *_id_and_created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "project_id",
            sa.Uuid(),
            nullable=False,
            comment="FK to projects table",
        ),
        sa.Column(
            "user_id",
            sa.Uuid(),
            nullable=False,
            comment="Applicant's user id",
        ),
        sa.Column(
            "motivation_message",
            sa.Text(),
            nullable=False,
            comment="Why the applicant wants to join (10-1000 chars)",
        ),
        sa.Column(
            "status",
            sa.String(length=20),
            nullable=False,
            comment="pending, accepted, rejected",
        ),
        sa.Column("seen_by_owner", sa.Boolean(), nullable=False),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "resolved_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Set when accepted or rejected",
        ),
        sa.Column(
            "lifecycle",
            sa.String(length=20),
            nullable=False,
            comment="active, deactivated (cancelled), deleted",
        ),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "project_id", "user_id", name="uq_project_applications_project_user"
        ),
    )
    op.create_index(
        op.f("ix_project_applications_project_id"),
        "project_applications",
        ["project_id"],
    )
    op.create_index(
        op.f("ix_project_applications_user_id"), "project_applications", ["user_id"]
    )


def downgrade() -> None:
    """Drop the project tables (users last, nothing references it by FK)."""
    op.drop_table("project_applications")
    op.drop_table("project_members")
    op.drop_table("projects")
    op.drop_table("users")
