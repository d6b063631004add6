"""Project aggregate.

A software project published by its owner. Other users apply to join it;
accepted applicants become team members up to ``max_team_size``.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Immutable snapshot: every transition returns a NEW Project built with
      dataclasses.replace, the original is never modified
    - Persistence is the orchestrator's responsibility

Lifecycle:
    ACTIVE ──deactivate()──> DEACTIVATED
    ACTIVE/DEACTIVATED ──soft_delete()──> DELETED
    DEACTIVATED/DELETED ──restore()──> ACTIVE

    Status (OPEN, IN_PROGRESS, ...) is independent from lifecycle: changing
    one never changes the other.

Usage:
    from devmatch.domain.entities import Project
    from devmatch.domain.enums import ProjectStatus

    project = Project.create(
        owner_id=owner_id,
        title=ProjectTitle("Habit Tracker API"),
        description=ProjectDescription("REST backend for tracking daily habits"),
        status=ProjectStatus.OPEN,
        max_team_size=TeamSize(4),
    )
    project = project.update_visibility(False)
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID

from devmatch.domain.enums import LifecycleState, ProjectStatus
from devmatch.domain.value_objects import (
    CoverImageUrl,
    ProjectDescription,
    ProjectDuration,
    ProjectTitle,
    RepositoryUrl,
    TeamSize,
)


@dataclass(frozen=True, kw_only=True)
class Project:
    """Software project looking for (or working with) collaborators.

    Attributes:
        id: Project identifier (None until persisted).
        title: Validated title.
        description: Validated description.
        status: Development status.
        owner_id: User who created the project (never changes).
        repo_url: Optional source repository.
        cover_image_url: Optional cover image.
        estimated_duration: Optional duration estimate.
        max_team_size: Optional maximum number of non-owner members.
        is_public: Whether non-owners can see the project.
        lifecycle: ACTIVE, DEACTIVATED or DELETED.
        created_at: Creation timestamp.
        updated_at: Last transition timestamp (None until first change).

    Example:
        >>> project.is_visible_to(stranger_id)
        True
        >>> project.soft_delete().can_be_edited_by(project.owner_id)
        False
    """

    title: ProjectTitle
    description: ProjectDescription
    status: ProjectStatus
    owner_id: UUID
    id: UUID | None = None
    repo_url: RepositoryUrl | None = None
    cover_image_url: CoverImageUrl | None = None
    estimated_duration: ProjectDuration | None = None
    max_team_size: TeamSize | None = None
    is_public: bool = True
    lifecycle: LifecycleState = LifecycleState.ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        *,
        owner_id: UUID,
        title: ProjectTitle,
        description: ProjectDescription,
        status: ProjectStatus,
        repo_url: RepositoryUrl | None = None,
        cover_image_url: CoverImageUrl | None = None,
        estimated_duration: ProjectDuration | None = None,
        max_team_size: TeamSize | None = None,
        is_public: bool = True,
    ) -> "Project":
        """Build a new, not yet persisted, active project.

        Returns:
            Project with id=None, lifecycle ACTIVE, created_at=now and no
            updated_at.
        """
        return cls(
            title=title,
            description=description,
            status=status,
            owner_id=owner_id,
            repo_url=repo_url,
            cover_image_url=cover_image_url,
            estimated_duration=estimated_duration,
            max_team_size=max_team_size,
            is_public=is_public,
        )

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.lifecycle.is_active

    @property
    def is_deleted(self) -> bool:
        return self.lifecycle.is_deleted

    def is_owner(self, user_id: UUID) -> bool:
        """Check if user_id is the project's owner."""
        return self.owner_id == user_id

    def can_be_edited_by(self, user_id: UUID) -> bool:
        """Check if a user may modify this project.

        Only the owner may edit, and only while the project is active.
        Deactivated and deleted projects must be restored first.

        Args:
            user_id: Caller.

        Returns:
            True iff caller is owner and the project is ACTIVE.
        """
        return self.is_owner(user_id) and self.lifecycle is LifecycleState.ACTIVE

    def is_visible_to(self, user_id: UUID) -> bool:
        """Public projects are visible to everyone, private ones to the owner."""
        return self.is_public or self.is_owner(user_id)

    def is_publicly_available(self) -> bool:
        """Public and active (what anonymous callers may see)."""
        return self.is_public and self.lifecycle is LifecycleState.ACTIVE

    def is_open_for_applications(self) -> bool:
        """Check if users may apply.

        Returns:
            True iff status is OPEN and the project is ACTIVE.
        """
        return (
            self.status == ProjectStatus.OPEN
            and self.lifecycle is LifecycleState.ACTIVE
        )

    def is_full(self, current_team_size: int | None) -> bool:
        """Check the team against max_team_size.

        Without a maximum (or without a count) the project is never full.

        Args:
            current_team_size: Number of active non-owner members.

        Returns:
            True if current_team_size >= max_team_size.
        """
        if self.max_team_size is None or current_team_size is None:
            return False
        return self.max_team_size.is_full(current_team_size)

    def is_in_active_development(self) -> bool:
        """OPEN, IN_PROGRESS or UNDER_REVIEW."""
        return self.status.is_in_active_development()

    # -------------------------------------------------------------------------
    # Transitions (return a new Project)
    # -------------------------------------------------------------------------

    def _touch(self, **changes: object) -> "Project":
        return replace(self, updated_at=datetime.now(UTC), **changes)

    def update_details(
        self,
        *,
        title: ProjectTitle,
        description: ProjectDescription,
        repo_url: RepositoryUrl | None,
        cover_image_url: CoverImageUrl | None,
        estimated_duration: ProjectDuration | None,
        max_team_size: TeamSize | None,
        is_public: bool,
    ) -> "Project":
        """Replace the editable fields.

        owner_id, status, lifecycle and created_at are left untouched.

        Returns:
            New Project with updated_at refreshed.
        """
        return self._touch(
            title=title,
            description=description,
            repo_url=repo_url,
            cover_image_url=cover_image_url,
            estimated_duration=estimated_duration,
            max_team_size=max_team_size,
            is_public=is_public,
        )

    def update_status(self, new_status: ProjectStatus) -> "Project":
        return self._touch(status=new_status)

    def update_visibility(self, is_public: bool) -> "Project":
        return self._touch(is_public=is_public)

    def deactivate(self) -> "Project":
        """Hide the project without deleting it (lifecycle DEACTIVATED)."""
        return self._touch(lifecycle=LifecycleState.DEACTIVATED)

    def soft_delete(self) -> "Project":
        """Mark the project deleted (lifecycle DELETED, so also inactive)."""
        return self._touch(lifecycle=LifecycleState.DELETED)

    def restore(self) -> "Project":
        """Bring a deactivated or deleted project back to ACTIVE."""
        return self._touch(lifecycle=LifecycleState.ACTIVE)
