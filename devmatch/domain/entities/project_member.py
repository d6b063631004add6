"""Project member entity.

A user's membership in a project team. Created when the owner creates the
project (owner membership) or when an application is accepted. Leaving a
team deactivates the membership; rows are never deleted.
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID

from devmatch.domain.enums import LifecycleState

MAX_ROLE_LENGTH = 50


def _validate_role(role: str) -> str:
    if role is None:
        raise ValueError("Member role cannot be null")
    label = str(role).strip()
    if not label:
        raise ValueError("Member role cannot be empty")
    if len(label) > MAX_ROLE_LENGTH:
        raise ValueError(f"Member role cannot exceed {MAX_ROLE_LENGTH} characters")
    return label


@dataclass(frozen=True, kw_only=True)
class ProjectMember:
    """Team membership.

    Attributes:
        id: Membership identifier (None until persisted).
        project_id: Project joined.
        user_id: Member.
        member_role: Free-form role label (e.g. "LEADER", "DEVELOPER").
        is_owner: True for the project owner's own membership.
        joined_at: When the membership started.
        left_at: When the member left (None while current).
        lifecycle: ACTIVE while current.

    Raises:
        ValueError: If member_role is blank or longer than 50 characters.
    """

    project_id: UUID
    user_id: UUID
    member_role: str
    id: UUID | None = None
    is_owner: bool = False
    joined_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    left_at: datetime | None = None
    lifecycle: LifecycleState = LifecycleState.ACTIVE

    def __post_init__(self) -> None:
        object.__setattr__(self, "member_role", _validate_role(self.member_role))

    @classmethod
    def join(
        cls,
        *,
        project_id: UUID,
        user_id: UUID,
        role: str,
        is_owner: bool = False,
    ) -> "ProjectMember":
        """Build a new active membership starting now."""
        return cls(
            project_id=project_id,
            user_id=user_id,
            member_role=role,
            is_owner=is_owner,
        )

    @property
    def is_active(self) -> bool:
        return self.lifecycle.is_active

    @property
    def is_deleted(self) -> bool:
        return self.lifecycle.is_deleted

    def is_current(self) -> bool:
        """Active and not left."""
        return self.lifecycle is LifecycleState.ACTIVE and self.left_at is None

    def change_role(self, role: str) -> "ProjectMember":
        """Return a copy with a new role label.

        Raises:
            ValueError: If the label is blank or too long.
        """
        return replace(self, member_role=role)

    def leave(self) -> "ProjectMember":
        """Return a deactivated copy with left_at set to now."""
        return replace(
            self,
            left_at=datetime.now(UTC),
            lifecycle=LifecycleState.DEACTIVATED,
        )
