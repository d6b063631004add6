"""ProjectMemberRepository protocol for team membership persistence.

Port (interface) for hexagonal architecture.

Capacity:
    add_member_if_capacity() is the only way the application workflow adds
    a collaborator. Implementations MUST make the count-then-insert atomic
    (e.g. lock the project row) so concurrent accepts cannot overfill a
    team. Owner memberships never count toward capacity.
"""

from typing import Protocol
from uuid import UUID

from devmatch.domain.entities.project_member import ProjectMember


class ProjectMemberRepository(Protocol):
    """Project member repository protocol (port).

    Methods:
        count_active_members_by_project_id: Live team size
        add_member: Insert a membership unconditionally
        add_member_if_capacity: Atomic capacity check and insert
        get_active_members_by_project_id: Current team
        find_active_member: One current membership
        save: Update an existing membership
    """

    async def count_active_members_by_project_id(self, project_id: UUID) -> int:
        """Count active non-owner members of a project.

        Args:
            project_id: Project identifier.

        Returns:
            Number of active members, excluding the owner.
        """
        ...

    async def add_member(
        self,
        project_id: UUID,
        user_id: UUID,
        role: str,
        is_owner: bool = False,
    ) -> ProjectMember:
        """Insert an active membership without a capacity check.

        Used for the owner membership created with the project.

        Args:
            project_id: Project identifier.
            user_id: Member's user identifier.
            role: Role label.
            is_owner: True for the owner's membership.

        Returns:
            Persisted membership.
        """
        ...

    async def add_member_if_capacity(
        self,
        project_id: UUID,
        user_id: UUID,
        role: str,
        max_team_size: int | None,
    ) -> ProjectMember | None:
        """Atomically insert a membership if the team has room.

        Args:
            project_id: Project identifier.
            user_id: Member's user identifier.
            role: Role label.
            max_team_size: Capacity (None means unlimited).

        Returns:
            Persisted membership, or None if the team was already full.
        """
        ...

    async def get_active_members_by_project_id(
        self, project_id: UUID
    ) -> list[ProjectMember]:
        """List current members (owner included), oldest first."""
        ...

    async def find_active_member(
        self, project_id: UUID, user_id: UUID
    ) -> ProjectMember | None:
        """Find a user's current membership in a project.

        Returns:
            Active membership, or None.
        """
        ...

    async def save(self, member: ProjectMember) -> ProjectMember:
        """Persist changes to an existing membership (role, leave)."""
        ...
