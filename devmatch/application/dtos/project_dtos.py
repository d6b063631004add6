"""Project DTOs (Data Transfer Objects).

Result dataclasses returned by the project management workflow to the
presentation layer. Profile-type enrichment happens here, not in the domain.

DTOs:
    - ProjectMemberResult: One team member with display data
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from devmatch.domain.entities import ProjectMember, UserSummary


@dataclass(frozen=True)
class ProjectMemberResult:
    """Team member enriched with user display data.

    Attributes:
        user_id: Member's user identifier.
        username: Member's username, or "User <id>" if the user is unknown.
        member_role: Role label in the project.
        profile_type: Member's first profile type, if any.
        is_owner: True for the project owner.
        joined_at: When the member joined.
    """

    user_id: UUID
    username: str
    member_role: str
    profile_type: str | None
    is_owner: bool
    joined_at: datetime

    @classmethod
    def from_member(
        cls, member: ProjectMember, user: UserSummary | None
    ) -> "ProjectMemberResult":
        """Build a result from a membership and its (possibly missing) user."""
        if user is None:
            username = f"User {member.user_id}"
            profile_type = None
        else:
            username = user.username
            profile_type = user.primary_profile_type
        return cls(
            user_id=member.user_id,
            username=username,
            member_role=member.member_role,
            profile_type=profile_type,
            is_owner=member.is_owner,
            joined_at=member.joined_at,
        )
