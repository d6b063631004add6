"""UserQueryProtocol for reading users owned by another context.

Used to check that an applicant exists and to enrich member listings with
usernames and profile types. Never used for authorization decisions.
"""

from typing import Protocol
from uuid import UUID

from devmatch.domain.entities.user_summary import UserSummary


class UserQueryProtocol(Protocol):
    """Read-only user lookup port."""

    async def find_user_by_id(self, user_id: UUID) -> UserSummary | None:
        """Find a user summary.

        Args:
            user_id: User identifier.

        Returns:
            UserSummary if the user exists, None otherwise.
        """
        ...
