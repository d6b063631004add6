"""UserQueryRepository - read-only adapter for UserQueryProtocol."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from devmatch.domain.entities.user_summary import UserSummary
from devmatch.infrastructure.persistence.models import UserModel


class UserQueryRepository:
    """Reads users from the shared users table.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_user_by_id(self, user_id: UUID) -> UserSummary | None:
        model = await self.session.get(UserModel, user_id)
        if model is None:
            return None
        return UserSummary(
            id=model.id,
            username=model.username,
            first_name=model.first_name,
            last_name=model.last_name,
            profile_types=tuple(model.profile_types or ()),
        )
