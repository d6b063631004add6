"""Repository dependency factories.

Request-scoped repository instances sharing the request's session, so every
repository used by one orchestrator call writes in the same transaction.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from devmatch.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from devmatch.infrastructure.persistence.repositories import (
        ProjectApplicationRepository,
        ProjectMemberRepository,
        ProjectRepository,
        UserQueryRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_project_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ProjectRepository":
    """Get project repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        ProjectRepository instance.
    """
    from devmatch.infrastructure.persistence.repositories import ProjectRepository

    return ProjectRepository(session=session)


async def get_project_member_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ProjectMemberRepository":
    from devmatch.infrastructure.persistence.repositories import (
        ProjectMemberRepository,
    )

    return ProjectMemberRepository(session=session)


async def get_project_application_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ProjectApplicationRepository":
    from devmatch.infrastructure.persistence.repositories import (
        ProjectApplicationRepository,
    )

    return ProjectApplicationRepository(session=session)


async def get_user_query(
    session: AsyncSession = Depends(get_db_session),
) -> "UserQueryRepository":
    """Get the read-only user lookup adapter (request-scoped)."""
    from devmatch.infrastructure.persistence.repositories import UserQueryRepository

    return UserQueryRepository(session=session)
