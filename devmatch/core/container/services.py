"""Workflow orchestrator factories.

Request-scoped orchestrators. Each factory builds its repositories on the
request's session and injects the app-scoped logger.

Usage:
    # Presentation layer (FastAPI)
    @router.post("/projects/{project_id}/applications")
    async def apply(
        project_id: UUID,
        service: ProjectApplicationService = Depends(
            get_project_application_service
        ),
    ): ...

    # Scripts and tests
    async with get_database().get_session() as session:
        service = build_project_application_service(session)
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from devmatch.core.container.infrastructure import get_db_session, get_logger

if TYPE_CHECKING:
    from devmatch.application.services import (
        ProjectApplicationService,
        ProjectManagementService,
    )
    from devmatch.domain.protocols import LoggerProtocol


def build_project_management_service(
    session: AsyncSession, logger: "LoggerProtocol | None" = None
) -> "ProjectManagementService":
    """Wire a ProjectManagementService on an existing session.

    Args:
        session: Session the repositories share.
        logger: Logger to inject (defaults to the app logger).
    """
    from devmatch.application.services import ProjectManagementService
    from devmatch.domain.services import ProjectPolicy
    from devmatch.infrastructure.persistence.repositories import (
        ProjectMemberRepository,
        ProjectRepository,
        UserQueryRepository,
    )

    return ProjectManagementService(
        project_repo=ProjectRepository(session=session),
        member_repo=ProjectMemberRepository(session=session),
        user_query=UserQueryRepository(session=session),
        policy=ProjectPolicy(),
        logger=logger or get_logger(),
    )


def build_project_application_service(
    session: AsyncSession, logger: "LoggerProtocol | None" = None
) -> "ProjectApplicationService":
    """Wire a ProjectApplicationService on an existing session."""
    from devmatch.application.services import ProjectApplicationService
    from devmatch.infrastructure.persistence.repositories import (
        ProjectApplicationRepository,
        ProjectMemberRepository,
        ProjectRepository,
        UserQueryRepository,
    )

    return ProjectApplicationService(
        project_repo=ProjectRepository(session=session),
        application_repo=ProjectApplicationRepository(session=session),
        member_repo=ProjectMemberRepository(session=session),
        user_query=UserQueryRepository(session=session),
        logger=logger or get_logger(),
    )


# ============================================================================
# Orchestrator Factories (Request-Scoped)
# ============================================================================


async def get_project_management_service(
    session: AsyncSession = Depends(get_db_session),
) -> "ProjectManagementService":
    """Get ProjectManagementService (request-scoped)."""
    return build_project_management_service(session)


async def get_project_application_service(
    session: AsyncSession = Depends(get_db_session),
) -> "ProjectApplicationService":
    """Get ProjectApplicationService (request-scoped)."""
    return build_project_application_service(session)
