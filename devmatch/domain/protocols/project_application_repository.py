"""ProjectApplicationRepository protocol for application persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from devmatch.domain.entities.project_application import ProjectApplication


class ProjectApplicationRepository(Protocol):
    """Project application repository protocol (port).

    Methods:
        find_by_id: Retrieve application by ID (optionally locked)
        mark_seen: Flag an application as seen by the owner
        save: Create or update application
        find_by_project_id: Applications received by a project
        find_by_user_id: Applications made by a user
        exists_by_project_id_and_user_id: Duplicate-application check
    """

    async def find_by_id(
        self, application_id: UUID, *, for_update: bool = False
    ) -> ProjectApplication | None:
        """Find application by ID.

        Args:
            application_id: Application identifier.
            for_update: Lock the row until the transaction ends and read its
                current state, so a decision (accept, reject, cancel) is
                taken on a snapshot nobody else can change first.

        Returns:
            ProjectApplication if found, None otherwise.
        """
        ...

    async def mark_seen(self, application_id: UUID, seen_at: datetime) -> None:
        """Set only the seen-by-owner flag (and updated_at) of an application.

        Leaves status and lifecycle untouched, so listing never overwrites a
        decision taken concurrently.
        """
        ...

    async def save(self, application: ProjectApplication) -> ProjectApplication:
        """Create or update an application.

        Returns:
            The persisted application (with id set).
        """
        ...

    async def find_by_project_id(self, project_id: UUID) -> list[ProjectApplication]:
        """List applications for a project, oldest first.

        Cancelled applications are included; callers filter if needed.
        """
        ...

    async def find_by_user_id(self, user_id: UUID) -> list[ProjectApplication]:
        """List a user's applications, newest first."""
        ...

    async def exists_by_project_id_and_user_id(
        self, project_id: UUID, user_id: UUID
    ) -> bool:
        """Check if a user has ever applied to a project.

        Any prior application counts, whatever its status or lifecycle,
        so a user applies to a project at most once.

        Args:
            project_id: Project identifier.
            user_id: Applicant identifier.

        Returns:
            True if an application exists.
        """
        ...
