"""ProjectRepository protocol for project persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from devmatch.domain.entities.project import Project


class ProjectRepository(Protocol):
    """Project repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve project by ID
        save: Create or update project
        find_by_owner_id: Retrieve all projects of an owner
        count_by_owner_id: Count projects of an owner (quota check)
    """

    async def find_by_id(self, project_id: UUID) -> Project | None:
        """Find project by ID, whatever its lifecycle state.

        Args:
            project_id: Project's unique identifier.

        Returns:
            Project if found, None otherwise.
        """
        ...

    async def save(self, project: Project) -> Project:
        """Create or update a project.

        Projects without an id are inserted and get a new id; others
        replace the stored row wholesale.

        Args:
            project: Project snapshot to persist.

        Returns:
            The persisted project (with id set).
        """
        ...

    async def find_by_owner_id(self, owner_id: UUID) -> list[Project]:
        """Find every non-deleted project owned by a user, newest first.

        Args:
            owner_id: Owner's user identifier.

        Returns:
            List of projects (empty if none).
        """
        ...

    async def count_by_owner_id(self, owner_id: UUID) -> int:
        """Count the non-deleted projects owned by a user.

        Deactivated projects count; deleted ones do not.

        Args:
            owner_id: Owner's user identifier.

        Returns:
            Number of projects.
        """
        ...
