"""Domain services."""

from devmatch.domain.services.project_policy import (
    MAX_PROJECTS_PER_OWNER,
    ProjectPolicy,
)

__all__ = ["MAX_PROJECTS_PER_OWNER", "ProjectPolicy"]
