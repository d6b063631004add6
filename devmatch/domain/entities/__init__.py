"""Domain entities and aggregates."""

from devmatch.domain.entities.project import Project
from devmatch.domain.entities.project_application import ProjectApplication
from devmatch.domain.entities.project_member import ProjectMember
from devmatch.domain.entities.user_summary import UserSummary

__all__ = [
    "Project",
    "ProjectApplication",
    "ProjectMember",
    "UserSummary",
]
