"""Repository adapters (implement domain.protocols without inheriting)."""

from devmatch.infrastructure.persistence.repositories.project_application_repository import (
    ProjectApplicationRepository,
)
from devmatch.infrastructure.persistence.repositories.project_member_repository import (
    ProjectMemberRepository,
)
from devmatch.infrastructure.persistence.repositories.project_repository import (
    ProjectRepository,
)
from devmatch.infrastructure.persistence.repositories.user_query_repository import (
    UserQueryRepository,
)

__all__ = [
    "ProjectApplicationRepository",
    "ProjectMemberRepository",
    "ProjectRepository",
    "UserQueryRepository",
]
