"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from devmatch.infrastructure.persistence.base import BaseModel
from devmatch.infrastructure.persistence.models.project import ProjectModel
from devmatch.infrastructure.persistence.models.project_application import (
    ProjectApplicationModel,
)
from devmatch.infrastructure.persistence.models.project_member import (
    ProjectMemberModel,
)
from devmatch.infrastructure.persistence.models.user import UserModel

__all__ = [
    "BaseModel",
    "ProjectApplicationModel",
    "ProjectMemberModel",
    "ProjectModel",
    "UserModel",
]
