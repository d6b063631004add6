"""Workflow orchestrators.

Usage:
    from devmatch.application.services import ProjectApplicationService
"""

from devmatch.application.services.project_application_service import (
    ProjectApplicationService,
)
from devmatch.application.services.project_management_service import (
    ProjectManagementService,
)

__all__ = ["ProjectApplicationService", "ProjectManagementService"]
