"""Container module - Centralized dependency injection (composition root).

    from devmatch.core.container import get_logger, get_project_application_service

The container is organized into modules:
- infrastructure: Database, session and logger
- repositories: Repository factories
- services: Workflow orchestrator factories
"""

# Infrastructure services
from devmatch.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
)

# Repositories
from devmatch.core.container.repositories import (
    get_project_application_repository,
    get_project_member_repository,
    get_project_repository,
    get_user_query,
)

# Orchestrators
from devmatch.core.container.services import (
    build_project_application_service,
    build_project_management_service,
    get_project_application_service,
    get_project_management_service,
)

__all__ = [
    "build_project_application_service",
    "build_project_management_service",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_project_application_repository",
    "get_project_application_service",
    "get_project_management_service",
    "get_project_member_repository",
    "get_project_repository",
    "get_user_query",
]
