"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from devmatch.domain.protocols import ProjectRepository, LoggerProtocol
"""

# Service protocols
from devmatch.domain.protocols.logger_protocol import LoggerProtocol
from devmatch.domain.protocols.user_query_protocol import UserQueryProtocol

# Repository protocols
from devmatch.domain.protocols.project_application_repository import (
    ProjectApplicationRepository,
)
from devmatch.domain.protocols.project_member_repository import (
    ProjectMemberRepository,
)
from devmatch.domain.protocols.project_repository import ProjectRepository

__all__ = [
    "LoggerProtocol",
    "ProjectApplicationRepository",
    "ProjectMemberRepository",
    "ProjectRepository",
    "UserQueryProtocol",
]
