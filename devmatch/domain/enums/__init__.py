"""Domain enums.

Usage:
    from devmatch.domain.enums import ProjectStatus, ApplicationStatus
"""

from devmatch.domain.enums.application_status import ApplicationStatus
from devmatch.domain.enums.lifecycle_state import LifecycleState
from devmatch.domain.enums.member_role import MemberRole
from devmatch.domain.enums.project_status import ProjectStatus

__all__ = [
    "ApplicationStatus",
    "LifecycleState",
    "MemberRole",
    "ProjectStatus",
]
