"""Application DTOs."""

from devmatch.application.dtos.project_dtos import ProjectMemberResult

__all__ = ["ProjectMemberResult"]
