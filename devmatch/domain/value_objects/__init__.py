"""Value objects for project data.

Immutable, self-validating wrappers. Construction raises ValueError when a
rule is broken; orchestrators turn that into Failure(ValidationError).
"""

from devmatch.domain.value_objects.cover_image_url import CoverImageUrl
from devmatch.domain.value_objects.motivation_message import MotivationMessage
from devmatch.domain.value_objects.project_description import ProjectDescription
from devmatch.domain.value_objects.project_duration import ProjectDuration
from devmatch.domain.value_objects.project_title import ProjectTitle
from devmatch.domain.value_objects.repository_url import RepositoryUrl
from devmatch.domain.value_objects.team_size import TeamSize

__all__ = [
    "CoverImageUrl",
    "MotivationMessage",
    "ProjectDescription",
    "ProjectDuration",
    "ProjectTitle",
    "RepositoryUrl",
    "TeamSize",
]
