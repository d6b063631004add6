"""Project status values.

A project's status describes where it is in its development life. Status is
independent from the project's lifecycle state (active/deactivated/deleted):
changing one never changes the other.

Usage:
    from devmatch.domain.enums import ProjectStatus

    if project.status == ProjectStatus.OPEN:
        # Accepting applications (if also active)
"""

from enum import Enum


class ProjectStatus(str, Enum):
    """Development status of a project.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are lowercase for consistency.

    Transitions:
        The owner may move a project between any two statuses; no ordering
        is enforced.
    """

    OPEN = "open"
    """Looking for collaborators. The only status that accepts applications."""

    IN_PROGRESS = "in_progress"
    """Team formed and working."""

    COMPLETED = "completed"
    """Finished."""

    CANCELLED = "cancelled"
    """Abandoned before completion."""

    UNDER_REVIEW = "under_review"
    """Paused while the owner reviews scope or team."""

    @property
    def display_name(self) -> str:
        """Human-readable label (e.g. "In Progress")."""
        return self.value.replace("_", " ").title()

    def is_in_active_development(self) -> bool:
        """Check if work on the project is ongoing or about to start.

        Returns:
            True for OPEN, IN_PROGRESS and UNDER_REVIEW.
        """
        return self in _ACTIVE_DEVELOPMENT

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings.

        Returns:
            List of status string values.
        """
        return [status.value for status in cls]


_ACTIVE_DEVELOPMENT = frozenset(
    {ProjectStatus.OPEN, ProjectStatus.IN_PROGRESS, ProjectStatus.UNDER_REVIEW}
)
