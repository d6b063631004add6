"""Project title value object."""

from dataclasses import dataclass

from devmatch.domain.validators import validate_project_title


@dataclass(frozen=True)
class ProjectTitle:
    """Validated, trimmed project title.

    Attributes:
        value: Title text (5-100 chars, restricted character set).

    Raises:
        ValueError: If the title breaks a title rule.

    Example:
        >>> ProjectTitle("  Habit Tracker API ").value
        'Habit Tracker API'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the title.

        Raises:
            ValueError: If the title is invalid.
        """
        object.__setattr__(self, "value", validate_project_title(self.value))

    @property
    def length(self) -> int:
        """Number of characters in the title."""
        return len(self.value)

    def is_short(self) -> bool:
        """Titles of 20 characters or fewer."""
        return self.length <= 20

    def is_long(self) -> bool:
        """Titles of 50 characters or more."""
        return self.length >= 50

    def __str__(self) -> str:
        return self.value
