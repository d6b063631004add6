"""Maximum team size value object.

The maximum number of collaborators (excluding the owner) a project accepts.
Capacity checks compare it with the number of active non-owner members.
"""

from dataclasses import dataclass

from devmatch.domain.validators import validate_team_size

RECOMMENDED_MIN_SIZE = 2
RECOMMENDED_MAX_SIZE = 8


@dataclass(frozen=True)
class TeamSize:
    """Validated maximum team size (1-20).

    Attributes:
        value: Maximum number of members.

    Raises:
        ValueError: If value is outside 1-20.

    Example:
        >>> size = TeamSize(4)
        >>> size.is_full(4)
        True
        >>> size.available_slots(1)
        3
    """

    value: int

    def __post_init__(self) -> None:
        """Validate the size.

        Raises:
            ValueError: If the size is out of range.
        """
        validate_team_size(self.value)

    def is_small(self) -> bool:
        return self.value <= 3

    def is_medium(self) -> bool:
        return 3 < self.value <= 6

    def is_large(self) -> bool:
        return self.value > 6

    def is_recommended(self) -> bool:
        """Between two and eight people."""
        return RECOMMENDED_MIN_SIZE <= self.value <= RECOMMENDED_MAX_SIZE

    def is_full(self, current_members: int) -> bool:
        """Check if the team has reached its maximum.

        Args:
            current_members: Number of active non-owner members.

        Returns:
            True if current_members >= value.
        """
        return current_members >= self.value

    def available_slots(self, current_members: int) -> int:
        """Remaining open slots (never negative)."""
        return max(0, self.value - current_members)

    def utilization_percentage(self, current_members: int) -> float:
        """Share of the team already filled, in percent."""
        return current_members / self.value * 100

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
