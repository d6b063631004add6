"""Estimated project duration value object."""

import math
from dataclasses import dataclass

from devmatch.domain.validators import validate_duration_weeks

RECOMMENDED_MIN_WEEKS = 2
RECOMMENDED_MAX_WEEKS = 52


@dataclass(frozen=True)
class ProjectDuration:
    """Estimated duration of a project in weeks (1-104).

    Attributes:
        weeks: Number of weeks.

    Raises:
        ValueError: If weeks is outside 1-104.

    Example:
        >>> ProjectDuration(10).category
        'medium'
        >>> ProjectDuration(10).months
        3
    """

    weeks: int

    def __post_init__(self) -> None:
        validate_duration_weeks(self.weeks)

    @property
    def months(self) -> int:
        """Approximate duration in months, rounded up (4.33 weeks per month)."""
        return math.ceil(self.weeks / 4.33)

    @property
    def years(self) -> int:
        """Approximate duration in years, rounded up."""
        return math.ceil(self.weeks / 52)

    def is_short(self) -> bool:
        return self.weeks <= 4

    def is_medium(self) -> bool:
        return 4 < self.weeks <= 12

    def is_long(self) -> bool:
        return self.weeks > 12

    def is_recommended(self) -> bool:
        """Between two weeks and one year."""
        return RECOMMENDED_MIN_WEEKS <= self.weeks <= RECOMMENDED_MAX_WEEKS

    @property
    def category(self) -> str:
        """"short", "medium" or "long"."""
        if self.is_short():
            return "short"
        if self.is_medium():
            return "medium"
        return "long"

    def __str__(self) -> str:
        return str(self.weeks)
