"""Project description value object."""

from dataclasses import dataclass

from devmatch.domain.validators import count_words, validate_project_description


@dataclass(frozen=True)
class ProjectDescription:
    """Validated, trimmed project description.

    Attributes:
        value: Description text (20-2000 chars, 5-500 words).

    Raises:
        ValueError: If the description breaks a description rule.
    """

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", validate_project_description(self.value))

    @property
    def length(self) -> int:
        return len(self.value)

    @property
    def word_count(self) -> int:
        return count_words(self.value)

    def is_short(self) -> bool:
        """Descriptions of 20 words or fewer."""
        return self.word_count <= 20

    def is_long(self) -> bool:
        """Descriptions of 100 words or more."""
        return self.word_count >= 100

    def contains_keyword(self, keyword: str) -> bool:
        """Case-insensitive substring search."""
        return keyword.lower() in self.value.lower()

    def summary(self, max_length: int) -> str:
        """Truncate to max_length characters, appending an ellipsis if cut."""
        if len(self.value) <= max_length:
            return self.value
        return self.value[:max_length] + "..."

    def __str__(self) -> str:
        return self.value
