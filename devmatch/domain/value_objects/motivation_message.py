"""Motivation message value object.

The free text an applicant writes when asking to join a project. It is shown
to the project owner alongside the application.

Rules:
    - 10 to 1000 characters after trimming
    - 5 to 200 words
    - No blocked terms (spam, test, prueba, lorem ipsum) anywhere in the text
"""

from dataclasses import dataclass

from devmatch.domain.validators import count_words, validate_motivation_message


@dataclass(frozen=True)
class MotivationMessage:
    """Validated motivation text attached to a project application.

    Attributes:
        value: Trimmed message text.

    Raises:
        ValueError: If the message breaks a motivation rule.

    Example:
        >>> msg = MotivationMessage("I have shipped three Django apps and want to help")
        >>> msg.word_count
        10
        >>> msg.is_short()
        True
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the message.

        Raises:
            ValueError: If the message is invalid.
        """
        object.__setattr__(self, "value", validate_motivation_message(self.value))

    @property
    def length(self) -> int:
        """Number of characters in the message."""
        return len(self.value)

    @property
    def word_count(self) -> int:
        """Number of whitespace-separated words."""
        return count_words(self.value)

    def is_short(self) -> bool:
        """Messages of 20 words or fewer."""
        return self.word_count <= 20

    def is_long(self) -> bool:
        """Messages of 100 words or more."""
        return self.word_count >= 100

    def contains_keyword(self, keyword: str) -> bool:
        """Check if the message mentions a keyword (case-insensitive).

        Args:
            keyword: Text to look for.

        Returns:
            True if keyword appears anywhere in the message.
        """
        return keyword.lower() in self.value.lower()

    def summary(self, max_length: int) -> str:
        """Get a preview of the message.

        Args:
            max_length: Maximum number of characters to keep.

        Returns:
            The message, truncated with "..." when longer than max_length.
        """
        if len(self.value) <= max_length:
            return self.value
        return self.value[:max_length] + "..."

    def __str__(self) -> str:
        return self.value
