"""Centralized validation functions (DRY principle).

All text and number rules for project data are defined once here and reused
by the value objects. Validators are pure functions that return the
normalized value or raise ValueError on validation failure.

Rules:
    - Project title: 5-100 chars, letters/digits/space/-/_/. and accents,
      not exactly a blocklisted word
    - Project description: 20-2000 chars, 5-500 words, not only symbols,
      no blocklisted word anywhere
    - Motivation message: 10-1000 chars, 5-200 words, no blocklisted word
    - Estimated duration: 1-104 weeks
    - Team size: 1-20 people
"""

import re

# Words rejected in user-authored project text (case-insensitive)
BLOCKED_TERMS: tuple[str, ...] = ("spam", "test", "prueba", "lorem ipsum")

TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 100
_TITLE_PATTERN = re.compile(r"^[a-zA-Z0-9\s\-_.ñÑáéíóúüÁÉÍÓÚÜ]+$")

DESCRIPTION_MIN_LENGTH = 20
DESCRIPTION_MAX_LENGTH = 2000
DESCRIPTION_MIN_WORDS = 5
DESCRIPTION_MAX_WORDS = 500

MOTIVATION_MIN_LENGTH = 10
MOTIVATION_MAX_LENGTH = 1000
MOTIVATION_MIN_WORDS = 5
MOTIVATION_MAX_WORDS = 200

DURATION_MIN_WEEKS = 1
DURATION_MAX_WEEKS = 104

TEAM_SIZE_MIN = 1
TEAM_SIZE_MAX = 20

_ONLY_SYMBOLS = re.compile(r"^[\s\W]+$")


def count_words(text: str) -> int:
    """Count whitespace-separated words.

    Args:
        text: Text to count.

    Returns:
        Number of words (0 for blank text).
    """
    return len(text.split())


def _contains_blocked_term(text: str) -> bool:
    lowered = text.lower()
    return any(term in lowered for term in BLOCKED_TERMS)


def _require_text(value: str | None, label: str) -> str:
    if value is None:
        raise ValueError(f"{label} cannot be null")
    trimmed = value.strip()
    if not trimmed:
        raise ValueError(f"{label} cannot be empty")
    return trimmed


def _check_bounds(
    text: str,
    label: str,
    min_length: int,
    max_length: int,
    min_words: int,
    max_words: int,
) -> None:
    if len(text) < min_length:
        raise ValueError(f"{label} must be at least {min_length} characters")
    if len(text) > max_length:
        raise ValueError(f"{label} cannot exceed {max_length} characters")

    words = count_words(text)
    if words < min_words:
        raise ValueError(f"{label} must contain at least {min_words} words")
    if words > max_words:
        raise ValueError(f"{label} cannot exceed {max_words} words")


def validate_project_title(v: str | None) -> str:
    """Validate a project title.

    Args:
        v: Raw title.

    Returns:
        Trimmed title.

    Raises:
        ValueError: If the title is blank, too short/long, contains
            unsupported characters, or is exactly a blocked word.

    Example:
        >>> validate_project_title("  Open Source Tracker ")
        'Open Source Tracker'
        >>> validate_project_title("test")
        ValueError: Project title contains a blocked word
    """
    title = _require_text(v, "Project title")

    if len(title) < TITLE_MIN_LENGTH:
        raise ValueError(
            f"Project title must be at least {TITLE_MIN_LENGTH} characters"
        )
    if len(title) > TITLE_MAX_LENGTH:
        raise ValueError(f"Project title cannot exceed {TITLE_MAX_LENGTH} characters")
    if not _TITLE_PATTERN.match(title):
        raise ValueError(
            "Project title may only contain letters, digits, spaces, "
            "hyphens, underscores, periods and accents"
        )
    # Titles are only refused when they are exactly a blocked word
    if title.lower() in BLOCKED_TERMS:
        raise ValueError("Project title contains a blocked word")

    return title


def validate_project_description(v: str | None) -> str:
    """Validate a project description.

    Args:
        v: Raw description.

    Returns:
        Trimmed description.

    Raises:
        ValueError: If length or word count is out of range, the text is only
            symbols, or it contains a blocked word.
    """
    description = _require_text(v, "Project description")
    _check_bounds(
        description,
        "Project description",
        DESCRIPTION_MIN_LENGTH,
        DESCRIPTION_MAX_LENGTH,
        DESCRIPTION_MIN_WORDS,
        DESCRIPTION_MAX_WORDS,
    )
    if _ONLY_SYMBOLS.match(description):
        raise ValueError(
            "Project description cannot contain only spaces or special characters"
        )
    if _contains_blocked_term(description):
        raise ValueError("Project description contains blocked content")
    return description


def validate_motivation_message(v: str | None) -> str:
    """Validate an applicant's motivation message.

    Args:
        v: Raw message.

    Returns:
        Trimmed message.

    Raises:
        ValueError: If length or word count is out of range or the message
            contains a blocked word.

    Example:
        >>> validate_motivation_message("I build APIs daily and want to help")
        'I build APIs daily and want to help'
    """
    message = _require_text(v, "Motivation message")
    _check_bounds(
        message,
        "Motivation message",
        MOTIVATION_MIN_LENGTH,
        MOTIVATION_MAX_LENGTH,
        MOTIVATION_MIN_WORDS,
        MOTIVATION_MAX_WORDS,
    )
    if _contains_blocked_term(message):
        raise ValueError("Motivation message contains blocked content")
    return message


def validate_duration_weeks(v: int) -> int:
    """Validate an estimated project duration in weeks.

    Raises:
        ValueError: If outside 1-104 weeks (two years).
    """
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError("Duration must be an integer number of weeks")
    if v < DURATION_MIN_WEEKS:
        raise ValueError(f"Duration must be at least {DURATION_MIN_WEEKS} week")
    if v > DURATION_MAX_WEEKS:
        raise ValueError(f"Duration cannot exceed {DURATION_MAX_WEEKS} weeks (2 years)")
    return v


def validate_team_size(v: int) -> int:
    """Validate a maximum team size.

    Raises:
        ValueError: If outside 1-20 people.
    """
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError("Team size must be an integer")
    if v < TEAM_SIZE_MIN:
        raise ValueError(f"Team size must be at least {TEAM_SIZE_MIN}")
    if v > TEAM_SIZE_MAX:
        raise ValueError(f"Team size cannot exceed {TEAM_SIZE_MAX}")
    return v
