"""Centralized validation functions for project data.

Usage:
    from devmatch.domain.validators import validate_project_title
"""

from devmatch.domain.validators.functions import (
    BLOCKED_TERMS,
    count_words,
    validate_duration_weeks,
    validate_motivation_message,
    validate_project_description,
    validate_project_title,
    validate_team_size,
)

__all__ = [
    "BLOCKED_TERMS",
    "count_words",
    "validate_duration_weeks",
    "validate_motivation_message",
    "validate_project_description",
    "validate_project_title",
    "validate_team_size",
]
