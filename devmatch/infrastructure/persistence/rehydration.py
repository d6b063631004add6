"""Rebuild value objects from stored columns without re-validating them.

Values were validated when they were written. Loading them again must not
depend on today's rules, otherwise tightening a rule (a longer minimum
description, a new forbidden word, a dropped repository host) would make
existing rows unreadable.

Only persistence mappers use this. Everything coming from users still goes
through the normal constructors.
"""

from typing import Any, TypeVar

from devmatch.domain.value_objects import (
    CoverImageUrl,
    MotivationMessage,
    ProjectDescription,
    ProjectDuration,
    ProjectTitle,
    RepositoryUrl,
    TeamSize,
)


T = TypeVar("T")


def rehydrate(cls: type[T], **fields: Any) -> T:
    """Create a frozen value object with the given fields, skipping __post_init__.

    Args:
        cls: Value object class.
        **fields: Every dataclass field of cls, by name.

    Returns:
        Instance of cls holding exactly the given field values.
    """
    instance = object.__new__(cls)
    for name, value in fields.items():
        object.__setattr__(instance, name, value)
    return instance


def stored_title(value: str) -> ProjectTitle:
    return rehydrate(ProjectTitle, value=value)


def stored_description(value: str) -> ProjectDescription:
    return rehydrate(ProjectDescription, value=value)


def stored_motivation(value: str) -> MotivationMessage:
    return rehydrate(MotivationMessage, value=value)


def stored_repo_url(value: str | None) -> RepositoryUrl | None:
    """Repository URLs are stored in normalized form."""
    if not value:
        return None
    return rehydrate(RepositoryUrl, value=value, normalized=value)


def stored_cover_image_url(value: str | None) -> CoverImageUrl | None:
    """Cover image URLs are stored in normalized form."""
    if not value:
        return None
    return rehydrate(CoverImageUrl, value=value, normalized=value)


def stored_duration(weeks: int | None) -> ProjectDuration | None:
    return rehydrate(ProjectDuration, weeks=weeks) if weeks is not None else None


def stored_team_size(value: int | None) -> TeamSize | None:
    return rehydrate(TeamSize, value=value) if value is not None else None
