"""Unit tests for rebuilding value objects from stored columns.

Tests cover:
- Rebuilt objects equal freshly validated ones for valid values
- Values that fail today's rules are still rebuilt
- NULL columns map to None
"""

import pytest

from devmatch.domain.value_objects import (
    CoverImageUrl,
    ProjectDescription,
    ProjectDuration,
    RepositoryUrl,
    TeamSize,
)
from devmatch.infrastructure.persistence.rehydration import (
    stored_cover_image_url,
    stored_description,
    stored_duration,
    stored_repo_url,
    stored_team_size,
)


@pytest.mark.unit
class TestStoredValues:
    def test_valid_values_equal_validated_objects(self):
        url = RepositoryUrl("www.github.com/acme/tracker/")

        assert stored_repo_url(url.normalized) == url
        assert stored_repo_url(url.normalized).owner == "acme"
        assert stored_duration(6) == ProjectDuration(6)
        assert stored_team_size(4) == TeamSize(4)

    def test_cover_image_keeps_derived_properties(self):
        cover = stored_cover_image_url("https://imgur.com/cover.png")

        assert cover == CoverImageUrl("https://imgur.com/cover.png")
        assert cover.image_format == "PNG"
        assert cover.is_from_trusted_domain()

    def test_invalid_values_are_rebuilt_as_stored(self):
        description = stored_description("tiny")

        assert description.value == "tiny"
        assert stored_team_size(0).value == 0
        with pytest.raises(ValueError):
            ProjectDescription("tiny")

    @pytest.mark.parametrize(
        "rebuild",
        [stored_repo_url, stored_cover_image_url, stored_duration, stored_team_size],
    )
    def test_null_column_is_none(self, rebuild):
        assert rebuild(None) is None
