"""Unit tests for ProjectPolicy (per-owner project quota)."""

import pytest
from uuid_extensions import uuid7

from devmatch.core.enums import ErrorCode
from devmatch.core.errors import LimitExceededError
from devmatch.core.result import Failure, Success
from devmatch.domain.services import MAX_PROJECTS_PER_OWNER, ProjectPolicy


@pytest.mark.unit
class TestProjectPolicy:
    def test_maximum_is_five(self):
        assert MAX_PROJECTS_PER_OWNER == 5
        assert ProjectPolicy().max_projects_per_owner == 5

    @pytest.mark.parametrize("count", [0, 1, 4])
    def test_allows_below_maximum(self, count):
        result = ProjectPolicy().validate_project_creation(uuid7(), count)

        assert isinstance(result, Success)
        assert result.value is None

    @pytest.mark.parametrize("count", [5, 6])
    def test_refuses_at_or_above_maximum(self, count):
        owner_id = uuid7()

        result = ProjectPolicy().validate_project_creation(owner_id, count)

        assert isinstance(result, Failure)
        assert isinstance(result.error, LimitExceededError)
        assert result.error.code == ErrorCode.PROJECT_LIMIT_EXCEEDED
        assert result.error.limit == 5
        assert result.error.current == count
        assert result.error.details == {"owner_id": str(owner_id)}
