"""Unit tests for the Failure builders and core error types."""

import pytest
from uuid_extensions import uuid7

from devmatch.application.errors import invalid_input, not_allowed, not_found
from devmatch.core.enums import ErrorCode
from devmatch.core.errors import (
    DomainError,
    NotFoundError,
    OperationNotAllowedError,
    ValidationError,
)
from devmatch.core.result import Failure


@pytest.mark.unit
class TestFailureBuilders:
    def test_not_found(self):
        project_id = uuid7()

        result = not_found(ErrorCode.PROJECT_NOT_FOUND, "Project", project_id)

        assert isinstance(result, Failure)
        assert result.error == NotFoundError(
            code=ErrorCode.PROJECT_NOT_FOUND,
            message=f"Project {project_id} not found",
            resource_type="Project",
            resource_id=str(project_id),
        )

    def test_not_allowed(self):
        result = not_allowed(ErrorCode.PROJECT_FULL, "Project is full", "accept")

        assert isinstance(result.error, OperationNotAllowedError)
        assert result.error.operation == "accept"
        assert result.error.message == "Project is full"

    def test_invalid_input_keeps_value_object_message(self):
        result = invalid_input(ValueError("Team size cannot exceed 20"), "max_team_size")

        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.message == "Team size cannot exceed 20"
        assert result.error.field == "max_team_size"


@pytest.mark.unit
class TestDomainError:
    def test_is_not_an_exception(self):
        assert not issubclass(DomainError, Exception)

    def test_str_includes_code(self):
        error = OperationNotAllowedError(
            code=ErrorCode.OWNER_CANNOT_APPLY, message="Owners cannot apply"
        )
        assert str(error) == "owner_cannot_apply: Owners cannot apply"
