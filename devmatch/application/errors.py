"""Failure builders shared by the workflow orchestrators.

Each helper wraps one error kind of ``devmatch.core.errors`` in a
``Failure`` so orchestrators can ``return not_found(...)`` directly.

Usage:
    from devmatch.application.errors import not_allowed, not_found

    if project is None:
        return not_found(ErrorCode.PROJECT_NOT_FOUND, "Project", project_id)
"""

from typing import Any
from uuid import UUID

from devmatch.core.enums import ErrorCode
from devmatch.core.errors import (
    NotFoundError,
    OperationNotAllowedError,
    ValidationError,
)
from devmatch.core.result import Failure


def not_found(
    code: ErrorCode, resource_type: str, resource_id: UUID | str
) -> Failure[Any]:
    """Failure for an id that does not resolve."""
    return Failure(
        error=NotFoundError(
            code=code,
            message=f"{resource_type} {resource_id} not found",
            resource_type=resource_type,
            resource_id=str(resource_id),
        )
    )


def not_allowed(code: ErrorCode, message: str, operation: str) -> Failure[Any]:
    """Failure for an operation refused to the caller or in the current state."""
    return Failure(
        error=OperationNotAllowedError(
            code=code,
            message=message,
            operation=operation,
        )
    )


def invalid_input(error: ValueError, field: str) -> Failure[Any]:
    """Failure for raw input rejected by a value object.

    Args:
        error: ValueError raised by the value object's constructor.
        field: Input field that was rejected.
    """
    return Failure(
        error=ValidationError(
            code=ErrorCode.VALIDATION_FAILED,
            message=str(error),
            field=field,
        )
    )
