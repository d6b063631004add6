"""Error kinds shared by the project and application workflows.

Error Types:
- ValidationError: Raw input rejected by a value object
- NotFoundError: Project, application, member or user id does not resolve
- OperationNotAllowedError: Authorization failure, wrong state, project
  full, duplicate application (caller-correctable)
- LimitExceededError: Project-creation quota reached
- IllegalStateError: Aggregate transition guard tripped. Orchestrators
  pre-check with can_be_accepted()/can_be_rejected()/can_be_cancelled(),
  so seeing this past an orchestrator indicates a bug.

Usage:
    from devmatch.core.errors import NotFoundError
    from devmatch.core.enums import ErrorCode
    from devmatch.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.PROJECT_NOT_FOUND,
        message="Project not found",
        resource_type="Project",
        resource_id=str(project_id),
    ))
"""

from dataclasses import dataclass

from devmatch.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Project, ProjectApplication, User).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class OperationNotAllowedError(DomainError):
    """Operation refused for the caller or for the current state.

    Attributes:
        operation: Short name of the refused operation (e.g. "accept").
    """

    operation: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class LimitExceededError(DomainError):
    """Quota reached.

    Attributes:
        limit: Maximum allowed count.
        current: Count observed when the request was made.
    """

    limit: int
    current: int


@dataclass(frozen=True, slots=True, kw_only=True)
class IllegalStateError(DomainError):
    """Aggregate transition attempted from a state that forbids it.

    Attributes:
        current_state: Description of the state the aggregate was in.
    """

    current_state: str | None = None
