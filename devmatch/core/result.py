"""Result types for railway-oriented programming.

Business failures in DevMatch (project not found, project full, application
no longer pending, ...) are values, not exceptions. Every orchestrator and
every fallible aggregate transition returns a Result so callers must handle
both branches explicitly.

Usage:
    result = application.accept()
    match result:
        case Success(value=accepted):
            await application_repo.save(accepted)
        case Failure(error=error):
            logger.warning("accept_refused", code=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome of an operation.

    Attributes:
        value: The produced value (an aggregate, a list, or None).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome of an operation.

    Attributes:
        error: The error describing why the operation was refused.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
