"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Error taxonomy returned inside Failure
- Settings and the dependency container

The core module has NO dependencies on the domain or application layers,
except for the container, which is the composition root.
"""

from devmatch.core.enums import ErrorCode
from devmatch.core.errors import (
    DomainError,
    IllegalStateError,
    LimitExceededError,
    NotFoundError,
    OperationNotAllowedError,
    ValidationError,
)
from devmatch.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "IllegalStateError",
    "LimitExceededError",
    "NotFoundError",
    "OperationNotAllowedError",
    "Result",
    "Success",
    "ValidationError",
]
