"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from devmatch.core.errors import DomainError, NotFoundError
"""

from devmatch.core.errors.common_errors import (
    IllegalStateError,
    LimitExceededError,
    NotFoundError,
    OperationNotAllowedError,
    ValidationError,
)
from devmatch.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "OperationNotAllowedError",
    "LimitExceededError",
    "IllegalStateError",
]
