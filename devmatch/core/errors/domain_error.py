"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every business failure DevMatch reports.
Errors flow through the system as data inside ``Failure``; the boundary
layer (controllers, not part of this package) maps them to responses.

Architecture:
- Base class for all error kinds (not found, not allowed, limit, state)
- Does NOT inherit from Exception (returned in Result, never raised)
- Uses dataclass inheritance (NOT Protocol/ABC)

Usage:
    from devmatch.core.errors import DomainError
    from devmatch.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from devmatch.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
