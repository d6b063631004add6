"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from devmatch.core.enums import ErrorCode, Environment
"""

from devmatch.core.enums.environment import Environment
from devmatch.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
