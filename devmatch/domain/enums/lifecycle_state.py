"""Lifecycle state shared by projects, applications and memberships.

Replaces the pair of ``is_active`` / ``is_deleted`` flags with one tagged
state, so "deleted but active" cannot be represented.

States:
    ACTIVE      is_active=True,  is_deleted=False
    DEACTIVATED is_active=False, is_deleted=False
    DELETED     is_active=False, is_deleted=True
"""

from enum import Enum


class LifecycleState(str, Enum):
    """Soft lifecycle of a persisted record (never physically deleted)."""

    ACTIVE = "active"
    DEACTIVATED = "deactivated"
    DELETED = "deleted"

    @property
    def is_active(self) -> bool:
        """True only for ACTIVE."""
        return self is LifecycleState.ACTIVE

    @property
    def is_deleted(self) -> bool:
        """True only for DELETED."""
        return self is LifecycleState.DELETED

    @classmethod
    def from_flags(cls, *, is_active: bool, is_deleted: bool) -> "LifecycleState":
        """Build a state from legacy flag pairs.

        A deleted record is always reported as DELETED, whatever its
        active flag says.

        Args:
            is_active: Legacy active flag.
            is_deleted: Legacy deleted flag.

        Returns:
            The corresponding lifecycle state.
        """
        if is_deleted:
            return cls.DELETED
        return cls.ACTIVE if is_active else cls.DEACTIVATED
