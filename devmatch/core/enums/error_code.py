"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Operation refusals (*_NOT_OWNED, *_NOT_OPEN, *_FULL, *_ALREADY_*)
- Quota violations (*_LIMIT_EXCEEDED)
- Aggregate transition guards (INVALID_STATE_TRANSITION)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_MEMBER_ROLE = "invalid_member_role"

    # Resource errors
    PROJECT_NOT_FOUND = "project_not_found"
    APPLICATION_NOT_FOUND = "application_not_found"
    USER_NOT_FOUND = "user_not_found"
    MEMBER_NOT_FOUND = "member_not_found"

    # Operation refusals (authorization and wrong-state checks)
    PROJECT_NOT_OWNED = "project_not_owned"
    PROJECT_NOT_EDITABLE = "project_not_editable"
    PROJECT_NOT_VISIBLE = "project_not_visible"
    PROJECT_NOT_PUBLIC = "project_not_public"
    PROJECT_NOT_OPEN = "project_not_open"
    PROJECT_FULL = "project_full"
    OWNER_CANNOT_APPLY = "owner_cannot_apply"
    OWNER_CANNOT_BE_REMOVED = "owner_cannot_be_removed"
    APPLICATION_ALREADY_EXISTS = "application_already_exists"
    APPLICATION_NOT_IN_PROJECT = "application_not_in_project"
    APPLICATION_NOT_PENDING = "application_not_pending"
    APPLICATION_NOT_OWNED = "application_not_owned"
    APPLICATION_NOT_CANCELLABLE = "application_not_cancellable"
    ALREADY_A_MEMBER = "already_a_member"

    # Quota violations
    PROJECT_LIMIT_EXCEEDED = "project_limit_exceeded"

    # Aggregate transition guards
    INVALID_STATE_TRANSITION = "invalid_state_transition"
