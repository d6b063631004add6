"""Well-known project member role labels.

Member roles are free-form labels; these are the two the workflows assign
on their own. Owners may set any other label through change_member_role.
"""

from enum import Enum


class MemberRole(str, Enum):
    """Role labels assigned automatically by the workflows."""

    LEADER = "LEADER"
    """Assigned to the project owner at creation."""

    DEVELOPER = "DEVELOPER"
    """Assigned to an applicant when their application is accepted."""
