"""Project application status state machine.

State Machine:
    PENDING → ACCEPTED (owner accepts)
    PENDING → REJECTED (owner rejects)

ACCEPTED and REJECTED are terminal. Cancellation by the applicant is not a
status: it deactivates the application while the status stays PENDING.
"""

from enum import Enum


class ApplicationStatus(str, Enum):
    """Status of a user's request to join a project."""

    PENDING = "pending"
    """Submitted, waiting for the owner's decision."""

    ACCEPTED = "accepted"
    """Owner accepted; the applicant became a team member (terminal)."""

    REJECTED = "rejected"
    """Owner rejected the application (terminal)."""

    def is_terminal(self) -> bool:
        """Check if no further status transition is possible."""
        return self is not ApplicationStatus.PENDING
