"""Project application aggregate.

One user's request to join one project.

State Machine:
    PENDING ──accept()──> ACCEPTED   (resolved_at set)
    PENDING ──reject()──> REJECTED   (resolved_at set)
    PENDING ──cancel()──> PENDING with lifecycle DEACTIVATED

    ACCEPTED and REJECTED are terminal; a cancelled application accepts no
    further transition. Accept/reject and cancel are mutually exclusive.

Transitions return Result: Failure(IllegalStateError) when the guard
(can_be_accepted / can_be_rejected / can_be_cancelled) is false. The
orchestrators check the guard first, so such a Failure past an
orchestrator points to a bug.
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID

from devmatch.core.enums import ErrorCode
from devmatch.core.errors import IllegalStateError
from devmatch.core.result import Failure, Result, Success
from devmatch.domain.enums import ApplicationStatus, LifecycleState
from devmatch.domain.value_objects import MotivationMessage


@dataclass(frozen=True, kw_only=True)
class ProjectApplication:
    """Request by a user to join a project.

    Attributes:
        id: Application identifier (None until persisted).
        project_id: Target project.
        user_id: Applicant.
        motivation_message: Why the applicant wants to join.
        status: PENDING, ACCEPTED or REJECTED.
        seen_by_owner: Whether the owner has listed it.
        submitted_at: When the application was made.
        resolved_at: When it was accepted or rejected.
        lifecycle: ACTIVE, or DEACTIVATED once cancelled.
        created_at: Creation timestamp.
        updated_at: Last transition timestamp.
    """

    project_id: UUID
    user_id: UUID
    motivation_message: MotivationMessage
    id: UUID | None = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    seen_by_owner: bool = False
    submitted_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    resolved_at: datetime | None = None
    lifecycle: LifecycleState = LifecycleState.ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    @classmethod
    def submit(
        cls,
        *,
        project_id: UUID,
        user_id: UUID,
        motivation_message: MotivationMessage,
    ) -> "ProjectApplication":
        """Build a new PENDING, unseen, active application."""
        return cls(
            project_id=project_id,
            user_id=user_id,
            motivation_message=motivation_message,
        )

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.lifecycle.is_active

    @property
    def is_deleted(self) -> bool:
        return self.lifecycle.is_deleted

    def is_pending(self) -> bool:
        return self.status == ApplicationStatus.PENDING

    def is_accepted(self) -> bool:
        return self.status == ApplicationStatus.ACCEPTED

    def is_rejected(self) -> bool:
        return self.status == ApplicationStatus.REJECTED

    def is_cancelled(self) -> bool:
        """Pending but withdrawn by the applicant."""
        return self.is_pending() and self.lifecycle is not LifecycleState.ACTIVE

    def _is_open(self) -> bool:
        return self.is_pending() and self.lifecycle is LifecycleState.ACTIVE

    def can_be_accepted(self) -> bool:
        """Pending and active."""
        return self._is_open()

    def can_be_rejected(self) -> bool:
        """Pending and active."""
        return self._is_open()

    def can_be_cancelled(self) -> bool:
        """Pending and active."""
        return self._is_open()

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def _illegal(self, action: str) -> Failure[IllegalStateError]:
        state = "cancelled" if self.is_cancelled() else self.status.value
        return Failure(
            error=IllegalStateError(
                code=ErrorCode.INVALID_STATE_TRANSITION,
                message=f"Cannot {action} an application that is {state}",
                current_state=state,
            )
        )

    def accept(self) -> Result["ProjectApplication", IllegalStateError]:
        """Transition PENDING → ACCEPTED.

        Returns:
            Success(ProjectApplication): New instance with status ACCEPTED
                and resolved_at/updated_at set to now.
            Failure(IllegalStateError): If can_be_accepted() is False.
        """
        if not self.can_be_accepted():
            return self._illegal("accept")
        now = datetime.now(UTC)
        return Success(
            value=replace(
                self,
                status=ApplicationStatus.ACCEPTED,
                resolved_at=now,
                updated_at=now,
            )
        )

    def reject(self) -> Result["ProjectApplication", IllegalStateError]:
        """Transition PENDING → REJECTED.

        Returns:
            Success(ProjectApplication): New instance with status REJECTED
                and resolved_at/updated_at set to now.
            Failure(IllegalStateError): If can_be_rejected() is False.
        """
        if not self.can_be_rejected():
            return self._illegal("reject")
        now = datetime.now(UTC)
        return Success(
            value=replace(
                self,
                status=ApplicationStatus.REJECTED,
                resolved_at=now,
                updated_at=now,
            )
        )

    def cancel(self) -> Result["ProjectApplication", IllegalStateError]:
        """Withdraw a pending application (status stays PENDING).

        Returns:
            Success(ProjectApplication): New instance with lifecycle
                DEACTIVATED.
            Failure(IllegalStateError): If can_be_cancelled() is False.
        """
        if not self.can_be_cancelled():
            return self._illegal("cancel")
        return Success(
            value=replace(
                self,
                lifecycle=LifecycleState.DEACTIVATED,
                updated_at=datetime.now(UTC),
            )
        )

    def mark_as_seen(self) -> "ProjectApplication":
        """Flag the application as seen by the owner.

        Idempotent: returns ``self`` when already seen.
        """
        if self.seen_by_owner:
            return self
        return replace(self, seen_by_owner=True, updated_at=datetime.now(UTC))
