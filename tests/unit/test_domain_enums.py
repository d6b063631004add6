"""Unit tests for domain enums."""

import pytest

from devmatch.domain.enums import (
    ApplicationStatus,
    LifecycleState,
    MemberRole,
    ProjectStatus,
)


@pytest.mark.unit
class TestProjectStatus:
    def test_values(self):
        assert ProjectStatus.values() == [
            "open",
            "in_progress",
            "completed",
            "cancelled",
            "under_review",
        ]

    def test_display_name(self):
        assert ProjectStatus.IN_PROGRESS.display_name == "In Progress"

    def test_parses_from_value(self):
        assert ProjectStatus("under_review") is ProjectStatus.UNDER_REVIEW


@pytest.mark.unit
class TestApplicationStatus:
    def test_only_pending_is_not_terminal(self):
        assert not ApplicationStatus.PENDING.is_terminal()
        assert ApplicationStatus.ACCEPTED.is_terminal()
        assert ApplicationStatus.REJECTED.is_terminal()


@pytest.mark.unit
class TestLifecycleState:
    @pytest.mark.parametrize(
        ("state", "is_active", "is_deleted"),
        [
            (LifecycleState.ACTIVE, True, False),
            (LifecycleState.DEACTIVATED, False, False),
            (LifecycleState.DELETED, False, True),
        ],
    )
    def test_flags(self, state, is_active, is_deleted):
        assert state.is_active is is_active
        assert state.is_deleted is is_deleted

    def test_from_flags_never_yields_deleted_but_active(self):
        assert (
            LifecycleState.from_flags(is_active=True, is_deleted=True)
            is LifecycleState.DELETED
        )
        assert (
            LifecycleState.from_flags(is_active=False, is_deleted=False)
            is LifecycleState.DEACTIVATED
        )
        assert (
            LifecycleState.from_flags(is_active=True, is_deleted=False)
            is LifecycleState.ACTIVE
        )


@pytest.mark.unit
def test_member_role_values():
    assert MemberRole.LEADER.value == "LEADER"
    assert MemberRole.DEVELOPER.value == "DEVELOPER"
