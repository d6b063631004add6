"""Unit tests for the ProjectMember entity."""

import pytest
from uuid_extensions import uuid7

from devmatch.domain.entities import ProjectMember
from devmatch.domain.enums import LifecycleState, MemberRole
from tests.conftest import create_member


@pytest.mark.unit
class TestProjectMember:
    """Test membership creation, role changes and leaving."""

    def test_join_creates_current_membership(self):
        member = ProjectMember.join(
            project_id=uuid7(), user_id=uuid7(), role=MemberRole.DEVELOPER.value
        )

        assert member.id is None
        assert member.is_current()
        assert member.is_active
        assert not member.is_owner
        assert member.left_at is None

    def test_role_is_trimmed(self):
        member = create_member(role="  Frontend Lead ")
        assert member.member_role == "Frontend Lead"

    @pytest.mark.parametrize("role", ["", "   ", "x" * 51])
    def test_rejects_invalid_role(self, role):
        with pytest.raises(ValueError):
            create_member(role=role)

    def test_change_role_returns_new_instance(self):
        member = create_member()

        relabelled = member.change_role("QA")

        assert relabelled.member_role == "QA"
        assert member.member_role == MemberRole.DEVELOPER.value
        assert relabelled.id == member.id

    def test_change_role_validates(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            create_member().change_role(" ")

    def test_leave_deactivates_and_sets_left_at(self):
        member = create_member()

        departed = member.leave()

        assert departed.left_at is not None
        assert departed.lifecycle is LifecycleState.DEACTIVATED
        assert not departed.is_current()
        assert member.is_current()
