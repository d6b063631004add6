"""Unit tests for ProjectManagementService.

Tests cover:
- create_project: quota, status parsing, field validation, owner membership
- update/status/visibility/deactivate/delete: owner of an active project only
- restore_project: owner only, works on inactive projects
- Team management: remove member, change role
- Queries: visibility rules, member enrichment with fallback username

Architecture:
- Repositories and user query mocked with AsyncMock(spec=Protocol)
- Real ProjectPolicy (pure domain service)
"""

from dataclasses import replace
from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from devmatch.application.dtos import ProjectMemberResult
from devmatch.application.services import ProjectManagementService
from devmatch.core.enums import ErrorCode
from devmatch.core.errors import (
    LimitExceededError,
    NotFoundError,
    OperationNotAllowedError,
    ValidationError,
)
from devmatch.core.result import Failure, Success
from devmatch.domain.enums import LifecycleState, ProjectStatus
from devmatch.domain.protocols import (
    LoggerProtocol,
    ProjectMemberRepository,
    ProjectRepository,
    UserQueryProtocol,
)
from devmatch.domain.services import ProjectPolicy
from devmatch.domain.value_objects import TeamSize
from tests.conftest import (
    VALID_DESCRIPTION,
    VALID_TITLE,
    create_member,
    create_project,
    create_user,
)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def owner_id():
    return uuid7()


@pytest.fixture
def project_repo() -> AsyncMock:
    """Project repository whose save() assigns an id like the real one."""
    repo = AsyncMock(spec=ProjectRepository)
    repo.save.side_effect = lambda project: (
        project if project.id else replace(project, id=uuid7())
    )
    repo.count_by_owner_id.return_value = 0
    return repo


@pytest.fixture
def member_repo() -> AsyncMock:
    repo = AsyncMock(spec=ProjectMemberRepository)
    repo.save.side_effect = lambda member: member
    return repo


@pytest.fixture
def user_query() -> AsyncMock:
    return AsyncMock(spec=UserQueryProtocol)


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock(spec=LoggerProtocol)


@pytest.fixture
def service(project_repo, member_repo, user_query, logger):
    return ProjectManagementService(
        project_repo=project_repo,
        member_repo=member_repo,
        user_query=user_query,
        policy=ProjectPolicy(),
        logger=logger,
    )


@pytest.fixture
def project(project_repo, owner_id):
    """Active public project returned by find_by_id."""
    project = create_project(owner_id=owner_id, max_team_size=4)
    project_repo.find_by_id.return_value = project
    return project


def assert_refused(result, error_type, code):
    assert isinstance(result, Failure)
    assert isinstance(result.error, error_type)
    assert result.error.code == code


# ============================================================================
# create_project
# ============================================================================


@pytest.mark.unit
class TestCreateProject:
    async def test_success_saves_project_and_owner_membership(
        self, service, project_repo, member_repo, logger, owner_id
    ):
        # Act
        result = await service.create_project(
            owner_id=owner_id,
            title=VALID_TITLE,
            description=VALID_DESCRIPTION,
            status="open",
            repo_url="github.com/acme/habits",
            cover_image_url="https://imgur.com/habits.png",
            estimated_duration_weeks=12,
            max_team_size=4,
        )

        # Assert
        assert isinstance(result, Success)
        project = result.value
        assert project.id is not None
        assert project.owner_id == owner_id
        assert project.status == ProjectStatus.OPEN
        assert project.lifecycle is LifecycleState.ACTIVE
        assert project.repo_url.normalized == "https://github.com/acme/habits"
        assert project.cover_image_url is not None
        assert project.estimated_duration.weeks == 12
        assert project.max_team_size == TeamSize(4)
        assert project.is_public
        member_repo.add_member.assert_awaited_once_with(
            project.id, owner_id, "LEADER", is_owner=True
        )
        assert logger.info.call_args.args[0] == "project_created"

    async def test_optional_fields_default_to_none(self, service, owner_id):
        result = await service.create_project(
            owner_id, VALID_TITLE, VALID_DESCRIPTION, ProjectStatus.UNDER_REVIEW
        )

        assert isinstance(result, Success)
        project = result.value
        assert project.repo_url is None
        assert project.cover_image_url is None
        assert project.estimated_duration is None
        assert project.max_team_size is None

    @pytest.mark.parametrize("count", [0, 4])
    async def test_allowed_below_quota(self, service, project_repo, owner_id, count):
        project_repo.count_by_owner_id.return_value = count

        result = await service.create_project(
            owner_id, VALID_TITLE, VALID_DESCRIPTION, "open"
        )

        assert isinstance(result, Success)

    async def test_sixth_project_refused(
        self, service, project_repo, member_repo, logger, owner_id
    ):
        project_repo.count_by_owner_id.return_value = 5

        result = await service.create_project(
            owner_id, VALID_TITLE, VALID_DESCRIPTION, "open"
        )

        assert_refused(result, LimitExceededError, ErrorCode.PROJECT_LIMIT_EXCEEDED)
        assert result.error.limit == 5
        assert result.error.current == 5
        project_repo.save.assert_not_awaited()
        member_repo.add_member.assert_not_awaited()
        assert logger.warning.call_args.args[0] == "create_project_refused"

    async def test_unknown_status(self, service, project_repo, owner_id):
        result = await service.create_project(
            owner_id, VALID_TITLE, VALID_DESCRIPTION, "archived"
        )

        assert_refused(result, ValidationError, ErrorCode.VALIDATION_FAILED)
        assert result.error.field == "status"
        project_repo.save.assert_not_awaited()

    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"title": "Tiny"}, "title"),
            ({"title": "Spam"}, "title"),
            ({"description": "Way too short"}, "description"),
            ({"repo_url": "https://example.com/acme/habits"}, "repo_url"),
            ({"cover_image_url": "http://imgur.com/a.png"}, "cover_image_url"),
            ({"estimated_duration_weeks": 105}, "estimated_duration_weeks"),
            ({"max_team_size": 0}, "max_team_size"),
            ({"max_team_size": 21}, "max_team_size"),
        ],
    )
    async def test_invalid_field_names_the_field(
        self, service, project_repo, member_repo, owner_id, overrides, field
    ):
        arguments = {
            "owner_id": owner_id,
            "title": VALID_TITLE,
            "description": VALID_DESCRIPTION,
            "status": "open",
            **overrides,
        }

        result = await service.create_project(**arguments)

        assert_refused(result, ValidationError, ErrorCode.VALIDATION_FAILED)
        assert result.error.field == field
        project_repo.save.assert_not_awaited()
        member_repo.add_member.assert_not_awaited()


# ============================================================================
# Editing
# ============================================================================


@pytest.mark.unit
class TestUpdateProject:
    async def test_success_replaces_details(self, service, project_repo, project, owner_id):
        result = await service.update_project(
            project.id,
            owner_id,
            title="Habit Tracker Mobile",
            description="Mobile client for the habit tracking backend",
            max_team_size=6,
            is_public=False,
        )

        assert isinstance(result, Success)
        updated = result.value
        assert updated.title.value == "Habit Tracker Mobile"
        assert updated.max_team_size == TeamSize(6)
        assert not updated.is_public
        assert updated.owner_id == owner_id
        assert updated.status == project.status
        assert updated.updated_at is not None
        project_repo.save.assert_awaited_once()

    async def test_unknown_project(self, service, project_repo):
        project_repo.find_by_id.return_value = None

        result = await service.update_project(
            uuid7(), uuid7(), VALID_TITLE, VALID_DESCRIPTION
        )

        assert_refused(result, NotFoundError, ErrorCode.PROJECT_NOT_FOUND)

    async def test_non_owner_refused(self, service, project_repo, project):
        result = await service.update_project(
            project.id, uuid7(), VALID_TITLE, VALID_DESCRIPTION
        )

        assert_refused(result, OperationNotAllowedError, ErrorCode.PROJECT_NOT_EDITABLE)
        project_repo.save.assert_not_awaited()

    async def test_deactivated_project_refused(self, service, project_repo, owner_id):
        inactive = create_project(owner_id=owner_id).deactivate()
        project_repo.find_by_id.return_value = inactive

        result = await service.update_project(
            inactive.id, owner_id, VALID_TITLE, VALID_DESCRIPTION
        )

        assert_refused(result, OperationNotAllowedError, ErrorCode.PROJECT_NOT_EDITABLE)

    async def test_invalid_description(self, service, project_repo, project, owner_id):
        result = await service.update_project(
            project.id, owner_id, VALID_TITLE, "only four words here"
        )

        assert_refused(result, ValidationError, ErrorCode.VALIDATION_FAILED)
        assert result.error.field == "description"
        project_repo.save.assert_not_awaited()


@pytest.mark.unit
class TestStatusAndVisibility:
    async def test_any_status_may_follow_any_other(self, service, project_repo, owner_id):
        completed = create_project(owner_id=owner_id, status=ProjectStatus.COMPLETED)
        project_repo.find_by_id.return_value = completed

        result = await service.change_project_status(completed.id, "open", owner_id)

        assert isinstance(result, Success)
        assert result.value.status == ProjectStatus.OPEN

    async def test_unknown_status(self, service, project_repo, project, owner_id):
        result = await service.change_project_status(project.id, "paused", owner_id)

        assert_refused(result, ValidationError, ErrorCode.VALIDATION_FAILED)
        assert result.error.field == "status"
        project_repo.save.assert_not_awaited()

    async def test_status_change_by_stranger(self, service, project):
        result = await service.change_project_status(
            project.id, ProjectStatus.IN_PROGRESS, uuid7()
        )

        assert_refused(result, OperationNotAllowedError, ErrorCode.PROJECT_NOT_EDITABLE)

    async def test_hide_project(self, service, project, owner_id):
        result = await service.change_project_visibility(project.id, False, owner_id)

        assert isinstance(result, Success)
        assert not result.value.is_public

    async def test_visibility_by_stranger(self, service, project_repo, project):
        result = await service.change_project_visibility(project.id, False, uuid7())

        assert_refused(result, OperationNotAllowedError, ErrorCode.PROJECT_NOT_EDITABLE)
        project_repo.save.assert_not_awaited()


@pytest.mark.unit
class TestLifecycle:
    async def test_deactivate(self, service, project, owner_id):
        result = await service.deactivate_project(project.id, owner_id)

        assert isinstance(result, Success)
        assert result.value.lifecycle is LifecycleState.DEACTIVATED

    async def test_delete(self, service, project, owner_id):
        result = await service.delete_project(project.id, owner_id)

        assert isinstance(result, Success)
        assert result.value.is_deleted
        assert not result.value.is_active

    async def test_delete_twice_refused(self, service, project_repo, owner_id):
        deleted = create_project(owner_id=owner_id).soft_delete()
        project_repo.find_by_id.return_value = deleted

        result = await service.delete_project(deleted.id, owner_id)

        assert_refused(result, OperationNotAllowedError, ErrorCode.PROJECT_NOT_EDITABLE)

    async def test_delete_by_stranger(self, service, project_repo, project):
        result = await service.delete_project(project.id, uuid7())

        assert_refused(result, OperationNotAllowedError, ErrorCode.PROJECT_NOT_EDITABLE)
        project_repo.save.assert_not_awaited()

    async def test_restore_deleted_project(self, service, project_repo, owner_id):
        deleted = create_project(owner_id=owner_id).soft_delete()
        project_repo.find_by_id.return_value = deleted

        result = await service.restore_project(deleted.id, owner_id)

        assert isinstance(result, Success)
        assert result.value.is_active
        assert result.value.can_be_edited_by(owner_id)

    async def test_restore_by_stranger(self, service, project_repo, owner_id):
        deleted = create_project(owner_id=owner_id).soft_delete()
        project_repo.find_by_id.return_value = deleted

        result = await service.restore_project(deleted.id, uuid7())

        assert_refused(result, OperationNotAllowedError, ErrorCode.PROJECT_NOT_OWNED)
        project_repo.save.assert_not_awaited()

    async def test_restore_unknown(self, service, project_repo):
        project_repo.find_by_id.return_value = None

        result = await service.restore_project(uuid7(), uuid7())

        assert_refused(result, NotFoundError, ErrorCode.PROJECT_NOT_FOUND)

    async def test_restore_deleted_project_at_quota_refused(
        self, service, project_repo, owner_id
    ):
        deleted = create_project(owner_id=owner_id).soft_delete()
        project_repo.find_by_id.return_value = deleted
        project_repo.count_by_owner_id.return_value = 5

        result = await service.restore_project(deleted.id, owner_id)

        assert_refused(result, LimitExceededError, ErrorCode.PROJECT_LIMIT_EXCEEDED)
        project_repo.count_by_owner_id.assert_awaited_once_with(owner_id)
        project_repo.save.assert_not_awaited()

    async def test_restore_deactivated_project_skips_quota(
        self, service, project_repo, owner_id
    ):
        # Deactivated projects already count towards the quota
        inactive = create_project(owner_id=owner_id).deactivate()
        project_repo.find_by_id.return_value = inactive
        project_repo.count_by_owner_id.return_value = 5

        result = await service.restore_project(inactive.id, owner_id)

        assert isinstance(result, Success)
        assert result.value.is_active
        project_repo.count_by_owner_id.assert_not_awaited()


# ============================================================================
# Team management
# ============================================================================


@pytest.mark.unit
class TestRemoveProjectMember:
    async def test_member_leaves(self, service, member_repo, project, owner_id):
        member = create_member(project_id=project.id)
        member_repo.find_active_member.return_value = member

        result = await service.remove_project_member(project.id, member.user_id, owner_id)

        assert isinstance(result, Success)
        assert result.value.left_at is not None
        assert not result.value.is_current()
        member_repo.save.assert_awaited_once()

    async def test_owner_cannot_be_removed(self, service, member_repo, project, owner_id):
        result = await service.remove_project_member(project.id, owner_id, owner_id)

        assert_refused(
            result, OperationNotAllowedError, ErrorCode.OWNER_CANNOT_BE_REMOVED
        )
        member_repo.save.assert_not_awaited()

    async def test_unknown_member(self, service, member_repo, project, owner_id):
        member_repo.find_active_member.return_value = None

        result = await service.remove_project_member(project.id, uuid7(), owner_id)

        assert_refused(result, NotFoundError, ErrorCode.MEMBER_NOT_FOUND)

    async def test_only_owner_can_remove(self, service, member_repo, project):
        result = await service.remove_project_member(project.id, uuid7(), uuid7())

        assert_refused(result, OperationNotAllowedError, ErrorCode.PROJECT_NOT_EDITABLE)
        member_repo.find_active_member.assert_not_awaited()


@pytest.mark.unit
class TestChangeMemberRole:
    async def test_success_returns_enriched_member(
        self, service, member_repo, user_query, project, owner_id
    ):
        member = create_member(project_id=project.id)
        member_repo.find_active_member.return_value = member
        user_query.find_user_by_id.return_value = create_user(
            user_id=member.user_id, username="grace", profile_types=("Frontend",)
        )

        result = await service.change_member_role(
            project.id, member.user_id, "Tech Lead", owner_id
        )

        assert isinstance(result, Success)
        assert isinstance(result.value, ProjectMemberResult)
        assert result.value.member_role == "Tech Lead"
        assert result.value.username == "grace"
        assert result.value.profile_type == "Frontend"
        assert member_repo.save.await_args.args[0].member_role == "Tech Lead"

    @pytest.mark.parametrize("role", ["", "   ", "x" * 51])
    async def test_invalid_role(self, service, member_repo, project, owner_id, role):
        member = create_member(project_id=project.id)
        member_repo.find_active_member.return_value = member

        result = await service.change_member_role(
            project.id, member.user_id, role, owner_id
        )

        assert_refused(result, ValidationError, ErrorCode.VALIDATION_FAILED)
        assert result.error.field == "member_role"
        member_repo.save.assert_not_awaited()

    async def test_unknown_member(self, service, member_repo, project, owner_id):
        member_repo.find_active_member.return_value = None

        result = await service.change_member_role(project.id, uuid7(), "QA", owner_id)

        assert_refused(result, NotFoundError, ErrorCode.MEMBER_NOT_FOUND)


# ============================================================================
# Queries
# ============================================================================


@pytest.mark.unit
class TestProjectQueries:
    async def test_projects_by_owner(self, service, project_repo, owner_id):
        owned = [create_project(owner_id=owner_id), create_project(owner_id=owner_id)]
        project_repo.find_by_owner_id.return_value = owned

        result = await service.get_projects_by_owner(owner_id)

        assert result == Success(value=owned)

    async def test_public_project_visible_to_anyone(self, service, project):
        result = await service.get_project_by_id(project.id, uuid7())

        assert result == Success(value=project)

    async def test_private_project_visible_to_owner_only(
        self, service, project_repo, logger, owner_id
    ):
        private = create_project(owner_id=owner_id, is_public=False)
        project_repo.find_by_id.return_value = private

        assert isinstance(await service.get_project_by_id(private.id, owner_id), Success)
        result = await service.get_project_by_id(private.id, uuid7())

        assert_refused(result, OperationNotAllowedError, ErrorCode.PROJECT_NOT_VISIBLE)
        assert logger.warning.call_args.args[0] == "view_project_refused"

    async def test_unknown_project(self, service, project_repo):
        project_repo.find_by_id.return_value = None

        result = await service.get_project_by_id(uuid7(), uuid7())

        assert_refused(result, NotFoundError, ErrorCode.PROJECT_NOT_FOUND)

    async def test_public_lookup(self, service, project):
        assert await service.get_public_project_by_id(project.id) == Success(
            value=project
        )

    @pytest.mark.parametrize(
        "hidden",
        [
            create_project(is_public=False),
            create_project().deactivate(),
            create_project().soft_delete(),
        ],
    )
    async def test_public_lookup_hides_private_or_inactive(
        self, service, project_repo, hidden
    ):
        project_repo.find_by_id.return_value = hidden

        result = await service.get_public_project_by_id(hidden.id)

        assert_refused(result, OperationNotAllowedError, ErrorCode.PROJECT_NOT_PUBLIC)


@pytest.mark.unit
class TestGetProjectMembers:
    async def test_members_enriched_with_fallback(
        self, service, member_repo, user_query, logger, project, owner_id
    ):
        # Arrange
        leader = create_member(
            project_id=project.id, user_id=owner_id, role="LEADER", is_owner=True
        )
        ghost = create_member(project_id=project.id)
        member_repo.get_active_members_by_project_id.return_value = [leader, ghost]
        user_query.find_user_by_id.side_effect = lambda user_id: (
            create_user(user_id=owner_id, username="ada") if user_id == owner_id else None
        )

        # Act
        result = await service.get_project_members(project.id, owner_id)

        # Assert
        assert isinstance(result, Success)
        first, second = result.value
        assert first.username == "ada"
        assert first.is_owner
        assert first.member_role == "LEADER"
        assert first.profile_type == "Backend Developer"
        assert second.username == f"User {ghost.user_id}"
        assert second.profile_type is None
        assert not second.is_owner
        assert logger.warning.call_args.args[0] == "member_user_not_found"

    async def test_private_project_members_hidden(
        self, service, project_repo, member_repo, owner_id
    ):
        private = create_project(owner_id=owner_id, is_public=False)
        project_repo.find_by_id.return_value = private

        result = await service.get_project_members(private.id, uuid7())

        assert_refused(result, OperationNotAllowedError, ErrorCode.PROJECT_NOT_VISIBLE)
        member_repo.get_active_members_by_project_id.assert_not_awaited()
