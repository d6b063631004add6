"""Project management workflow.

Creation, editing, status and visibility changes, lifecycle transitions and
team management of projects.

Architecture:
- Application layer service (orchestrates business logic)
- Imports only from domain layer and core
- Uses Result types for error handling

Authorization:
    Every mutating operation requires Project.can_be_edited_by(), i.e. the
    caller owns the project and it is active. restore_project is the
    exception: it only requires ownership, since a project that needs
    restoring is by definition not active.
"""

from typing import Any
from uuid import UUID

from devmatch.application.dtos import ProjectMemberResult
from devmatch.application.errors import invalid_input, not_allowed, not_found
from devmatch.core.enums import ErrorCode
from devmatch.core.result import Failure, Result, Success
from devmatch.domain.entities import Project, ProjectMember
from devmatch.domain.enums import MemberRole, ProjectStatus
from devmatch.domain.protocols import (
    LoggerProtocol,
    ProjectMemberRepository,
    ProjectRepository,
    UserQueryProtocol,
)
from devmatch.domain.services import ProjectPolicy
from devmatch.domain.value_objects import (
    CoverImageUrl,
    ProjectDescription,
    ProjectDuration,
    ProjectTitle,
    RepositoryUrl,
    TeamSize,
)


def _build_details(
    *,
    title: str,
    description: str,
    repo_url: str | None,
    cover_image_url: str | None,
    estimated_duration_weeks: int | None,
    max_team_size: int | None,
) -> Result[dict[str, Any], Any]:
    """Turn raw project fields into value objects.

    Returns:
        Success(dict): Keyword arguments for Project.create/update_details.
        Failure(ValidationError): First field that failed, with its name.
    """
    builders: list[tuple[str, str, type, Any]] = [
        ("title", "title", ProjectTitle, title),
        ("description", "description", ProjectDescription, description),
        ("repo_url", "repo_url", RepositoryUrl, repo_url),
        ("cover_image_url", "cover_image_url", CoverImageUrl, cover_image_url),
        (
            "estimated_duration",
            "estimated_duration_weeks",
            ProjectDuration,
            estimated_duration_weeks,
        ),
        ("max_team_size", "max_team_size", TeamSize, max_team_size),
    ]
    optional = {"repo_url", "cover_image_url", "estimated_duration", "max_team_size"}

    details: dict[str, Any] = {}
    for key, field_name, value_object, raw in builders:
        if raw is None and key in optional:
            details[key] = None
            continue
        try:
            details[key] = value_object(raw)
        except ValueError as e:
            return invalid_input(e, field_name)
    return Success(value=details)


class ProjectManagementService:
    """Orchestrator for project and team management.

    Dependencies (injected via constructor):
        - ProjectRepository: Project persistence
        - ProjectMemberRepository: Team membership persistence
        - UserQueryProtocol: Member enrichment
        - ProjectPolicy: Per-owner project quota
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        member_repo: ProjectMemberRepository,
        user_query: UserQueryProtocol,
        policy: ProjectPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._project_repo = project_repo
        self._member_repo = member_repo
        self._user_query = user_query
        self._policy = policy
        self._logger = logger

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    async def create_project(
        self,
        owner_id: UUID,
        title: str,
        description: str,
        status: ProjectStatus | str,
        repo_url: str | None = None,
        cover_image_url: str | None = None,
        estimated_duration_weeks: int | None = None,
        max_team_size: int | None = None,
        is_public: bool = True,
    ) -> Result[Project, Any]:
        """Create a project and its owner membership.

        Args:
            owner_id: Creating user.
            title: Raw title.
            description: Raw description.
            status: Initial status (enum or its value).
            repo_url: Optional repository URL.
            cover_image_url: Optional cover image URL.
            estimated_duration_weeks: Optional duration estimate.
            max_team_size: Optional team capacity.
            is_public: Visibility.

        Returns:
            Success(Project): The persisted project.
            Failure(LimitExceededError): Owner already has the maximum.
            Failure(ValidationError): A field is invalid.

        Side Effects:
            - Saves the project
            - Inserts the owner's LEADER membership
        """
        context = {"user_id": str(owner_id)}

        current_count = await self._project_repo.count_by_owner_id(owner_id)
        quota = self._policy.validate_project_creation(owner_id, current_count)
        if isinstance(quota, Failure):
            return self._refused("create_project_refused", quota, **context)

        try:
            project_status = ProjectStatus(status)
        except ValueError as e:
            return self._refused(
                "create_project_refused", invalid_input(e, "status"), **context
            )

        details = _build_details(
            title=title,
            description=description,
            repo_url=repo_url,
            cover_image_url=cover_image_url,
            estimated_duration_weeks=estimated_duration_weeks,
            max_team_size=max_team_size,
        )
        if isinstance(details, Failure):
            return self._refused("create_project_refused", details, **context)

        project = Project.create(
            owner_id=owner_id,
            status=project_status,
            is_public=is_public,
            **details.value,
        )
        saved = await self._project_repo.save(project)
        await self._member_repo.add_member(
            saved.id,  # type: ignore[arg-type]  # set by save()
            owner_id,
            MemberRole.LEADER.value,
            is_owner=True,
        )

        self._logger.info("project_created", project_id=str(saved.id), **context)
        return Success(value=saved)

    async def update_project(
        self,
        project_id: UUID,
        user_id: UUID,
        title: str,
        description: str,
        repo_url: str | None = None,
        cover_image_url: str | None = None,
        estimated_duration_weeks: int | None = None,
        max_team_size: int | None = None,
        is_public: bool = True,
    ) -> Result[Project, Any]:
        """Replace a project's editable fields.

        Returns:
            Success(Project): The persisted project.
            Failure(NotFoundError): Project does not exist.
            Failure(OperationNotAllowedError): Caller cannot edit it.
            Failure(ValidationError): A field is invalid.
        """
        context = {"project_id": str(project_id), "user_id": str(user_id)}

        loaded = await self._load_editable(project_id, user_id, "update")
        if isinstance(loaded, Failure):
            return self._refused("update_project_refused", loaded, **context)

        details = _build_details(
            title=title,
            description=description,
            repo_url=repo_url,
            cover_image_url=cover_image_url,
            estimated_duration_weeks=estimated_duration_weeks,
            max_team_size=max_team_size,
        )
        if isinstance(details, Failure):
            return self._refused("update_project_refused", details, **context)

        updated = loaded.value.update_details(is_public=is_public, **details.value)
        saved = await self._project_repo.save(updated)

        self._logger.info("project_updated", **context)
        return Success(value=saved)

    async def change_project_status(
        self, project_id: UUID, new_status: ProjectStatus | str, user_id: UUID
    ) -> Result[Project, Any]:
        """Move a project to another status. Any status may follow any other."""
        context = {"project_id": str(project_id), "user_id": str(user_id)}

        loaded = await self._load_editable(project_id, user_id, "change_status")
        if isinstance(loaded, Failure):
            return self._refused("change_status_refused", loaded, **context)

        try:
            status = ProjectStatus(new_status)
        except ValueError as e:
            return self._refused(
                "change_status_refused", invalid_input(e, "status"), **context
            )

        saved = await self._project_repo.save(loaded.value.update_status(status))

        self._logger.info("project_status_changed", status=status.value, **context)
        return Success(value=saved)

    async def change_project_visibility(
        self, project_id: UUID, is_public: bool, user_id: UUID
    ) -> Result[Project, Any]:
        context = {"project_id": str(project_id), "user_id": str(user_id)}

        loaded = await self._load_editable(project_id, user_id, "change_visibility")
        if isinstance(loaded, Failure):
            return self._refused("change_visibility_refused", loaded, **context)

        saved = await self._project_repo.save(loaded.value.update_visibility(is_public))

        self._logger.info("project_visibility_changed", is_public=is_public, **context)
        return Success(value=saved)

    async def deactivate_project(
        self, project_id: UUID, user_id: UUID
    ) -> Result[Project, Any]:
        """Hide an active project from listings and applications."""
        context = {"project_id": str(project_id), "user_id": str(user_id)}

        loaded = await self._load_editable(project_id, user_id, "deactivate")
        if isinstance(loaded, Failure):
            return self._refused("deactivate_project_refused", loaded, **context)

        saved = await self._project_repo.save(loaded.value.deactivate())

        self._logger.info("project_deactivated", **context)
        return Success(value=saved)

    async def delete_project(
        self, project_id: UUID, user_id: UUID
    ) -> Result[Project, Any]:
        """Soft delete an active project (the row is kept)."""
        context = {"project_id": str(project_id), "user_id": str(user_id)}

        loaded = await self._load_editable(project_id, user_id, "delete")
        if isinstance(loaded, Failure):
            return self._refused("delete_project_refused", loaded, **context)

        saved = await self._project_repo.save(loaded.value.soft_delete())

        self._logger.info("project_deleted", **context)
        return Success(value=saved)

    async def restore_project(
        self, project_id: UUID, user_id: UUID
    ) -> Result[Project, Any]:
        """Bring a deactivated or deleted project back to active.

        A deleted project is subject to the per-owner quota again, as if it
        were being created.

        Returns:
            Success(Project): The persisted, active project.
            Failure(NotFoundError): Project does not exist.
            Failure(OperationNotAllowedError): Caller is not the owner.
            Failure(LimitExceededError): Restoring a deleted project would
                exceed the owner's quota.
        """
        context = {"project_id": str(project_id), "user_id": str(user_id)}

        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            return self._refused(
                "restore_project_refused",
                not_found(ErrorCode.PROJECT_NOT_FOUND, "Project", project_id),
                **context,
            )
        if not project.is_owner(user_id):
            return self._refused(
                "restore_project_refused",
                not_allowed(
                    ErrorCode.PROJECT_NOT_OWNED,
                    "Only the project owner can restore it",
                    "restore",
                ),
                **context,
            )

        # Deleted projects are not counted, so bringing one back uses a slot
        if project.is_deleted:
            current_count = await self._project_repo.count_by_owner_id(user_id)
            quota = self._policy.validate_project_creation(user_id, current_count)
            if isinstance(quota, Failure):
                return self._refused("restore_project_refused", quota, **context)

        saved = await self._project_repo.save(project.restore())

        self._logger.info("project_restored", **context)
        return Success(value=saved)

    async def remove_project_member(
        self, project_id: UUID, member_user_id: UUID, owner_user_id: UUID
    ) -> Result[ProjectMember, Any]:
        """Remove a collaborator from the team.

        Returns:
            Success(ProjectMember): The persisted, departed membership.
            Failure(NotFoundError): Project or active membership not found.
            Failure(OperationNotAllowedError): Caller cannot edit the
                project, or tried to remove the owner.
        """
        context = {
            "project_id": str(project_id),
            "user_id": str(owner_user_id),
            "member_user_id": str(member_user_id),
        }

        loaded = await self._load_editable(project_id, owner_user_id, "remove_member")
        if isinstance(loaded, Failure):
            return self._refused("remove_member_refused", loaded, **context)

        if loaded.value.is_owner(member_user_id):
            return self._refused(
                "remove_member_refused",
                not_allowed(
                    ErrorCode.OWNER_CANNOT_BE_REMOVED,
                    "The project owner cannot be removed from the team",
                    "remove_member",
                ),
                **context,
            )

        member = await self._member_repo.find_active_member(project_id, member_user_id)
        if member is None:
            return self._refused(
                "remove_member_refused",
                not_found(ErrorCode.MEMBER_NOT_FOUND, "ProjectMember", member_user_id),
                **context,
            )

        saved = await self._member_repo.save(member.leave())

        self._logger.info("project_member_removed", **context)
        return Success(value=saved)

    async def change_member_role(
        self,
        project_id: UUID,
        member_user_id: UUID,
        new_role: str,
        owner_user_id: UUID,
    ) -> Result[ProjectMemberResult, Any]:
        """Relabel a team member's role.

        Returns:
            Success(ProjectMemberResult): The updated, enriched member.
            Failure(NotFoundError): Project or active membership not found.
            Failure(OperationNotAllowedError): Caller cannot edit the project.
            Failure(ValidationError): Role label is blank or too long.
        """
        context = {
            "project_id": str(project_id),
            "user_id": str(owner_user_id),
            "member_user_id": str(member_user_id),
        }

        loaded = await self._load_editable(project_id, owner_user_id, "change_role")
        if isinstance(loaded, Failure):
            return self._refused("change_member_role_refused", loaded, **context)

        member = await self._member_repo.find_active_member(project_id, member_user_id)
        if member is None:
            return self._refused(
                "change_member_role_refused",
                not_found(ErrorCode.MEMBER_NOT_FOUND, "ProjectMember", member_user_id),
                **context,
            )

        try:
            relabelled = member.change_role(new_role)
        except ValueError as e:
            return self._refused(
                "change_member_role_refused",
                invalid_input(e, "member_role"),
                **context,
            )

        saved = await self._member_repo.save(relabelled)

        self._logger.info("project_member_role_changed", **context)
        return Success(value=await self._to_member_result(saved))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    async def get_projects_by_owner(self, owner_id: UUID) -> Result[list[Project], Any]:
        return Success(value=await self._project_repo.find_by_owner_id(owner_id))

    async def get_project_by_id(
        self, project_id: UUID, user_id: UUID
    ) -> Result[Project, Any]:
        """Fetch a project the caller is allowed to see."""
        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            return not_found(ErrorCode.PROJECT_NOT_FOUND, "Project", project_id)
        if not project.is_visible_to(user_id):
            return self._refused(
                "view_project_refused",
                not_allowed(
                    ErrorCode.PROJECT_NOT_VISIBLE, "Project is private", "view"
                ),
                project_id=str(project_id),
                user_id=str(user_id),
            )
        return Success(value=project)

    async def get_public_project_by_id(self, project_id: UUID) -> Result[Project, Any]:
        """Fetch a project for anonymous callers (public and active only)."""
        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            return not_found(ErrorCode.PROJECT_NOT_FOUND, "Project", project_id)
        if not project.is_publicly_available():
            return not_allowed(
                ErrorCode.PROJECT_NOT_PUBLIC,
                f"Project {project_id} is not publicly available",
                "view",
            )
        return Success(value=project)

    async def get_project_members(
        self, project_id: UUID, user_id: UUID
    ) -> Result[list[ProjectMemberResult], Any]:
        """List the current team with usernames and profile types.

        Members whose user cannot be found are still listed, under the
        fallback name "User <id>".

        Returns:
            Success(list[ProjectMemberResult]): Current members, owner included.
            Failure(NotFoundError): Project does not exist.
            Failure(OperationNotAllowedError): Project is private to the caller.
        """
        visible = await self.get_project_by_id(project_id, user_id)
        if isinstance(visible, Failure):
            return visible

        members = await self._member_repo.get_active_members_by_project_id(project_id)
        return Success(value=[await self._to_member_result(m) for m in members])

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _load_editable(
        self, project_id: UUID, user_id: UUID, operation: str
    ) -> Result[Project, Any]:
        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            return not_found(ErrorCode.PROJECT_NOT_FOUND, "Project", project_id)
        if not project.can_be_edited_by(user_id):
            return not_allowed(
                ErrorCode.PROJECT_NOT_EDITABLE,
                "Only the owner of an active project can modify it",
                operation,
            )
        return Success(value=project)

    async def _to_member_result(self, member: ProjectMember) -> ProjectMemberResult:
        user = await self._user_query.find_user_by_id(member.user_id)
        if user is None:
            self._logger.warning(
                "member_user_not_found",
                project_id=str(member.project_id),
                member_user_id=str(member.user_id),
            )
        return ProjectMemberResult.from_member(member, user)

    def _refused(self, event: str, failure: Failure[Any], **context: Any) -> Failure[Any]:
        self._logger.warning(event, error_code=failure.error.code.value, **context)
        return failure
