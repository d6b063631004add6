"""Project application workflow.

Coordinates the application pipeline: a user applies to a project, the
owner lists, accepts or rejects applications, the applicant may cancel.
Accepted applicants become team members subject to the project's capacity.

Architecture:
- Application layer service (orchestrates business logic)
- Imports only from domain layer (entities, protocols, policy) and core
- Uses Result types for error handling; infrastructure exceptions propagate
  so the request-scoped session rolls back

Capacity:
    The "project full" check runs at apply time and again at accept time.
    At accept time the membership is created through
    add_member_if_capacity(), which counts and inserts atomically, so two
    owners' clicks on the last slot cannot both succeed. The accepted
    application is saved only after the slot is reserved.

    Accept, reject and cancel read the application with its row locked, so
    only one of them can move a pending application out of PENDING.
"""

from typing import Any
from uuid import UUID

from devmatch.application.errors import invalid_input, not_allowed, not_found
from devmatch.core.enums import ErrorCode
from devmatch.core.result import Failure, Result, Success
from devmatch.domain.entities import Project, ProjectApplication
from devmatch.domain.enums import MemberRole
from devmatch.domain.protocols import (
    LoggerProtocol,
    ProjectApplicationRepository,
    ProjectMemberRepository,
    ProjectRepository,
    UserQueryProtocol,
)
from devmatch.domain.value_objects import MotivationMessage


class ProjectApplicationService:
    """Orchestrator for the apply / review / cancel pipeline.

    Dependencies (injected via constructor):
        - ProjectRepository: Project lookup
        - ProjectApplicationRepository: Application persistence
        - ProjectMemberRepository: Team size and membership creation
        - UserQueryProtocol: Applicant existence check
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        application_repo: ProjectApplicationRepository,
        member_repo: ProjectMemberRepository,
        user_query: UserQueryProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            project_repo: Project repository.
            application_repo: Project application repository.
            member_repo: Project member repository.
            user_query: User lookup port.
            logger: Logger for workflow events.
        """
        self._project_repo = project_repo
        self._application_repo = application_repo
        self._member_repo = member_repo
        self._user_query = user_query
        self._logger = logger

    async def apply_to_project(
        self, project_id: UUID, user_id: UUID, motivation_message: str
    ) -> Result[ProjectApplication, Any]:
        """Submit a user's application to a project.

        Checks, in order: project exists, user exists, project is open,
        project is not full, caller is not the owner, caller has not
        applied before, motivation message is valid.

        Args:
            project_id: Target project.
            user_id: Applicant.
            motivation_message: Raw motivation text.

        Returns:
            Success(ProjectApplication): The persisted PENDING application.
            Failure(NotFoundError): Project or user does not exist.
            Failure(OperationNotAllowedError): Project closed or full, caller
                is the owner, or caller already applied.
            Failure(ValidationError): Motivation message is invalid.

        Side Effects:
            - Saves a new ProjectApplication (on success only)
        """
        context = {"project_id": str(project_id), "user_id": str(user_id)}

        # Step 1: Resolve project and applicant
        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            return self._refused(
                "apply_refused",
                not_found(ErrorCode.PROJECT_NOT_FOUND, "Project", project_id),
                **context,
            )

        user = await self._user_query.find_user_by_id(user_id)
        if user is None:
            return self._refused(
                "apply_refused",
                not_found(ErrorCode.USER_NOT_FOUND, "User", user_id),
                **context,
            )

        # Step 2: Project must accept applications and have room
        if not project.is_open_for_applications():
            return self._refused(
                "apply_refused",
                not_allowed(
                    ErrorCode.PROJECT_NOT_OPEN,
                    "Project is not accepting applications",
                    "apply",
                ),
                **context,
            )

        current_members = await self._member_repo.count_active_members_by_project_id(
            project_id
        )
        if project.is_full(current_members):
            return self._refused(
                "apply_refused", self._project_full("apply"), **context
            )

        # Step 3: Owners don't apply, and nobody applies twice
        if project.is_owner(user_id):
            return self._refused(
                "apply_refused",
                not_allowed(
                    ErrorCode.OWNER_CANNOT_APPLY,
                    "Owners cannot apply to their own project",
                    "apply",
                ),
                **context,
            )

        if await self._application_repo.exists_by_project_id_and_user_id(
            project_id, user_id
        ):
            return self._refused(
                "apply_refused",
                not_allowed(
                    ErrorCode.APPLICATION_ALREADY_EXISTS,
                    "User has already applied to this project",
                    "apply",
                ),
                **context,
            )

        # Step 4: Build and persist
        try:
            motivation = MotivationMessage(motivation_message)
        except ValueError as e:
            return self._refused(
                "apply_refused", invalid_input(e, "motivation_message"), **context
            )

        application = ProjectApplication.submit(
            project_id=project_id,
            user_id=user_id,
            motivation_message=motivation,
        )
        saved = await self._application_repo.save(application)

        self._logger.info(
            "application_submitted", application_id=str(saved.id), **context
        )
        return Success(value=saved)

    async def get_project_applications(
        self, project_id: UUID, owner_id: UUID
    ) -> Result[list[ProjectApplication], Any]:
        """List a project's applications for its owner.

        The first time the owner lists an unseen application it is marked
        as seen. Only the seen flag is written, so a decision taken
        concurrently on the same application is never overwritten.

        Args:
            project_id: Project whose applications to list.
            owner_id: Caller (must own the project).

        Returns:
            Success(list[ProjectApplication]): Applications, all seen.
            Failure(NotFoundError): Project does not exist.
            Failure(OperationNotAllowedError): Caller is not the owner.
        """
        context = {"project_id": str(project_id), "user_id": str(owner_id)}

        project_result = await self._load_owned_project(
            project_id, owner_id, "list_applications"
        )
        if isinstance(project_result, Failure):
            return self._refused("list_applications_refused", project_result, **context)

        applications = await self._application_repo.find_by_project_id(project_id)

        listed: list[ProjectApplication] = []
        for application in applications:
            if not application.seen_by_owner:
                application = application.mark_as_seen()
                await self._application_repo.mark_seen(
                    application.id,  # type: ignore[arg-type]  # loaded rows have ids
                    application.updated_at,  # type: ignore[arg-type]  # set by mark_as_seen
                )
            listed.append(application)

        return Success(value=listed)

    async def get_user_applications(
        self, user_id: UUID
    ) -> Result[list[ProjectApplication], Any]:
        """List every application a user has made.

        Returns:
            Success(list[ProjectApplication]): The user's applications.
            Failure(NotFoundError): User does not exist.
        """
        user = await self._user_query.find_user_by_id(user_id)
        if user is None:
            return self._refused(
                "list_user_applications_refused",
                not_found(ErrorCode.USER_NOT_FOUND, "User", user_id),
                user_id=str(user_id),
            )

        return Success(value=await self._application_repo.find_by_user_id(user_id))

    async def accept_application(
        self, project_id: UUID, application_id: UUID, owner_id: UUID
    ) -> Result[ProjectApplication, Any]:
        """Accept a pending application and add the applicant to the team.

        Args:
            project_id: Project the application belongs to.
            application_id: Application to accept.
            owner_id: Caller (must own the project).

        Returns:
            Success(ProjectApplication): The persisted ACCEPTED application.
            Failure(NotFoundError): Project or application does not exist.
            Failure(OperationNotAllowedError): Caller is not the owner, the
                application belongs to another project, is not pending, the
                applicant is already a member, or the project is full.
            Failure(IllegalStateError): The aggregate refused the transition.

        Side Effects:
            - Inserts a DEVELOPER ProjectMember (on success only)
            - Saves the accepted application (on success only)
        """
        context = {
            "project_id": str(project_id),
            "application_id": str(application_id),
            "user_id": str(owner_id),
        }

        project_result = await self._load_owned_project(project_id, owner_id, "accept")
        if isinstance(project_result, Failure):
            return self._refused("accept_refused", project_result, **context)
        project = project_result.value

        application_result = await self._load_pending_application(
            project_id, application_id, "accept"
        )
        if isinstance(application_result, Failure):
            return self._refused("accept_refused", application_result, **context)
        application = application_result.value

        existing = await self._member_repo.find_active_member(
            project_id, application.user_id
        )
        if existing is not None:
            return self._refused(
                "accept_refused",
                not_allowed(
                    ErrorCode.ALREADY_A_MEMBER,
                    "Applicant is already a member of this project",
                    "accept",
                ),
                **context,
            )

        # Fast check; the atomic reservation below is authoritative
        current_members = await self._member_repo.count_active_members_by_project_id(
            project_id
        )
        if project.is_full(current_members):
            return self._refused("accept_refused", self._project_full("accept"), **context)

        transition = application.accept()
        if isinstance(transition, Failure):
            return self._refused("accept_refused", transition, **context)
        accepted = transition.value

        member = await self._member_repo.add_member_if_capacity(
            project_id,
            application.user_id,
            MemberRole.DEVELOPER.value,
            project.max_team_size.value if project.max_team_size else None,
        )
        if member is None:
            return self._refused("accept_refused", self._project_full("accept"), **context)

        saved = await self._application_repo.save(accepted)

        self._logger.info(
            "application_accepted",
            applicant_id=str(application.user_id),
            member_id=str(member.id),
            **context,
        )
        return Success(value=saved)

    async def reject_application(
        self, project_id: UUID, application_id: UUID, owner_id: UUID
    ) -> Result[ProjectApplication, Any]:
        """Reject a pending application.

        Returns:
            Success(ProjectApplication): The persisted REJECTED application.
            Failure(NotFoundError): Project or application does not exist.
            Failure(OperationNotAllowedError): Caller is not the owner, the
                application belongs to another project or is not pending.
        """
        context = {
            "project_id": str(project_id),
            "application_id": str(application_id),
            "user_id": str(owner_id),
        }

        project_result = await self._load_owned_project(project_id, owner_id, "reject")
        if isinstance(project_result, Failure):
            return self._refused("reject_refused", project_result, **context)

        application_result = await self._load_pending_application(
            project_id, application_id, "reject"
        )
        if isinstance(application_result, Failure):
            return self._refused("reject_refused", application_result, **context)

        transition = application_result.value.reject()
        if isinstance(transition, Failure):
            return self._refused("reject_refused", transition, **context)

        saved = await self._application_repo.save(transition.value)

        self._logger.info("application_rejected", **context)
        return Success(value=saved)

    async def cancel_application(
        self, application_id: UUID, user_id: UUID
    ) -> Result[ProjectApplication, Any]:
        """Withdraw an application by its author.

        Returns:
            Success(ProjectApplication): The persisted cancelled application
                (status still PENDING, no longer active).
            Failure(NotFoundError): Application does not exist.
            Failure(OperationNotAllowedError): Caller is not the applicant, or
                the application is no longer pending and active.
        """
        context = {"application_id": str(application_id), "user_id": str(user_id)}

        application = await self._application_repo.find_by_id(
            application_id, for_update=True
        )
        if application is None:
            return self._refused(
                "cancel_refused",
                not_found(
                    ErrorCode.APPLICATION_NOT_FOUND, "ProjectApplication", application_id
                ),
                **context,
            )

        if application.user_id != user_id:
            return self._refused(
                "cancel_refused",
                not_allowed(
                    ErrorCode.APPLICATION_NOT_OWNED,
                    "Only the applicant can cancel an application",
                    "cancel",
                ),
                **context,
            )

        if not application.can_be_cancelled():
            return self._refused(
                "cancel_refused",
                not_allowed(
                    ErrorCode.APPLICATION_NOT_CANCELLABLE,
                    "Application can no longer be cancelled",
                    "cancel",
                ),
                **context,
            )

        transition = application.cancel()
        if isinstance(transition, Failure):
            return self._refused("cancel_refused", transition, **context)

        saved = await self._application_repo.save(transition.value)

        self._logger.info(
            "application_cancelled", project_id=str(application.project_id), **context
        )
        return Success(value=saved)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _load_owned_project(
        self, project_id: UUID, owner_id: UUID, operation: str
    ) -> Result[Project, Any]:
        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            return not_found(ErrorCode.PROJECT_NOT_FOUND, "Project", project_id)
        if not project.is_owner(owner_id):
            return not_allowed(
                ErrorCode.PROJECT_NOT_OWNED,
                "Only the project owner can review applications",
                operation,
            )
        return Success(value=project)

    async def _load_pending_application(
        self, project_id: UUID, application_id: UUID, operation: str
    ) -> Result[ProjectApplication, Any]:
        application = await self._application_repo.find_by_id(
            application_id, for_update=True
        )
        if application is None:
            return not_found(
                ErrorCode.APPLICATION_NOT_FOUND, "ProjectApplication", application_id
            )
        if application.project_id != project_id:
            return not_allowed(
                ErrorCode.APPLICATION_NOT_IN_PROJECT,
                "Application does not belong to this project",
                operation,
            )
        # accept and reject share the same guard
        if not application.can_be_accepted():
            return not_allowed(
                ErrorCode.APPLICATION_NOT_PENDING,
                "Application is no longer pending",
                operation,
            )
        return Success(value=application)

    @staticmethod
    def _project_full(operation: str) -> Failure[Any]:
        return not_allowed(
            ErrorCode.PROJECT_FULL, "Project has reached its maximum team size", operation
        )

    def _refused(self, event: str, failure: Failure[Any], **context: Any) -> Failure[Any]:
        self._logger.warning(event, error_code=failure.error.code.value, **context)
        return failure
