"""Project creation policy.

Cross-aggregate rule no single Project can enforce: an owner may hold at
most MAX_PROJECTS_PER_OWNER projects. The orchestrator supplies the current
count, the policy decides.
"""

from uuid import UUID

from devmatch.core.enums import ErrorCode
from devmatch.core.errors import LimitExceededError
from devmatch.core.result import Failure, Result, Success

MAX_PROJECTS_PER_OWNER = 5


class ProjectPolicy:
    """Domain service for project quota rules.

    Example:
        >>> policy = ProjectPolicy()
        >>> policy.validate_project_creation(owner_id, 4)
        Success(value=None)
        >>> isinstance(policy.validate_project_creation(owner_id, 5), Failure)
        True
    """

    @property
    def max_projects_per_owner(self) -> int:
        return MAX_PROJECTS_PER_OWNER

    def validate_project_creation(
        self, owner_id: UUID, current_project_count: int
    ) -> Result[None, LimitExceededError]:
        """Check the owner's project quota before creating a project.

        Args:
            owner_id: Owner creating the project.
            current_project_count: Projects the owner already has.

        Returns:
            Success(None): The owner may create another project.
            Failure(LimitExceededError): The owner already has the maximum.
        """
        if current_project_count >= MAX_PROJECTS_PER_OWNER:
            return Failure(
                error=LimitExceededError(
                    code=ErrorCode.PROJECT_LIMIT_EXCEEDED,
                    message=(
                        f"Maximum of {MAX_PROJECTS_PER_OWNER} projects per owner reached"
                    ),
                    limit=MAX_PROJECTS_PER_OWNER,
                    current=current_project_count,
                    details={"owner_id": str(owner_id)},
                )
            )
        return Success(value=None)
