"""ProjectApplicationRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture.
Maps between domain ProjectApplication aggregates and database
ProjectApplicationModel.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from devmatch.domain.entities.project_application import ProjectApplication
from devmatch.domain.enums import ApplicationStatus, LifecycleState
from devmatch.infrastructure.persistence.models import ProjectApplicationModel
from devmatch.infrastructure.persistence.rehydration import stored_motivation


class ProjectApplicationRepository:
    """SQLAlchemy implementation of ProjectApplicationRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, application_id: UUID, *, for_update: bool = False
    ) -> ProjectApplication | None:
        """Find an application, optionally locking its row.

        With for_update the row is selected FOR UPDATE and the identity map
        entry is refreshed, so a concurrent accept/reject/cancel waits for
        this transaction and then sees its outcome.
        """
        if for_update:
            stmt = (
                select(ProjectApplicationModel)
                .where(ProjectApplicationModel.id == application_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            result = await self.session.execute(stmt)
            model = result.scalar_one_or_none()
        else:
            model = await self.session.get(ProjectApplicationModel, application_id)
        return self._to_domain(model) if model else None

    async def mark_seen(self, application_id: UUID, seen_at: datetime) -> None:
        """Set seen_by_owner without touching status or lifecycle."""
        stmt = (
            update(ProjectApplicationModel)
            .where(ProjectApplicationModel.id == application_id)
            .where(ProjectApplicationModel.seen_by_owner.is_(False))
            .values(seen_by_owner=True, updated_at=seen_at)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)

    async def save(self, application: ProjectApplication) -> ProjectApplication:
        """Create or update an application.

        Only status, seen flag, resolution time and lifecycle change after
        submission; project, applicant and message are written once.
        """
        existing = (
            await self.session.get(ProjectApplicationModel, application.id)
            if application.id is not None
            else None
        )

        if existing is None:
            model = self._to_model(application)
            self.session.add(model)
        else:
            model = existing
            model.status = application.status.value
            model.seen_by_owner = application.seen_by_owner
            model.resolved_at = application.resolved_at
            model.lifecycle = application.lifecycle.value
            model.updated_at = application.updated_at

        await self.session.flush()
        return self._to_domain(model)

    async def find_by_project_id(self, project_id: UUID) -> list[ProjectApplication]:
        """Applications received by a project, oldest first."""
        stmt = (
            select(ProjectApplicationModel)
            .where(ProjectApplicationModel.project_id == project_id)
            .order_by(ProjectApplicationModel.submitted_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(m) for m in result.scalars().all()]

    async def find_by_user_id(self, user_id: UUID) -> list[ProjectApplication]:
        """Applications made by a user, newest first."""
        stmt = (
            select(ProjectApplicationModel)
            .where(ProjectApplicationModel.user_id == user_id)
            .order_by(ProjectApplicationModel.submitted_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(m) for m in result.scalars().all()]

    async def exists_by_project_id_and_user_id(
        self, project_id: UUID, user_id: UUID
    ) -> bool:
        stmt = (
            select(ProjectApplicationModel.id)
            .where(ProjectApplicationModel.project_id == project_id)
            .where(ProjectApplicationModel.user_id == user_id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    # =========================================================================
    # Entity <-> Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: ProjectApplicationModel) -> ProjectApplication:
        return ProjectApplication(
            id=model.id,
            project_id=model.project_id,
            user_id=model.user_id,
            motivation_message=stored_motivation(model.motivation_message),
            status=ApplicationStatus(model.status),
            seen_by_owner=model.seen_by_owner,
            submitted_at=model.submitted_at,
            resolved_at=model.resolved_at,
            lifecycle=LifecycleState(model.lifecycle),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: ProjectApplication) -> ProjectApplicationModel:
        model = ProjectApplicationModel(
            project_id=entity.project_id,
            user_id=entity.user_id,
            motivation_message=entity.motivation_message.value,
            status=entity.status.value,
            seen_by_owner=entity.seen_by_owner,
            submitted_at=entity.submitted_at,
            resolved_at=entity.resolved_at,
            lifecycle=entity.lifecycle.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
        if entity.id is not None:
            model.id = entity.id
        return model
