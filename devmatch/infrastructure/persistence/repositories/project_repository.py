"""ProjectRepository - SQLAlchemy implementation of ProjectRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Project aggregates and database ProjectModel.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from devmatch.domain.entities.project import Project
from devmatch.domain.enums import LifecycleState, ProjectStatus
from devmatch.infrastructure.persistence.models import ProjectModel
from devmatch.infrastructure.persistence.rehydration import (
    stored_cover_image_url,
    stored_description,
    stored_duration,
    stored_repo_url,
    stored_team_size,
    stored_title,
)


class ProjectRepository:
    """SQLAlchemy implementation of ProjectRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural
    typing). It flushes but never commits: the session owner decides.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = ProjectRepository(session)
        ...     project = await repo.find_by_id(project_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, project_id: UUID) -> Project | None:
        """Find project by ID (any lifecycle state).

        Args:
            project_id: Project's unique identifier.

        Returns:
            Domain Project if found, None otherwise.
        """
        model = await self.session.get(ProjectModel, project_id)
        return self._to_domain(model) if model else None

    async def save(self, project: Project) -> Project:
        """Create or update a project.

        Args:
            project: Project snapshot to persist.

        Returns:
            Persisted Project (id assigned on first save).
        """
        existing = (
            await self.session.get(ProjectModel, project.id)
            if project.id is not None
            else None
        )

        if existing is None:
            model = self._to_model(project)
            self.session.add(model)
        else:
            model = existing
            self._update_model(model, project)

        await self.session.flush()
        return self._to_domain(model)

    async def find_by_owner_id(self, owner_id: UUID) -> list[Project]:
        """Find an owner's non-deleted projects, newest first."""
        stmt = (
            select(ProjectModel)
            .where(ProjectModel.owner_id == owner_id)
            .where(ProjectModel.lifecycle != LifecycleState.DELETED.value)
            .order_by(ProjectModel.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(m) for m in result.scalars().all()]

    async def count_by_owner_id(self, owner_id: UUID) -> int:
        """Count an owner's non-deleted projects."""
        stmt = (
            select(func.count())
            .select_from(ProjectModel)
            .where(ProjectModel.owner_id == owner_id)
            .where(ProjectModel.lifecycle != LifecycleState.DELETED.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    # =========================================================================
    # Entity <-> Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: ProjectModel) -> Project:
        """Convert database model to domain aggregate.

        Rebuilds value objects from their stored primitive values without
        re-validating them, so rows written under older rules still load.
        """
        return Project(
            id=model.id,
            title=stored_title(model.title),
            description=stored_description(model.description),
            status=ProjectStatus(model.status),
            owner_id=model.owner_id,
            repo_url=stored_repo_url(model.repo_url),
            cover_image_url=stored_cover_image_url(model.cover_image_url),
            estimated_duration=stored_duration(model.estimated_duration_weeks),
            max_team_size=stored_team_size(model.max_team_size),
            is_public=model.is_public,
            lifecycle=LifecycleState(model.lifecycle),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Project) -> ProjectModel:
        model = ProjectModel(
            owner_id=entity.owner_id,
            created_at=entity.created_at,
        )
        if entity.id is not None:
            model.id = entity.id
        self._update_model(model, entity)
        return model

    def _update_model(self, model: ProjectModel, entity: Project) -> None:
        """Copy mutable fields onto an existing model.

        Does not update id, owner_id or created_at (immutable).
        """
        model.title = entity.title.value
        model.description = entity.description.value
        model.status = entity.status.value
        model.repo_url = entity.repo_url.normalized if entity.repo_url else None
        model.cover_image_url = (
            entity.cover_image_url.normalized if entity.cover_image_url else None
        )
        model.estimated_duration_weeks = (
            entity.estimated_duration.weeks if entity.estimated_duration else None
        )
        model.max_team_size = (
            entity.max_team_size.value if entity.max_team_size else None
        )
        model.is_public = entity.is_public
        model.lifecycle = entity.lifecycle.value
        model.updated_at = entity.updated_at
