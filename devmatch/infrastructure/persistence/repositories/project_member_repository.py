"""ProjectMemberRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture.
Maps between domain ProjectMember entities and database ProjectMemberModel.

Capacity:
    add_member_if_capacity() locks the project row with SELECT ... FOR UPDATE
    before counting members. A second transaction accepting into the same
    project blocks on that lock until the first commits, then sees its new
    member. (SQLite has no row locks; it serializes writers per database.)
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from devmatch.domain.entities.project_member import ProjectMember
from devmatch.domain.enums import LifecycleState
from devmatch.infrastructure.persistence.models import (
    ProjectMemberModel,
    ProjectModel,
)


class ProjectMemberRepository:
    """SQLAlchemy implementation of ProjectMemberRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def count_active_members_by_project_id(self, project_id: UUID) -> int:
        """Count active non-owner members."""
        stmt = (
            select(func.count())
            .select_from(ProjectMemberModel)
            .where(ProjectMemberModel.project_id == project_id)
            .where(ProjectMemberModel.lifecycle == LifecycleState.ACTIVE.value)
            .where(ProjectMemberModel.is_owner.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def add_member(
        self,
        project_id: UUID,
        user_id: UUID,
        role: str,
        is_owner: bool = False,
    ) -> ProjectMember:
        """Insert an active membership (no capacity check).

        Raises:
            IntegrityError: If the user already has a membership row for
                this project.
        """
        member = ProjectMember.join(
            project_id=project_id,
            user_id=user_id,
            role=role,
            is_owner=is_owner,
        )
        model = self._to_model(member)
        self.session.add(model)
        await self.session.flush()
        return self._to_domain(model)

    async def add_member_if_capacity(
        self,
        project_id: UUID,
        user_id: UUID,
        role: str,
        max_team_size: int | None,
    ) -> ProjectMember | None:
        """Insert a membership if the team has room, atomically.

        Args:
            project_id: Project identifier.
            user_id: New member.
            role: Role label.
            max_team_size: Capacity (None means unlimited).

        Returns:
            Persisted membership, or None if the team is full.
        """
        # Serialize concurrent reservations on the project row
        await self.session.execute(
            select(ProjectModel.id)
            .where(ProjectModel.id == project_id)
            .with_for_update()
        )

        if max_team_size is not None:
            current = await self.count_active_members_by_project_id(project_id)
            if current >= max_team_size:
                return None

        return await self.add_member(project_id, user_id, role)

    async def get_active_members_by_project_id(
        self, project_id: UUID
    ) -> list[ProjectMember]:
        """List current members (owner included), oldest first."""
        stmt = (
            select(ProjectMemberModel)
            .where(ProjectMemberModel.project_id == project_id)
            .where(ProjectMemberModel.lifecycle == LifecycleState.ACTIVE.value)
            .order_by(ProjectMemberModel.joined_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(m) for m in result.scalars().all()]

    async def find_active_member(
        self, project_id: UUID, user_id: UUID
    ) -> ProjectMember | None:
        stmt = (
            select(ProjectMemberModel)
            .where(ProjectMemberModel.project_id == project_id)
            .where(ProjectMemberModel.user_id == user_id)
            .where(ProjectMemberModel.lifecycle == LifecycleState.ACTIVE.value)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def save(self, member: ProjectMember) -> ProjectMember:
        """Persist role, departure and lifecycle changes.

        Memberships without an id are inserted.
        """
        existing = (
            await self.session.get(ProjectMemberModel, member.id)
            if member.id is not None
            else None
        )
        if existing is None:
            model = self._to_model(member)
            self.session.add(model)
        else:
            model = existing
            model.member_role = member.member_role
            model.left_at = member.left_at
            model.lifecycle = member.lifecycle.value

        await self.session.flush()
        return self._to_domain(model)

    # =========================================================================
    # Entity <-> Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: ProjectMemberModel) -> ProjectMember:
        return ProjectMember(
            id=model.id,
            project_id=model.project_id,
            user_id=model.user_id,
            member_role=model.member_role,
            is_owner=model.is_owner,
            joined_at=model.joined_at,
            left_at=model.left_at,
            lifecycle=LifecycleState(model.lifecycle),
        )

    def _to_model(self, entity: ProjectMember) -> ProjectMemberModel:
        model = ProjectMemberModel(
            project_id=entity.project_id,
            user_id=entity.user_id,
            member_role=entity.member_role,
            is_owner=entity.is_owner,
            joined_at=entity.joined_at,
            left_at=entity.left_at,
            lifecycle=entity.lifecycle.value,
            created_at=entity.joined_at,
        )
        if entity.id is not None:
            model.id = entity.id
        return model
