"""Unit tests for the dependency container.

Tests cover:
- App-scoped singletons are cached
- Repository and orchestrator factories wire the SQLAlchemy adapters
  onto the request's session
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from devmatch.application.services import (
    ProjectApplicationService,
    ProjectManagementService,
)
from devmatch.core.container import (
    build_project_application_service,
    build_project_management_service,
    get_database,
    get_logger,
    get_project_application_repository,
    get_project_member_repository,
    get_project_repository,
    get_user_query,
)
from devmatch.domain.protocols import LoggerProtocol
from devmatch.infrastructure.logging import ConsoleAdapter
from devmatch.infrastructure.persistence import Database
from devmatch.infrastructure.persistence.repositories import (
    ProjectApplicationRepository,
    ProjectMemberRepository,
    ProjectRepository,
    UserQueryRepository,
)


@pytest.mark.unit
class TestSingletons:
    def test_database_is_cached(self):
        assert isinstance(get_database(), Database)
        assert get_database() is get_database()

    def test_logger_is_cached_console_adapter(self):
        assert isinstance(get_logger(), ConsoleAdapter)
        assert get_logger() is get_logger()


@pytest.mark.unit
class TestRepositoryFactories:
    @pytest.mark.parametrize(
        ("factory", "expected"),
        [
            (get_project_repository, ProjectRepository),
            (get_project_member_repository, ProjectMemberRepository),
            (get_project_application_repository, ProjectApplicationRepository),
            (get_user_query, UserQueryRepository),
        ],
    )
    async def test_factory_uses_given_session(self, factory, expected):
        session = MagicMock(spec=AsyncSession)

        repository = await factory(session=session)

        assert isinstance(repository, expected)
        assert repository.session is session


@pytest.mark.unit
class TestServiceBuilders:
    def test_management_service_shares_session(self):
        session = MagicMock(spec=AsyncSession)
        logger = MagicMock(spec=LoggerProtocol)

        service = build_project_management_service(session, logger=logger)

        assert isinstance(service, ProjectManagementService)
        assert service._project_repo.session is session
        assert service._member_repo.session is session
        assert service._logger is logger

    def test_application_service_defaults_to_app_logger(self):
        session = MagicMock(spec=AsyncSession)

        service = build_project_application_service(session)

        assert isinstance(service, ProjectApplicationService)
        assert service._application_repo.session is session
        assert service._logger is get_logger()
