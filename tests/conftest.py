"""Pytest configuration.

This configuration ensures:
1. Settings load without a real environment (SQLite URL, testing env)
2. Async tests are marked for pytest-asyncio automatically
3. Integration tests get a fresh SQLite database per test
4. Shared builders for domain objects used across test modules
"""

import inspect
import os
from dataclasses import replace

# Settings are loaded at import time; give them a database URL first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "testing")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from devmatch.domain.entities import (  # noqa: E402
    Project,
    ProjectApplication,
    ProjectMember,
    UserSummary,
)
from devmatch.domain.enums import MemberRole, ProjectStatus  # noqa: E402
from devmatch.domain.value_objects import (  # noqa: E402
    MotivationMessage,
    ProjectDescription,
    ProjectTitle,
    TeamSize,
)

# Texts shared by the tests. Blocklisted words match as substrings, so
# none of these may contain "spam", "prueba" or t-e-s-t (as in "latest").
VALID_TITLE = "Habit Tracker API"
VALID_DESCRIPTION = "A REST backend that helps people track their daily habits"
VALID_MOTIVATION = "I build REST services every day and would love to help"


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Domain builders
# =============================================================================


def create_project(
    *,
    project_id=None,
    owner_id=None,
    status: ProjectStatus = ProjectStatus.OPEN,
    max_team_size: int | None = None,
    is_public: bool = True,
    persisted: bool = True,
) -> Project:
    """Build a Project with valid defaults.

    Args:
        persisted: When True (default) the project gets an id, as if loaded
            from a repository.
    """
    project = Project.create(
        owner_id=owner_id or uuid7(),
        title=ProjectTitle(VALID_TITLE),
        description=ProjectDescription(VALID_DESCRIPTION),
        status=status,
        max_team_size=TeamSize(max_team_size) if max_team_size is not None else None,
        is_public=is_public,
    )
    if persisted:
        project = replace(project, id=project_id or uuid7())
    return project


def create_application(
    *,
    application_id=None,
    project_id=None,
    user_id=None,
    message: str = VALID_MOTIVATION,
) -> ProjectApplication:
    """Build a persisted PENDING application."""

    application = ProjectApplication.submit(
        project_id=project_id or uuid7(),
        user_id=user_id or uuid7(),
        motivation_message=MotivationMessage(message),
    )
    return replace(application, id=application_id or uuid7())


def create_member(
    *,
    project_id=None,
    user_id=None,
    role: str = MemberRole.DEVELOPER.value,
    is_owner: bool = False,
) -> ProjectMember:
    """Build a persisted active membership."""

    member = ProjectMember.join(
        project_id=project_id or uuid7(),
        user_id=user_id or uuid7(),
        role=role,
        is_owner=is_owner,
    )
    return replace(member, id=uuid7())


def create_user(
    *, user_id=None, username: str = "ada", profile_types=("Backend Developer",)
) -> UserSummary:
    return UserSummary(
        id=user_id or uuid7(),
        username=username,
        first_name="Ada",
        last_name="Lovelace",
        profile_types=tuple(profile_types),
    )


# =============================================================================
# Database fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a fresh SQLite database with all tables created.

    Each test gets its own file, so no data leaks between tests. Tests open
    as many sessions as they need:

        async with test_database.get_session() as session:
            ...
    """
    from devmatch.infrastructure.persistence.database import Database

    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'devmatch.db'}")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()
