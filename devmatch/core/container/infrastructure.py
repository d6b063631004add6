"""Infrastructure dependency factories.

App-scoped singletons (database, logger) and the request-scoped database
session.

Lifetimes:
    - get_database(), get_logger(): one instance per process (lru_cache)
    - get_db_session(): one session per request, committed on success and
      rolled back on exception
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from devmatch.core.config import settings
from devmatch.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from devmatch.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from devmatch.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.environment.uses_json_logs,
        level="DEBUG" if settings.debug else settings.log_level,
        app=settings.app_name,
        version=settings.app_version,
        env=settings.environment.value,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Yields:
        Database session for request duration.

    Usage:
        from fastapi import Depends

        async def endpoint(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
