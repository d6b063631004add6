"""SQLAlchemy persistence adapters."""

from devmatch.infrastructure.persistence.database import Database

__all__ = ["Database"]
