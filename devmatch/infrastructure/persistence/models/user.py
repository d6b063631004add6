"""User database model (read side).

The users table is owned by the accounts context. DevMatch only reads it
through UserQueryRepository; the model exists so migrations and tests can
create the table.
"""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from devmatch.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """Platform user."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )

    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    profile_types: Mapped[list[Any]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Profile type labels, primary first",
    )
