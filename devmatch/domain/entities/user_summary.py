"""Read-only view of a platform user.

Users belong to another bounded context; DevMatch only reads the fields it
needs to enrich responses and to check that an applicant exists.
"""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class UserSummary:
    """Projection of a user returned by the user query port.

    Attributes:
        id: User identifier.
        username: Public handle.
        first_name: Given name, if known.
        last_name: Family name, if known.
        profile_types: Profile type labels (e.g. "Backend Developer").
    """

    id: UUID
    username: str
    first_name: str | None = None
    last_name: str | None = None
    profile_types: tuple[str, ...] = field(default_factory=tuple)

    @property
    def full_name(self) -> str:
        """First and last name joined, falling back to the username."""
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else self.username

    @property
    def primary_profile_type(self) -> str | None:
        """First profile type, used as the member's displayed profile."""
        return self.profile_types[0] if self.profile_types else None
