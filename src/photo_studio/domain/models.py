"""Domain models shared across the studio service."""

from dataclasses import dataclass, field
from uuid import UUID

CLIENT = "client"
PHOTOGRAPHER = "photographer"
ADMIN = "admin"

ROLES = frozenset({CLIENT, PHOTOGRAPHER, ADMIN})


@dataclass(frozen=True)
class UserRecord:
    """Represents a user as seen by the booking subsystem."""

    id: UUID
    name: str
    email: str
    role: str
    profile: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class Actor:
    """Authenticated identity performing an operation."""

    id: UUID
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN
