"""User lookups used by the booking subsystem."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_studio.domain.models import Actor, UserRecord


class UserRepository(Protocol):
    """Read-only access to users owned by the auth subsystem."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""

    def list_users(self) -> list[UserRecord]:
        """Return all users."""


@dataclass
class UserService:
    """Application service for resolving users and actors."""

    repository: UserRepository

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id, if present."""
        return self.repository.get_by_id(user_id)

    def resolve_actor(self, user_id: UUID) -> Actor | None:
        """Build the actor for an authenticated user id."""
        user = self.repository.get_by_id(user_id)
        if user is None:
            return None
        return Actor(id=user.id, role=user.role)

    def display_name(self, user_id: UUID) -> str:
        """Return the user's name, or an empty string when unknown."""
        user = self.repository.get_by_id(user_id)
        return user.name if user else ""

    def list_users(self) -> list[UserRecord]:
        """Return all users."""
        return self.repository.list_users()
