"""Supabase-backed user lookups."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from photo_studio.adapters.supabase_query import execute
from photo_studio.domain.models import UserRecord
from photo_studio.services.users import UserRepository

_COLUMNS = "id, name, email, role, profile"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user lookups."""

    client: Client

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        rows = execute(
            self.client.table("users")
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1),
            "load user",
        )
        if not rows:
            return None
        return _parse_row(rows[0])

    def list_users(self) -> list[UserRecord]:
        """Return all users."""
        rows = execute(self.client.table("users").select(_COLUMNS), "list users")
        return [_parse_row(row) for row in rows]


def _parse_row(row: dict[str, object]) -> UserRecord:
    profile = row.get("profile")
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        email=str(row.get("email") or ""),
        role=str(row["role"]),
        profile=profile if isinstance(profile, dict) else {},
    )
