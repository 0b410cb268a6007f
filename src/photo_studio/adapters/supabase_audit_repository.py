"""Supabase repository for activity log events."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from photo_studio.adapters.supabase_query import execute, parse_timestamp
from photo_studio.domain.admin import ActivityLogEntry
from photo_studio.services.audit import AuditRepository


@dataclass
class SupabaseAuditRepository(AuditRepository):
    """Supabase-backed activity log repository."""

    client: Client

    def create_event(  # noqa: PLR0913
        self,
        user_id: UUID,
        entity_type: str,
        entity_id: UUID,
        event_type: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        """Create an activity log row."""
        execute(
            self.client.table("audit_events").insert(
                {
                    "user_id": str(user_id),
                    "entity_type": entity_type,
                    "entity_id": str(entity_id),
                    "event_type": event_type,
                    "before_json": before,
                    "after_json": after,
                }
            ),
            "create audit event",
        )

    def list_events(
        self, user_id: UUID | None, entity_type: str | None, limit: int
    ) -> list[ActivityLogEntry]:
        """Return recent events, newest first."""
        query = self.client.table("audit_events").select("*")
        if user_id is not None:
            query = query.eq("user_id", str(user_id))
        if entity_type is not None:
            query = query.eq("entity_type", entity_type)
        rows = execute(
            query.order("created_at", desc=True).limit(limit), "list audit events"
        )
        return [
            ActivityLogEntry(
                id=UUID(str(row["id"])),
                user_id=UUID(str(row["user_id"])),
                entity_type=str(row["entity_type"]),
                entity_id=UUID(str(row["entity_id"])),
                event_type=str(row["event_type"]),
                before=row.get("before_json"),
                after=row.get("after_json"),
                created_at=parse_timestamp(row.get("created_at")),
            )
            for row in rows
        ]
