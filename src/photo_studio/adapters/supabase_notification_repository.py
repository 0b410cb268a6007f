"""Supabase repository for notifications."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from photo_studio.adapters.supabase_query import execute, parse_timestamp
from photo_studio.domain.errors import StorageError
from photo_studio.domain.notifications import NotificationRecord
from photo_studio.services.notifications import NotificationRepository

_COLUMNS = "id, user_id, title, message, type, is_read, created_at"


@dataclass
class SupabaseNotificationRepository(NotificationRepository):
    """Supabase implementation for notification persistence."""

    client: Client

    def create_notification(
        self, user_id: UUID, title: str, message: str, notification_type: str
    ) -> NotificationRecord:
        """Insert an unread notification and return it."""
        rows = execute(
            self.client.table("notifications").insert(
                {
                    "user_id": str(user_id),
                    "title": title,
                    "message": message,
                    "type": notification_type,
                    "is_read": False,
                }
            ),
            "create notification",
        )
        if not rows:
            raise StorageError("Failed to create notification in Supabase")
        return _parse_row(rows[0])

    def get_notification(self, notification_id: UUID) -> NotificationRecord | None:
        """Return a notification by id, if present."""
        rows = execute(
            self.client.table("notifications")
            .select(_COLUMNS)
            .eq("id", str(notification_id))
            .limit(1),
            "load notification",
        )
        if not rows:
            return None
        return _parse_row(rows[0])

    def list_by_user(
        self, user_id: UUID, unread_only: bool
    ) -> list[NotificationRecord]:
        """Return a user's notifications, newest first."""
        query = (
            self.client.table("notifications")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
        )
        if unread_only:
            query = query.eq("is_read", False)
        rows = execute(query.order("created_at", desc=True), "list notifications")
        return [_parse_row(row) for row in rows]

    def mark_read(self, notification_id: UUID) -> NotificationRecord | None:
        """Flip a notification to read."""
        rows = execute(
            self.client.table("notifications")
            .update({"is_read": True})
            .eq("id", str(notification_id)),
            "mark notification read",
        )
        if not rows:
            return None
        return _parse_row(rows[0])

    def mark_all_read(self, user_id: UUID) -> int:
        """Mark every unread notification for a user as read."""
        rows = execute(
            self.client.table("notifications")
            .update({"is_read": True})
            .eq("user_id", str(user_id))
            .eq("is_read", False),
            "mark notifications read",
        )
        return len(rows)

    def delete_notification(self, notification_id: UUID) -> bool:
        """Delete a notification row."""
        rows = execute(
            self.client.table("notifications").delete().eq("id", str(notification_id)),
            "delete notification",
        )
        return bool(rows)

    def delete_all(self, user_id: UUID) -> int:
        """Delete all notifications for a user."""
        rows = execute(
            self.client.table("notifications").delete().eq("user_id", str(user_id)),
            "delete notifications",
        )
        return len(rows)

    def list_all(
        self,
        user_id: UUID | None,
        notification_type: str | None,
        is_read: bool | None,
        newest_first: bool,
    ) -> list[NotificationRecord]:
        """Return notifications across all users, optionally filtered."""
        query = self.client.table("notifications").select(_COLUMNS)
        if user_id is not None:
            query = query.eq("user_id", str(user_id))
        if notification_type is not None:
            query = query.eq("type", notification_type)
        if is_read is not None:
            query = query.eq("is_read", is_read)
        rows = execute(
            query.order("created_at", desc=newest_first), "list all notifications"
        )
        return [_parse_row(row) for row in rows]


def _parse_row(row: dict[str, object]) -> NotificationRecord:
    return NotificationRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        title=str(row["title"]),
        message=str(row["message"]),
        type=str(row["type"]),
        is_read=bool(row.get("is_read")),
        created_at=parse_timestamp(row.get("created_at")),
    )
