"""Admin service for dashboard reporting."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

from photo_studio.domain.admin import (
    ActivityLogEntry,
    DashboardStats,
    NotificationOverview,
)
from photo_studio.domain.booking_status import BOOKING_STATUSES, COMPLETED
from photo_studio.domain.errors import InvalidRequest
from photo_studio.domain.models import CLIENT, PHOTOGRAPHER, ROLES
from photo_studio.domain.notifications import NOTIFICATION_TYPES, SYSTEM
from photo_studio.services.audit import AuditService
from photo_studio.services.bookings import BookingStore
from photo_studio.services.notifications import NotificationService
from photo_studio.services.users import UserService

ALL_USERS = "all"


@dataclass
class AdminService:
    """Service for admin dashboards."""

    user_service: UserService
    booking_store: BookingStore
    audit_service: AuditService
    notification_service: NotificationService
    active_client_window_days: int = 30

    def get_stats(self) -> DashboardStats:
        """Return user and booking counts for the dashboard."""
        users = self.user_service.list_users()
        bookings = self.booking_store.list_all()
        by_status = dict.fromkeys(sorted(BOOKING_STATUSES), 0)
        for booking in bookings:
            by_status[booking.status] = by_status.get(booking.status, 0) + 1
        window_start = (
            datetime.now(tz=UTC) - timedelta(days=self.active_client_window_days)
        ).date()
        active_clients = {
            booking.client_id for booking in bookings if booking.date >= window_start
        }
        return DashboardStats(
            total_clients=sum(1 for user in users if user.role == CLIENT),
            total_photographers=sum(1 for user in users if user.role == PHOTOGRAPHER),
            total_bookings=len(bookings),
            bookings_by_status=by_status,
            completed_sessions=by_status[COMPLETED],
            active_clients=len(active_clients),
        )

    def list_logs(
        self,
        user_id: UUID | None = None,
        entity_type: str | None = None,
        limit: int = 50,
    ) -> list[dict[str, object]]:
        """Return recent activity log entries."""
        events = self.audit_service.list_events(user_id, entity_type, limit)
        return [_serialize_event(event) for event in events]

    def broadcast_notification(
        self, target_role: str, title: str, message: str
    ) -> int:
        """Send a system notification to every user with a role.

        ``target_role`` may also be ``"all"``. Returns how many users were
        notified; zero when nobody has the role.
        """
        if target_role != ALL_USERS and target_role not in ROLES:
            raise InvalidRequest(f"unknown target role {target_role}")
        recipients = [
            user.id
            for user in self.user_service.list_users()
            if target_role in (ALL_USERS, user.role)
        ]
        sent = self.notification_service.broadcast(recipients, title, message, SYSTEM)
        return len(sent)

    def list_notifications(
        self,
        user_id: UUID | None = None,
        notification_type: str | None = None,
        is_read: bool | None = None,
        newest_first: bool = True,
    ) -> NotificationOverview:
        """Return notifications across all users with per-type counts."""
        notifications = self.notification_service.list_all(
            user_id=user_id,
            notification_type=notification_type,
            is_read=is_read,
            newest_first=newest_first,
        )
        stats = {
            "total": len(notifications),
            "unread": sum(1 for n in notifications if not n.is_read),
        }
        for kind in sorted(NOTIFICATION_TYPES):
            stats[kind] = sum(1 for n in notifications if n.type == kind)
        return NotificationOverview(
            notifications=notifications,
            user_names={user.id: user.name for user in self.user_service.list_users()},
            stats=stats,
        )


def _serialize_event(event: ActivityLogEntry) -> dict[str, object]:
    return {
        "id": str(event.id),
        "user_id": str(event.user_id),
        "entity_type": event.entity_type,
        "entity_id": str(event.entity_id),
        "event_type": event.event_type,
        "before": event.before,
        "after": event.after,
        "created_at": event.created_at.isoformat(),
    }
