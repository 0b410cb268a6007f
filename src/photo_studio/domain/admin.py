"""Admin domain models."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from photo_studio.domain.notifications import NotificationRecord


@dataclass(frozen=True)
class ActivityLogEntry:
    """Recorded change to a domain entity."""

    id: UUID
    user_id: UUID
    entity_type: str
    entity_id: UUID
    event_type: str
    before: dict[str, object] | None
    after: dict[str, object] | None
    created_at: datetime


@dataclass(frozen=True)
class DashboardStats:
    """Headline numbers for the admin dashboard."""

    total_clients: int
    total_photographers: int
    total_bookings: int
    bookings_by_status: dict[str, int]
    completed_sessions: int
    active_clients: int


@dataclass(frozen=True)
class NotificationOverview:
    """Notifications across all users with the names of their recipients."""

    notifications: list[NotificationRecord]
    user_names: dict[UUID, str]
    stats: dict[str, int]
