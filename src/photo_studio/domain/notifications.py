"""Notification domain models."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

BOOKING = "booking"
PHOTO = "photo"
ORDER = "order"
SYSTEM = "system"

NOTIFICATION_TYPES = frozenset({BOOKING, PHOTO, ORDER, SYSTEM})


@dataclass(frozen=True)
class NotificationRecord:
    """A notification addressed to exactly one user."""

    id: UUID
    user_id: UUID
    title: str
    message: str
    type: str
    is_read: bool
    created_at: datetime
