"""In-app notifications and booking notification fan-out."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_studio.domain.booking_status import CANCELLED, COMPLETED, CONFIRMED
from photo_studio.domain.bookings import Booking
from photo_studio.domain.errors import (
    InvalidRequest,
    NotificationDispatchError,
    NotificationNotFound,
    PermissionDenied,
    StorageError,
)
from photo_studio.domain.models import CLIENT, Actor
from photo_studio.domain.notifications import (
    BOOKING,
    NOTIFICATION_TYPES,
    SYSTEM,
    NotificationRecord,
)
from photo_studio.services.users import UserService

logger = logging.getLogger(__name__)


class NotificationRepository(Protocol):
    """Persistence interface for notifications."""

    def create_notification(
        self, user_id: UUID, title: str, message: str, notification_type: str
    ) -> NotificationRecord:
        """Create an unread notification and return it."""

    def get_notification(self, notification_id: UUID) -> NotificationRecord | None:
        """Return a notification by id, if present."""

    def list_by_user(
        self, user_id: UUID, unread_only: bool
    ) -> list[NotificationRecord]:
        """Return a user's notifications, newest first."""

    def mark_read(self, notification_id: UUID) -> NotificationRecord | None:
        """Flip a notification to read and return it."""

    def mark_all_read(self, user_id: UUID) -> int:
        """Mark every unread notification for a user as read."""

    def delete_notification(self, notification_id: UUID) -> bool:
        """Delete a notification, returning whether it existed."""

    def delete_all(self, user_id: UUID) -> int:
        """Delete all notifications for a user."""

    def list_all(
        self,
        user_id: UUID | None,
        notification_type: str | None,
        is_read: bool | None,
        newest_first: bool,
    ) -> list[NotificationRecord]:
        """Return notifications across all users, optionally filtered."""


@dataclass
class NotificationService:
    """Application service for a user's notification inbox."""

    repository: NotificationRepository

    def send(
        self,
        user_id: UUID,
        title: str,
        message: str,
        notification_type: str = BOOKING,
    ) -> NotificationRecord:
        """Create a notification for a single recipient."""
        if notification_type not in NOTIFICATION_TYPES:
            raise InvalidRequest(f"unknown notification type {notification_type}")
        try:
            return self.repository.create_notification(
                user_id, title, message, notification_type
            )
        except StorageError as exc:
            raise NotificationDispatchError(
                f"could not notify user {user_id}"
            ) from exc

    def list_for_user(
        self, user_id: UUID, unread_only: bool = False
    ) -> list[NotificationRecord]:
        """Return the user's notifications, newest first."""
        return self.repository.list_by_user(user_id, unread_only)

    def mark_read(self, actor: Actor, notification_id: UUID) -> NotificationRecord:
        """Mark one of the actor's notifications as read."""
        self._get_owned(actor, notification_id)
        updated = self.repository.mark_read(notification_id)
        if updated is None:
            raise NotificationNotFound(notification_id)
        return updated

    def mark_all_read(self, user_id: UUID) -> int:
        """Mark all of the user's notifications as read."""
        return self.repository.mark_all_read(user_id)

    def delete(self, actor: Actor, notification_id: UUID) -> None:
        """Delete one of the actor's notifications."""
        self._get_owned(actor, notification_id)
        if not self.repository.delete_notification(notification_id):
            raise NotificationNotFound(notification_id)

    def delete_all(self, user_id: UUID) -> int:
        """Delete all of the user's notifications."""
        return self.repository.delete_all(user_id)

    def broadcast(
        self,
        user_ids: list[UUID],
        title: str,
        message: str,
        notification_type: str = SYSTEM,
    ) -> list[NotificationRecord]:
        """Send the same notification to each user in turn.

        The first failure is raised; notifications already created for
        earlier recipients are kept.
        """
        return [
            self.send(user_id, title, message, notification_type)
            for user_id in user_ids
        ]

    def list_all(
        self,
        user_id: UUID | None = None,
        notification_type: str | None = None,
        is_read: bool | None = None,
        newest_first: bool = True,
    ) -> list[NotificationRecord]:
        """Return notifications across all users for the admin view."""
        return self.repository.list_all(
            user_id, notification_type, is_read, newest_first
        )

    def _get_owned(self, actor: Actor, notification_id: UUID) -> NotificationRecord:
        notification = self.repository.get_notification(notification_id)
        if notification is None:
            raise NotificationNotFound(notification_id)
        if notification.user_id != actor.id:
            raise PermissionDenied("notification belongs to another user")
        return notification


@dataclass(frozen=True)
class _Message:
    user_id: UUID
    title: str
    message: str


@dataclass
class NotificationDispatcher:
    """Turns booking status transitions into notifications.

    Delivery is best effort: each recipient is attempted once and failures are
    logged, never raised, so a persisted status change is never undone by a
    notification problem.
    """

    notification_service: NotificationService
    user_service: UserService

    def dispatch(
        self,
        booking: Booking,
        previous_status: str,
        new_status: str,
        actor_role: str,
    ) -> list[NotificationRecord]:
        """Notify the parties affected by a booking transition."""
        if new_status == previous_status:
            return []
        delivered = []
        for message in self._compose(booking, new_status, actor_role):
            try:
                delivered.append(
                    self.notification_service.send(
                        message.user_id, message.title, message.message, BOOKING
                    )
                )
            except Exception:
                logger.exception(
                    "Failed to send booking notification",
                    extra={
                        "booking_id": str(booking.id),
                        "recipient_id": str(message.user_id),
                    },
                )
        return delivered

    def _compose(
        self, booking: Booking, new_status: str, actor_role: str
    ) -> list[_Message]:
        when = f"{booking.date.isoformat()} {booking.start_time}"
        if new_status == CONFIRMED:
            photographer_name = self._name(booking.photographer_id)
            return [
                _Message(
                    booking.client_id,
                    "Booking confirmed",
                    f"Booking confirmed by photographer {photographer_name}; "
                    f"date {when}.",
                )
            ]
        if new_status == CANCELLED and actor_role == CLIENT:
            client_name = self._name(booking.client_id)
            return [
                _Message(
                    booking.client_id,
                    "Booking cancelled",
                    f"You cancelled your booking for {when}.",
                ),
                _Message(
                    booking.photographer_id,
                    "Client cancelled booking",
                    f"Client {client_name} cancelled the booking for {when}.",
                ),
            ]
        if new_status == CANCELLED:
            return [
                _Message(
                    booking.client_id,
                    "Booking cancelled",
                    f"Your booking for {when} was cancelled.",
                )
            ]
        if new_status == COMPLETED:
            return [
                _Message(
                    booking.client_id,
                    "Booking completed",
                    "Your booking is complete; photos will be uploaded soon.",
                )
            ]
        return []

    def _name(self, user_id: UUID) -> str:
        try:
            return self.user_service.display_name(user_id)
        except Exception:
            logger.exception(
                "Failed to resolve user name", extra={"user_id": str(user_id)}
            )
            return ""
