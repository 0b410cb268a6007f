"""Booking status updates: the single write path for Booking.status."""

import logging
from dataclasses import dataclass
from uuid import UUID

from photo_studio.domain.booking_status import (
    INVALID_TRANSITION,
    TransitionRejected,
    validate_transition,
)
from photo_studio.domain.bookings import Booking
from photo_studio.domain.errors import BookingNotFound, InvalidTransition, PermissionDenied
from photo_studio.domain.models import Actor
from photo_studio.services.audit import AuditService
from photo_studio.services.bookings import BookingStore
from photo_studio.services.notifications import NotificationDispatcher

logger = logging.getLogger(__name__)


@dataclass
class BookingLifecycleManager:
    """Validates, persists and announces booking status changes."""

    store: BookingStore
    dispatcher: NotificationDispatcher
    audit_service: AuditService

    def update_status(
        self,
        booking_id: UUID,
        requested_status: str,
        actor: Actor,
        notes: str | None = None,
    ) -> Booking:
        """Move a booking to a new status on behalf of an actor.

        Every rejection is raised before the store is written. Notifications
        and the activity log entry are sent only after the new status has been
        persisted, and their failures never fail the update.
        """
        booking = self.store.get_by_id(booking_id)
        if booking is None:
            raise BookingNotFound(booking_id)
        if not actor.is_admin and not booking.involves(actor.id):
            raise PermissionDenied("not permitted")

        decision = validate_transition(booking.status, requested_status, actor.role)
        if isinstance(decision, TransitionRejected):
            if decision.code == INVALID_TRANSITION:
                raise InvalidTransition(decision.reason)
            raise PermissionDenied(decision.reason)

        fields: dict[str, object] = {}
        if not decision.noop:
            fields["status"] = requested_status
        if notes is not None:
            fields["notes"] = notes
        if not fields:
            return booking

        updated = self.store.update(booking_id, fields)
        if updated is None:
            raise BookingNotFound(booking_id)
        if decision.noop:
            return updated

        logger.info(
            "Booking status changed",
            extra={
                "booking_id": str(booking_id),
                "from_status": booking.status,
                "to_status": requested_status,
                "actor_role": actor.role,
            },
        )
        self.dispatcher.dispatch(updated, booking.status, requested_status, actor.role)
        self.audit_service.record_event_best_effort(
            user_id=actor.id,
            entity_type="booking",
            entity_id=booking_id,
            event_type="booking.status_changed",
            before={"status": booking.status},
            after={"status": requested_status},
        )
        return updated
