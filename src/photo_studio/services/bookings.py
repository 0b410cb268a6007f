"""Booking storage interface and read/create/delete operations."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_studio.domain.booking_status import PENDING
from photo_studio.domain.bookings import Booking, BookingDraft
from photo_studio.domain.errors import BookingNotFound, InvalidRequest, PermissionDenied
from photo_studio.domain.models import CLIENT, PHOTOGRAPHER, Actor
from photo_studio.services.audit import AuditService
from photo_studio.services.users import UserService


class BookingStore(Protocol):
    """Persistence interface for bookings."""

    def create(self, client_id: UUID, draft: BookingDraft, status: str) -> Booking:
        """Create a booking and return it."""

    def get_by_id(self, booking_id: UUID) -> Booking | None:
        """Return a booking by id, if present."""

    def update(self, booking_id: UUID, fields: dict[str, object]) -> Booking | None:
        """Merge fields into a booking, refresh updated_at and return it."""

    def delete(self, booking_id: UUID) -> bool:
        """Delete a booking, returning whether it existed."""

    def list_all(self) -> list[Booking]:
        """Return every booking."""

    def list_by_client(self, client_id: UUID) -> list[Booking]:
        """Return bookings made by a client."""

    def list_by_photographer(self, photographer_id: UUID) -> list[Booking]:
        """Return bookings assigned to a photographer."""

    def list_by_status(self, status: str) -> list[Booking]:
        """Return bookings in a status."""


@dataclass
class BookingService:
    """Application service for everything except status changes."""

    store: BookingStore
    user_service: UserService
    audit_service: AuditService

    def create_booking(self, actor: Actor, draft: BookingDraft) -> Booking:
        """Create a pending booking on behalf of a client."""
        if actor.role != CLIENT:
            raise PermissionDenied("only clients can create bookings")
        photographer = self.user_service.get_user(draft.photographer_id)
        if photographer is None or photographer.role != PHOTOGRAPHER:
            raise InvalidRequest("photographer not found")
        booking = self.store.create(actor.id, draft, status=PENDING)
        self.audit_service.record_event_best_effort(
            user_id=actor.id,
            entity_type="booking",
            entity_id=booking.id,
            event_type="booking.created",
            before=None,
            after={"status": booking.status},
        )
        return booking

    def get_booking(self, actor: Actor, booking_id: UUID) -> Booking:
        """Return a booking visible to the actor."""
        booking = self.store.get_by_id(booking_id)
        if booking is None:
            raise BookingNotFound(booking_id)
        if not actor.is_admin and not booking.involves(actor.id):
            raise PermissionDenied("not permitted")
        return booking

    def list_bookings(
        self,
        actor: Actor,
        status: str | None = None,
        client_id: UUID | None = None,
        photographer_id: UUID | None = None,
    ) -> list[Booking]:
        """Return the bookings the actor may see, optionally filtered."""
        if actor.is_admin:
            if photographer_id:
                bookings = self.store.list_by_photographer(photographer_id)
            elif client_id:
                bookings = self.store.list_by_client(client_id)
            elif status:
                return self.store.list_by_status(status)
            else:
                bookings = self.store.list_all()
        elif actor.role == PHOTOGRAPHER:
            bookings = self.store.list_by_photographer(actor.id)
        elif actor.role == CLIENT:
            bookings = self.store.list_by_client(actor.id)
        else:
            bookings = []
        if status:
            bookings = [booking for booking in bookings if booking.status == status]
        return bookings

    def delete_booking(self, actor: Actor, booking_id: UUID) -> None:
        """Delete a booking; clients may only withdraw pending requests."""
        booking = self.store.get_by_id(booking_id)
        if booking is None:
            raise BookingNotFound(booking_id)
        client_withdrawal = actor.id == booking.client_id and booking.status == PENDING
        if not actor.is_admin and not client_withdrawal:
            raise PermissionDenied("not permitted")
        if not self.store.delete(booking_id):
            raise BookingNotFound(booking_id)
        self.audit_service.record_event_best_effort(
            user_id=actor.id,
            entity_type="booking",
            entity_id=booking_id,
            event_type="booking.deleted",
            before={"status": booking.status},
            after=None,
        )
