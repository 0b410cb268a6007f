"""Domain models for photography session bookings."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class BookingDraft:
    """Fields supplied by a client when requesting a booking."""

    photographer_id: UUID
    date: date
    start_time: str
    end_time: str
    type: str
    location: str = ""
    notes: str = ""


@dataclass(frozen=True)
class Booking:
    """Represents a persisted booking."""

    id: UUID
    client_id: UUID
    photographer_id: UUID
    date: date
    start_time: str
    end_time: str
    type: str
    location: str
    status: str
    notes: str
    created_at: datetime
    updated_at: datetime

    def involves(self, user_id: UUID) -> bool:
        """Return True when the user is the booking's client or photographer."""
        return user_id in {self.client_id, self.photographer_id}
