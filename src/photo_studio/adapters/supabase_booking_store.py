"""Supabase-backed booking store."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from photo_studio.adapters.supabase_query import execute, parse_timestamp
from photo_studio.domain.bookings import Booking, BookingDraft
from photo_studio.domain.errors import StorageError
from photo_studio.services.bookings import BookingStore

_COLUMNS = (
    "id, client_id, photographer_id, date, start_time, end_time, type, location, "
    "status, notes, created_at, updated_at"
)
_UPDATABLE_FIELDS = {"status", "notes"}


@dataclass
class SupabaseBookingStore(BookingStore):
    """Supabase implementation for booking persistence."""

    client: Client

    def create(self, client_id: UUID, draft: BookingDraft, status: str) -> Booking:
        """Insert a booking row and return it."""
        rows = execute(
            self.client.table("bookings").insert(
                {
                    "client_id": str(client_id),
                    "photographer_id": str(draft.photographer_id),
                    "date": draft.date.isoformat(),
                    "start_time": draft.start_time,
                    "end_time": draft.end_time,
                    "type": draft.type,
                    "location": draft.location,
                    "status": status,
                    "notes": draft.notes,
                }
            ),
            "create booking",
        )
        if not rows:
            raise StorageError("Failed to create booking in Supabase")
        return _parse_row(rows[0])

    def get_by_id(self, booking_id: UUID) -> Booking | None:
        """Return a booking by id, if present."""
        rows = execute(
            self.client.table("bookings")
            .select(_COLUMNS)
            .eq("id", str(booking_id))
            .limit(1),
            "load booking",
        )
        if not rows:
            return None
        return _parse_row(rows[0])

    def update(self, booking_id: UUID, fields: dict[str, object]) -> Booking | None:
        """Update status and notes on a single row."""
        unexpected = set(fields) - _UPDATABLE_FIELDS
        if unexpected:
            raise ValueError(f"Booking fields are immutable: {sorted(unexpected)}")
        rows = execute(
            self.client.table("bookings")
            .update({**fields, "updated_at": datetime.now(tz=UTC).isoformat()})
            .eq("id", str(booking_id)),
            "update booking",
        )
        if not rows:
            return None
        return _parse_row(rows[0])

    def delete(self, booking_id: UUID) -> bool:
        """Delete a booking row."""
        rows = execute(
            self.client.table("bookings").delete().eq("id", str(booking_id)),
            "delete booking",
        )
        return bool(rows)

    def list_all(self) -> list[Booking]:
        """Return every booking, newest first."""
        return self._list(None, None, "list bookings")

    def list_by_client(self, client_id: UUID) -> list[Booking]:
        """Return bookings made by a client."""
        return self._list("client_id", str(client_id), "list client bookings")

    def list_by_photographer(self, photographer_id: UUID) -> list[Booking]:
        """Return bookings assigned to a photographer."""
        return self._list(
            "photographer_id", str(photographer_id), "list photographer bookings"
        )

    def list_by_status(self, status: str) -> list[Booking]:
        """Return bookings in a status."""
        return self._list("status", status, "list bookings by status")

    def _list(self, column: str | None, value: str | None, action: str) -> list[Booking]:
        query = self.client.table("bookings").select(_COLUMNS)
        if column is not None:
            query = query.eq(column, value)
        rows = execute(query.order("created_at", desc=True), action)
        return [_parse_row(row) for row in rows]


def _parse_row(row: dict[str, object]) -> Booking:
    return Booking(
        id=UUID(str(row["id"])),
        client_id=UUID(str(row["client_id"])),
        photographer_id=UUID(str(row["photographer_id"])),
        date=date.fromisoformat(str(row["date"])),
        start_time=str(row["start_time"]),
        end_time=str(row["end_time"]),
        type=str(row.get("type") or ""),
        location=str(row.get("location") or ""),
        status=str(row["status"]),
        notes=str(row.get("notes") or ""),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
