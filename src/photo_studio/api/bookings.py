"""Booking endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request, status

from photo_studio.api.auth import get_actor
from photo_studio.api.models import (
    BookingCreateRequest,
    BookingStatusRequest,
    BookingStatusValue,
)
from photo_studio.domain.bookings import Booking, BookingDraft
from photo_studio.domain.models import Actor  # noqa: TC001

if TYPE_CHECKING:
    from photo_studio.containers import AppContainer

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_booking(
    payload: BookingCreateRequest,
    request: Request,
    actor: Actor = Depends(get_actor),
) -> dict[str, object]:
    """Create a pending booking for the calling client."""
    container: AppContainer = request.app.state.container
    booking = container.booking_service.create_booking(
        actor,
        BookingDraft(
            photographer_id=payload.photographer_id,
            date=payload.date,
            start_time=payload.start_time,
            end_time=payload.end_time,
            type=payload.type,
            location=payload.location,
            notes=payload.notes,
        ),
    )
    return {"booking": _serialize_booking(booking)}


@router.get("")
async def list_bookings(  # noqa: PLR0913
    request: Request,
    status_filter: BookingStatusValue | None = Query(default=None, alias="status"),
    client_id: UUID | None = None,
    photographer_id: UUID | None = None,
    actor: Actor = Depends(get_actor),
) -> dict[str, object]:
    """Return bookings visible to the caller."""
    container: AppContainer = request.app.state.container
    bookings = container.booking_service.list_bookings(
        actor,
        status=status_filter,
        client_id=client_id,
        photographer_id=photographer_id,
    )
    return {"bookings": [_serialize_booking(booking) for booking in bookings]}


@router.get("/{booking_id}")
async def get_booking(
    booking_id: UUID, request: Request, actor: Actor = Depends(get_actor)
) -> dict[str, object]:
    """Return a single booking."""
    container: AppContainer = request.app.state.container
    booking = container.booking_service.get_booking(actor, booking_id)
    return {"booking": _serialize_booking(booking)}


@router.patch("/{booking_id}/status")
async def update_booking_status(
    booking_id: UUID,
    payload: BookingStatusRequest,
    request: Request,
    actor: Actor = Depends(get_actor),
) -> dict[str, object]:
    """Change a booking's status."""
    container: AppContainer = request.app.state.container
    booking = container.lifecycle_manager.update_status(
        booking_id, payload.status, actor, notes=payload.notes
    )
    return {"booking": _serialize_booking(booking)}


@router.delete("/{booking_id}")
async def delete_booking(
    booking_id: UUID, request: Request, actor: Actor = Depends(get_actor)
) -> dict[str, str]:
    """Delete a booking."""
    container: AppContainer = request.app.state.container
    container.booking_service.delete_booking(actor, booking_id)
    return {"status": "deleted"}


def _serialize_booking(booking: Booking) -> dict[str, object]:
    return {
        "id": str(booking.id),
        "client_id": str(booking.client_id),
        "photographer_id": str(booking.photographer_id),
        "date": booking.date.isoformat(),
        "start_time": booking.start_time,
        "end_time": booking.end_time,
        "type": booking.type,
        "location": booking.location,
        "status": booking.status,
        "notes": booking.notes,
        "created_at": booking.created_at.isoformat(),
        "updated_at": booking.updated_at.isoformat(),
    }
