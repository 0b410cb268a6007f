"""Notification inbox endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from photo_studio.api.auth import get_actor
from photo_studio.domain.models import Actor  # noqa: TC001
from photo_studio.domain.notifications import NotificationRecord

if TYPE_CHECKING:
    from photo_studio.containers import AppContainer

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("")
async def list_notifications(
    request: Request, unread_only: bool = False, actor: Actor = Depends(get_actor)
) -> dict[str, object]:
    """Return the caller's notifications, newest first."""
    container: AppContainer = request.app.state.container
    notifications = container.notification_service.list_for_user(
        actor.id, unread_only=unread_only
    )
    return {"notifications": [serialize_notification(n) for n in notifications]}


@router.patch("")
async def mark_all_read(
    request: Request, actor: Actor = Depends(get_actor)
) -> dict[str, int]:
    """Mark all of the caller's notifications as read."""
    container: AppContainer = request.app.state.container
    return {"updated": container.notification_service.mark_all_read(actor.id)}


@router.delete("")
async def delete_all(
    request: Request, actor: Actor = Depends(get_actor)
) -> dict[str, int]:
    """Delete all of the caller's notifications."""
    container: AppContainer = request.app.state.container
    return {"deleted": container.notification_service.delete_all(actor.id)}


@router.patch("/{notification_id}")
async def mark_read(
    notification_id: UUID, request: Request, actor: Actor = Depends(get_actor)
) -> dict[str, object]:
    """Mark a single notification as read."""
    container: AppContainer = request.app.state.container
    notification = container.notification_service.mark_read(actor, notification_id)
    return {"notification": serialize_notification(notification)}


@router.delete("/{notification_id}")
async def delete_notification(
    notification_id: UUID, request: Request, actor: Actor = Depends(get_actor)
) -> dict[str, str]:
    """Delete a single notification."""
    container: AppContainer = request.app.state.container
    container.notification_service.delete(actor, notification_id)
    return {"status": "deleted"}


def serialize_notification(notification: NotificationRecord) -> dict[str, object]:
    """Return the JSON shape of a notification."""
    return {
        "id": str(notification.id),
        "user_id": str(notification.user_id),
        "title": notification.title,
        "message": notification.message,
        "type": notification.type,
        "is_read": notification.is_read,
        "created_at": notification.created_at.isoformat(),
    }
