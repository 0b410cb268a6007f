"""Admin API endpoints restricted to admin actors."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Literal
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from photo_studio.api.auth import get_actor
from photo_studio.api.models import (
    BroadcastNotificationRequest,
    NotificationTypeValue,
    SystemNotificationRequest,
)
from photo_studio.api.notifications import serialize_notification
from photo_studio.domain.models import Actor  # noqa: TC001

if TYPE_CHECKING:
    from photo_studio.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


async def require_admin(actor: Actor = Depends(get_actor)) -> Actor:
    """Ensure the caller is an admin."""
    if not actor.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN)
    return actor


@router.get("/stats", dependencies=[Depends(require_admin)])
async def dashboard_stats(request: Request) -> dict[str, object]:
    """Return headline dashboard numbers."""
    container: AppContainer = request.app.state.container
    return asdict(container.admin_service.get_stats())


@router.get("/logs", dependencies=[Depends(require_admin)])
async def activity_logs(
    request: Request,
    user_id: UUID | None = None,
    entity_type: str | None = None,
    limit: int = Query(default=50, ge=1, le=500),
) -> dict[str, object]:
    """Return recent activity log entries."""
    container: AppContainer = request.app.state.container
    return {
        "logs": container.admin_service.list_logs(
            user_id=user_id, entity_type=entity_type, limit=limit
        )
    }


@router.get("/notifications", dependencies=[Depends(require_admin)])
async def all_notifications(
    request: Request,
    user_id: UUID | None = None,
    type_filter: NotificationTypeValue | None = Query(default=None, alias="type"),
    read_status: Literal["read", "unread"] | None = Query(
        default=None, alias="status"
    ),
    sort_order: Literal["asc", "desc"] = "desc",
) -> dict[str, object]:
    """Return notifications across all users with recipient names."""
    container: AppContainer = request.app.state.container
    overview = container.admin_service.list_notifications(
        user_id=user_id,
        notification_type=type_filter,
        is_read=None if read_status is None else read_status == "read",
        newest_first=sort_order == "desc",
    )
    return {
        "notifications": [
            {
                **serialize_notification(notification),
                "user_name": overview.user_names.get(notification.user_id, ""),
            }
            for notification in overview.notifications
        ],
        "stats": overview.stats,
    }


@router.post(
    "/notifications",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def send_notification(
    payload: SystemNotificationRequest, request: Request
) -> dict[str, object]:
    """Send a notification to a single user."""
    container: AppContainer = request.app.state.container
    notification = container.notification_service.send(
        payload.user_id, payload.title, payload.message, payload.type
    )
    return {"notification": serialize_notification(notification)}


@router.post("/notifications/broadcast", dependencies=[Depends(require_admin)])
async def broadcast_notification(
    payload: BroadcastNotificationRequest, request: Request
) -> dict[str, int]:
    """Send a system notification to every user with the target role."""
    container: AppContainer = request.app.state.container
    notified = container.admin_service.broadcast_notification(
        payload.target_role, payload.title, payload.message
    )
    return {"notified_count": notified}
