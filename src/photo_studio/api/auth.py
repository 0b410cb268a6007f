"""Actor resolution for authenticated requests."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import Header, HTTPException, Request, status

from photo_studio.domain.models import Actor

if TYPE_CHECKING:
    from photo_studio.containers import AppContainer


async def get_actor(
    request: Request, x_user_id: str | None = Header(default=None)
) -> Actor:
    """Resolve the actor from the user id set by the upstream auth layer."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        user_id = UUID(x_user_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from None
    container: AppContainer = request.app.state.container
    actor = container.user_service.resolve_actor(user_id)
    if actor is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return actor
