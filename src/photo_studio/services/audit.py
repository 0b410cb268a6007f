"""Activity logging service."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_studio.domain.admin import ActivityLogEntry

logger = logging.getLogger(__name__)


class AuditRepository(Protocol):
    """Persistence interface for activity log events."""

    def create_event(  # noqa: PLR0913
        self,
        user_id: UUID,
        entity_type: str,
        entity_id: UUID,
        event_type: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        """Create an activity log row."""

    def list_events(
        self, user_id: UUID | None, entity_type: str | None, limit: int
    ) -> list[ActivityLogEntry]:
        """Return recent events, newest first, optionally filtered."""


@dataclass
class AuditService:
    """Service for recording and reading activity log events."""

    repository: AuditRepository

    def record_event(  # noqa: PLR0913
        self,
        user_id: UUID,
        entity_type: str,
        entity_id: UUID,
        event_type: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        """Persist an activity log event."""
        self.repository.create_event(
            user_id=user_id,
            entity_type=entity_type,
            entity_id=entity_id,
            event_type=event_type,
            before=before,
            after=after,
        )

    def list_events(
        self,
        user_id: UUID | None = None,
        entity_type: str | None = None,
        limit: int = 50,
    ) -> list[ActivityLogEntry]:
        """Return recent events."""
        return self.repository.list_events(user_id, entity_type, limit)

    def record_event_best_effort(  # noqa: PLR0913
        self,
        user_id: UUID,
        entity_type: str,
        entity_id: UUID,
        event_type: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        """Persist an activity log event, logging instead of raising on failure."""
        try:
            self.record_event(user_id, entity_type, entity_id, event_type, before, after)
        except Exception:
            logger.exception(
                "Failed to record activity event",
                extra={"entity_id": str(entity_id), "event_type": event_type},
            )
