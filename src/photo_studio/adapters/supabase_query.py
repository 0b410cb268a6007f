"""Shared helpers for Supabase-backed stores."""

from datetime import datetime
from typing import Any

import httpx
from postgrest.exceptions import APIError

from photo_studio.domain.errors import StorageError


def execute(query: Any, action: str) -> list[dict[str, Any]]:
    """Run a PostgREST query and return its rows."""
    try:
        response = query.execute()
    except (APIError, httpx.HTTPError) as exc:
        raise StorageError(f"Failed to {action} in Supabase") from exc
    return response.data or []


def parse_timestamp(raw: object) -> datetime:
    """Parse an ISO timestamp column."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    raise StorageError(f"Invalid timestamp value: {raw!r}")
