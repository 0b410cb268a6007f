"""Request models for the HTTP API."""

import datetime as dt
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

BookingStatusValue = Literal["pending", "confirmed", "completed", "cancelled"]
NotificationTypeValue = Literal["booking", "photo", "order", "system"]


class BookingCreateRequest(BaseModel):
    """Payload for requesting a new booking."""

    photographer_id: UUID
    date: dt.date
    start_time: str = Field(pattern=_TIME_PATTERN)
    end_time: str = Field(pattern=_TIME_PATTERN)
    type: str = Field(min_length=1)
    location: str = ""
    notes: str = ""

    @model_validator(mode="after")
    def _check_time_range(self) -> "BookingCreateRequest":
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class BookingStatusRequest(BaseModel):
    """Payload for changing a booking's status."""

    status: BookingStatusValue
    notes: str | None = None


class SystemNotificationRequest(BaseModel):
    """Payload for an admin-authored notification."""

    user_id: UUID
    title: str = Field(min_length=1)
    message: str = Field(min_length=1)
    type: NotificationTypeValue = "system"


class BroadcastNotificationRequest(BaseModel):
    """Payload for a system notification sent to every user with a role."""

    title: str = Field(min_length=1)
    message: str = Field(min_length=1)
    target_role: Literal["client", "photographer", "admin", "all"]
