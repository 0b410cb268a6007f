"""Domain errors raised by services and translated by the API layer."""


class StudioError(Exception):
    """Base class for expected application failures."""


class BookingNotFound(StudioError):
    """Raised when a booking id does not exist."""

    def __init__(self, booking_id: object) -> None:
        super().__init__("booking not found")
        self.booking_id = booking_id


class NotificationNotFound(StudioError):
    """Raised when a notification id does not exist."""

    def __init__(self, notification_id: object) -> None:
        super().__init__("notification not found")
        self.notification_id = notification_id


class PermissionDenied(StudioError):
    """Raised when the actor may not perform the requested operation."""


class InvalidTransition(StudioError):
    """Raised when a status change is missing from the transition table."""


class InvalidRequest(StudioError):
    """Raised when a request references missing or mismatched entities."""


class StorageError(StudioError):
    """Raised when the backing store fails on read or write."""


class NotificationDispatchError(StudioError):
    """Raised when a notification could not be persisted."""
