"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from photo_studio.config import Settings
from photo_studio.containers import AppContainer
from photo_studio.domain.admin import ActivityLogEntry
from photo_studio.domain.booking_status import PENDING
from photo_studio.domain.bookings import Booking, BookingDraft
from photo_studio.domain.errors import StorageError
from photo_studio.domain.models import ADMIN, CLIENT, PHOTOGRAPHER, Actor, UserRecord
from photo_studio.domain.notifications import NotificationRecord
from photo_studio.services.admin import AdminService
from photo_studio.services.audit import AuditRepository, AuditService
from photo_studio.services.bookings import BookingService, BookingStore
from photo_studio.services.lifecycle import BookingLifecycleManager
from photo_studio.services.notifications import (
    NotificationDispatcher,
    NotificationRepository,
    NotificationService,
)
from photo_studio.services.users import UserRepository, UserService

TEST_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJl"
)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def add(self, name: str, role: str) -> UserRecord:
        user = UserRecord(
            id=uuid4(),
            name=name,
            email=f"{name.lower().replace(' ', '.')}@example.com",
            role=role,
        )
        self.users[user.id] = user
        return user

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def list_users(self) -> list[UserRecord]:
        return list(self.users.values())


@dataclass
class InMemoryBookingStore(BookingStore):
    """In-memory booking store for tests."""

    bookings: dict[UUID, Booking] = field(default_factory=dict)
    writes: list[tuple[UUID, dict[str, object]]] = field(default_factory=list)

    def add(  # noqa: PLR0913
        self,
        client_id: UUID,
        photographer_id: UUID,
        status: str = PENDING,
        booking_date: date = date(2026, 11, 2),
        start_time: str = "14:00",
        notes: str = "",
    ) -> Booking:
        now = datetime.now(tz=UTC)
        booking = Booking(
            id=uuid4(),
            client_id=client_id,
            photographer_id=photographer_id,
            date=booking_date,
            start_time=start_time,
            end_time="16:00",
            type="portrait",
            location="Studio A",
            status=status,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        self.bookings[booking.id] = booking
        return booking

    def create(self, client_id: UUID, draft: BookingDraft, status: str) -> Booking:
        now = datetime.now(tz=UTC)
        booking = Booking(
            id=uuid4(),
            client_id=client_id,
            photographer_id=draft.photographer_id,
            date=draft.date,
            start_time=draft.start_time,
            end_time=draft.end_time,
            type=draft.type,
            location=draft.location,
            status=status,
            notes=draft.notes,
            created_at=now,
            updated_at=now,
        )
        self.bookings[booking.id] = booking
        return booking

    def get_by_id(self, booking_id: UUID) -> Booking | None:
        return self.bookings.get(booking_id)

    def update(self, booking_id: UUID, fields: dict[str, object]) -> Booking | None:
        current = self.bookings.get(booking_id)
        if current is None:
            return None
        self.writes.append((booking_id, dict(fields)))
        updated = replace(current, **fields, updated_at=datetime.now(tz=UTC))
        self.bookings[booking_id] = updated
        return updated

    def delete(self, booking_id: UUID) -> bool:
        return self.bookings.pop(booking_id, None) is not None

    def list_all(self) -> list[Booking]:
        return list(self.bookings.values())

    def list_by_client(self, client_id: UUID) -> list[Booking]:
        return [b for b in self.bookings.values() if b.client_id == client_id]

    def list_by_photographer(self, photographer_id: UUID) -> list[Booking]:
        return [b for b in self.bookings.values() if b.photographer_id == photographer_id]

    def list_by_status(self, status: str) -> list[Booking]:
        return [b for b in self.bookings.values() if b.status == status]


@dataclass
class InMemoryNotificationRepository(NotificationRepository):
    """In-memory notification repository that can fail for chosen recipients."""

    notifications: dict[UUID, NotificationRecord] = field(default_factory=dict)
    failing_user_ids: set[UUID] = field(default_factory=set)

    def create_notification(
        self, user_id: UUID, title: str, message: str, notification_type: str
    ) -> NotificationRecord:
        if user_id in self.failing_user_ids:
            raise StorageError("notifications table unavailable")
        record = NotificationRecord(
            id=uuid4(),
            user_id=user_id,
            title=title,
            message=message,
            type=notification_type,
            is_read=False,
            created_at=datetime.now(tz=UTC),
        )
        self.notifications[record.id] = record
        return record

    def get_notification(self, notification_id: UUID) -> NotificationRecord | None:
        return self.notifications.get(notification_id)

    def list_by_user(
        self, user_id: UUID, unread_only: bool
    ) -> list[NotificationRecord]:
        records = [
            n
            for n in self.notifications.values()
            if n.user_id == user_id and not (unread_only and n.is_read)
        ]
        return sorted(records, key=lambda n: n.created_at, reverse=True)

    def mark_read(self, notification_id: UUID) -> NotificationRecord | None:
        current = self.notifications.get(notification_id)
        if current is None:
            return None
        updated = replace(current, is_read=True)
        self.notifications[notification_id] = updated
        return updated

    def mark_all_read(self, user_id: UUID) -> int:
        unread = [
            n for n in self.notifications.values() if n.user_id == user_id and not n.is_read
        ]
        for notification in unread:
            self.notifications[notification.id] = replace(notification, is_read=True)
        return len(unread)

    def delete_notification(self, notification_id: UUID) -> bool:
        return self.notifications.pop(notification_id, None) is not None

    def delete_all(self, user_id: UUID) -> int:
        owned = [n.id for n in self.notifications.values() if n.user_id == user_id]
        for notification_id in owned:
            del self.notifications[notification_id]
        return len(owned)

    def list_all(
        self,
        user_id: UUID | None,
        notification_type: str | None,
        is_read: bool | None,
        newest_first: bool,
    ) -> list[NotificationRecord]:
        records = [
            n
            for n in self.notifications.values()
            if (user_id is None or n.user_id == user_id)
            and (notification_type is None or n.type == notification_type)
            and (is_read is None or n.is_read == is_read)
        ]
        return sorted(records, key=lambda n: n.created_at, reverse=newest_first)

    def for_user(self, user_id: UUID) -> list[NotificationRecord]:
        return [n for n in self.notifications.values() if n.user_id == user_id]


@dataclass
class InMemoryAuditRepository(AuditRepository):
    """In-memory audit repository for tests."""

    events: list[ActivityLogEntry] = field(default_factory=list)

    def create_event(  # noqa: PLR0913
        self,
        user_id: UUID,
        entity_type: str,
        entity_id: UUID,
        event_type: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        self.events.append(
            ActivityLogEntry(
                id=uuid4(),
                user_id=user_id,
                entity_type=entity_type,
                entity_id=entity_id,
                event_type=event_type,
                before=before,
                after=after,
                created_at=datetime.now(tz=UTC),
            )
        )

    def list_events(
        self, user_id: UUID | None, entity_type: str | None, limit: int
    ) -> list[ActivityLogEntry]:
        events = [
            event
            for event in reversed(self.events)
            if (user_id is None or event.user_id == user_id)
            and (entity_type is None or event.entity_type == entity_type)
        ]
        return events[:limit]


@dataclass
class StudioUsers:
    """The cast of users most tests need."""

    client: UserRecord
    other_client: UserRecord
    photographer: UserRecord
    admin: UserRecord

    def actor(self, user: UserRecord) -> Actor:
        return Actor(id=user.id, role=user.role)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=TEST_SERVICE_KEY,
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def users(user_repository: InMemoryUserRepository) -> StudioUsers:
    return StudioUsers(
        client=user_repository.add("Alice Client", CLIENT),
        other_client=user_repository.add("Oscar Other", CLIENT),
        photographer=user_repository.add("Paula Lens", PHOTOGRAPHER),
        admin=user_repository.add("Ada Admin", ADMIN),
    )


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def notification_repository() -> InMemoryNotificationRepository:
    return InMemoryNotificationRepository()


@pytest.fixture
def audit_repository() -> InMemoryAuditRepository:
    return InMemoryAuditRepository()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_repository: InMemoryUserRepository,
    booking_store: InMemoryBookingStore,
    notification_repository: InMemoryNotificationRepository,
    audit_repository: InMemoryAuditRepository,
    users: StudioUsers,
) -> AppContainer:
    user_service = UserService(user_repository)
    audit_service = AuditService(audit_repository)
    notification_service = NotificationService(notification_repository)
    dispatcher = NotificationDispatcher(
        notification_service=notification_service,
        user_service=user_service,
    )
    return AppContainer(
        settings=settings,
        user_service=user_service,
        booking_service=BookingService(
            store=booking_store,
            user_service=user_service,
            audit_service=audit_service,
        ),
        lifecycle_manager=BookingLifecycleManager(
            store=booking_store,
            dispatcher=dispatcher,
            audit_service=audit_service,
        ),
        notification_service=notification_service,
        admin_service=AdminService(
            user_service=user_service,
            booking_store=booking_store,
            audit_service=audit_service,
            notification_service=notification_service,
        ),
    )
