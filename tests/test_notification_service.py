"""Tests for the notification inbox."""

import pytest

from photo_studio.domain.errors import (
    InvalidRequest,
    NotificationDispatchError,
    NotificationNotFound,
    PermissionDenied,
)
from photo_studio.services.notifications import NotificationService
from tests.conftest import InMemoryNotificationRepository, StudioUsers


@pytest.fixture
def service(
    notification_repository: InMemoryNotificationRepository,
) -> NotificationService:
    return NotificationService(notification_repository)


def test_list_unread_only(service: NotificationService, users: StudioUsers) -> None:
    first = service.send(users.client.id, "Hello", "First")
    service.send(users.client.id, "Hello", "Second")
    service.send(users.photographer.id, "Hello", "Not yours")
    service.mark_read(users.actor(users.client), first.id)

    unread = service.list_for_user(users.client.id, unread_only=True)

    assert [n.message for n in unread] == ["Second"]
    assert len(service.list_for_user(users.client.id)) == 2


def test_mark_read_requires_ownership(
    service: NotificationService, users: StudioUsers
) -> None:
    notification = service.send(users.client.id, "Hello", "Mine")

    with pytest.raises(PermissionDenied):
        service.mark_read(users.actor(users.photographer), notification.id)
    with pytest.raises(PermissionDenied):
        service.delete(users.actor(users.admin), notification.id)


def test_mark_read_unknown_notification(
    service: NotificationService, users: StudioUsers
) -> None:
    with pytest.raises(NotificationNotFound):
        service.mark_read(users.actor(users.client), users.client.id)


def test_mark_all_and_delete_all(
    service: NotificationService,
    notification_repository: InMemoryNotificationRepository,
    users: StudioUsers,
) -> None:
    service.send(users.client.id, "Hello", "One")
    service.send(users.client.id, "Hello", "Two")
    kept = service.send(users.photographer.id, "Hello", "Three")

    assert service.mark_all_read(users.client.id) == 2
    assert service.mark_all_read(users.client.id) == 0
    assert service.delete_all(users.client.id) == 2
    assert list(notification_repository.notifications) == [kept.id]


def test_delete_own_notification(
    service: NotificationService,
    notification_repository: InMemoryNotificationRepository,
    users: StudioUsers,
) -> None:
    notification = service.send(users.client.id, "Hello", "Bye")

    service.delete(users.actor(users.client), notification.id)

    assert notification_repository.notifications == {}


def test_send_rejects_unknown_type(
    service: NotificationService, users: StudioUsers
) -> None:
    with pytest.raises(InvalidRequest):
        service.send(users.client.id, "Hello", "Hi", notification_type="sms")


def test_send_wraps_storage_failure(
    service: NotificationService,
    notification_repository: InMemoryNotificationRepository,
    users: StudioUsers,
) -> None:
    notification_repository.failing_user_ids.add(users.client.id)

    with pytest.raises(NotificationDispatchError):
        service.send(users.client.id, "Hello", "Hi")


def test_broadcast_stops_at_first_failure(
    service: NotificationService,
    notification_repository: InMemoryNotificationRepository,
    users: StudioUsers,
) -> None:
    notification_repository.failing_user_ids.add(users.photographer.id)

    with pytest.raises(NotificationDispatchError):
        service.broadcast(
            [users.client.id, users.photographer.id, users.admin.id],
            "Maintenance",
            "Back soon",
        )

    (sent,) = notification_repository.notifications.values()
    assert sent.user_id == users.client.id
    assert sent.type == "system"
