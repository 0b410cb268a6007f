"""Tests for user service."""

from uuid import uuid4

from photo_studio.domain.models import PHOTOGRAPHER, Actor
from photo_studio.services.users import UserService
from tests.conftest import InMemoryUserRepository


def test_resolve_actor_uses_stored_role() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)
    user = repository.add("Paula Lens", PHOTOGRAPHER)

    assert service.resolve_actor(user.id) == Actor(id=user.id, role=PHOTOGRAPHER)
    assert service.resolve_actor(uuid4()) is None


def test_display_name_is_empty_for_unknown_user() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)
    user = repository.add("Paula Lens", PHOTOGRAPHER)

    assert service.display_name(user.id) == "Paula Lens"
    assert service.display_name(uuid4()) == ""
