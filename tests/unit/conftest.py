"""Shared fixtures for unit tests."""

import pytest

from domain.entities.actor import Actor, ActorType
from domain.entities.session import SessionContext
from domain.services.group_service import GroupService
from domain.services.settings_service import SettingsService
from tests.unit.fakes import FakeUnitOfWork


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def settings_service(uow: FakeUnitOfWork) -> SettingsService:
    return SettingsService(lambda: uow)


@pytest.fixture
def service(
    uow: FakeUnitOfWork,
    settings_service: SettingsService,
    gm_session: SessionContext,
) -> GroupService:
    return GroupService(lambda: uow, settings_service, gm_session)


@pytest.fixture
def hero() -> Actor:
    return Actor(id="hero", name="Hero", type=ActorType.CHARACTER)


@pytest.fixture
def sidekick() -> Actor:
    return Actor(id="sidekick", name="Sidekick", type=ActorType.CHARACTER)


@pytest.fixture
def goblin() -> Actor:
    return Actor(id="goblin", name="Goblin", type=ActorType.NPC)
