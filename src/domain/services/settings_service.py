"""World settings service, including the primary party pointer."""

from collections.abc import Callable
from typing import Any

import structlog

from core.config import settings
from core.exceptions import ActorNotFoundError, GroupNotFoundError, InvalidPrimaryPartyError
from domain.entities.actor import ActorType
from domain.entities.setting import PrimaryParty
from domain.repositories.unit_of_work import IUnitOfWork
from domain.schemas.group import GroupData

logger = structlog.get_logger()


class SettingsService:
    """Service layer for namespaced, world-wide settings."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        namespace: str = settings.settings_namespace,
    ) -> None:
        self._uow_factory = uow_factory
        self._namespace = namespace

    async def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value in this service's namespace."""
        async with self._uow_factory() as uow:
            value = await uow.settings.get(self._namespace, key)
            return default if value is None else value

    async def set(self, key: str, value: Any) -> Any:
        """Store a setting value in this service's namespace."""
        async with self._uow_factory() as uow:
            stored = await uow.settings.set(self._namespace, key, value)
            await uow.commit()
            return stored

    async def get_primary_party(self) -> PrimaryParty:
        """Get the primary party pointer (empty when unset)."""
        value = await self.get(settings.primary_party_key)
        return PrimaryParty.from_value(value)

    async def set_primary_party(self, actor_id: str | None) -> PrimaryParty:
        """Point the primary party at a party group, or clear it with None."""
        if actor_id is not None:
            async with self._uow_factory() as uow:
                actor = await uow.actors.get(actor_id)
            if not actor:
                raise ActorNotFoundError(actor_id)
            if actor.type != ActorType.GROUP:
                raise GroupNotFoundError(actor_id)
            group_type = GroupData.model_validate(actor.system).type.value
            if group_type != settings.party_type:
                raise InvalidPrimaryPartyError(actor_id, group_type)

        party = PrimaryParty(actor_id=actor_id)
        await self.set(settings.primary_party_key, party.to_value())
        logger.info("primary_party_set", actor_id=actor_id)
        return party
