"""Group service layer with business logic."""

import copy
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime
from typing import Any

import structlog
from pydantic import ValidationError

from core.config import settings
from core.exceptions import (
    ActorNotInWorldError,
    GroupNotFoundError,
    InvalidGroupDataError,
    InvalidMemberArgumentError,
    NestedGroupError,
    NotAGroupMemberError,
)
from core.objects import expand_object, get_property, has_property, set_property
from domain.entities.actor import Actor, ActorIndex, ActorType
from domain.entities.group import GroupRecord
from domain.entities.session import SessionContext
from domain.repositories.unit_of_work import IUnitOfWork
from domain.schemas.group import GroupData, MemberData
from domain.services.settings_service import SettingsService

logger = structlog.get_logger()


class GroupService:
    """Service layer for group actors and their members."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        settings_service: SettingsService,
        session: SessionContext,
    ) -> None:
        self._uow_factory = uow_factory
        self._settings = settings_service
        self._session = session

    async def get(self, group_id: str) -> GroupRecord:
        """Load a group, migrate its data and prepare its members."""
        async with self._uow_factory() as uow:
            stored = await self._get_group_actor(uow, group_id)
            return await self._prepare(uow, stored)

    async def create(
        self, name: str, system: dict[str, Any] | None = None
    ) -> GroupRecord:
        """Create a group actor. Legacy member id lists are accepted."""
        data = self._validate(name, system or {})
        actor = Actor(name=name, type=ActorType.GROUP, system=data.model_dump())

        async with self._uow_factory() as uow:
            created = await uow.actors.create(actor)
            await uow.commit()
            record = await self._prepare(uow, created)

        logger.info("group_created", group_id=record.id, member_count=len(record.members))
        return record

    async def update(self, group_id: str, changes: dict[str, Any]) -> GroupRecord:
        """Apply dotted-path changes, e.g. ``{"system.type.value": "crew"}``."""
        async with self._uow_factory() as uow:
            stored = await self._get_group_actor(uow, group_id)
            record, changed = await self._save(uow, stored, changes)

        await self.on_update(record, changed, self._session.user_id)
        return record

    async def add_member(self, group_id: str, actor: Actor) -> GroupRecord | None:
        """Add a non-group world actor to the group.

        Returns None without persisting anything when the actor is already a
        member.
        """
        if actor.type == ActorType.GROUP:
            raise NestedGroupError(actor.id)
        if actor.pack:
            raise ActorNotInWorldError(actor.id, actor.pack)

        async with self._uow_factory() as uow:
            stored = await self._get_group_actor(uow, group_id)
            group = await self._prepare(uow, stored)
            if actor.id in group.members.ids:
                return None

            members = group.source_members()
            members.append(MemberData(actor=actor.id).model_dump())
            record, changed = await self._save(uow, stored, {"system.members": members})

        await self.on_update(record, changed, self._session.user_id)
        return record

    async def remove_member(self, group_id: str, actor: Actor | str) -> GroupRecord:
        """Remove a member, given either the actor or its id."""
        actor_id = self._member_id(actor)

        async with self._uow_factory() as uow:
            stored = await self._get_group_actor(uow, group_id)
            group = await self._prepare(uow, stored)
            if actor_id not in group.members.ids:
                raise NotAGroupMemberError(actor_id, group_id)

            members = group.source_members()
            index = next(i for i, m in enumerate(members) if m["actor"] == actor_id)
            del members[index]
            record, changed = await self._save(uow, stored, {"system.members": members})

        await self.on_update(record, changed, self._session.user_id)
        return record

    async def on_update(
        self, group: GroupRecord, changed: dict[str, Any], user_id: str
    ) -> None:
        """React to a completed update of ``group``.

        When the group's type changes away from a party while it is the
        primary party, the primary party setting is cleared. Only the
        primary authority session writes the setting.

        Args:
            group: The group after the update.
            changed: The nested differential data that was changed.
            user_id: The user who requested the update.
        """
        if not has_property(changed, "system.type.value"):
            return
        if not self._session.is_primary_authority:
            return

        new_type = get_property(changed, "system.type.value")
        if new_type == settings.party_type:
            return

        primary = await self._settings.get_primary_party()
        if primary.actor_id != group.id:
            return

        await self._settings.set_primary_party(None)
        logger.info(
            "primary_party_cleared",
            group_id=group.id,
            group_type=new_type,
            user_id=user_id,
        )

    # --- Internal helpers ---

    @staticmethod
    def _member_id(actor: Any) -> str:
        """Accept an actor id or anything exposing a string ``id``."""
        if isinstance(actor, str):
            return actor
        actor_id = getattr(actor, "id", None)
        if isinstance(actor_id, str):
            return actor_id
        raise InvalidMemberArgumentError(actor)

    @staticmethod
    def _validate(label: str, system: dict[str, Any]) -> GroupData:
        try:
            return GroupData.model_validate(system)
        except ValidationError as e:
            raise InvalidGroupDataError(label, e.errors(include_url=False)) from e

    async def _get_group_actor(self, uow: IUnitOfWork, group_id: str) -> Actor:
        actor = await uow.actors.get(group_id)
        if not actor or actor.type != ActorType.GROUP:
            raise GroupNotFoundError(group_id)
        return actor

    async def _prepare(self, uow: IUnitOfWork, stored: Actor) -> GroupRecord:
        """Build the record and filter its members against the world."""
        try:
            record = GroupRecord.from_actor(stored)
        except ValidationError as e:
            raise InvalidGroupDataError(stored.id, e.errors(include_url=False)) from e
        actors = await uow.actors.get_many(record.referenced_ids())
        record.prepare_base_data(ActorIndex(actors))
        return record

    async def _save(
        self, uow: IUnitOfWork, stored: Actor, changes: dict[str, Any]
    ) -> tuple[GroupRecord, dict[str, Any]]:
        """Validate and persist ``changes`` in one update, then commit.

        Returns the prepared record and the nested diff of what changed.
        """
        document = {"name": stored.name, "system": copy.deepcopy(stored.system)}
        for path, value in changes.items():
            if path != "name" and not path.startswith("system."):
                raise InvalidGroupDataError(
                    stored.id, [{"loc": path, "msg": "Field cannot be updated"}]
                )
            set_property(document, path, value)

        data = self._validate(stored.id, document["system"])
        cleaned = {"name": document["name"], "system": data.model_dump()}

        updated = await uow.actors.update(
            replace(
                stored,
                name=cleaned["name"],
                system=cleaned["system"],
                updated_at=datetime.utcnow(),
            )
        )
        await uow.commit()

        changed = expand_object({path: get_property(cleaned, path) for path in changes})
        return await self._prepare(uow, updated), changed
