"""Group domain entities."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

import structlog

from domain.entities.actor import Actor, ActorRef, ActorType, IActorRegistry
from domain.schemas.group import GroupData

logger = structlog.get_logger()


@dataclass(frozen=True)
class GroupMember:
    """A prepared member: a resolved world actor and its quantity."""

    actor: Actor
    quantity: int = 1


@dataclass(frozen=True)
class GroupMembers:
    """Members that survived preparation, plus the set of their actor ids.

    ``ids`` describes the entries; iteration and ``len()`` only cover
    ``entries``.
    """

    entries: tuple[GroupMember, ...] = ()
    ids: frozenset[str] = frozenset()

    def __iter__(self) -> Iterator[GroupMember]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class GroupRecord:
    """Domain entity for a group actor ("Party", "Encounter", "Crew")."""

    id: str
    name: str
    system: GroupData = field(default_factory=GroupData)
    members: GroupMembers = field(default_factory=GroupMembers)

    @classmethod
    def from_actor(cls, actor: Actor) -> "GroupRecord":
        """Build a record from a stored group actor, migrating its data."""
        return cls(
            id=actor.id,
            name=actor.name,
            system=GroupData.model_validate(actor.system),
        )

    @property
    def group_type(self) -> str:
        return self.system.type.value

    def source_members(self) -> list[dict[str, Any]]:
        """Stored member entries, before any filtering."""
        return [member.model_dump() for member in self.system.members]

    def referenced_ids(self) -> list[str]:
        """Actor ids referenced by the stored member entries."""
        return [member.actor for member in self.system.members if member.actor]

    def prepare_base_data(self, registry: IActorRegistry) -> GroupMembers:
        """Rebuild ``members`` from the stored entries.

        Entries that do not resolve to a world actor, resolve to another
        group, or repeat an earlier actor are dropped with a warning. The
        stored data is left as is.
        """
        member_ids: set[str] = set()
        kept: list[GroupMember] = []

        for member in self.system.members:
            actor = ActorRef(member.actor).resolve(registry)
            if actor is None:
                logger.warning(
                    "group_member_not_in_world",
                    actor_id=member.actor,
                    group_id=self.id,
                )
            elif actor.type == ActorType.GROUP:
                logger.warning(
                    "group_member_is_group",
                    actor_id=actor.id,
                    group_id=self.id,
                )
            elif actor.id in member_ids:
                logger.warning(
                    "group_member_duplicated",
                    actor_id=actor.id,
                    group_id=self.id,
                )
            else:
                member_ids.add(actor.id)
                kept.append(GroupMember(actor=actor, quantity=member.quantity))

        self.members = GroupMembers(entries=tuple(kept), ids=frozenset(member_ids))
        return self.members
