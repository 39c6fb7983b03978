"""Actor domain entities and references."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any, Protocol
from uuid import uuid4


class ActorType(StrEnum):
    """Kinds of actor known to the world."""

    CHARACTER = "character"
    NPC = "npc"
    VEHICLE = "vehicle"
    GROUP = "group"


def new_actor_id() -> str:
    """Generate a 16 character actor identifier."""
    return uuid4().hex[:16]


@dataclass
class Actor:
    """Domain entity for a world or compendium actor."""

    name: str
    type: str
    id: str = field(default_factory=new_actor_id)
    pack: str | None = None
    system: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)


class IActorRegistry(Protocol):
    """Synchronous id lookup over the actors of the current world."""

    def get(self, actor_id: str) -> Actor | None:
        """Return the actor with the given id, or None."""
        ...


class ActorIndex:
    """In-memory registry built from a snapshot of world actors."""

    def __init__(self, actors: Iterable[Actor] = ()) -> None:
        self._actors = {actor.id: actor for actor in actors if actor.pack is None}

    def get(self, actor_id: str) -> Actor | None:
        return self._actors.get(actor_id)


@dataclass(frozen=True)
class ActorRef:
    """A stored actor identifier, resolved lazily against a registry."""

    id: str | None

    def resolve(self, registry: IActorRegistry) -> Actor | None:
        if not self.id:
            return None
        return registry.get(self.id)
