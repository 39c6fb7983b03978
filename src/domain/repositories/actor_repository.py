"""Actor repository protocol."""

from typing import Protocol

from domain.entities.actor import Actor


class IActorRepository(Protocol):
    """Repository interface for world Actor entities."""

    async def get(self, id: str) -> Actor | None:
        """Get an actor by ID."""
        ...

    async def get_many(self, ids: list[str]) -> list[Actor]:
        """Get the actors matching the given IDs. Unknown IDs are skipped."""
        ...

    async def create(self, actor: Actor) -> Actor:
        """Create a new actor."""
        ...

    async def update(self, actor: Actor) -> Actor:
        """Replace an existing actor's name and system data."""
        ...
