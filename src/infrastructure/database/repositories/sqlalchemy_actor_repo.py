"""SQLAlchemy implementation of Actor repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.actor import Actor
from infrastructure.database.models import ActorModel


class SQLAlchemyActorRepository:
    """SQLAlchemy implementation of IActorRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> Actor | None:
        """Get an actor by ID."""
        stmt = select(ActorModel).where(ActorModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_many(self, ids: list[str]) -> list[Actor]:
        """Get the actors matching the given IDs."""
        if not ids:
            return []
        stmt = select(ActorModel).where(ActorModel.id.in_(list(dict.fromkeys(ids))))
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, actor: Actor) -> Actor:
        """Create a new actor."""
        model = self._to_model(actor)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, actor: Actor) -> Actor:
        """Replace an existing actor's name and system data."""
        stmt = select(ActorModel).where(ActorModel.id == actor.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Actor {actor.id} not found")

        model.name = actor.name
        model.system = dict(actor.system)
        model.updated_at = actor.updated_at

        await self._session.flush()
        return self._to_entity(model)

    def _to_entity(self, model: ActorModel) -> Actor:
        """Convert ORM model to domain entity."""
        return Actor(
            id=model.id,
            name=model.name,
            type=model.type,
            pack=model.pack,
            system=dict(model.system or {}),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Actor) -> ActorModel:
        """Convert domain entity to ORM model."""
        return ActorModel(
            id=entity.id,
            name=entity.name,
            type=entity.type,
            pack=entity.pack,
            system=dict(entity.system),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
