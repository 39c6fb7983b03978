"""SQLAlchemy implementation of the world settings repository."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models import SettingModel


class SQLAlchemySettingsRepository:
    """SQLAlchemy implementation of ISettingsRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, namespace: str, key: str) -> Any | None:
        """Get a setting value."""
        model = await self._get_model(namespace, key)
        return model.value if model else None

    async def set(self, namespace: str, key: str, value: Any) -> Any:
        """Insert or replace a setting value."""
        model = await self._get_model(namespace, key)
        if model:
            model.value = value
        else:
            model = SettingModel(namespace=namespace, key=key, value=value)
            self._session.add(model)

        await self._session.flush()
        return model.value

    async def _get_model(self, namespace: str, key: str) -> SettingModel | None:
        stmt = select(SettingModel).where(
            SettingModel.namespace == namespace,
            SettingModel.key == key,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
