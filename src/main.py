"""Application entry point: wires configuration, database and services."""

from dataclasses import dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from core.config import settings
from core.logging import setup_logging
from domain.entities.session import SessionContext
from domain.services.group_service import GroupService
from domain.services.settings_service import SettingsService
from infrastructure.database.models import Base
from infrastructure.database.session import build_engine, build_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

logger = structlog.get_logger()


@dataclass
class Application:
    """Services bound to one database and one local session."""

    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    settings: SettingsService
    groups: GroupService

    async def create_tables(self) -> None:
        """Create any missing tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


def create_app(session: SessionContext, database_url: str | None = None) -> Application:
    """Create and configure the application for the local ``session``."""
    setup_logging()

    engine = build_engine(database_url)
    session_factory = build_session_factory(engine)

    def uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    settings_service = SettingsService(uow_factory)
    group_service = GroupService(uow_factory, settings_service, session)

    logger.info(
        "application_created",
        app_name=settings.app_name,
        app_env=settings.app_env,
        user_id=session.user_id,
        primary_authority=session.is_primary_authority,
    )

    return Application(
        engine=engine,
        session_factory=session_factory,
        settings=settings_service,
        groups=group_service,
    )
