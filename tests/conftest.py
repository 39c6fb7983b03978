"""Pytest configuration and fixtures."""

import sys
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import settings
from domain.entities.session import SessionContext
from main import Application, create_app

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = settings.test_database_url

# Fixed game master ID for consistency
TEST_GM_ID = "gm00000000000001"


@pytest.fixture
def gm_session() -> SessionContext:
    """Local session of the active game master."""
    return SessionContext(user_id=TEST_GM_ID, active_gm_id=TEST_GM_ID)


@pytest.fixture
def player_session() -> SessionContext:
    """Local session of a player while the game master is connected."""
    return SessionContext(user_id="player0000000001", active_gm_id=TEST_GM_ID)


@pytest.fixture
async def app(gm_session: SessionContext) -> AsyncGenerator[Application, None]:
    """Application on a fresh in-memory database, acting as the game master."""
    application = create_app(gm_session, TEST_DATABASE_URL)
    await application.create_tables()
    yield application
    await application.dispose()
