"""API test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - Settings cache cleared around locale overrides
"""

import pytest
from httpx import ASGITransport, AsyncClient

import cinecatalog.infrastructure.database as db_module
from cinecatalog.config import get_settings
from cinecatalog.infrastructure.database import get_db, DatabaseSessionManager
from cinecatalog.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def pt_br_locale(monkeypatch):
    """Serve messages in Brazilian Portuguese for the duration of a test."""
    monkeypatch.setenv("LOCALE", "pt-BR")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
