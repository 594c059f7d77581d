"""Service test fixtures — in-memory SQLite document store + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db_manager / get_form_value_provider dependencies overridden per test
    - database.db_manager patched for the readiness probe, restored afterwards
"""

import pytest
from httpx import ASGITransport, AsyncClient

from witquery.db.base import Base
from witquery.infrastructure import database as db_module
from witquery.infrastructure.database import DatabaseSessionManager, get_db_manager
from witquery.infrastructure.document_store import SqlDocumentStore
from witquery.api.dependencies import get_form_value_provider
from witquery.main import app
import witquery.models  # noqa: F401

from tests.services.fakes import FakeFormValueProvider


@pytest.fixture
async def test_db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
def document_store(test_db_manager):
    return SqlDocumentStore(test_db_manager)


@pytest.fixture
def form_provider():
    return FakeFormValueProvider(
        {
            "System.WorkItemType": "Bug",
            "System.State": "Active",
            "System.AreaPath": "Proj\\Web",
            "System.Tags": "ui;login",
        },
        work_item_id=42,
    )


@pytest.fixture
async def client(test_db_manager, form_provider):
    """FastAPI test client with DB and form service dependencies overridden."""
    app.dependency_overrides[get_db_manager] = lambda: test_db_manager
    app.dependency_overrides[get_form_value_provider] = lambda: form_provider

    original_manager = db_module.db_manager
    db_module.db_manager = test_db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
