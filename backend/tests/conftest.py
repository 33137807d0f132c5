"""Root conftest: shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Route tests get an app built by create_app(storage=...), never the
      module-level app, so no real database is touched

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency; foreign
      keys are switched on by DatabaseSessionManager so FK behavior matches PostgreSQL
"""

import os

# Ensure importing portal.main never points at a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

import portal.models  # noqa: E402,F401
from portal.db.base import Base  # noqa: E402
from portal.infrastructure.database import DatabaseSessionManager  # noqa: E402
from portal.infrastructure.storage import DatabaseStorage  # noqa: E402
from portal.main import create_app  # noqa: E402


@pytest.fixture
async def db_manager():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    # Wrap before the first connection so the FK pragma listener applies
    manager = DatabaseSessionManager.from_engine(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def storage(db_manager):
    return DatabaseStorage(db_manager)


@pytest.fixture
async def test_db(db_manager):
    """Raw session for seeding rows the storage API cannot create (engineers)."""
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def app(storage):
    return create_app(storage=storage)


@pytest.fixture
async def client(app):
    """FastAPI test client over the injected storage."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
