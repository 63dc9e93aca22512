"""Infrastructure test fixtures - in-memory SQLite mirror and mocked API server.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Kube tests route httpx through a MockTransport (no sockets)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for read queries
      (PostgreSQL-specific features not exercised here)
"""

import httpx
import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from noderefs.db.base import Base
from noderefs.infrastructure.database import DatabaseSessionManager
import noderefs.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        yield session


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def api_server():
    """Fake API server: queue responses per call, record every request.

    Each entry in `responses` is an httpx.Response, an exception instance
    to raise, or a callable(request) -> httpx.Response.
    """
    requests: list[httpx.Request] = []
    responses: list = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        r = responses.pop(0)
        if isinstance(r, BaseException):
            raise r
        return r(request) if callable(r) else r

    client = httpx.AsyncClient(
        base_url="https://api.workload-a.test",
        transport=httpx.MockTransport(handler),
    )
    return {"client": client, "requests": requests, "responses": responses}
