"""Service test fixtures — async DB, fake mailer and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - get_mailer dependency overridden with FakeMailer (records, never sends)
    - db_manager patched so the readiness probe checks the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares one connection,
      so rows written by a fixture are visible to the route under test
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

import founders_club.infrastructure.database as db_module
import founders_club.models  # noqa: F401
from founders_club.api.dependencies import get_mailer
from founders_club.core.repository_protocols import MailResult
from founders_club.db.base import Base
from founders_club.infrastructure.database import get_db, DatabaseSessionManager
from founders_club.main import app
from founders_club.models.founders_request import FoundersRequest


class FakeMailer:
    """MailSender test double — records messages, returns a configurable result."""

    def __init__(self):
        self.sent: list[dict] = []
        self.result = MailResult(success=True)
        self.raises: Exception | None = None

    async def send(self, to, subject, html, text=None):
        if self.raises is not None:
            raise self.raises
        self.sent.append({"to": to, "subject": subject, "html": html, "text": text})
        return self.result


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
async def client(test_engine, test_session_factory, mailer):
    """FastAPI test client with DB and mailer dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mailer] = lambda: mailer

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
async def seed_request(test_db):
    """Insert a pending request directly into the test DB."""
    request = FoundersRequest(
        full_name="Jane Doe",
        email="jane@x.com",
        phone="+1 555",
        profession="Designer",
        status="pending",
    )
    test_db.add(request)
    await test_db.commit()
    await test_db.refresh(request)
    return request
