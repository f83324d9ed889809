"""Pytest configuration for all tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from rolehex.domain.entities.role import Role
from rolehex.domain.ports.notification import RoleNotificationPort
from rolehex.infrastructure.persistence.database import Base
from rolehex.infrastructure.persistence.models import RoleModel  # noqa: F401


class RecordingNotifier(RoleNotificationPort):
    """Notifier that remembers every event it receives."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    async def on_created(self, role: Role) -> None:
        self.events.append(("created", role))

    async def on_updated(self, role: Role) -> None:
        self.events.append(("updated", role))

    async def on_deleted(self, role_id: int) -> None:
        self.events.append(("deleted", role_id))


@pytest.fixture
def notifier() -> RecordingNotifier:
    """Provide a notifier that records events."""
    return RecordingNotifier()


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def app() -> FastAPI:
    """Provide the application instance."""
    from rolehex.infrastructure.api.app import app

    return app


@pytest_asyncio.fixture
async def client(
    app: FastAPI,
    db_session: AsyncSession,
    notifier: RecordingNotifier,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database and notifier dependencies."""
    from rolehex.infrastructure.api.dependencies import get_role_notifier
    from rolehex.infrastructure.persistence.database import get_db_session

    app.dependency_overrides[get_db_session] = lambda: db_session
    app.dependency_overrides[get_role_notifier] = lambda: notifier

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    await app.state.notification_dispatcher.drain()
    app.dependency_overrides = {}
