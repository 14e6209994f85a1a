"""Pytest configuration and shared fixtures."""

import asyncio
import os


# Settings are read at import time, so the environment is prepared first.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-with-at-least-32-characters"
os.environ["ENVIRONMENT"] = "test"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from workboard.core.database import Base, get_db  # noqa: E402
from workboard.main import create_app  # noqa: E402

# Import all models to ensure they're registered with Base.metadata
from workboard.modules.members.models import Account  # noqa: E402, F401
from workboard.modules.organizations.models import Organization  # noqa: E402, F401
from workboard.modules.projects.models import (  # noqa: E402, F401
    Project,
    ProjectMembership,
)
from workboard.modules.work_items.models import (  # noqa: E402, F401
    WorkItem,
    WorkItemComment,
)
from tests.factories.registration import RegisterRequestFactory  # noqa: E402


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

RegisterOrg = Callable[..., Awaitable[dict[str, Any]]]


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with the full schema."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def app(session_factory: async_sessionmaker[AsyncSession]):
    """Create test application instance."""
    application = create_app()

    # Override database dependency with the per-test database
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except (Exception, asyncio.CancelledError):
                await session.rollback()
                raise

    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Organization Fixtures
# ============================================================


@pytest.fixture
def register_org(client: AsyncClient) -> RegisterOrg:
    """Register organizations through the API.

    Returns:
        A coroutine function taking registration field overrides and
        returning the response body plus ready-made auth headers
    """

    async def _register(**overrides: Any) -> dict[str, Any]:
        payload = RegisterRequestFactory.build(**overrides).model_dump()
        response = await client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text
        body = response.json()
        body["password"] = payload["password"]
        body["headers"] = {"Authorization": f"Bearer {body['token']}"}
        return body

    return _register


@pytest.fixture
async def org_a(register_org: RegisterOrg) -> dict[str, Any]:
    return await register_org(organization_name="Acme Rockets")


@pytest.fixture
async def org_b(register_org: RegisterOrg) -> dict[str, Any]:
    return await register_org(organization_name="Globex")
