"""
Shared pytest fixtures and configuration
"""
import os
from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

# Required settings must exist before the app is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-for-testing-only")

from app.main import app
from app.database import get_async_session
from app.apps.authentication.utils import create_access_token, upsert_admin
from app.apps.pages.utils import seed_default_pages

# Import all models so their tables are created
from app.apps.authentication.models import User
from app.apps.content.models import News  # noqa: F401
from app.apps.contact.models import ContactInquiry  # noqa: F401
from app.apps.pages.models import Page  # noqa: F401

# Create in-memory SQLite database for testing
# Note: aiosqlite must be installed for async SQLite support
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_EMAIL = "admin@wesleyhigh.edu"
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct-horse-battery"


@pytest.fixture(scope="function")
async def test_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Fresh database for each test, with the default pages seeded.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        await seed_default_pages(session)
        try:
            yield session
        finally:
            await session.close()

    await engine.dispose()


@pytest.fixture(scope="function")
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Async client against the app with the database dependency overridden.
    """
    async def override_get_async_session():
        yield test_session

    app.dependency_overrides[get_async_session] = override_get_async_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Cleanup
    app.dependency_overrides.clear()


@pytest.fixture
async def admin_user(test_session: AsyncSession) -> User:
    """The site admin account"""
    return await upsert_admin(test_session, ADMIN_EMAIL, ADMIN_PASSWORD, username=ADMIN_USERNAME)


@pytest.fixture
def admin_token(admin_user: User) -> str:
    return create_access_token(admin_user)


@pytest.fixture
def auth_headers(admin_token: str) -> dict:
    """Bearer header for the admin account"""
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    """Point media storage at a temporary directory"""
    target = tmp_path / "uploads"
    monkeypatch.setattr("app.apps.media.utils.UPLOAD_DIR", target)
    return target


@pytest.fixture
def admin_credentials() -> dict:
    return {"email": ADMIN_EMAIL, "username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
