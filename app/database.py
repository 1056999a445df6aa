"""
Database connection and session management
Using SQLModel with an async SQLAlchemy engine (asyncpg for PostgreSQL)

The engine is owned by a Database object that the application opens on
startup, keeps on app.state and disposes on shutdown.
"""
from sqlmodel import SQLModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from fastapi import Request
from typing import AsyncGenerator, Optional
import logging

logger = logging.getLogger(__name__)


def to_async_url(database_url: str) -> str:
    """Convert postgresql:// to postgresql+asyncpg:// for async operations"""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgres://"):
        return database_url.replace("postgres://", "postgresql+asyncpg://", 1)
    return database_url


def mask_url(database_url: str) -> str:
    """Hide credentials when logging a database URL"""
    url_parts = database_url.split("@")
    if len(url_parts) > 1:
        scheme = url_parts[0].split("://")[0]
        return f"{scheme}://***@{url_parts[1]}"
    return database_url


class Database:
    """
    Store client shared by all request handlers.

    Usage:
        database = Database(DATABASE_URL)
        await database.open()
        async with database.sessionmaker() as session:
            ...
        await database.close()
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.url = to_async_url(database_url)
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.sessionmaker: Optional[async_sessionmaker] = None

    def _engine_options(self) -> dict:
        if self.url.startswith("sqlite"):
            return {"connect_args": {"check_same_thread": False}}
        return {
            "pool_pre_ping": True,  # Verify connections before using
            "pool_recycle": 3600,  # Recycle connections after 1 hour
            "pool_timeout": 30,
            "pool_size": 10,
            "max_overflow": 20,
        }

    async def open(self) -> None:
        """Create the engine and check that the database answers"""
        self.engine = create_async_engine(self.url, echo=self.echo, **self._engine_options())
        self.sessionmaker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info(f"Database engine created: {mask_url(self.url)}")

        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Successfully connected to the database")

    async def create_all(self) -> None:
        """Create all tables and seed the default pages"""
        # Import all models here so SQLModel knows every table
        from app.apps.authentication.models import User  # noqa: F401
        from app.apps.content.models import News  # noqa: F401
        from app.apps.contact.models import ContactInquiry  # noqa: F401
        from app.apps.pages.models import Page  # noqa: F401
        from app.apps.pages.utils import seed_default_pages

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        async with self.sessionmaker() as session:
            created = await seed_default_pages(session)
            if created:
                logger.info(f"Seeded default pages: {', '.join(created)}")

    async def close(self) -> None:
        """Dispose of the connection pool"""
        if self.engine is not None:
            await self.engine.dispose()
            self.engine = None
            logger.info("Database connections closed")


async def get_async_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get async database session
    Usage: async def endpoint(session: AsyncSession = Depends(get_async_session))
    """
    database: Database = request.app.state.database
    async with database.sessionmaker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
