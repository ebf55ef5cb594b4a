"""Central database engine and session factory."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from backend.tenancy.config import Settings, get_settings
from backend.tenancy.db.models import CentralBase


def create_async_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create async SQLAlchemy engine for the central registry.

    Raises:
        ValueError: If DATABASE_URL is unset or empty.
    """
    database_url = settings.database_url

    if not database_url:
        raise ValueError(
            "DATABASE_URL must be set to a valid connection string. "
            "Please configure the database_url setting."
        )

    # Plain sqlite:// URLs get the async driver
    if database_url.startswith("sqlite://"):
        database_url = database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)

    return create_async_engine(database_url, pool_pre_ping=True, echo=settings.echo_sql)


_async_engine: AsyncEngine | None = None


def get_async_engine() -> AsyncEngine:
    """Get global async engine instance."""
    global _async_engine
    if _async_engine is None:
        _async_engine = create_async_engine_from_settings(get_settings())
    return _async_engine


async def ensure_central_schema(engine: AsyncEngine) -> None:
    """Create the organizations and users tables if they are missing."""
    async with engine.begin() as conn:
        await conn.run_sync(CentralBase.metadata.create_all)


async def dispose_async_engine() -> None:
    """Dispose the global engine, if one was created."""
    global _async_engine
    if _async_engine is not None:
        await _async_engine.dispose()
        _async_engine = None


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for a central database session.

    Yields:
        AsyncSession instance
    """
    async with AsyncSession(get_async_engine(), expire_on_commit=False) as session:
        yield session
