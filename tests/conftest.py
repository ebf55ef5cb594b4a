"""Shared pytest fixtures for all test suites."""

from collections.abc import AsyncGenerator, Iterator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from backend.tenancy.api.dependencies import get_tenant_store_factory
from backend.tenancy.db.engine import get_session
from backend.tenancy.db.models import CentralBase
from backend.tenancy.db.tenant_store import TenantStore, TenantStoreFactory
from backend.tenancy.main import app


class RecordingTenantStoreFactory(TenantStoreFactory):
    """TenantStoreFactory that remembers every descriptor it was asked to open."""

    def __init__(self, base_dir: Path) -> None:
        super().__init__(base_dir=base_dir)
        self.opened: list[str] = []
        self.stores: list[TenantStore] = []

    async def open(self, descriptor: str) -> TenantStore:
        self.opened.append(descriptor)
        store = await super().open(descriptor)
        self.stores.append(store)
        return store


@pytest.fixture
def central_db_path(tmp_path: Path) -> Path:
    """Central registry SQLite file with the schema already created."""
    db_path = tmp_path / "central.db"
    engine = create_engine(f"sqlite:///{db_path}")
    CentralBase.metadata.create_all(engine)
    engine.dispose()
    return db_path


@pytest.fixture
def central_engine(central_db_path: Path) -> AsyncEngine:
    """Async engine on the central registry file."""
    return create_async_engine(f"sqlite+aiosqlite:///{central_db_path}", poolclass=NullPool)


@pytest_asyncio.fixture
async def central_session(central_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session on the central registry for repository tests."""
    async with AsyncSession(central_engine, expire_on_commit=False) as session:
        yield session
    await central_engine.dispose()


@pytest.fixture
def tenant_factory(tmp_path: Path) -> RecordingTenantStoreFactory:
    """Tenant store factory rooted in the test's temporary directory."""
    return RecordingTenantStoreFactory(base_dir=tmp_path)


@pytest.fixture
def client(
    central_engine: AsyncEngine, tenant_factory: RecordingTenantStoreFactory
) -> Iterator[TestClient]:
    """Test client with central and tenant stores pointed at temporary files."""

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with AsyncSession(central_engine, expire_on_commit=False) as session:
            yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_tenant_store_factory] = lambda: tenant_factory

    yield TestClient(app)

    app.dependency_overrides.clear()
