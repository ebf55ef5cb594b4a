"""FastAPI dependencies for the central registry and the tenant store factory.

Tests substitute either through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.tenancy.config import Settings, get_settings
from backend.tenancy.db.engine import get_session
from backend.tenancy.db.repositories import RegistryRepository
from backend.tenancy.db.sql_repositories import SqlRegistryRepository
from backend.tenancy.db.tenant_store import TenantStoreFactory


async def get_registry(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> RegistryRepository:
    """Central registry bound to the request's session."""
    return SqlRegistryRepository(session)


def get_tenant_store_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TenantStoreFactory:
    """Tenant store factory configured from settings."""
    return TenantStoreFactory(base_dir=settings.tenant_store_dir, echo=settings.echo_sql)
