"""Tests for tenant resolution."""

from typing import Any

import pytest
import pytest_asyncio

from backend.tenancy.api.tenant import resolve_tenant
from backend.tenancy.db.inmemory import InMemoryRegistryRepository
from backend.tenancy.db.repositories import OrganizationRecord
from backend.tenancy.errors import (
    MissingTenantHeader,
    StoreConnectionError,
    StoreOperationError,
    TenantUnavailable,
    UnknownTenant,
)
from backend.tenancy.models.organization import OrganizationCreate


class FailingRegistry(InMemoryRegistryRepository):
    """Registry whose lookups always fail."""

    async def get_organization(self, org_id: str) -> OrganizationRecord | None:
        raise StoreOperationError("could not load organization")


@pytest_asyncio.fixture
async def registry() -> InMemoryRegistryRepository:
    repo = InMemoryRegistryRepository()
    await repo.create_organization(OrganizationCreate(id="org1", name="Acme", config="acme.db"))
    await repo.create_organization(
        OrganizationCreate(id="broken", name="Broken", config="missing/broken.db")
    )
    return repo


@pytest.mark.asyncio
@pytest.mark.parametrize("header", [None, "", "   "])
async def test_missing_tenant_opens_nothing(
    header: str | None, tenant_factory: Any
) -> None:
    """No identifier: fail before touching the registry or any store."""
    registry = InMemoryRegistryRepository()

    with pytest.raises(MissingTenantHeader):
        await resolve_tenant(header, registry, tenant_factory)

    assert registry.lookups == []
    assert tenant_factory.opened == []


@pytest.mark.asyncio
async def test_unknown_tenant(tenant_factory: Any) -> None:
    """Unregistered identifier is rejected and no store is opened."""
    registry = InMemoryRegistryRepository()

    with pytest.raises(UnknownTenant) as exc_info:
        await resolve_tenant("nobody", registry, tenant_factory)

    assert exc_info.value.status_code == 400
    assert registry.lookups == ["nobody"]
    assert tenant_factory.opened == []


@pytest.mark.asyncio
async def test_failed_lookup_is_unknown_tenant(tenant_factory: Any) -> None:
    """A registry failure during lookup is reported like an unknown tenant."""
    with pytest.raises(UnknownTenant):
        await resolve_tenant("org1", FailingRegistry(), tenant_factory)

    assert tenant_factory.opened == []


@pytest.mark.asyncio
async def test_unreachable_store_is_tenant_unavailable(
    registry: InMemoryRegistryRepository, tenant_factory: Any
) -> None:
    """Store open failure maps to a server error."""
    with pytest.raises(TenantUnavailable) as exc_info:
        await resolve_tenant("broken", registry, tenant_factory)

    assert isinstance(exc_info.value, StoreConnectionError)
    assert exc_info.value.status_code == 500
    assert tenant_factory.opened == ["missing/broken.db"]


@pytest.mark.asyncio
async def test_resolves_to_open_store(
    registry: InMemoryRegistryRepository, tenant_factory: Any
) -> None:
    """Known tenant: context carries the organization and an open store."""
    ctx = await resolve_tenant(" org1 ", registry, tenant_factory)
    try:
        assert ctx.tenant_id == "org1"
        assert ctx.organization.name == "Acme"
        assert ctx.store.descriptor == "acme.db"
        assert not ctx.store.closed
    finally:
        await ctx.store.close()


@pytest.mark.asyncio
async def test_each_resolution_opens_a_new_store(
    registry: InMemoryRegistryRepository, tenant_factory: Any
) -> None:
    """Nothing is cached between resolutions."""
    first = await resolve_tenant("org1", registry, tenant_factory)
    second = await resolve_tenant("org1", registry, tenant_factory)
    await first.store.close()
    await second.store.close()

    assert first.store is not second.store
    assert tenant_factory.opened == ["acme.db", "acme.db"]
