"""Tenant resolver dependency.

Maps the tenant header of an incoming request to an open tenant store:

1. Extract the tenant identifier from the header (missing -> 400).
2. Look it up in the central registry (unknown -> 400).
3. Open the organization's tenant store (failure -> 500).
4. Hand a ``TenantContext`` to the route; close the store afterwards.

Nothing is cached between requests.

Usage in FastAPI routes:
    @router.get("/example")
    async def example(
        tenant: Annotated[TenantContext, Depends(get_tenant_context)],
    ):
        async with tenant.store.session() as session:
            ...
"""

import time
from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request

from backend.tenancy.api.dependencies import get_registry, get_tenant_store_factory
from backend.tenancy.config import Settings, get_settings
from backend.tenancy.db.context import TenantContext
from backend.tenancy.db.repositories import RegistryRepository
from backend.tenancy.db.tenant_store import TenantStoreFactory
from backend.tenancy.errors import (
    MissingTenantHeader,
    StoreConnectionError,
    StoreOperationError,
    TenantUnavailable,
    UnknownTenant,
)
from backend.tenancy.utils.logging import StructuredTenantLogger
from backend.tenancy.utils.metrics import PrometheusTenantMetrics

_metrics = PrometheusTenantMetrics()
_log = StructuredTenantLogger()


async def resolve_tenant(
    tenant_id: str | None,
    registry: RegistryRepository,
    factory: TenantStoreFactory,
) -> TenantContext:
    """Resolve a tenant identifier into a context holding an open store.

    Args:
        tenant_id: Raw header value, or None if the header is missing
        registry: Central registry
        factory: Tenant store factory

    Returns:
        TenantContext whose store the caller must close

    Raises:
        MissingTenantHeader: If no identifier was supplied
        UnknownTenant: If the identifier is not registered or the lookup fails
        TenantUnavailable: If the tenant store cannot be opened
    """
    start = time.perf_counter()
    tenant_id = (tenant_id or "").strip()

    if not tenant_id:
        _finish(None, "missing", start)
        raise MissingTenantHeader()

    try:
        organization = await registry.get_organization(tenant_id)
    except StoreOperationError as e:
        _finish(tenant_id, "unknown", start, error_reason=str(e))
        raise UnknownTenant() from e

    if organization is None:
        _finish(tenant_id, "unknown", start)
        raise UnknownTenant()

    try:
        store = await factory.open(organization.config)
    except StoreConnectionError as e:
        _finish(tenant_id, "unavailable", start, error_reason=repr(e.__cause__ or e))
        raise TenantUnavailable() from e

    _finish(tenant_id, "resolved", start)
    return TenantContext(tenant_id=tenant_id, organization=organization, store=store)


async def get_tenant_context(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    registry: Annotated[RegistryRepository, Depends(get_registry)],
    factory: Annotated[TenantStoreFactory, Depends(get_tenant_store_factory)],
) -> AsyncGenerator[TenantContext, None]:
    """FastAPI dependency resolving the tenant of the current request.

    Yields:
        TenantContext for the tenant named in the tenant header
    """
    ctx = await resolve_tenant(request.headers.get(settings.tenant_header), registry, factory)
    try:
        yield ctx
    finally:
        await ctx.store.close()


def _finish(
    tenant_id: str | None,
    outcome: str,
    start: float,
    error_reason: str | None = None,
) -> None:
    latency_ms = (time.perf_counter() - start) * 1000
    _metrics.inc_resolution(outcome)
    _log.log_resolution(tenant_id, outcome, latency_ms, error_reason=error_reason)
