"""Request context for tenant-scoped routes."""

from dataclasses import dataclass

from backend.tenancy.db.repositories import OrganizationRecord
from backend.tenancy.db.tenant_store import TenantStore


@dataclass(frozen=True)
class TenantContext:
    """Resolved tenant for the current request.

    Carries the organization looked up in the central registry and the
    tenant store opened from its connection descriptor. Handlers receive it
    through ``Depends(get_tenant_context)``; the store is closed once the
    response has been produced.
    """

    tenant_id: str
    organization: OrganizationRecord
    store: TenantStore
