"""Kindergarten endpoints - tenant-scoped, resolved from the tenant header."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from backend.tenancy.api.tenant import get_tenant_context
from backend.tenancy.config import Settings, get_settings
from backend.tenancy.db.context import TenantContext
from backend.tenancy.db.sql_repositories import SqlKindergartenRepository
from backend.tenancy.errors import NotFoundError
from backend.tenancy.models.kindergarten import (
    SEED_KINDERGARTENS,
    Kindergarten,
    KindergartenCreate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/kindergartens", tags=["kindergartens"])


@router.get("", response_model=list[Kindergarten])
async def list_kindergartens(
    tenant: Annotated[TenantContext, Depends(get_tenant_context)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> list[Kindergarten]:
    """List the kindergartens of the resolved tenant.

    With ``seed_kindergartens`` enabled, the two demo kindergartens are
    inserted first if they are not already present.
    """
    async with tenant.store.session() as session:
        repo = SqlKindergartenRepository(session)
        if settings.seed_kindergartens:
            inserted = await repo.ensure_seeded(SEED_KINDERGARTENS)
            if inserted:
                logger.info("Seeded %d kindergartens for tenant %s", inserted, tenant.tenant_id)
        return await repo.list_kindergartens()


@router.post("", response_model=Kindergarten)
async def create_kindergarten(
    request: KindergartenCreate,
    tenant: Annotated[TenantContext, Depends(get_tenant_context)],
) -> Kindergarten:
    """Create a kindergarten in the resolved tenant's store."""
    async with tenant.store.session() as session:
        return await SqlKindergartenRepository(session).create_kindergarten(request)


@router.get("/{kindergarten_id}", response_model=Kindergarten)
async def get_kindergarten(
    kindergarten_id: str,
    tenant: Annotated[TenantContext, Depends(get_tenant_context)],
) -> Kindergarten:
    """Fetch one kindergarten of the resolved tenant."""
    async with tenant.store.session() as session:
        kindergarten = await SqlKindergartenRepository(session).get_kindergarten(kindergarten_id)
    if kindergarten is None:
        raise NotFoundError("kindergarten not found")
    return kindergarten


@router.delete("/{kindergarten_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_kindergarten(
    kindergarten_id: str,
    tenant: Annotated[TenantContext, Depends(get_tenant_context)],
) -> None:
    """Delete a kindergarten of the resolved tenant."""
    async with tenant.store.session() as session:
        await SqlKindergartenRepository(session).delete_kindergarten(kindergarten_id)
