"""Organization endpoints - CRUD over the central registry."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from backend.tenancy.api.dependencies import get_registry, get_tenant_store_factory
from backend.tenancy.db.repositories import OrganizationRecord, RegistryRepository
from backend.tenancy.db.sql_repositories import SqlKindergartenRepository
from backend.tenancy.db.tenant_store import TenantStoreFactory
from backend.tenancy.errors import NotFoundError
from backend.tenancy.models.kindergarten import Kindergarten
from backend.tenancy.models.organization import (
    Organization,
    OrganizationCreate,
    OrganizationUpdate,
    OrganizationWithKindergartens,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/organizations", tags=["organizations"])


@router.post("", response_model=Organization)
async def create_organization(
    request: OrganizationCreate,
    registry: Annotated[RegistryRepository, Depends(get_registry)],
) -> Organization:
    """Register a new organization."""
    record = await registry.create_organization(request)
    logger.info("Created organization %s", record.id)
    return Organization.model_validate(record)


@router.get("", response_model=list[OrganizationWithKindergartens])
async def list_organizations(
    registry: Annotated[RegistryRepository, Depends(get_registry)],
    factory: Annotated[TenantStoreFactory, Depends(get_tenant_store_factory)],
) -> list[OrganizationWithKindergartens]:
    """List organizations, each with the kindergartens of its own store.

    Tenant stores are opened one after another, one per organization.
    Any store that cannot be opened fails the whole request.
    """
    records = await registry.list_organizations()

    organizations = []
    for record in records:
        kindergartens = await _load_kindergartens(factory, record)
        organizations.append(
            OrganizationWithKindergartens(
                id=record.id,
                name=record.name,
                config=record.config,
                kindergartens=kindergartens,
            )
        )
    return organizations


@router.get("/{org_id}", response_model=Organization)
async def get_organization(
    org_id: str,
    registry: Annotated[RegistryRepository, Depends(get_registry)],
) -> Organization:
    """Fetch one organization."""
    record = await registry.get_organization(org_id)
    if record is None:
        raise NotFoundError("organization not found")
    return Organization.model_validate(record)


@router.put("/{org_id}", response_model=Organization)
async def update_organization(
    org_id: str,
    request: OrganizationUpdate,
    registry: Annotated[RegistryRepository, Depends(get_registry)],
) -> Organization:
    """Update name and/or connection descriptor of an organization."""
    record = await registry.update_organization(org_id, request)
    if record is None:
        raise NotFoundError("organization not found")
    logger.info("Updated organization %s", org_id)
    return Organization.model_validate(record)


@router.delete("/{org_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_organization(
    org_id: str,
    registry: Annotated[RegistryRepository, Depends(get_registry)],
) -> None:
    """Delete an organization. Deleting an unknown ID is not an error."""
    deleted = await registry.delete_organization(org_id)
    logger.info("Delete organization %s (deleted=%s)", org_id, deleted)


async def _load_kindergartens(
    factory: TenantStoreFactory, record: OrganizationRecord
) -> list[Kindergarten]:
    store = await factory.open(record.config)
    try:
        async with store.session() as session:
            return await SqlKindergartenRepository(session).list_kindergartens()
    finally:
        await store.close()
