"""Integration tests for dev seeding helper."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from backend.tenancy.db.models import Organization, User
from backend.tenancy.db.seed_dev import DEV_ORGANIZATIONS, seed_dev_registry


@pytest.mark.asyncio
async def test_seed_is_idempotent(central_engine: AsyncEngine) -> None:
    """Running the seed twice leaves one copy of each demo row."""
    await seed_dev_registry(central_engine)
    await seed_dev_registry(central_engine)

    async with AsyncSession(central_engine) as session:
        org_count = await session.scalar(select(func.count()).select_from(Organization))
        user_count = await session.scalar(select(func.count()).select_from(User))
        acme = await session.get(Organization, "acme")

    await central_engine.dispose()

    assert org_count == len(DEV_ORGANIZATIONS)
    assert user_count == 1
    assert acme is not None
    assert acme.config == "acme.db"
