"""Dev seeding helper - demo organizations and an admin user."""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from backend.tenancy.db.engine import ensure_central_schema, get_async_engine
from backend.tenancy.db.models import Organization, User

DEV_ORGANIZATIONS = (
    ("acme", "Acme", "acme.db"),
    ("globex", "Globex", "globex.db"),
)
DEV_ADMIN_USERNAME = "admin"


async def seed_dev_registry(engine: AsyncEngine | None = None) -> None:
    """Seed demo organizations and an admin user.

    This function is idempotent - safe to run multiple times.
    """
    engine = engine or get_async_engine()
    await ensure_central_schema(engine)

    async with AsyncSession(engine) as session:
        for org_id, name, config in DEV_ORGANIZATIONS:
            org = await session.get(Organization, org_id)
            if org is None:
                print(f"Creating dev organization {org_id} -> {config}...")
                session.add(Organization(id=org_id, name=name, config=config))
            else:
                print(f"Dev organization already exists: {org.name}")

        result = await session.execute(select(User).where(User.username == DEV_ADMIN_USERNAME))
        if result.scalar_one_or_none() is None:
            print(f"Creating dev user {DEV_ADMIN_USERNAME}...")
            session.add(User(username=DEV_ADMIN_USERNAME, password="admin", role="admin"))
        else:
            print(f"Dev user already exists: {DEV_ADMIN_USERNAME}")

        await session.commit()
        print("Dev seeding complete")


if __name__ == "__main__":
    asyncio.run(seed_dev_registry())
