"""SQL implementations of repository interfaces."""

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.tenancy.db.models import Kindergarten as KindergartenDB
from backend.tenancy.db.models import Organization as OrganizationDB
from backend.tenancy.db.models import User as UserDB
from backend.tenancy.db.repositories import OrganizationRecord, UserRecord
from backend.tenancy.errors import StoreOperationError
from backend.tenancy.models.kindergarten import Kindergarten, KindergartenCreate
from backend.tenancy.models.organization import OrganizationCreate, OrganizationUpdate
from backend.tenancy.models.user import UserCreate, UserUpdate


def _org_record(org: OrganizationDB) -> OrganizationRecord:
    return OrganizationRecord(id=org.id, name=org.name, config=org.config)


def _user_record(user: UserDB) -> UserRecord:
    return UserRecord(
        id=user.id,
        username=user.username,
        password=user.password,
        role=user.role,
    )


class _SessionRepository:
    """Shared commit/rollback handling for session-bound repositories."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _commit(self, detail: str) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise StoreOperationError(detail) from e


class SqlRegistryRepository(_SessionRepository):
    """SQL implementation of RegistryRepository."""

    async def get_organization(self, org_id: str) -> OrganizationRecord | None:
        """Get organization by ID."""
        try:
            org = await self._session.get(OrganizationDB, org_id)
        except SQLAlchemyError as e:
            raise StoreOperationError("could not load organization") from e
        return _org_record(org) if org else None

    async def create_organization(self, data: OrganizationCreate) -> OrganizationRecord:
        """Create a new organization."""
        org = OrganizationDB(id=data.id, name=data.name, config=data.config)
        self._session.add(org)
        await self._commit("could not create organization")
        return _org_record(org)

    async def list_organizations(self) -> list[OrganizationRecord]:
        """List all organizations ordered by ID."""
        try:
            result = await self._session.execute(
                select(OrganizationDB).order_by(OrganizationDB.id)
            )
        except SQLAlchemyError as e:
            raise StoreOperationError("could not list organizations") from e
        return [_org_record(org) for org in result.scalars().all()]

    async def update_organization(
        self, org_id: str, changes: OrganizationUpdate
    ) -> OrganizationRecord | None:
        """Apply the fields set in ``changes``."""
        try:
            org = await self._session.get(OrganizationDB, org_id)
        except SQLAlchemyError as e:
            raise StoreOperationError("could not load organization") from e
        if org is None:
            return None

        for field, value in changes.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(org, field, value)

        await self._commit("could not update organization")
        return _org_record(org)

    async def delete_organization(self, org_id: str) -> bool:
        """Delete organization."""
        try:
            result = await self._session.execute(
                delete(OrganizationDB).where(OrganizationDB.id == org_id)
            )
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise StoreOperationError("could not delete organization") from e
        await self._commit("could not delete organization")
        return bool(result.rowcount)

    async def get_user(self, user_id: int) -> UserRecord | None:
        """Get user by ID."""
        try:
            user = await self._session.get(UserDB, user_id)
        except SQLAlchemyError as e:
            raise StoreOperationError("could not load user") from e
        return _user_record(user) if user else None

    async def create_user(self, data: UserCreate) -> UserRecord:
        """Create a new user with an auto-assigned ID."""
        user = UserDB(username=data.username, password=data.password, role=data.role)
        self._session.add(user)
        await self._commit("could not create user")
        return _user_record(user)

    async def list_users(self) -> list[UserRecord]:
        """List all users ordered by ID."""
        try:
            result = await self._session.execute(select(UserDB).order_by(UserDB.id))
        except SQLAlchemyError as e:
            raise StoreOperationError("could not list users") from e
        return [_user_record(user) for user in result.scalars().all()]

    async def update_user(self, user_id: int, changes: UserUpdate) -> UserRecord | None:
        """Apply the fields set in ``changes``."""
        try:
            user = await self._session.get(UserDB, user_id)
        except SQLAlchemyError as e:
            raise StoreOperationError("could not load user") from e
        if user is None:
            return None

        for field, value in changes.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(user, field, value)

        await self._commit("could not update user")
        return _user_record(user)

    async def delete_user(self, user_id: int) -> bool:
        """Delete user."""
        try:
            result = await self._session.execute(delete(UserDB).where(UserDB.id == user_id))
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise StoreOperationError("could not delete user") from e
        await self._commit("could not delete user")
        return bool(result.rowcount)


class SqlKindergartenRepository(_SessionRepository):
    """SQL implementation of KindergartenRepository, bound to a tenant session."""

    async def list_kindergartens(self) -> list[Kindergarten]:
        """List all kindergartens of the tenant ordered by ID."""
        try:
            result = await self._session.execute(
                select(KindergartenDB).order_by(KindergartenDB.id)
            )
        except SQLAlchemyError as e:
            raise StoreOperationError("could not list kindergartens") from e
        return [Kindergarten.model_validate(row) for row in result.scalars().all()]

    async def get_kindergarten(self, kindergarten_id: str) -> Kindergarten | None:
        """Get kindergarten by ID."""
        try:
            row = await self._session.get(KindergartenDB, kindergarten_id)
        except SQLAlchemyError as e:
            raise StoreOperationError("could not load kindergarten") from e
        return Kindergarten.model_validate(row) if row else None

    async def create_kindergarten(self, data: KindergartenCreate) -> Kindergarten:
        """Create a kindergarten."""
        row = KindergartenDB(id=data.id, name=data.name)
        self._session.add(row)
        await self._commit("could not create kindergarten")
        return Kindergarten.model_validate(row)

    async def delete_kindergarten(self, kindergarten_id: str) -> bool:
        """Delete kindergarten."""
        try:
            result = await self._session.execute(
                delete(KindergartenDB).where(KindergartenDB.id == kindergarten_id)
            )
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise StoreOperationError("could not delete kindergarten") from e
        await self._commit("could not delete kindergarten")
        return bool(result.rowcount)

    async def ensure_seeded(self, seed: tuple[Kindergarten, ...]) -> int:
        """Insert the seed rows that are missing."""
        seed_ids = [item.id for item in seed]
        try:
            result = await self._session.execute(
                select(KindergartenDB.id).where(KindergartenDB.id.in_(seed_ids))
            )
        except SQLAlchemyError as e:
            raise StoreOperationError("could not seed kindergartens") from e

        existing = set(result.scalars().all())
        missing = [item for item in seed if item.id not in existing]
        if not missing:
            return 0

        self._session.add_all(KindergartenDB(id=item.id, name=item.name) for item in missing)
        try:
            await self._session.commit()
        except IntegrityError:
            # Seeded concurrently by another request; the rows are there.
            await self._session.rollback()
            return 0
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise StoreOperationError("could not seed kindergartens") from e
        return len(missing)
