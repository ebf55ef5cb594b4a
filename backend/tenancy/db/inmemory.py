"""In-memory implementations of repository interfaces."""

import itertools
from dataclasses import replace

from backend.tenancy.db.repositories import OrganizationRecord, UserRecord
from backend.tenancy.errors import StoreOperationError
from backend.tenancy.models.kindergarten import Kindergarten, KindergartenCreate
from backend.tenancy.models.organization import OrganizationCreate, OrganizationUpdate
from backend.tenancy.models.user import UserCreate, UserUpdate


class InMemoryRegistryRepository:
    """In-memory implementation of RegistryRepository."""

    def __init__(self) -> None:
        self._orgs: dict[str, OrganizationRecord] = {}
        self._users: dict[int, UserRecord] = {}
        self._user_ids = itertools.count(1)
        self.lookups: list[str] = []

    async def get_organization(self, org_id: str) -> OrganizationRecord | None:
        """Get organization by ID."""
        self.lookups.append(org_id)
        return self._orgs.get(org_id)

    async def create_organization(self, data: OrganizationCreate) -> OrganizationRecord:
        """Create a new organization."""
        if data.id in self._orgs:
            raise StoreOperationError("could not create organization")
        record = OrganizationRecord(id=data.id, name=data.name, config=data.config)
        self._orgs[data.id] = record
        return record

    async def list_organizations(self) -> list[OrganizationRecord]:
        """List all organizations ordered by ID."""
        return [self._orgs[key] for key in sorted(self._orgs)]

    async def update_organization(
        self, org_id: str, changes: OrganizationUpdate
    ) -> OrganizationRecord | None:
        """Apply the fields set in ``changes``."""
        record = self._orgs.get(org_id)
        if record is None:
            return None
        updated = replace(record, **changes.model_dump(exclude_unset=True, exclude_none=True))
        self._orgs[org_id] = updated
        return updated

    async def delete_organization(self, org_id: str) -> bool:
        """Delete organization."""
        return self._orgs.pop(org_id, None) is not None

    async def get_user(self, user_id: int) -> UserRecord | None:
        """Get user by ID."""
        return self._users.get(user_id)

    async def create_user(self, data: UserCreate) -> UserRecord:
        """Create a new user with an auto-assigned ID."""
        if any(user.username == data.username for user in self._users.values()):
            raise StoreOperationError("could not create user")
        record = UserRecord(
            id=next(self._user_ids),
            username=data.username,
            password=data.password,
            role=data.role,
        )
        self._users[record.id] = record
        return record

    async def list_users(self) -> list[UserRecord]:
        """List all users ordered by ID."""
        return [self._users[key] for key in sorted(self._users)]

    async def update_user(self, user_id: int, changes: UserUpdate) -> UserRecord | None:
        """Apply the fields set in ``changes``."""
        record = self._users.get(user_id)
        if record is None:
            return None
        updated = replace(record, **changes.model_dump(exclude_unset=True, exclude_none=True))
        self._users[user_id] = updated
        return updated

    async def delete_user(self, user_id: int) -> bool:
        """Delete user."""
        return self._users.pop(user_id, None) is not None


class InMemoryKindergartenRepository:
    """In-memory implementation of KindergartenRepository."""

    def __init__(self) -> None:
        self._rows: dict[str, Kindergarten] = {}

    async def list_kindergartens(self) -> list[Kindergarten]:
        """List all kindergartens ordered by ID."""
        return [self._rows[key] for key in sorted(self._rows)]

    async def get_kindergarten(self, kindergarten_id: str) -> Kindergarten | None:
        """Get kindergarten by ID."""
        return self._rows.get(kindergarten_id)

    async def create_kindergarten(self, data: KindergartenCreate) -> Kindergarten:
        """Create a kindergarten."""
        if data.id in self._rows:
            raise StoreOperationError("could not create kindergarten")
        row = Kindergarten(id=data.id, name=data.name)
        self._rows[row.id] = row
        return row

    async def delete_kindergarten(self, kindergarten_id: str) -> bool:
        """Delete kindergarten."""
        return self._rows.pop(kindergarten_id, None) is not None

    async def ensure_seeded(self, seed: tuple[Kindergarten, ...]) -> int:
        """Insert the seed rows that are missing."""
        missing = [item for item in seed if item.id not in self._rows]
        for item in missing:
            self._rows[item.id] = item
        return len(missing)
