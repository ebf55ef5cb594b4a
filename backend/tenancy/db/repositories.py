"""Repository protocol interfaces for data access."""

from dataclasses import dataclass
from typing import Protocol

from backend.tenancy.models.kindergarten import Kindergarten, KindergartenCreate
from backend.tenancy.models.organization import OrganizationCreate, OrganizationUpdate
from backend.tenancy.models.user import UserCreate, UserUpdate


@dataclass
class OrganizationRecord:
    """Organization data record."""

    id: str
    name: str
    config: str


@dataclass
class UserRecord:
    """User data record."""

    id: int
    username: str
    password: str
    role: str


class RegistryRepository(Protocol):
    """Central registry of organizations and users.

    Every mutating call persists immediately. Storage failures, including
    uniqueness violations, raise ``StoreOperationError``.
    """

    async def get_organization(self, org_id: str) -> OrganizationRecord | None:
        """Get organization by ID.

        Returns:
            Organization record or None if not found
        """
        ...

    async def create_organization(self, data: OrganizationCreate) -> OrganizationRecord:
        """Create a new organization."""
        ...

    async def list_organizations(self) -> list[OrganizationRecord]:
        """List all organizations ordered by ID."""
        ...

    async def update_organization(
        self, org_id: str, changes: OrganizationUpdate
    ) -> OrganizationRecord | None:
        """Apply the fields set in ``changes``.

        Returns:
            Updated record or None if not found
        """
        ...

    async def delete_organization(self, org_id: str) -> bool:
        """Delete organization.

        Returns:
            True if a row was deleted
        """
        ...

    async def get_user(self, user_id: int) -> UserRecord | None:
        """Get user by ID."""
        ...

    async def create_user(self, data: UserCreate) -> UserRecord:
        """Create a new user with an auto-assigned ID."""
        ...

    async def list_users(self) -> list[UserRecord]:
        """List all users ordered by ID."""
        ...

    async def update_user(self, user_id: int, changes: UserUpdate) -> UserRecord | None:
        """Apply the fields set in ``changes``."""
        ...

    async def delete_user(self, user_id: int) -> bool:
        """Delete user."""
        ...


class KindergartenRepository(Protocol):
    """Kindergartens inside one tenant store."""

    async def list_kindergartens(self) -> list[Kindergarten]:
        """List all kindergartens of the tenant ordered by ID."""
        ...

    async def get_kindergarten(self, kindergarten_id: str) -> Kindergarten | None:
        """Get kindergarten by ID."""
        ...

    async def create_kindergarten(self, data: KindergartenCreate) -> Kindergarten:
        """Create a kindergarten."""
        ...

    async def delete_kindergarten(self, kindergarten_id: str) -> bool:
        """Delete kindergarten."""
        ...

    async def ensure_seeded(self, seed: tuple[Kindergarten, ...]) -> int:
        """Insert the seed rows that are missing.

        Returns:
            Number of rows inserted
        """
        ...
