"""Models package - re-exports for convenience."""

from backend.tenancy.models.kindergarten import (
    SEED_KINDERGARTENS,
    Kindergarten,
    KindergartenCreate,
)
from backend.tenancy.models.organization import (
    Organization,
    OrganizationCreate,
    OrganizationUpdate,
    OrganizationWithKindergartens,
)
from backend.tenancy.models.user import User, UserCreate, UserUpdate

__all__ = [
    "SEED_KINDERGARTENS",
    "Kindergarten",
    "KindergartenCreate",
    "Organization",
    "OrganizationCreate",
    "OrganizationUpdate",
    "OrganizationWithKindergartens",
    "User",
    "UserCreate",
    "UserUpdate",
]
