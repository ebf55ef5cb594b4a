"""User endpoints - CRUD over the central registry."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from backend.tenancy.api.dependencies import get_registry
from backend.tenancy.db.repositories import RegistryRepository
from backend.tenancy.errors import NotFoundError
from backend.tenancy.models.user import User, UserCreate, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=User)
async def create_user(
    request: UserCreate,
    registry: Annotated[RegistryRepository, Depends(get_registry)],
) -> User:
    """Create a user. The ID is assigned by the store."""
    record = await registry.create_user(request)
    logger.info("Created user %s", record.id)
    return User.model_validate(record)


@router.get("", response_model=list[User])
async def list_users(
    registry: Annotated[RegistryRepository, Depends(get_registry)],
) -> list[User]:
    """List all users."""
    records = await registry.list_users()
    return [User.model_validate(record) for record in records]


@router.get("/{user_id}", response_model=User)
async def get_user(
    user_id: str,
    registry: Annotated[RegistryRepository, Depends(get_registry)],
) -> User:
    """Fetch one user."""
    numeric_id = _parse_user_id(user_id)
    record = None if numeric_id is None else await registry.get_user(numeric_id)
    if record is None:
        raise NotFoundError("user not found")
    return User.model_validate(record)


@router.put("/{user_id}", response_model=User)
async def update_user(
    user_id: str,
    request: UserUpdate,
    registry: Annotated[RegistryRepository, Depends(get_registry)],
) -> User:
    """Update a user."""
    numeric_id = _parse_user_id(user_id)
    record = None if numeric_id is None else await registry.update_user(numeric_id, request)
    if record is None:
        raise NotFoundError("user not found")
    logger.info("Updated user %s", user_id)
    return User.model_validate(record)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    registry: Annotated[RegistryRepository, Depends(get_registry)],
) -> None:
    """Delete a user. Unknown or non-numeric IDs are not an error."""
    numeric_id = _parse_user_id(user_id)
    deleted = numeric_id is not None and await registry.delete_user(numeric_id)
    logger.info("Delete user %s (deleted=%s)", user_id, deleted)


def _parse_user_id(raw: str) -> int | None:
    """Numeric user ID, or None when the path segment cannot name a user."""
    try:
        return int(raw)
    except ValueError:
        return None
