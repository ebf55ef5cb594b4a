"""Tests for request/response models."""

import pytest
from pydantic import ValidationError

from backend.tenancy.db.repositories import OrganizationRecord, UserRecord
from backend.tenancy.models import (
    SEED_KINDERGARTENS,
    Kindergarten,
    Organization,
    OrganizationCreate,
    OrganizationUpdate,
    OrganizationWithKindergartens,
    User,
    UserCreate,
)


def test_organization_create_requires_id() -> None:
    """An organization without an identifier cannot be created."""
    with pytest.raises(ValidationError):
        OrganizationCreate.model_validate({"name": "Acme", "config": "acme.db"})

    with pytest.raises(ValidationError):
        OrganizationCreate.model_validate({"id": "", "name": "Acme", "config": "acme.db"})


def test_organization_create_requires_config() -> None:
    """Every organization needs a store descriptor to be listable."""
    with pytest.raises(ValidationError):
        OrganizationCreate.model_validate({"id": "org1", "name": "Acme"})

    with pytest.raises(ValidationError):
        OrganizationCreate.model_validate({"id": "org1", "name": "Acme", "config": ""})

    with pytest.raises(ValidationError):
        OrganizationUpdate.model_validate({"config": ""})


def test_organization_create_accepts_capitalized_keys() -> None:
    """Both key spellings decode to the same request."""
    lower = OrganizationCreate.model_validate({"id": "org9", "name": "Acme", "config": "acme.db"})
    upper = OrganizationCreate.model_validate({"ID": "org9", "Name": "Acme", "Config": "acme.db"})

    assert lower == upper


def test_organization_serializes_capitalized_keys() -> None:
    """Responses use the capitalized wire keys."""
    org = OrganizationWithKindergartens(
        id="org1",
        name="Acme",
        config="acme.db",
        kindergartens=[Kindergarten(id="a1", name="Acme Tots")],
    )

    assert org.model_dump(by_alias=True) == {
        "ID": "org1",
        "Name": "Acme",
        "Config": "acme.db",
        "Kindergartens": [{"ID": "a1", "Name": "Acme Tots"}],
    }


def test_organization_update_ignores_identifier() -> None:
    """The identifier is immutable, so an id in an update body is dropped."""
    update = OrganizationUpdate.model_validate({"id": "other", "name": "Renamed"})

    assert update.model_dump(exclude_unset=True) == {"name": "Renamed"}


def test_organization_from_record() -> None:
    """Records convert to the API model by attribute."""
    record = OrganizationRecord(id="org1", name="Acme", config="acme.db")

    org = Organization.model_validate(record)

    assert org.model_dump() == {"id": "org1", "name": "Acme", "config": "acme.db"}


def test_user_response_omits_password() -> None:
    """Passwords are accepted on input and never serialized back."""
    record = UserRecord(id=7, username="alice", password="s3cret", role="admin")

    body = User.model_validate(record).model_dump()

    assert body == {"id": 7, "username": "alice", "role": "admin"}


def test_user_create_defaults() -> None:
    """Only the username is mandatory."""
    user = UserCreate.model_validate({"username": "bob"})

    assert user.password == ""
    assert user.role == ""


def test_seed_kindergartens() -> None:
    """The demo seed is exactly two fixed kindergartens."""
    assert [(k.id, k.name) for k in SEED_KINDERGARTENS] == [
        ("1", "Kindergarten 1"),
        ("2", "Kindergarten 2"),
    ]


def test_user_serializes_capitalized_keys() -> None:
    """User responses use the capitalized wire keys and still omit the password."""
    record = UserRecord(id=7, username="alice", password="s3cret", role="admin")

    body = User.model_validate(record).model_dump(by_alias=True)

    assert body == {"ID": 7, "Username": "alice", "Role": "admin"}
