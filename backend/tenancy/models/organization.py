"""Organization models - tenants registered in the central store.

Bodies are accepted with either lowercase or capitalized keys; responses use
the capitalized keys (``ID``, ``Name``, ``Config``, ``Kindergartens``) that
existing clients read.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from backend.tenancy.models.kindergarten import Kindergarten


class OrganizationCreate(BaseModel):
    """Request body for POST /organizations."""

    id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("id", "ID"),
        description="Globally unique tenant identifier",
    )
    name: str = Field(
        "", validation_alias=AliasChoices("name", "Name"), description="Display name"
    )
    config: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("config", "Config"),
        description="Connection descriptor of the tenant store",
    )


class OrganizationUpdate(BaseModel):
    """Request body for PUT /organizations/{id}.

    Only the fields present in the body are applied. The identifier is
    immutable, so an ``id`` in the body is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(None, validation_alias=AliasChoices("name", "Name"))
    config: str | None = Field(
        None, min_length=1, validation_alias=AliasChoices("config", "Config")
    )


class Organization(BaseModel):
    """Organization as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., validation_alias=AliasChoices("id", "ID"), serialization_alias="ID")
    name: str = Field(
        ..., validation_alias=AliasChoices("name", "Name"), serialization_alias="Name"
    )
    config: str = Field(
        ..., validation_alias=AliasChoices("config", "Config"), serialization_alias="Config"
    )


class OrganizationWithKindergartens(Organization):
    """Organization plus the kindergartens found in its own tenant store."""

    kindergartens: list[Kindergarten] = Field(
        default_factory=list,
        validation_alias=AliasChoices("kindergartens", "Kindergartens"),
        serialization_alias="Kindergartens",
    )
