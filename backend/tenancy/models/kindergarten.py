"""Kindergarten models - records held in a tenant store."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Kindergarten(BaseModel):
    """A single kindergarten belonging to one tenant."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("id", "ID"),
        serialization_alias="ID",
    )
    name: str = Field(
        ..., validation_alias=AliasChoices("name", "Name"), serialization_alias="Name"
    )


class KindergartenCreate(BaseModel):
    """Request body for POST /kindergartens."""

    id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("id", "ID"),
        description="Tenant-local kindergarten identifier",
    )
    name: str = Field(
        ..., validation_alias=AliasChoices("name", "Name"), description="Display name"
    )


SEED_KINDERGARTENS: tuple[Kindergarten, ...] = (
    Kindergarten(id="1", name="Kindergarten 1"),
    Kindergarten(id="2", name="Kindergarten 2"),
)
