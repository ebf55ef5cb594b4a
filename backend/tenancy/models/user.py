"""Platform user models."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Request body for POST /users."""

    username: str = Field(..., min_length=1, validation_alias=AliasChoices("username", "Username"))
    password: str = Field("", validation_alias=AliasChoices("password", "Password"))
    role: str = Field("", validation_alias=AliasChoices("role", "Role"))


class UserUpdate(BaseModel):
    """Request body for PUT /users/{id}."""

    model_config = ConfigDict(extra="ignore")

    username: str | None = Field(
        None, min_length=1, validation_alias=AliasChoices("username", "Username")
    )
    password: str | None = Field(None, validation_alias=AliasChoices("password", "Password"))
    role: str | None = Field(None, validation_alias=AliasChoices("role", "Role"))


class User(BaseModel):
    """User as returned by the API. The password is never echoed."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., validation_alias=AliasChoices("id", "ID"), serialization_alias="ID")
    username: str = Field(
        ..., validation_alias=AliasChoices("username", "Username"), serialization_alias="Username"
    )
    role: str = Field(
        ..., validation_alias=AliasChoices("role", "Role"), serialization_alias="Role"
    )
