"""SQLAlchemy ORM models.

Two independent metadata collections: ``CentralBase`` for the shared
registry database and ``TenantBase`` for each tenant's isolated database.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class CentralBase(DeclarativeBase):
    """Base class for tables in the central registry database."""

    pass


class TenantBase(DeclarativeBase):
    """Base class for tables in a tenant database."""

    pass


class Organization(CentralBase):
    """Organization table - one row per tenant."""

    __tablename__ = "organizations"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # Connection descriptor of the tenant store
    config: Mapped[str] = mapped_column(Text, nullable=False, default="")


class User(CentralBase):
    """User table - platform accounts, not tenant-scoped."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True, index=True)
    password: Mapped[str] = mapped_column(Text, nullable=False, default="")
    role: Mapped[str] = mapped_column(Text, nullable=False, default="")


class Kindergarten(TenantBase):
    """Kindergarten table - lives only in tenant databases."""

    __tablename__ = "kindergartens"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, default="")
