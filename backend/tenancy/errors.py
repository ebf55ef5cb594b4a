"""Error taxonomy for the registry and tenant stores.

Every error carries the HTTP status it maps to and a short client-facing
detail message. Handlers in ``main.py`` render them as ``{"detail": ...}``.
"""

from fastapi import status


class RegistryError(Exception):
    """Base error for all request-terminating failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "internal error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InputDecodeError(RegistryError):
    """Request body could not be decoded."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "invalid input"


class NotFoundError(RegistryError):
    """Entity with the given identifier does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "not found"


class MissingTenantHeader(RegistryError):
    """Tenant-scoped request arrived without a tenant identifier."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "tenant ID is required"


class UnknownTenant(RegistryError):
    """Tenant identifier does not match any organization."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "invalid tenant ID"


class StoreConnectionError(RegistryError):
    """Tenant store could not be opened."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "failed to connect to tenant database"


class TenantUnavailable(StoreConnectionError):
    """Resolved tenant's store could not be opened for this request."""

    pass


class StoreOperationError(RegistryError):
    """Create/read/update/delete against a store failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "store operation failed"
