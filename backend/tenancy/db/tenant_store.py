"""Tenant store handles and the factory that opens them.

Each tenant keeps its kindergartens in its own database, addressed by the
connection descriptor stored on its organization row. Handles are not
pooled: every ``open`` creates a fresh engine and ensures the tenant schema,
and the caller must ``close`` the handle when done.
"""

import logging
import time
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from backend.tenancy.db.models import TenantBase
from backend.tenancy.errors import StoreConnectionError
from backend.tenancy.utils.metrics import PrometheusTenantMetrics

logger = logging.getLogger(__name__)


class TenantStore:
    """Open handle on one tenant's database."""

    def __init__(self, descriptor: str, engine: AsyncEngine) -> None:
        self.descriptor = descriptor
        self._engine = engine
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def session(self) -> AsyncSession:
        """New session bound to the tenant database."""
        if self._closed:
            raise StoreConnectionError("tenant store is closed")
        return AsyncSession(self._engine, expire_on_commit=False)

    async def close(self) -> None:
        """Release the engine. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        await self._engine.dispose()


class TenantStoreFactory:
    """Opens tenant stores from connection descriptors.

    A descriptor containing ``://`` is taken as a SQLAlchemy URL. Anything
    else is a SQLite file path, relative paths being resolved against
    ``base_dir``.
    """

    def __init__(
        self,
        base_dir: str | Path = ".",
        echo: bool = False,
        metrics: PrometheusTenantMetrics | None = None,
    ) -> None:
        self._base_dir = Path(base_dir)
        self._echo = echo
        self._metrics = metrics or PrometheusTenantMetrics()

    def url_for(self, descriptor: str) -> str:
        """Translate a connection descriptor into an async SQLAlchemy URL.

        Raises:
            StoreConnectionError: If the descriptor is empty.
        """
        descriptor = descriptor.strip()
        if not descriptor:
            raise StoreConnectionError()

        if "://" in descriptor:
            if descriptor.startswith("sqlite://"):
                return descriptor.replace("sqlite://", "sqlite+aiosqlite://", 1)
            return descriptor

        path = Path(descriptor)
        if not path.is_absolute():
            path = self._base_dir / path
        return f"sqlite+aiosqlite:///{path}"

    async def open(self, descriptor: str) -> TenantStore:
        """Open a tenant store and ensure its schema exists.

        Raises:
            StoreConnectionError: If the store cannot be reached, its driver
                is not installed, or its schema cannot be created. Nothing
                is retried.
        """
        start = time.perf_counter()
        engine: AsyncEngine | None = None
        try:
            url = self.url_for(descriptor)
            engine = create_async_engine(url, poolclass=NullPool, echo=self._echo)
            async with engine.begin() as conn:
                await conn.run_sync(TenantBase.metadata.create_all)
        except (StoreConnectionError, SQLAlchemyError, OSError, ImportError) as e:
            if engine is not None:
                await engine.dispose()
            self._metrics.record_store_open("error", _elapsed_ms(start))
            logger.warning(
                "Failed to open tenant store %r: %s",
                descriptor,
                type(e).__name__,
            )
            if isinstance(e, StoreConnectionError):
                raise
            raise StoreConnectionError() from e

        self._metrics.record_store_open("ok", _elapsed_ms(start))
        logger.debug("Opened tenant store %r", descriptor)
        return TenantStore(descriptor, engine)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000
