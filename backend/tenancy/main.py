"""FastAPI application - multi-tenant kindergarten registry."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from backend.tenancy.api.routes.health import router as health_router
from backend.tenancy.api.routes.kindergartens import router as kindergartens_router
from backend.tenancy.api.routes.metrics import router as metrics_router
from backend.tenancy.api.routes.organizations import router as organizations_router
from backend.tenancy.api.routes.users import router as users_router
from backend.tenancy.config import get_settings
from backend.tenancy.db.engine import (
    dispose_async_engine,
    ensure_central_schema,
    get_async_engine,
)
from backend.tenancy.errors import InputDecodeError, RegistryError
from backend.tenancy.utils.logging import configure_logging

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and the central schema on startup, release the engine on shutdown."""
    configure_logging(get_settings().log_level)
    await ensure_central_schema(get_async_engine())
    logger.info("Central registry ready")
    yield
    await dispose_async_engine()


app = FastAPI(title="Kindergarten Registry API", version=VERSION, lifespan=lifespan)


@app.exception_handler(RegistryError)
async def registry_error_handler(request: Request, exc: RegistryError) -> JSONResponse:
    """Render domain errors as ``{"detail": ...}`` with their status."""
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.detail,
            exc_info=exc.__cause__,
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed or mistyped request input is a plain 400."""
    error = InputDecodeError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(organizations_router)
app.include_router(users_router)
app.include_router(kindergartens_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Kindergarten Registry API", "version": VERSION}


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
