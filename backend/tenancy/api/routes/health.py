"""Health check endpoints.

- /health: liveness, always ok
- /healthz: checks the central registry database
"""

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from backend.tenancy.db.engine import get_async_engine

router = APIRouter()


async def check_db() -> tuple[bool, str]:
    """Check central database connectivity.

    Returns:
        (is_ok, status_message)
    """
    try:
        async with AsyncSession(get_async_engine()) as session:
            await session.execute(text("SELECT 1"))
        return (True, "ok")
    except Exception as e:
        return (False, f"error: {type(e).__name__}")


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz() -> dict[str, Any] | JSONResponse:
    """Health check endpoint.

    Returns:
        200 with component status if the central database answers
        503 otherwise
    """
    db_ok, db_status = await check_db()

    response_body = {
        "status": "ok" if db_ok else "degraded",
        "components": {"db": db_status},
    }

    if not db_ok:
        return JSONResponse(content=response_body, status_code=503)

    return response_body
