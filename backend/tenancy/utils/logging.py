"""Logging setup and structured logging for tenant resolution."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a stream handler on the root logger."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


class StructuredTenantLogger:
    """Structured logger for tenant resolution."""

    def log_resolution(
        self,
        tenant_id: str | None,
        outcome: str,
        latency_ms: float,
        error_reason: str | None = None,
    ) -> None:
        """Log one resolver run with structured data."""
        log_data: dict[str, Any] = {
            "tenant_id": tenant_id,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
        }

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Tenant resolution: {tenant_id or '<none>'} - {outcome}"

        if outcome == "resolved":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
