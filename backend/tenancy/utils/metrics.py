"""Prometheus metrics for tenant resolution and tenant store access."""

from prometheus_client import Counter, Histogram

tenant_resolutions_total = Counter(
    "tenant_resolutions_total",
    "Tenant resolutions by outcome",
    ["outcome"],
)

tenant_store_open_ms = Histogram(
    "tenant_store_open_ms",
    "Tenant store open latency in milliseconds",
    ["outcome"],
    buckets=[1, 5, 10, 25, 50, 100, 250, 500, 1000, 2500],
)

tenant_store_open_errors_total = Counter(
    "tenant_store_open_errors_total",
    "Total tenant store open failures",
)


class PrometheusTenantMetrics:
    """Prometheus-based tenant metrics implementation."""

    def inc_resolution(self, outcome: str) -> None:
        """Increment resolution counter."""
        tenant_resolutions_total.labels(outcome=outcome).inc()

    def record_store_open(self, outcome: str, latency_ms: float) -> None:
        """Record tenant store open latency."""
        tenant_store_open_ms.labels(outcome=outcome).observe(latency_ms)
        if outcome != "ok":
            tenant_store_open_errors_total.inc()
