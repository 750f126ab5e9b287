# catalog_admin/services/health_checker.py

"""Connectivity check for the remote products API."""

import asyncio
import logging
import time
from dataclasses import dataclass

from catalog_admin.config.settings import Settings
from catalog_admin.services.product_gateway import ProductGateway

logger = logging.getLogger("catalog_admin.health")


@dataclass
class HealthResult:
    """Result of probing one endpoint."""

    endpoint: str
    status: str  # "ok", "slow", "down"
    latency_ms: float
    message: str


def probe_endpoint(gateway: ProductGateway) -> HealthResult:
    """GET the products endpoint once and time the response."""
    url = gateway.products_url
    start = time.monotonic()
    try:
        resp = gateway.session.get(
            url,
            headers=gateway.settings.DEFAULT_HEADERS,
            timeout=Settings.HEALTH_TIMEOUT,
        )
        elapsed_ms = (time.monotonic() - start) * 1000

        if resp.status_code != 200:
            return HealthResult(
                endpoint=url,
                status="down",
                latency_ms=elapsed_ms,
                message=f"HTTP {resp.status_code}",
            )

        if elapsed_ms > Settings.SLOW_THRESHOLD_MS:
            return HealthResult(
                endpoint=url,
                status="slow",
                latency_ms=elapsed_ms,
                message="High latency",
            )

        return HealthResult(
            endpoint=url,
            status="ok",
            latency_ms=elapsed_ms,
            message="",
        )

    except Exception as exc:
        elapsed_ms = (time.monotonic() - start) * 1000
        return HealthResult(
            endpoint=url,
            status="down",
            latency_ms=elapsed_ms,
            message=str(exc)[:80],
        )


class HealthChecker:
    """Probes the configured API from a worker thread."""

    def __init__(self, gateway: ProductGateway | None = None) -> None:
        self.gateway = gateway or ProductGateway()

    async def check(self) -> HealthResult:
        result = await asyncio.to_thread(probe_endpoint, self.gateway)
        logger.info(
            "Health check %s: %s (%.0fms) %s",
            result.endpoint,
            result.status,
            result.latency_ms,
            result.message,
        )
        return result
