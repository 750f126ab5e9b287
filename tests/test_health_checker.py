# tests/test_health_checker.py

"""Tests for the API health checker service."""

import unittest
from unittest.mock import MagicMock, patch

from catalog_admin.services.health_checker import (
    HealthChecker,
    HealthResult,
    probe_endpoint,
)


def _make_gateway(status: int = 200) -> MagicMock:
    """Build a gateway mock whose session answers with *status*."""
    gateway = MagicMock()
    gateway.products_url = "https://api.example.test/v1/products"
    gateway.settings.DEFAULT_HEADERS = {}
    resp = MagicMock()
    resp.status_code = status
    gateway.session.get.return_value = resp
    return gateway


class TestProbeEndpoint(unittest.TestCase):
    """Tests for the single-endpoint probe."""

    def test_ok_status(self) -> None:
        """A fast 200 response is 'ok'."""
        result = probe_endpoint(_make_gateway(200))
        self.assertEqual(result.status, "ok")
        self.assertEqual(result.message, "")
        self.assertGreaterEqual(result.latency_ms, 0)

    def test_down_on_http_error(self) -> None:
        """A non-200 response is 'down' with the status in the message."""
        result = probe_endpoint(_make_gateway(503))
        self.assertEqual(result.status, "down")
        self.assertIn("503", result.message)

    def test_down_on_exception(self) -> None:
        """Transport errors are reported, not raised."""
        gateway = _make_gateway()
        gateway.session.get.side_effect = ConnectionError("dns failure")
        result = probe_endpoint(gateway)
        self.assertEqual(result.status, "down")
        self.assertIn("dns failure", result.message)

    @patch("catalog_admin.services.health_checker.time")
    def test_slow_status(self, mock_time: MagicMock) -> None:
        """Responses slower than the threshold are 'slow'."""
        mock_time.monotonic.side_effect = [0.0, 6.0]
        result = probe_endpoint(_make_gateway(200))
        self.assertEqual(result.status, "slow")
        self.assertAlmostEqual(result.latency_ms, 6000.0)

    def test_probe_uses_health_timeout(self) -> None:
        """The probe, unlike normal calls, is bounded."""
        gateway = _make_gateway()
        probe_endpoint(gateway)
        self.assertEqual(gateway.session.get.call_args.kwargs["timeout"], 10.0)


class TestHealthChecker(unittest.IsolatedAsyncioTestCase):
    """Tests for the async wrapper."""

    async def test_check_returns_result(self) -> None:
        """check() runs the probe and returns its HealthResult."""
        checker = HealthChecker(gateway=_make_gateway(200))
        result = await checker.check()
        self.assertIsInstance(result, HealthResult)
        self.assertEqual(result.status, "ok")
        self.assertEqual(
            result.endpoint, "https://api.example.test/v1/products"
        )


if __name__ == "__main__":
    unittest.main()
