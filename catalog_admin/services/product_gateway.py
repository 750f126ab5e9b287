# catalog_admin/services/product_gateway.py

"""Blocking client for the remote products REST API."""

import logging
from typing import Any

from curl_cffi import requests as curl_requests

from catalog_admin.config.settings import Settings
from catalog_admin.filters.product_validator import ProductValidator
from catalog_admin.models.product import Product, ProductDraft

logger = logging.getLogger("catalog_admin.gateway")


class GatewayError(Exception):
    """A remote call failed (transport error, bad status or bad body)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProductGateway:
    """List, create and update products on the remote API.

    Every call is a single attempt: no retries, and no timeout unless
    ``Settings.REQUEST_TIMEOUT`` is set.  Failures surface as
    :class:`GatewayError`.
    """

    def __init__(
        self,
        base_url: str | None = None,
        session: curl_requests.Session | None = None,
    ) -> None:
        self.settings = Settings()
        self.base_url = (base_url or self.settings.API_BASE_URL).rstrip("/")
        self.session = session or curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._request_timeout = self.settings.REQUEST_TIMEOUT

    @property
    def products_url(self) -> str:
        return f"{self.base_url}{self.settings.PRODUCTS_PATH}"

    def _request(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body."""
        try:
            resp = self.session.request(
                method,
                url,
                headers=self.settings.DEFAULT_HEADERS,
                json=payload,
                timeout=self._request_timeout,
            )
        except Exception as exc:
            logger.warning(
                "%s %s failed: %s", method, url, exc, exc_info=True
            )
            raise GatewayError(f"{method} {url} failed: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            logger.warning(
                "%s %s returned HTTP %d", method, url, resp.status_code
            )
            raise GatewayError(
                f"{method} {url} returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as exc:
            logger.warning(
                "%s %s returned malformed JSON", method, url, exc_info=True
            )
            raise GatewayError(
                f"{method} {url} returned malformed JSON",
                status_code=resp.status_code,
            ) from exc

    def list_products(self) -> list[Product]:
        """Fetch every product from the API."""
        body = self._request("GET", self.products_url)
        if not isinstance(body, list):
            raise GatewayError(
                f"GET {self.products_url} did not return a list"
            )
        products, dropped = ProductValidator.parse_many(body)
        logger.info(
            "Fetched %d products (%d dropped)", len(products), dropped
        )
        return products

    def _save(
        self, method: str, url: str, draft: ProductDraft
    ) -> Product | None:
        body = self._request(method, url, draft.to_payload())
        product = ProductValidator.parse(body)
        logger.info(
            "%s %s succeeded (id=%s)",
            method,
            url,
            product.id if product else "?",
        )
        return product

    def create_product(self, draft: ProductDraft) -> Product | None:
        """Create a product; returns the stored record when parseable."""
        return self._save("POST", self.products_url, draft)

    def update_product(
        self, product_id: int, draft: ProductDraft
    ) -> Product | None:
        """Replace the fields of product *product_id*."""
        return self._save(
            "PUT", f"{self.products_url}/{product_id}", draft
        )
