# tests/test_product_gateway.py

"""Tests for ProductGateway against a mocked curl_cffi session."""

import json
import unittest
from typing import Any
from unittest.mock import MagicMock

from catalog_admin.models.product import ProductDraft
from catalog_admin.services.product_gateway import (
    GatewayError,
    ProductGateway,
)

BASE = "https://api.example.test/v1"


def _response(status: int, body: Any = None) -> MagicMock:
    """Build a fake response returning *body* from .json()."""
    resp = MagicMock()
    resp.status_code = status
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


class TestProductGateway(unittest.TestCase):
    """List, create and update calls."""

    def setUp(self) -> None:
        """Build a gateway around a mock session."""
        self.session = MagicMock()
        self.gateway = ProductGateway(base_url=BASE + "/", session=self.session)

    def test_products_url_strips_trailing_slash(self) -> None:
        """The base URL is normalised."""
        self.assertEqual(self.gateway.products_url, f"{BASE}/products")

    def test_list_products_parses_records(self) -> None:
        """GET /products returns validated Product objects."""
        self.session.request.return_value = _response(
            200,
            [
                {"id": 1, "title": "A", "price": "5", "images": ["u"]},
                {"title": "no id"},
                {"id": 2, "title": "B", "price": 7},
            ],
        )
        products = self.gateway.list_products()

        self.assertEqual([p.id for p in products], [1, 2])
        self.assertEqual(products[0].price, 5.0)
        method, url = self.session.request.call_args[0]
        self.assertEqual(method, "GET")
        self.assertEqual(url, f"{BASE}/products")

    def test_list_products_drops_overflowing_ids(self) -> None:
        """Ids decoding to infinity are dropped, the rest still load."""
        body = json.loads(
            '[{"id": Infinity, "title": "a"}, {"id": 1e400, "title": "b"},'
            ' {"id": 1.5, "title": "c"}, {"id": 3, "title": "d"}]'
        )
        self.session.request.return_value = _response(200, body)
        products = self.gateway.list_products()
        self.assertEqual([p.id for p in products], [3])

    def test_list_products_single_attempt(self) -> None:
        """Failures are not retried."""
        self.session.request.return_value = _response(500)
        with self.assertRaises(GatewayError) as ctx:
            self.gateway.list_products()
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(self.session.request.call_count, 1)

    def test_list_products_non_list_body(self) -> None:
        """An object instead of an array is a gateway error."""
        self.session.request.return_value = _response(200, {"error": "x"})
        with self.assertRaises(GatewayError):
            self.gateway.list_products()

    def test_malformed_json(self) -> None:
        """Undecodable bodies raise GatewayError."""
        self.session.request.return_value = _response(
            200, json.JSONDecodeError("bad", "doc", 0)
        )
        with self.assertRaises(GatewayError):
            self.gateway.list_products()

    def test_transport_error_wrapped(self) -> None:
        """Network exceptions surface as GatewayError without status."""
        self.session.request.side_effect = ConnectionError("refused")
        with self.assertRaises(GatewayError) as ctx:
            self.gateway.list_products()
        self.assertIsNone(ctx.exception.status_code)
        self.assertIn("refused", str(ctx.exception))

    def test_create_posts_payload(self) -> None:
        """POST /products sends the draft as JSON."""
        self.session.request.return_value = _response(
            201, {"id": 99, "title": "New", "price": 12.5}
        )
        draft = ProductDraft(
            title="New",
            price=12.5,
            description="desc",
            image_url="https://img.test/1.png",
        )
        product = self.gateway.create_product(draft)

        assert product is not None
        self.assertEqual(product.id, 99)
        args, kwargs = self.session.request.call_args
        self.assertEqual(args, ("POST", f"{BASE}/products"))
        self.assertEqual(
            kwargs["json"],
            {
                "title": "New",
                "price": 12.5,
                "description": "desc",
                "categoryId": 1,
                "images": ["https://img.test/1.png"],
            },
        )

    def test_create_rejected(self) -> None:
        """A 400 from create raises with the status code."""
        self.session.request.return_value = _response(400, {"message": "bad"})
        with self.assertRaises(GatewayError) as ctx:
            self.gateway.create_product(ProductDraft(title="x", price=1.0))
        self.assertEqual(ctx.exception.status_code, 400)

    def test_update_puts_to_product_url(self) -> None:
        """PUT goes to /products/<id>."""
        self.session.request.return_value = _response(200, {"id": 7})
        self.gateway.update_product(7, ProductDraft(title="x", price=1.0))
        args, _ = self.session.request.call_args
        self.assertEqual(args, ("PUT", f"{BASE}/products/7"))

    def test_no_timeout_by_default(self) -> None:
        """Requests wait indefinitely unless configured otherwise."""
        self.session.request.return_value = _response(200, [])
        self.gateway.list_products()
        self.assertIsNone(self.session.request.call_args.kwargs["timeout"])


if __name__ == "__main__":
    unittest.main()
