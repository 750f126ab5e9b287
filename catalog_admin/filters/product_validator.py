# catalog_admin/filters/product_validator.py

"""Boundary validation: turn raw API records into typed products."""

import logging
import math
from typing import Any

from catalog_admin.models.product import Category, Product

logger = logging.getLogger("catalog_admin.filters")


def _coerce_price(value: Any) -> float:
    """Parse a price that may arrive as a number or a numeric string."""
    if isinstance(value, bool) or value is None:
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _coerce_category(value: Any) -> Category | None:
    if not isinstance(value, dict):
        return None
    name = _coerce_text(value.get("name")).strip()
    if not name:
        return None
    raw_id = value.get("id")
    category_id = raw_id if isinstance(raw_id, int) else None
    return Category(name=name, id=category_id)


def _coerce_images(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(url) for url in value if url]


class ProductValidator:
    """Validate raw product records and drop unusable ones."""

    @staticmethod
    def parse(record: Any) -> Product | None:
        """Coerce a single record; return None when it has no usable id."""
        if not isinstance(record, dict):
            return None
        raw_id = record.get("id")
        if isinstance(raw_id, bool):
            return None
        if isinstance(raw_id, float) and not raw_id.is_integer():
            return None
        try:
            product_id = int(raw_id)
        except (TypeError, ValueError, OverflowError):
            return None

        return Product(
            id=product_id,
            title=_coerce_text(record.get("title")),
            price=_coerce_price(record.get("price")),
            description=_coerce_text(record.get("description")),
            category=_coerce_category(record.get("category")),
            images=_coerce_images(record.get("images")),
        )

    @staticmethod
    def parse_many(
        records: list[Any],
    ) -> tuple[list[Product], int]:
        """Coerce a list of raw records, preserving their order.

        Returns the valid products and the count of dropped records.
        """
        valid: list[Product] = []
        dropped = 0

        for record in records:
            product = ProductValidator.parse(record)
            if product is None:
                logger.debug(
                    "Dropped product record without a usable id: %r",
                    record,
                )
                dropped += 1
                continue
            valid.append(product)

        if dropped:
            logger.info(
                "Validation dropped %d invalid product records",
                dropped,
            )

        return valid, dropped
