# catalog_admin/filters/product_sorter.py

"""Stable, type-aware sorting of product lists.

Every sortable field carries a static kind tag.  Numeric fields compare
as floats, text fields compare case-insensitively.  Missing values
(``nan`` prices, empty text, no category) always land after the present
ones, whichever direction is requested, and keep their relative order.
"""

import logging
import math
from collections.abc import Callable
from enum import Enum, auto

from catalog_admin.models.product import Product
from catalog_admin.models.view_state import SortDirection

logger = logging.getLogger("catalog_admin.filters")


class FieldKind(Enum):
    """How values of a sortable field are compared."""

    NUMERIC = auto()
    TEXT = auto()


SortKey = float | str


def _category_key(p: Product) -> str:
    return p.category.name if p.category is not None else ""


SORT_FIELDS: dict[str, tuple[FieldKind, Callable[[Product], SortKey]]] = {
    "id": (FieldKind.NUMERIC, lambda p: float(p.id)),
    "price": (FieldKind.NUMERIC, lambda p: p.price),
    "title": (FieldKind.TEXT, lambda p: p.title.lower()),
    "category": (FieldKind.TEXT, lambda p: _category_key(p).lower()),
    "description": (FieldKind.TEXT, lambda p: p.description.lower()),
}


def _is_missing(kind: FieldKind, value: SortKey) -> bool:
    if kind is FieldKind.NUMERIC:
        return isinstance(value, float) and math.isnan(value)
    return value == ""


class ProductSorter:
    """Sort products by one of the registered fields."""

    @staticmethod
    def field_kind(sort_field: str) -> FieldKind:
        """Return the kind tag for *sort_field*.

        Raises ``ValueError`` for fields that are not sortable.
        """
        try:
            return SORT_FIELDS[sort_field][0]
        except KeyError:
            valid = ", ".join(sorted(SORT_FIELDS))
            msg = f"Unknown sort field '{sort_field}' (valid: {valid})"
            raise ValueError(msg) from None

    @staticmethod
    def sort(
        products: list[Product],
        sort_field: str,
        direction: SortDirection,
    ) -> list[Product]:
        """Return a new, stably sorted list."""
        kind = ProductSorter.field_kind(sort_field)
        key = SORT_FIELDS[sort_field][1]

        present: list[Product] = []
        missing: list[Product] = []
        for product in products:
            if _is_missing(kind, key(product)):
                missing.append(product)
            else:
                present.append(product)

        # list.sort stays stable with reverse=True
        present.sort(
            key=key,
            reverse=direction is SortDirection.DESC,
        )

        logger.debug(
            "Sorted %d products by %s %s (%d missing values last)",
            len(products),
            sort_field,
            direction.value,
            len(missing),
        )
        return present + missing
