# catalog_admin/filters/product_filter.py

"""Title search over the in-memory product list."""

import logging

from catalog_admin.models.product import Product

logger = logging.getLogger("catalog_admin.filters")


class ProductFilter:
    """Filter products by a case-insensitive title substring."""

    @staticmethod
    def filter_by_title(
        products: list[Product],
        query: str,
    ) -> list[Product]:
        """Return the subsequence of products whose title contains *query*.

        An empty query returns a copy of the full list in its original
        order.
        """
        if not query:
            return list(products)

        needle = query.lower()
        kept = [p for p in products if needle in p.title.lower()]

        logger.debug(
            "Search '%s' matched %d of %d products",
            query,
            len(kept),
            len(products),
        )
        return kept
