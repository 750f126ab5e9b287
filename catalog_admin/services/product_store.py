# catalog_admin/services/product_store.py

"""In-memory product store with the derived search/sort/page view."""

import logging
import math

from catalog_admin.config.settings import Settings
from catalog_admin.filters.product_filter import ProductFilter
from catalog_admin.filters.product_sorter import ProductSorter
from catalog_admin.models.product import Product
from catalog_admin.models.view_state import (
    PageInfo,
    SortDirection,
    ViewState,
)

logger = logging.getLogger("catalog_admin.store")


class ProductStore:
    """Holds the last full fetch and the view derived from it.

    ``products`` is only ever replaced wholesale.  ``view`` is always
    recomputed from ``products`` plus the current :class:`ViewState`;
    nothing edits it independently.
    """

    def __init__(self, page_size: int = Settings.DEFAULT_PAGE_SIZE) -> None:
        self.products: list[Product] = []
        self.view: list[Product] = []
        self.state = ViewState(page_size=page_size)

    # ── Properties ───────────────────────────────────────

    @property
    def current_page(self) -> int:
        return self.state.page

    @property
    def page_size(self) -> int:
        return self.state.page_size

    @property
    def total_pages(self) -> int:
        """Number of pages in the current view (0 when it is empty)."""
        return math.ceil(len(self.view) / self.state.page_size)

    # ── Mutations ────────────────────────────────────────

    def replace(self, products: list[Product]) -> None:
        """Swap in a freshly fetched product list.

        The view becomes an unfiltered, unsorted copy, so the search
        query and sort selection are cleared with it.
        """
        self.products = list(products)
        self.view = list(self.products)
        self.state.query = ""
        self.state.sort_field = None
        self.state.sort_direction = SortDirection.ASC
        self._clamp_page()
        logger.info(
            "Store replaced with %d products (page %d/%d)",
            len(self.products),
            self.state.page,
            max(1, self.total_pages),
        )

    def apply_search(self, query: str) -> None:
        """Filter by title substring and return to the first page.

        The result keeps store order, so any active sort is cleared.
        """
        self.state.query = query
        self.view = ProductFilter.filter_by_title(self.products, query)
        self.state.sort_field = None
        self.state.sort_direction = SortDirection.ASC
        self.state.page = 1

    def apply_sort(
        self,
        sort_field: str,
        direction: SortDirection | None = None,
    ) -> None:
        """Sort the view by *sort_field*, keeping the current page.

        Re-selecting the active field flips its direction; a different
        field starts ascending.  An explicit *direction* overrides both.
        """
        ProductSorter.field_kind(sort_field)

        if direction is not None:
            self.state.sort_direction = direction
        elif self.state.sort_field == sort_field:
            self.state.sort_direction = self.state.sort_direction.flipped()
        else:
            self.state.sort_direction = SortDirection.ASC
        self.state.sort_field = sort_field

        self.view[:] = ProductSorter.sort(
            self.view, sort_field, self.state.sort_direction
        )

    def set_page_size(self, page_size: int) -> None:
        """Change the page size and return to the first page."""
        if page_size < 1:
            msg = f"Page size must be at least 1, got {page_size}"
            raise ValueError(msg)
        self.state.page_size = page_size
        self.state.page = 1

    def go_to_page(self, page: int) -> bool:
        """Move to *page*; return False when it is out of range or current."""
        last = max(1, self.total_pages)
        if page < 1 or page > last or page == self.state.page:
            return False
        self.state.page = page
        return True

    def _clamp_page(self) -> None:
        last = max(1, self.total_pages)
        self.state.page = min(max(1, self.state.page), last)

    # ── Queries ──────────────────────────────────────────

    def page_window(self) -> list[Product]:
        """Return the slice of the view shown on the current page."""
        start = (self.state.page - 1) * self.state.page_size
        return self.view[start:start + self.state.page_size]

    def pagination(self) -> PageInfo:
        """Describe the pagination bar for the current view."""
        total = self.total_pages
        current = self.state.page
        radius = Settings.PAGINATION_RADIUS
        first = max(1, current - radius)
        last = min(total, current + radius)
        return PageInfo(
            current=current,
            total_pages=total,
            pages=list(range(first, last + 1)),
        )

    def find(self, product_id: int) -> Product | None:
        """Look up a product in the full store by id."""
        for product in self.products:
            if product.id == product_id:
                return product
        return None
