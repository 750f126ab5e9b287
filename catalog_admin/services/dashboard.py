# catalog_admin/services/dashboard.py

"""Dashboard controller: store, gateway and exporter behind one object."""

import asyncio
import logging
from pathlib import Path

from catalog_admin.models.product import Product, ProductDraft
from catalog_admin.services.product_gateway import ProductGateway
from catalog_admin.services.product_store import ProductStore
from catalog_admin.storage.file_manager import FileManager

logger = logging.getLogger("catalog_admin.dashboard")


class DashboardController:
    """Coordinates remote calls with the in-memory product store.

    Blocking gateway calls run in a worker thread so the event loop
    keeps serving the UI while a request is in flight.
    """

    def __init__(
        self,
        gateway: ProductGateway | None = None,
        store: ProductStore | None = None,
        file_manager: FileManager | None = None,
    ) -> None:
        self.gateway = gateway or ProductGateway()
        self.store = store or ProductStore()
        self._file_manager = file_manager
        self._load_seq = 0

    @property
    def file_manager(self) -> FileManager:
        # Created lazily so browsing never touches the exports dir
        if self._file_manager is None:
            self._file_manager = FileManager()
        return self._file_manager

    async def load(self) -> bool:
        """Refetch every product and replace the store.

        Overlapping loads are fenced: only the most recently started
        load may replace the store.  Returns False when this load was
        superseded.  Raises ``GatewayError`` on failure, leaving the
        store untouched.
        """
        self._load_seq += 1
        seq = self._load_seq
        logger.debug("Load #%d started", seq)

        products: list[Product] = await asyncio.to_thread(
            self.gateway.list_products
        )

        if seq != self._load_seq:
            logger.info(
                "Discarding load #%d, superseded by #%d",
                seq,
                self._load_seq,
            )
            return False

        self.store.replace(products)
        return True

    async def create_product(self, draft: ProductDraft) -> Product | None:
        """Create a product remotely.  The caller reloads afterwards."""
        logger.info("Creating product '%s'", draft.title)
        product: Product | None = await asyncio.to_thread(
            self.gateway.create_product, draft
        )
        return product

    async def update_product(
        self, product_id: int, draft: ProductDraft
    ) -> Product | None:
        """Update product *product_id* remotely."""
        logger.info("Updating product %d", product_id)
        product: Product | None = await asyncio.to_thread(
            self.gateway.update_product, product_id, draft
        )
        return product

    def export_page(self) -> Path:
        """Write the visible page window to CSV and return its path."""
        return self.file_manager.export_page_csv(
            self.store.page_window(), self.store.current_page
        )
