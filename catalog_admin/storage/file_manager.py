# catalog_admin/storage/file_manager.py

"""Exports the visible page of products to CSV."""

import csv
import io
import logging
import math
from pathlib import Path
from typing import TextIO

from catalog_admin.config.settings import Settings
from catalog_admin.models.product import Product

logger = logging.getLogger("catalog_admin.storage")

CSV_HEADER = ["ID", "Title", "Price", "Category", "Description"]


def _csv_row(p: Product) -> list[object]:
    price: object = "" if math.isnan(p.price) else p.price
    return [p.id, p.title, price, p.category_name, p.description]


class FileManager:
    """Writes CSV exports into the exports directory."""

    def __init__(self) -> None:
        self.exports_dir: Path = Settings.EXPORTS_DIR
        self.exports_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("FileManager initialised, exports_dir=%s", self.exports_dir)

    @staticmethod
    def _write_rows(handle: TextIO, products: list[Product]) -> None:
        # Text cells are always quoted; embedded quotes are doubled
        writer = csv.writer(handle, quoting=csv.QUOTE_NONNUMERIC)
        writer.writerow(CSV_HEADER)
        for p in products:
            writer.writerow(_csv_row(p))

    def format_csv(self, products: list[Product]) -> str:
        """Render products as a CSV document string."""
        buffer = io.StringIO()
        self._write_rows(buffer, products)
        return buffer.getvalue()

    def export_page_csv(self, products: list[Product], page: int) -> Path:
        """Export one page window to ``products_page_<page>.csv``."""
        filepath = self.exports_dir / f"products_page_{page}.csv"

        with open(filepath, "w", newline="", encoding="utf-8") as f:
            self._write_rows(f, products)

        logger.info(
            "Exported %d products from page %d to %s",
            len(products),
            page,
            filepath,
        )
        return filepath
