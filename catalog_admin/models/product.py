# catalog_admin/models/product.py

"""Product data models shared by the gateway, store and UI."""

import math
from dataclasses import dataclass, field
from typing import Any

from catalog_admin.config.settings import Settings


@dataclass
class Category:
    """Category sub-record attached to a product."""

    name: str
    id: int | None = None


@dataclass
class Product:
    """A single catalog record as returned by the remote API."""

    id: int
    title: str = ""
    price: float = math.nan
    description: str = ""
    category: Category | None = None
    images: list[str] = field(default_factory=lambda: list[str]())

    @property
    def category_name(self) -> str:
        """Category label, or the placeholder when none is attached."""
        if self.category is None or not self.category.name:
            return Settings.MISSING_LABEL
        return self.category.name

    @property
    def image_url(self) -> str:
        """First image URL, or an empty string."""
        return self.images[0] if self.images else ""

    @property
    def display_price(self) -> str:
        """Price formatted as ``$12.50``."""
        if math.isnan(self.price):
            return "—"
        return f"${self.price:.2f}"


@dataclass
class ProductDraft:
    """Outgoing payload for create and update calls."""

    title: str
    price: float
    description: str = ""
    image_url: str = ""
    category_id: int = Settings.DEFAULT_CATEGORY_ID

    def to_payload(self) -> dict[str, Any]:
        """Serialise to the JSON body the products API expects."""
        return {
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "categoryId": self.category_id,
            "images": [self.image_url],
        }
