"""Product catalogue.

The catalogue is seeded once at start-up and is read-only afterwards.
Lookups are a linear scan: the catalogue is small and static.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

from shopping_system.errors import CatalogFullError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Product:
    """In‑memory representation of a purchasable item."""
    id: str
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        # Accept ints/strings for convenience but always store a Decimal
        object.__setattr__(self, "price", Decimal(str(self.price)))
        if self.price < 0:
            raise ValueError(f"Price for product {self.id!r} must not be negative")


DEFAULT_PRODUCTS: Tuple[Tuple[str, str, str], ...] = (
    ("A", "Lipstick", "159"),
    ("B", "Blush", "299"),
    ("C", "Mascara", "149"),
    ("D", "Eye Shadow Palette", "399"),
    ("E", "Brush for Blush", "79"),
    ("F", "Lip Gloss", "88"),
    ("G", "Highlighter", "115"),
    ("H", "Eyebrow Pencil", "129"),
    ("I", "Eyeliner", "69"),
    ("J", "Foundation Liquid", "599"),
)


class ProductCatalog:
    """Bounded, ordered collection of products."""

    def __init__(self, max_products: int = 150) -> None:
        self.max_products = max_products
        self._products: List[Product] = []
        self._seeded = False

    def seed(self) -> None:
        """Populate the default products.  Subsequent calls do nothing."""
        if self._seeded:
            return
        for pid, name, price in DEFAULT_PRODUCTS:
            self.add_product(Product(pid, name, Decimal(price)))
        self._seeded = True
        logger.info("Catalog seeded", extra={"extra": {"products": len(self._products)}})

    def add_product(self, product: Product) -> None:
        """Append a product.

        Raises:
            CatalogFullError: the catalogue already holds ``max_products``.
            ValueError: a product with the same id (ignoring case) exists.
        """
        if len(self._products) >= self.max_products:
            logger.warning("Catalog full; rejected product %s", product.id)
            raise CatalogFullError(self.max_products)
        if self.find_by_id(product.id) is not None:
            raise ValueError(f"Product with ID '{product.id}' already exists")
        self._products.append(product)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Return the product whose id matches ``product_id`` ignoring case."""
        wanted = product_id.casefold()
        for product in self._products:
            if product.id.casefold() == wanted:
                return product
        return None

    def list_products(self) -> Tuple[Product, ...]:
        return tuple(self._products)

    def __len__(self) -> int:
        return len(self._products)
