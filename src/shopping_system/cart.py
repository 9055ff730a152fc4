"""In‑memory shopping cart."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import List, Tuple

from shopping_system.catalog import Product
from shopping_system.errors import CartFullError
from shopping_system.metrics import CART_LINES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLine:
    """A line in the shopping cart: one product and how many of it."""
    product: Product
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


class ShoppingCart:
    """
    Ordered collection of cart lines with at most one line per product id.

    Adding a product that is already present increases the quantity of its
    existing line.  The number of distinct lines is capped at ``max_lines``.
    """

    def __init__(self, max_lines: int = 100) -> None:
        self.max_lines = max_lines
        self._lines: List[CartLine] = []

    def add(self, product: Product, quantity: int) -> CartLine:
        """Add ``quantity`` units of ``product`` and return the resulting line.

        Raises:
            ValueError: ``quantity`` is not positive.
            CartFullError: a new line would exceed ``max_lines``.
        """
        if quantity <= 0:
            raise ValueError("Quantity must be positive.")

        wanted = product.id.casefold()
        for idx, line in enumerate(self._lines):
            if line.product.id.casefold() == wanted:
                merged = replace(line, quantity=line.quantity + quantity)
                self._lines[idx] = merged
                logger.debug("Increased %s to %d", product.id, merged.quantity)
                return merged

        if len(self._lines) >= self.max_lines:
            logger.warning("Cart full; rejected product %s", product.id)
            raise CartFullError(self.max_lines)

        line = CartLine(product=product, quantity=quantity)
        self._lines.append(line)
        CART_LINES.set(len(self._lines))
        logger.debug("Added %d x %s to cart", quantity, product.id)
        return line

    def lines(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines)

    def total(self) -> Decimal:
        return sum((line.line_total for line in self._lines), Decimal("0"))

    def clear(self) -> None:
        self._lines.clear()
        CART_LINES.set(0)

    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)
