"""Orders and the order ledger.

An :class:`Order` is an immutable snapshot of the cart taken at checkout.
The :class:`OrderLedger` keeps every order created during the process
lifetime and appends one human-readable line per order to a text log.
That log is a write-only side channel; it is never read back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, UTC
from decimal import Decimal
from typing import List, Optional, Tuple

from shopping_system.cart import CartLine, ShoppingCart
from shopping_system.errors import OrderLimitReachedError
from shopping_system.metrics import ORDERS_CREATED_TOTAL, ORDER_TOTAL_AMOUNT
from shopping_system.payment_service import PaymentMethod

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Order:
    """In‑memory representation of a placed order."""
    id: int
    lines: Tuple[CartLine, ...]
    total: Decimal
    payment_method: str
    payment_tag: PaymentMethod
    placed_at: str


class OrderLedger:
    """Append-only, bounded sequence of orders."""

    def __init__(self, max_orders: int = 50, log_path: str = "order_log.txt") -> None:
        self.max_orders = max_orders
        self.log_path = log_path
        self._orders: List[Order] = []

    def create_order(self, cart: ShoppingCart, payment_method: PaymentMethod) -> int:
        """Record the cart contents as a new order and return its ID.

        The order ID is one more than the previous highest ID, starting at
        1.  A line is appended to the order log; failing to write it is
        logged as a warning and does not affect the order.

        Raises:
            OrderLimitReachedError: the ledger already holds ``max_orders``.
        """
        if len(self._orders) >= self.max_orders:
            logger.info("Order limit reached", extra={"extra": {"max_orders": self.max_orders}})
            raise OrderLimitReachedError(self.max_orders)

        order_id = self._orders[-1].id + 1 if self._orders else 1
        order = Order(
            id=order_id,
            lines=cart.lines(),
            total=cart.total(),
            payment_method=payment_method.display_name,
            payment_tag=payment_method,
            placed_at=datetime.now(UTC).isoformat(),
        )
        self._orders.append(order)
        self._append_log_line(order)

        ORDERS_CREATED_TOTAL.inc(payment_method=order.payment_method)
        ORDER_TOTAL_AMOUNT.observe(float(order.total), payment_method=order.payment_method)
        logger.info(
            "Order created",
            extra={
                "extra": {
                    "order_id": order.id,
                    "total": f"{order.total:.2f}",
                    "payment_method": order.payment_method,
                    "lines": len(order.lines),
                }
            },
        )
        return order_id

    def _append_log_line(self, order: Order) -> None:
        line = (
            f"[LOG] -> Order ID: {order.id} has been successfully checked out "
            f"and paid using {order.payment_method}.\n"
        )
        try:
            with open(self.log_path, "a", encoding="utf-8") as fh:
                fh.write(line)
        except OSError as e:
            logger.warning("Could not open log file! (%s: %s)", self.log_path, e)

    def list_orders(self) -> Tuple[Order, ...]:
        return tuple(self._orders)

    def get(self, order_id: int) -> Optional[Order]:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def __len__(self) -> int:
        return len(self._orders)
