"""Text rendering for the console screens.

All monetary values are shown with exactly two decimal places.
"""

from __future__ import annotations

from typing import Iterable, List

from shopping_system.cart import CartLine, ShoppingCart
from shopping_system.catalog import Product
from shopping_system.orders import Order


def format_products(products: Iterable[Product]) -> str:
    lines = ["", "Available Products", f"{'Product ID':<15}{'Name':<20}{'Price ($)':>10}"]
    for p in products:
        lines.append(f"{p.id:<15}{p.name:<20}{p.price:>10.2f}")
    lines.append("")
    return "\n".join(lines)


def _cart_rows(cart_lines: Iterable[CartLine]) -> List[str]:
    rows = [f"{'Product ID':<15}{'Name':<20}{'Price ($)':>10}{'Quantity':>10}{'Total ($)':>12}"]
    for line in cart_lines:
        p = line.product
        rows.append(
            f"{p.id:<15}{p.name:<20}{p.price:>10.2f}{line.quantity:>10}{line.line_total:>12.2f}"
        )
    return rows


def format_cart(cart: ShoppingCart) -> str:
    """Render the cart as a table followed by the total amount."""
    if cart.is_empty():
        return "Your shopping cart is currently empty."
    lines = ["", "Shopping Cart"]
    lines.extend(_cart_rows(cart.lines()))
    lines.append("-" * 67)
    lines.append(f"{'Total Amount: $':>55}{cart.total():>10.2f}")
    lines.append("")
    return "\n".join(lines)


def format_orders(orders: Iterable[Order]) -> str:
    orders = list(orders)
    if not orders:
        return "No orders have been placed yet."
    blocks = []
    for order in orders:
        lines = [
            "",
            f"Order ID: {order.id}",
            f"Total Amount: ${order.total:.2f}",
            f"Payment Method: {order.payment_method}",
            "Order Details: ",
            f"{'Product ID':<15}{'Name':<20}{'Price ($)':>10}{'Quantity':>10}",
        ]
        for line in order.lines:
            p = line.product
            lines.append(f"{p.id:<15}{p.name:<20}{p.price:>10.2f}{line.quantity:>10}")
        blocks.append("\n".join(lines))
    return "\n".join(blocks)
