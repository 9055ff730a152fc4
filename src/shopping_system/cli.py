"""
Command‑line interface for the shopping system.

``ShoppingApplication`` drives the text menu: it reads one line per
prompt, validates it with :mod:`shopping_system.validation`, and calls
into the catalogue, cart and ledger it was constructed with.  ``main``
wires those objects together, runs the loop and turns an escaped fatal
error into a non‑zero exit status.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO, Tuple

from shopping_system.cart import ShoppingCart
from shopping_system.catalog import ProductCatalog
from shopping_system.config import ShopConfig, load_config
from shopping_system.display import format_cart, format_orders, format_products
from shopping_system.errors import (
    CapacityError,
    InvalidPaymentSelectionError,
    OrderLimitReachedError,
    ShoppingError,
)
from shopping_system.logging_config import configure_logging
from shopping_system.metrics import CHECKOUT_ERROR_TOTAL
from shopping_system.orders import OrderLedger
from shopping_system.payment_service import PaymentMethod
from shopping_system.validation import (
    parse_menu_choice,
    parse_payment_choice,
    parse_product_id,
    parse_quantity,
    parse_yes_no,
)

logger = logging.getLogger(__name__)

MENU_VIEW_PRODUCTS = 1
MENU_VIEW_CART = 2
MENU_VIEW_ORDERS = 3
MENU_EXIT = 4


class ShoppingApplication:
    """Interactive menu over a catalogue, a cart and an order ledger."""

    def __init__(
        self,
        catalog: ProductCatalog,
        cart: ShoppingCart,
        ledger: OrderLedger,
        input_func: Optional[Callable[[str], str]] = None,
        out: Optional[TextIO] = None,
        product_id_range: Tuple[str, str] = ("A", "J"),
    ) -> None:
        self.catalog = catalog
        self.cart = cart
        self.ledger = ledger
        self.input_func = input_func
        self.out = out
        self.first_id, self.last_id = product_id_range

    def _print(self, *args: object) -> None:
        print(*args, file=self.out if self.out is not None else sys.stdout)

    def _ask(self, prompt: str) -> str:
        return (self.input_func or input)(prompt)

    def print_menu(self) -> None:
        self._print("\nShopping System Menu")
        self._print("1. View Products")
        self._print("2. View Shopping Cart")
        self._print("3. View Orders")
        self._print("4. Exit")

    def run(self) -> None:
        """Loop over the main menu until the user chooses Exit.

        ``OrderLimitReachedError`` is not handled here; it propagates to
        the caller.
        """
        logger.info("Session started")
        while True:
            self.print_menu()
            choice = parse_menu_choice(self._ask("Enter your choice: "))
            if choice is None:
                self._print("Invalid input. Please enter a number.")
                continue
            if choice == MENU_VIEW_PRODUCTS:
                self.view_products()
            elif choice == MENU_VIEW_CART:
                self.view_cart()
            elif choice == MENU_VIEW_ORDERS:
                self.view_orders()
            elif choice == MENU_EXIT:
                break
            else:
                self._print("Invalid choice. Please try again.")
        self._print("Thank you for using our Shopping System!")
        logger.info("Session ended", extra={"extra": {"orders": len(self.ledger)}})

    # ---- Products ----

    def view_products(self) -> None:
        self._print(format_products(self.catalog.list_products()))
        while True:
            self._add_one_product()
            answer = self._ask("Do you want to add another product to the shopping cart? (Y/N): ")
            if not parse_yes_no(answer):
                break

    def _add_one_product(self) -> None:
        while True:
            product_id = parse_product_id(
                self._ask("Enter the ID of the product you want to add to the shopping cart: "),
                self.first_id,
                self.last_id,
            )
            if product_id is None:
                self._print(
                    f"Invalid product ID. Please enter a single letter from {self.first_id} to {self.last_id}."
                )
                continue
            product = self.catalog.find_by_id(product_id)
            if product is None:
                self._print(f"Product with ID '{product_id}' not found.")
                continue
            break

        quantity = self._ask_quantity()
        try:
            self.cart.add(product, quantity)
        except CapacityError as e:
            self._print(e)
            return
        self._print("Product added successfully!")

    def _ask_quantity(self) -> int:
        while True:
            quantity = parse_quantity(self._ask("Enter quantity: "))
            if quantity is not None:
                return quantity
            self._print("Quantity must be a positive number.")

    # ---- Cart / checkout ----

    def view_cart(self) -> None:
        self._print(format_cart(self.cart))
        if self.cart.is_empty():
            return
        if parse_yes_no(self._ask("Do you want to check out all the products? (Y/N): ")):
            self.checkout()

    def checkout(self) -> Optional[int]:
        """Turn the cart into an order.  Returns the order ID, or None.

        An invalid payment choice aborts the checkout and leaves the cart
        as it was.  The order is recorded before the payment confirmation
        is shown.
        """
        self._print("\nItems for Checkout")
        self._print(format_cart(self.cart))
        self._print("Select payment method:")
        for method in PaymentMethod:
            self._print(f"{method.choice}. {method.menu_label}")
        choice = parse_payment_choice(self._ask("Enter your choice: "))

        try:
            method = PaymentMethod.from_choice(choice)
        except InvalidPaymentSelectionError as e:
            CHECKOUT_ERROR_TOTAL.inc(type="invalid_payment")
            logger.info("Checkout aborted", extra={"extra": {"payment_choice": choice}})
            self._print(e)
            return None

        order_id = self.ledger.create_order(self.cart, method)
        confirmation = method.pay(self.cart.total())
        self._print(confirmation.message)
        self._print("You have successfully checked out the products!")
        self._print(f"Your order ID is: {order_id}")
        self.cart.clear()
        return order_id

    # ---- Orders ----

    def view_orders(self) -> None:
        self._print(format_orders(self.ledger.list_orders()))


def main(config: Optional[ShopConfig] = None) -> int:
    """Run the interactive shop and return the process exit status."""
    if config is None:
        config = load_config()
    try:
        configure_logging(config.log_dir, config.log_level)
    except OSError as e:
        print(f"Fatal error: cannot set up logging in {config.log_dir!r}: {e}", file=sys.stderr)
        return 1

    catalog = ProductCatalog(max_products=config.max_products)
    catalog.seed()
    app = ShoppingApplication(
        catalog=catalog,
        cart=ShoppingCart(max_lines=config.max_cart_lines),
        ledger=OrderLedger(max_orders=config.max_orders, log_path=config.order_log_path),
    )
    try:
        app.run()
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted by user. Exiting.")
        return 0
    except ShoppingError as e:
        if isinstance(e, OrderLimitReachedError):
            CHECKOUT_ERROR_TOTAL.inc(type="order_limit")
        logger.critical("Fatal error: %s", e, extra={"file_only": True})
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
