"""Exception types raised by the shopping system.

Validation problems with user input are not exceptions: the parsers in
:mod:`shopping_system.validation` return ``None`` and the CLI re-prompts.
The classes below cover the conditions that must be reported to the
user or escalated to the top level.
"""


class ShoppingError(Exception):
    """Base class for all shopping system errors."""


class CapacityError(ShoppingError):
    """A bounded collection refused an insertion."""


class CatalogFullError(CapacityError):
    def __init__(self, limit: int) -> None:
        super().__init__("Error: Product catalog is full!")
        self.limit = limit


class CartFullError(CapacityError):
    def __init__(self, limit: int) -> None:
        super().__init__("Error: Shopping cart is full!")
        self.limit = limit


class OrderLimitReachedError(CapacityError):
    """Raised when the ledger already holds its maximum number of orders.

    Unlike the other capacity errors this one is fatal: the CLI does not
    catch it and the process exits with a non‑zero status.
    """

    def __init__(self, limit: int) -> None:
        super().__init__("Error: Maximum number of orders reached!")
        self.limit = limit


class InvalidPaymentSelectionError(ShoppingError):
    """The payment menu choice was not one of the offered methods."""

    def __init__(self, choice: int) -> None:
        super().__init__("Error: Invalid payment method selected!")
        self.choice = choice
