# payment_service.py
"""
Payment method simulation used by the shopping system.

- Closed set of methods: cash, card, e-wallet.
- ``pay`` only produces a confirmation; no gateway is involved and it
  never fails.
- Menu numbers map to methods through ``PaymentMethod.from_choice``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from shopping_system.errors import InvalidPaymentSelectionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentConfirmation:
    """Result of a (simulated) payment."""
    method: "PaymentMethod"
    amount: Decimal
    message: str


class PaymentMethod(Enum):
    """The payment methods offered at checkout.

    Each member carries its menu number, the display name stored on
    orders, the label shown in the payment menu and the phrase used in the
    confirmation message.
    """

    CASH = (1, "Cash", "Cash", "Cash")
    CARD = (2, "Credit / Debit", "Credit/Debit Card", "the payment method of Credit/Debit Card")
    E_WALLET = (3, "E-Wallet", "E-Wallet", "the payment method of E-Wallet")

    def __init__(self, choice: int, display_name: str, menu_label: str, phrase: str) -> None:
        self.choice = choice
        self.display_name = display_name
        self.menu_label = menu_label
        self.phrase = phrase

    @classmethod
    def from_choice(cls, choice: int) -> "PaymentMethod":
        """Return the method for a payment menu number.

        Raises:
            InvalidPaymentSelectionError: ``choice`` is not 1, 2 or 3.
        """
        for method in cls:
            if method.choice == choice:
                return method
        raise InvalidPaymentSelectionError(choice)

    def pay(self, amount: Decimal) -> PaymentConfirmation:
        message = f"Paid ${amount:.2f} using {self.phrase}"
        logger.info(
            "Payment confirmed",
            extra={"extra": {"payment_method": self.display_name, "amount": f"{amount:.2f}"}},
        )
        return PaymentConfirmation(method=self, amount=amount, message=message)
