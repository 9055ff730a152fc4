"""Runtime configuration for the shopping system.

The defaults reproduce the documented behaviour.  ``load_config`` lets a
deployment move the order log or the application log directory through
the optional ``SHOP_ORDER_LOG`` and ``SHOP_LOG_DIR`` environment
variables; nothing else is read from the environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ShopConfig:
    """Capacities and file locations used when wiring the application."""
    max_products: int = 150
    max_cart_lines: int = 100
    max_orders: int = 50
    order_log_path: str = "order_log.txt"
    log_dir: str = "logs"
    log_level: int = logging.INFO


def load_config() -> ShopConfig:
    defaults = ShopConfig()
    return ShopConfig(
        order_log_path=os.environ.get("SHOP_ORDER_LOG", defaults.order_log_path),
        log_dir=os.environ.get("SHOP_LOG_DIR", defaults.log_dir),
    )
