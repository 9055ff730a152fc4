"""Top‑level package for the console shopping system.

This package exposes the product catalogue via :mod:`catalog`, the
shopping cart via :mod:`cart`, the order ledger via :mod:`orders` and the
interactive menu via :mod:`cli`.
"""

__version__ = "1.0.0"
