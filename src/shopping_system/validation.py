"""Parsers for the lines typed at the console prompts.

Each parser takes the raw line and returns the parsed value, or ``None``
when the line is not acceptable so that the caller can re-prompt.
"""

import re
from typing import Optional

# Digits with optional surrounding whitespace; no sign, no inner spaces
_INTEGER_RE = re.compile(r"\s*0*(\d+)\s*", re.ASCII)

# Numbers with more significant digits than this are returned as
# INTEGER_OVERFLOW, which no prompt accepts
MAX_INTEGER_DIGITS = 9
INTEGER_OVERFLOW = 10 ** MAX_INTEGER_DIGITS


def parse_integer(line: str) -> Optional[int]:
    """Parse a non-negative integer surrounded by optional whitespace.

    Values of ten or more significant digits come back as
    ``INTEGER_OVERFLOW`` instead of being converted.

    >>> parse_integer(" 4 ")
    4
    >>> parse_integer("4a") is None
    True
    """
    match = _INTEGER_RE.fullmatch(line)
    if match is None:
        return None
    digits = match.group(1)
    if len(digits) > MAX_INTEGER_DIGITS:
        return INTEGER_OVERFLOW
    return int(digits)


# The main menu accepts exactly what the integer parser accepts
parse_menu_choice = parse_integer


def parse_product_id(line: str, first: str = "A", last: str = "J") -> Optional[str]:
    """Return the uppercased product ID if ``line`` is one letter in range."""
    text = line.strip()
    if len(text) != 1 or not text.isascii() or not text.isalpha():
        return None
    letter = text.upper()
    if not first.upper() <= letter <= last.upper():
        return None
    return letter


def parse_quantity(line: str) -> Optional[int]:
    quantity = parse_integer(line)
    if quantity is None or not 1 <= quantity < INTEGER_OVERFLOW:
        return None
    return quantity


def parse_yes_no(line: str) -> bool:
    """Return True only if the first non-blank character is 'y' or 'Y'.

    An empty or blank line counts as 'N'.
    """
    text = line.strip()
    answer = text[0].upper() if text else "N"
    return answer == "Y"


def parse_payment_choice(line: str) -> int:
    """Return the typed payment menu number, or -1 if it is not a number.

    Range checking is left to :meth:`PaymentMethod.from_choice` so that an
    out-of-range number and garbage input fail the same way.
    """
    choice = parse_integer(line)
    return -1 if choice is None else choice
