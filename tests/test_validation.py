# --- path/bootstrap (keep this at the very top) ---
from pathlib import Path
import sys

SRC = Path(__file__).resolve().parents[1] / "src"
if SRC.is_dir() and str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
# --- end path/bootstrap ---

import unittest

from shopping_system.validation import (
    INTEGER_OVERFLOW,
    parse_integer,
    parse_menu_choice,
    parse_payment_choice,
    parse_product_id,
    parse_quantity,
    parse_yes_no,
)


class TestIntegerParsing(unittest.TestCase):

    def test_accepts_digits_with_surrounding_whitespace(self):
        self.assertEqual(parse_menu_choice(" 4 "), 4)
        self.assertEqual(parse_integer("\t12\r\n"), 12)
        self.assertEqual(parse_integer("007"), 7)

    def test_rejects_everything_else(self):
        for line in ("", "   ", "abc", "4a", "4 4", "-3", "+3", "3.0", "²"):
            self.assertIsNone(parse_integer(line), line)

    def test_very_long_numbers_do_not_raise(self):
        self.assertEqual(parse_integer("9" * 5000), INTEGER_OVERFLOW)
        self.assertEqual(parse_menu_choice(" " + "1" * 10 + " "), INTEGER_OVERFLOW)
        self.assertEqual(parse_integer("999999999"), 999999999)
        self.assertEqual(parse_integer("0" * 20 + "7"), 7)


class TestProductId(unittest.TestCase):

    def test_single_letter_in_range(self):
        self.assertEqual(parse_product_id("a"), "A")
        self.assertEqual(parse_product_id("  J "), "J")

    def test_rejects_invalid_ids(self):
        for line in ("", "K", "z", "AB", "1", "é", "A B"):
            self.assertIsNone(parse_product_id(line), line)

    def test_custom_range(self):
        self.assertEqual(parse_product_id("k", first="A", last="K"), "K")


class TestQuantity(unittest.TestCase):

    def test_positive_integers_only(self):
        self.assertEqual(parse_quantity(" 3 "), 3)
        for line in ("-3", "abc", "0", ""):
            self.assertIsNone(parse_quantity(line), line)
        self.assertIsNone(parse_quantity("9" * 5000))
        self.assertEqual(parse_quantity("999999999"), 999999999)


class TestYesNo(unittest.TestCase):

    def test_first_non_blank_character_decides(self):
        self.assertTrue(parse_yes_no("y"))
        self.assertTrue(parse_yes_no("  Yes please"))
        self.assertFalse(parse_yes_no("n"))
        self.assertFalse(parse_yes_no(""))
        self.assertFalse(parse_yes_no("   "))
        self.assertFalse(parse_yes_no("maybe"))


class TestPaymentChoice(unittest.TestCase):

    def test_unparseable_is_minus_one(self):
        self.assertEqual(parse_payment_choice(" 2"), 2)
        self.assertEqual(parse_payment_choice("9"), 9)
        self.assertEqual(parse_payment_choice("cash"), -1)
        self.assertEqual(parse_payment_choice("9" * 5000), INTEGER_OVERFLOW)


if __name__ == "__main__":
    unittest.main(verbosity=2)
