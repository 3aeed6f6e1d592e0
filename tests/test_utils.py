import sys
import unittest
from datetime import datetime

from backend.core.utils import locale_timestamp, parse_int

# 0 when the interpreter (or PYTHONINTMAXSTRDIGITS=0) places no limit on int("...")
DIGIT_LIMIT = getattr(sys, "get_int_max_str_digits", lambda: 0)()

class TestLocaleTimestamp(unittest.TestCase):
    def test_afternoon(self):
        self.assertEqual(locale_timestamp(datetime(2026, 10, 18, 15, 4, 5)), "10/18/2026, 3:04:05 PM")

    def test_midnight_and_noon_use_twelve(self):
        self.assertEqual(locale_timestamp(datetime(2026, 1, 2, 0, 0, 9)), "1/2/2026, 12:00:09 AM")
        self.assertEqual(locale_timestamp(datetime(2026, 1, 2, 12, 30, 0)), "1/2/2026, 12:30:00 PM")

class TestParseInt(unittest.TestCase):
    def test_accepted_forms(self):
        self.assertEqual(parse_int(7), 7)
        self.assertEqual(parse_int("42"), 42)
        self.assertEqual(parse_int("  -3 "), -3)
        self.assertEqual(parse_int("80 liters"), 80)
        self.assertEqual(parse_int(9.99), 9)

    def test_rejected_forms(self):
        for value in (None, "", "abc", "l80", True, float("inf"), [1], {"n": 1}):
            self.assertIsNone(parse_int(value), value)

    @unittest.skipUnless(DIGIT_LIMIT, "interpreter has no int digit limit")
    def test_digit_string_past_conversion_limit(self):
        self.assertIsNone(parse_int("9" * (DIGIT_LIMIT + 1)))

if __name__ == "__main__":
    unittest.main()
