"""Unit tests for input parsing and validation helpers."""

from __future__ import annotations

import unittest

from valuai.exceptions import ValidationError
from valuai.validation import (
    optional_amount,
    optional_text,
    parse_amount,
    parse_team_size,
    require_field,
    require_text,
)


class RequireFieldTests(unittest.TestCase):
    """Tests for require_field()."""

    def test_returns_value_when_present_and_correct_type(self) -> None:
        self.assertEqual(require_field({"a": "hello"}, "a", str), "hello")

    def test_raises_when_key_missing(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            require_field({}, "name", str)
        self.assertIn("name", str(ctx.exception))

    def test_raises_when_value_is_none(self) -> None:
        with self.assertRaises(ValidationError):
            require_field({"a": None}, "a", str)

    def test_raises_on_type_mismatch_single(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            require_field({"a": 42}, "a", str)
        self.assertIn("str", str(ctx.exception))
        self.assertIn("int", str(ctx.exception))

    def test_accepts_tuple_of_types(self) -> None:
        self.assertEqual(require_field({"a": 3.14}, "a", (int, float)), 3.14)

    def test_bool_rejected_for_int(self) -> None:
        with self.assertRaises(ValidationError):
            require_field({"a": True}, "a", int)


class RequireTextTests(unittest.TestCase):
    def test_strips_whitespace(self) -> None:
        self.assertEqual(require_text({"a": "  Acme  "}, "a"), "Acme")

    def test_blank_string_raises(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            require_text({"a": "   "}, "a")
        self.assertIn("empty", str(ctx.exception))

    def test_optional_text_absent(self) -> None:
        self.assertIsNone(optional_text({}, "a"))

    def test_optional_text_wrong_type(self) -> None:
        with self.assertRaises(ValidationError):
            optional_text({"a": 5}, "a")


class ParseAmountTests(unittest.TestCase):
    """Tests for parse_amount() / optional_amount()."""

    def test_int_input(self) -> None:
        self.assertEqual(parse_amount(100, "x"), 100.0)

    def test_string_input(self) -> None:
        self.assertEqual(parse_amount("99.5", "x"), 99.5)

    def test_zero_is_valid(self) -> None:
        self.assertEqual(parse_amount(0, "x"), 0.0)

    def test_negative_raises(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            parse_amount(-5, "revenue")
        self.assertIn("non-negative", str(ctx.exception))

    def test_non_numeric_string_raises(self) -> None:
        with self.assertRaises(ValidationError):
            parse_amount("abc", "x")

    def test_nan_raises(self) -> None:
        with self.assertRaises(ValidationError):
            parse_amount("nan", "x")

    def test_bool_raises(self) -> None:
        with self.assertRaises(ValidationError):
            parse_amount(False, "x")

    def test_optional_amount_absent_is_none(self) -> None:
        self.assertIsNone(optional_amount({"revenue": None}, "revenue"))

    def test_optional_amount_present(self) -> None:
        self.assertEqual(optional_amount({"revenue": 1500}, "revenue"), 1500.0)


class ParseTeamSizeTests(unittest.TestCase):
    def test_valid(self) -> None:
        self.assertEqual(parse_team_size({"team_size": 3}), 3)

    def test_zero_raises(self) -> None:
        with self.assertRaises(ValidationError):
            parse_team_size({"team_size": 0})

    def test_float_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            parse_team_size({"team_size": 2.5})

    def test_missing_raises(self) -> None:
        with self.assertRaises(ValidationError):
            parse_team_size({})


if __name__ == "__main__":
    unittest.main()
