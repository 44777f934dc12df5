"""Tests for the left-to-right evaluator and number helpers."""

import math

import pytest

from formula_evaluator import (
    FloatArithmeticProvider,
    LeftToRightEvaluator,
    format_number,
    parse_number,
)


class TestParseNumber:
    @pytest.mark.parametrize("text, expected", [
        ("42", 42.0),
        ("-5", -5.0),
        ("3.", 3.0),
        (".5", 0.5),
        ("1.5e+21", 1.5e21),
        ("1.2.3", 1.2),
        ("7abc", 7.0),
    ])
    def test_parses_numeric_prefix(self, text, expected):
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", [".", "", "abc", "Error", "-"])
    def test_returns_none_when_not_numeric(self, text):
        assert parse_number(text) is None

    def test_infinity_symbol(self):
        assert parse_number("∞") == math.inf
        assert parse_number("-∞") == -math.inf


class TestFormatNumber:
    @pytest.mark.parametrize("value, expected", [
        (20.0, "20"),
        (0.3, "0.3"),
        (-2.5, "-2.5"),
        (-0.0, "0"),
        (0.00001, "0.00001"),
        (1e-7, "1e-7"),
        (1.5e21, "1.5e+21"),
        (1e16, "10000000000000000"),
        (123456.789, "123456.789"),
    ])
    def test_shortest_representation(self, value, expected):
        assert format_number(value) == expected

    def test_special_values(self):
        assert format_number(math.nan) == "NaN"
        assert format_number(math.inf) == "∞"
        assert format_number(-math.inf) == "-∞"


class TestLeftToRightEvaluator:
    def setup_method(self):
        self.evaluator = LeftToRightEvaluator()

    def test_no_operator_precedence(self):
        assert self.evaluator.evaluate("2 + 3 × 4") == "20"

    def test_subtraction_and_division(self):
        assert self.evaluator.evaluate("10 - 4 ÷ 4") == "1.5"

    def test_division_by_zero_is_zero(self):
        assert self.evaluator.evaluate("5 ÷ 0") == "0"
        assert self.evaluator.evaluate("5 ÷ 0 + 3") == "3"

    def test_rounds_to_eight_decimals(self):
        assert self.evaluator.evaluate("0.1 + 0.2") == "0.3"
        assert self.evaluator.evaluate("2 ÷ 3") == "0.66666667"

    def test_ties_round_away_from_zero(self):
        assert self.evaluator.evaluate("1 ÷ 512") == "0.00195313"
        assert self.evaluator.evaluate("0 - 1 ÷ 512") == "-0.00195313"

    def test_large_values_keep_integer_digits(self):
        assert self.evaluator.evaluate("123456789012 + 0.5") == "123456789012.5"

    def test_single_operand_returned_unchanged(self):
        assert self.evaluator.evaluate("  12.50 ") == "12.50"

    def test_skips_malformed_operand(self):
        assert self.evaluator.evaluate("8 + . × 2") == "16"

    def test_skips_unknown_operator(self):
        assert self.evaluator.evaluate("8 ^ 2 + 1") == "9"

    def test_unparseable_first_operand_is_nan(self):
        assert self.evaluator.evaluate(". + 1") == "NaN"

    def test_overflow_renders_infinity(self):
        assert self.evaluator.evaluate("1e308 × 10") == "∞"
        assert self.evaluator.evaluate("∞ - 1") == "∞"

    def test_custom_decimals(self):
        evaluator = LeftToRightEvaluator(decimals=2)
        assert evaluator.evaluate("1 ÷ 3") == "0.33"


class TestFloatArithmeticProvider:
    def test_operations_cover_all_operators(self):
        operations = FloatArithmeticProvider().build_operations()
        assert set(operations) == {"+", "-", "×", "÷"}
        assert operations["÷"](1.0, 0.0) == 0.0
        assert operations["×"](3.0, 4.0) == 12.0
