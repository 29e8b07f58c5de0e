"""Unit tests for field classifiers and per-cell numeric coercion."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from plotdata.parsing.classifiers import is_header_word, is_label, is_numeric
from plotdata.parsing.coercion import coerce_row, coerce_value
from plotdata.parsing.schema import NumberCell, TextCell


class TestIsNumeric:

    @pytest.mark.parametrize("text", ["0", "25", "-3", "+7", "3.14", ".5", "5.", "1e3", "-2.5E-2", "6.02e+23"])
    def test_numbers(self, text):
        assert is_numeric(text) is True

    @pytest.mark.parametrize("text", ["", " ", "abc", "12abc", "1e", "1.2.3", "inf", "nan", "0x1F", "1_000", "--1", "1,5"])
    def test_non_numbers(self, text):
        assert is_numeric(text) is False

    def test_unicode_digits_rejected(self):
        assert is_numeric("١٢") is False


class TestIsLabel:

    def test_text(self):
        assert is_label("Name") is True

    def test_number(self):
        assert is_label("42") is False

    def test_empty(self):
        assert is_label("") is False


class TestIsHeaderWord:

    def test_known_word(self):
        assert is_header_word(" Label ") is True

    def test_unknown_word(self):
        assert is_header_word("alpha") is False


class TestCoerceValue:

    def test_integer(self):
        assert coerce_value("25") == NumberCell(value=25.0)

    def test_exponent(self):
        assert coerce_value("-3.5e2") == NumberCell(value=-350.0)

    def test_text_unchanged(self):
        assert coerce_value("Alice") == TextCell(value="Alice")

    def test_partial_number_stays_text(self):
        assert coerce_value("12abc") == TextCell(value="12abc")

    def test_empty_stays_text(self):
        assert coerce_value("") == TextCell(value="")

    def test_identical_text_coerces_identically(self):
        assert coerce_value("007") == coerce_value("007")

    def test_number_matches_float_of_text(self):
        for text in ("1", "0.1", "-2e-3", ".25"):
            assert coerce_value(text).value == float(text)


class TestCoerceRow:

    def test_mixed_row(self):
        assert coerce_row(("Bob", "30", "")) == (TextCell(value="Bob"), NumberCell(value=30.0), TextCell(value=""))

    def test_empty_row(self):
        assert coerce_row(()) == ()
