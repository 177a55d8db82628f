import re

import pytest
from pydantic import ValidationError

from string_calculator import CalculatorSettings, DelimitedNumbersCalculator
from string_calculator.calculator import split_dropping_trailing_empty

NEWLINE = re.compile("\n")


class TestSplitDroppingTrailingEmpty:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("//.\n1.2", ["//.", "1.2"]),
            ("//.\n", ["//."]),
            ("//.\n1\n\n", ["//.", "1"]),
            ("\n1", ["", "1"]),
            ("no separator", ["no separator"]),
            ("", [""]),
            ("\n\n", []),
        ],
    )
    def test_split_when_text_then_drops_only_trailing_empty(self, text, expected):
        assert split_dropping_trailing_empty(NEWLINE, text) == expected


class TestSplitSections:

    def test_split_sections_when_marker_only_then_none(self, calculator):
        assert calculator.split_sections("//\n1") is None

    def test_split_sections_when_three_sections_then_none(self, calculator):
        assert calculator.split_sections("//.\n1\n2") is None

    def test_split_sections_when_valid_then_returns_delimiter_and_numbers(self, calculator):
        assert calculator.split_sections("//*++)\n1*++)2") == ("*++)", "1*++)2")

    def test_split_sections_when_invalid_then_returns_none(self, calculator):
        assert calculator.split_sections("1,2") is None

    def test_split_sections_when_custom_marker_then_strips_it(self):
        calculator = DelimitedNumbersCalculator(CalculatorSettings(header_marker="##"))
        assert calculator.split_sections("##ab\n1ab2") == ("ab", "1ab2")


class TestCalculatorSettings:

    def test_defaults_when_created_then_match_grammar(self):
        settings = CalculatorSettings()
        assert settings.header_marker == "//"
        assert settings.section_separator == "\n"
        assert settings.reserved_symbols == frozenset("/\\[^*+?{()$|.")

    def test_settings_when_assigned_then_frozen(self):
        settings = CalculatorSettings()
        with pytest.raises(ValidationError):
            settings.header_marker = "##"

    def test_settings_when_empty_marker_then_rejected(self):
        with pytest.raises(ValidationError):
            CalculatorSettings(header_marker="")

    def test_settings_when_multi_char_symbol_then_rejected(self):
        with pytest.raises(ValidationError, match="single characters"):
            CalculatorSettings(reserved_symbols=frozenset({"**"}))

    def test_settings_when_marker_contains_separator_then_rejected(self):
        with pytest.raises(ValidationError, match="contains"):
            CalculatorSettings(header_marker="/\n")
