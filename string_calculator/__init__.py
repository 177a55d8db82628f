"""Sum integers from a delimited text expression."""

from string_calculator.calculator import (
    DelimitedNumbersCalculator,
    StringCalculator,
    add,
    evaluate,
)
from string_calculator.config import CalculatorSettings
from string_calculator.errors import (
    DelimiterAtEndError,
    DifferentDelimitersError,
    InvalidFormatError,
    StringCalculatorError,
)
from string_calculator.outcome import (
    DelimiterAtEnd,
    DifferentDelimiters,
    Failure,
    InvalidFormat,
    MalformedEmptyToken,
    Outcome,
    OutcomeKind,
    Success,
)

__all__ = [
    "CalculatorSettings",
    "DelimitedNumbersCalculator",
    "DelimiterAtEnd",
    "DelimiterAtEndError",
    "DifferentDelimiters",
    "DifferentDelimitersError",
    "Failure",
    "InvalidFormat",
    "InvalidFormatError",
    "MalformedEmptyToken",
    "Outcome",
    "OutcomeKind",
    "StringCalculator",
    "StringCalculatorError",
    "Success",
    "add",
    "evaluate",
]
