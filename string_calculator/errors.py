"""Exceptions raised by the string calculator.

StringCalculatorError (base, a ValueError)
├── InvalidFormatError        - header or section layout is wrong
├── DelimiterAtEndError       - numbers section ends with the delimiter
└── DifferentDelimitersError  - a token is not an integer

A token that is empty after stripping raises a plain ``ValueError`` instead,
the same error ``int("")`` gives. It is deliberately not a
``StringCalculatorError``.
"""

from __future__ import annotations


class StringCalculatorError(ValueError):
    """Base class for all classified expression failures."""


class InvalidFormatError(StringCalculatorError):
    """Expression is not ``<marker><delimiter><separator><numbers>``."""

    def __init__(self, message: str = "Invalid expression format") -> None:
        super().__init__(message)


class DelimiterAtEndError(StringCalculatorError):
    """Numbers section ends with the declared delimiter."""

    def __init__(self, delimiter: str | None = None) -> None:
        self.delimiter = delimiter
        if delimiter is None:
            message = "Numbers section ends with the delimiter"
        else:
            message = f"Numbers section ends with the delimiter {delimiter!r}"
        super().__init__(message)


class DifferentDelimitersError(StringCalculatorError):
    """A token could not be parsed, most likely because another delimiter was used.

    Attributes:
        position: Offset in the numbers section of the first occurrence of
            the offending token.

    """

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Unexpected delimiter near position {position} of the numbers section")
