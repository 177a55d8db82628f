"""Delimited numbers string calculator.

An expression declares its delimiter on the first line and lists the
numbers on the second::

    //;
    1;2;3

``add`` returns the sum or raises; ``evaluate`` returns an ``Outcome``.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod

from string_calculator.config import RESERVED_SYMBOLS, CalculatorSettings
from string_calculator.outcome import (
    DelimiterAtEnd,
    DifferentDelimiters,
    InvalidFormat,
    MalformedEmptyToken,
    Outcome,
    Success,
)

logger = logging.getLogger(__name__)

# Optionally signed base-10 integer; int() alone would also accept "4_5"
INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def split_dropping_trailing_empty(pattern: re.Pattern[str], text: str) -> list[str]:
    """Split ``text`` on ``pattern`` and drop empty pieces from the end.

    Leading empty pieces are kept. Text without any match comes back whole,
    even when it is empty.

        >>> split_dropping_trailing_empty(re.compile("\\n"), "//.\\n")
        ['//.']
        >>> split_dropping_trailing_empty(re.compile("\\n"), "\\n1")
        ['', '1']
    """
    parts = pattern.split(text)
    if len(parts) == 1:
        return parts
    while parts and not parts[-1]:
        parts.pop()
    return parts


def escape_symbol(character, reserved_symbols=RESERVED_SYMBOLS):
    return "\\" + character if character in reserved_symbols else character


def regexify(delimiter, reserved_symbols=RESERVED_SYMBOLS):
    """Turn a literal delimiter into a pattern that matches only that text.

    Only characters in ``reserved_symbols`` are escaped, so the escaped set
    stays explicit instead of following ``re.escape``.

        >>> regexify("*++)")
        '\\\\*\\\\+\\\\+\\\\)'
    """
    return "".join(escape_symbol(character, reserved_symbols) for character in delimiter)


def parse_number(token: str) -> int | None:
    """Parse a stripped token, returning None when it is not an integer.

    There is no range check, so values past 32 bits parse normally.
    """
    if INTEGER_PATTERN.fullmatch(token) is None:
        return None
    return int(token)


def sum_numbers(numbers_section: str, tokens: list[str]) -> Outcome:
    """Parse every token and sum them, stopping at the first bad token.

    An empty token (two delimiters in a row, or a leading delimiter) gives
    ``MalformedEmptyToken``. Any other bad token gives
    ``DifferentDelimiters`` with the offset where that text first appears in
    ``numbers_section``. Tokens are trimmed with ``str.strip``, which also
    removes non-breaking spaces.

    The parsed values are collected into a set, so repeated values are
    counted once. ``"//,\\n3,3,3"`` sums to 3. This matches the long-standing
    behaviour of the calculator and is kept on purpose even though it is
    probably not what a caller expects.
    """
    numbers = set()
    for token in tokens:
        stripped = token.strip()
        if not stripped:
            logger.debug("Empty token %r in %r", token, numbers_section)
            return MalformedEmptyToken(token)

        number = parse_number(stripped)
        if number is None:
            position = numbers_section.find(stripped)
            logger.debug("Unparseable token %r at position %d", stripped, position)
            return DifferentDelimiters(position)
        numbers.add(number)
    return Success(sum(numbers))


class StringCalculator(ABC):
    @abstractmethod
    def add(self, numbers: str | None) -> int:
        """Return the sum of the numbers described by ``numbers``."""


class DelimitedNumbersCalculator(StringCalculator):
    """Sums numbers separated by a delimiter declared in a header line.

    Instances keep only their frozen settings, so one calculator can be
    shared between threads.
    """

    def __init__(self, settings: CalculatorSettings | None = None) -> None:
        self.settings = settings or CalculatorSettings()
        self._separator = re.compile(re.escape(self.settings.section_separator))

    def add(self, numbers: str | None) -> int:
        return self.evaluate(numbers).unwrap()

    def evaluate(self, numbers: str | None) -> Outcome:
        if not numbers or not numbers.strip():
            return Success(0)

        sections = self.split_sections(numbers)
        if sections is None:
            return InvalidFormat()
        delimiter, numbers_section = sections

        if numbers_section.endswith(delimiter):
            logger.debug("Numbers section %r ends with %r", numbers_section, delimiter)
            return DelimiterAtEnd(delimiter)

        pattern = re.compile(regexify(delimiter, self.settings.reserved_symbols))
        tokens = split_dropping_trailing_empty(pattern, numbers_section)
        return sum_numbers(numbers_section, tokens)

    def split_sections(self, numbers: str) -> tuple[str, str] | None:
        """Return ``(delimiter, numbers_section)``, or None when the format is invalid."""
        marker = self.settings.header_marker
        sections = split_dropping_trailing_empty(self._separator, numbers)
        if len(sections) != 2 or not self._is_header_valid(sections[0]):
            logger.debug("Invalid format: %d section(s) in %r", len(sections), numbers)
            return None

        header, numbers_section = sections
        delimiter = header[len(marker):]
        logger.debug("Declared delimiter %r", delimiter)
        return delimiter, numbers_section

    def _is_header_valid(self, header: str) -> bool:
        marker = self.settings.header_marker
        return header.startswith(marker) and len(header) > len(marker)


_default_calculator = DelimitedNumbersCalculator()


def add(numbers: str | None) -> int:
    return _default_calculator.add(numbers)


def evaluate(numbers: str | None) -> Outcome:
    return _default_calculator.evaluate(numbers)
