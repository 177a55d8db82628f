"""Calculator settings.

The defaults describe the expression grammar::

    //<delimiter>\\n<number><delimiter><number>...

Usage:
    from string_calculator import CalculatorSettings, DelimitedNumbersCalculator

    settings = CalculatorSettings(header_marker="##")
    calculator = DelimitedNumbersCalculator(settings=settings)
    calculator.add("##;\\n1;2")  # 3
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Characters that must be escaped before a delimiter is used as a split pattern
RESERVED_SYMBOLS: frozenset[str] = frozenset("/\\[^*+?{()$|.")

DEFAULT_HEADER_MARKER = "//"
DEFAULT_SECTION_SEPARATOR = "\n"


class CalculatorSettings(BaseModel):
    """Grammar settings for the delimited numbers calculator.

    Attributes:
        header_marker: Prefix of the delimiter declaration section.
        section_separator: Literal text separating the header from the numbers.
        reserved_symbols: Delimiter characters escaped before splitting.

    """

    model_config = ConfigDict(frozen=True)

    header_marker: str = Field(
        default=DEFAULT_HEADER_MARKER,
        min_length=1,
        description="Prefix that introduces the custom delimiter",
    )
    section_separator: str = Field(
        default=DEFAULT_SECTION_SEPARATOR,
        min_length=1,
        description="Separator between the header and the numbers section",
    )
    reserved_symbols: frozenset[str] = Field(
        default=RESERVED_SYMBOLS,
        description="Pattern metacharacters escaped in the delimiter",
    )

    @field_validator("reserved_symbols", mode="after")
    @classmethod
    def validate_reserved_symbols(cls, v: frozenset[str]) -> frozenset[str]:
        """Validate that every reserved symbol is a single character."""
        invalid = sorted(symbol for symbol in v if len(symbol) != 1)
        if invalid:
            raise ValueError(
                f"Reserved symbols must be single characters, got: {', '.join(map(repr, invalid))}"
            )
        return v

    @model_validator(mode="after")
    def validate_marker_separator(self) -> Self:
        """Header marker cannot contain the section separator."""
        if self.section_separator in self.header_marker:
            raise ValueError(
                f"header_marker {self.header_marker!r} contains "
                f"section_separator {self.section_separator!r}"
            )
        return self
