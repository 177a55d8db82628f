"""Tagged outcome of evaluating an expression.

``evaluate`` returns ``Success`` or one of the ``Failure`` variants instead
of raising, and ``unwrap`` turns a failure back into the matching exception
so ``add`` keeps the raising contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from string_calculator.errors import (
    DelimiterAtEndError,
    DifferentDelimitersError,
    InvalidFormatError,
)


class OutcomeKind(Enum):
    SUCCESS = "success"
    INVALID_FORMAT = "invalid format"
    DELIMITER_AT_END = "delimiter at end"
    DIFFERENT_DELIMITERS = "different delimiters"
    MALFORMED_EMPTY_TOKEN = "malformed empty token"


@dataclass(frozen=True)
class Outcome(ABC):
    """Base class of all outcome variants."""

    kind: ClassVar[OutcomeKind]

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @abstractmethod
    def unwrap(self) -> int:
        """Return the sum, or raise the exception matching this failure."""


@dataclass(frozen=True)
class Success(Outcome):
    value: int

    kind: ClassVar[OutcomeKind] = OutcomeKind.SUCCESS

    def unwrap(self) -> int:
        return self.value


@dataclass(frozen=True)
class Failure(Outcome):
    """Base class of the failure variants."""

    @abstractmethod
    def to_exception(self) -> Exception:
        """Build the exception ``add`` raises for this failure."""

    def unwrap(self) -> int:
        raise self.to_exception()


@dataclass(frozen=True)
class InvalidFormat(Failure):
    kind: ClassVar[OutcomeKind] = OutcomeKind.INVALID_FORMAT

    def to_exception(self) -> Exception:
        return InvalidFormatError()


@dataclass(frozen=True)
class DelimiterAtEnd(Failure):
    delimiter: str | None = None

    kind: ClassVar[OutcomeKind] = OutcomeKind.DELIMITER_AT_END

    def to_exception(self) -> Exception:
        return DelimiterAtEndError(self.delimiter)


@dataclass(frozen=True)
class DifferentDelimiters(Failure):
    # Offset of the first occurrence of the bad token in the numbers section
    position: int

    kind: ClassVar[OutcomeKind] = OutcomeKind.DIFFERENT_DELIMITERS

    def to_exception(self) -> Exception:
        return DifferentDelimitersError(self.position)


@dataclass(frozen=True)
class MalformedEmptyToken(Failure):
    """A token was empty after stripping.

    Reported as the plain ``ValueError`` that ``int()`` raises for it.
    """

    token: str = ""

    kind: ClassVar[OutcomeKind] = OutcomeKind.MALFORMED_EMPTY_TOKEN

    def to_exception(self) -> Exception:
        return ValueError(f"invalid literal for int() with base 10: {self.token!r}")
