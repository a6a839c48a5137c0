"""
Number and parse result value types.
"""

import errno
from dataclasses import dataclass
from enum import Enum


ERROR_CATEGORY = "numstream.parse"


class ParseError(Enum):
    """Error slot of a number parser."""

    NONE = (0, "Success")
    INVALID_ARGUMENT = (errno.EINVAL, "Invalid argument")

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message

    @property
    def category(self) -> str:
        return ERROR_CATEGORY

    def __bool__(self) -> bool:
        return self is not ParseError.NONE

    def __str__(self) -> str:
        return f"{self.category} : {self.code} : {self.message}"


@dataclass(frozen=True)
class Number:
    """A parsed number as normalized mantissa and exponent text."""

    mantissa: str
    exponent: str

    def __eq__(self, other) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.mantissa == other.mantissa and self.exponent == other.exponent

    def __str__(self) -> str:
        return self.mantissa + self.exponent


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parsing one number.

    When ``error`` is set, ``number`` holds whatever had been accumulated at
    the point of failure and carries no meaning.
    """

    error: ParseError
    number: Number

    def __eq__(self, other) -> bool:
        if not isinstance(other, ParseResult):
            return NotImplemented
        return self.error is other.error and self.number == other.number

    @property
    def ok(self) -> bool:
        return not self.error

    def __str__(self) -> str:
        if self.error:
            return str(self.error)
        return str(self.number)
