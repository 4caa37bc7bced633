"""
User input parsing.

This module turns raw console text into typed values: menu commands,
collection indexes, fractions and calorie counts. Nothing here prints;
bad input raises InvalidArgumentError and the CLI decides what to show.
"""

from enum import Enum
from typing import Optional

from ..errors import InvalidArgumentError
from ..models import Rational


class Command(Enum):
    """
    Menu commands, keyed by the letter the user types.

    Matching is case-insensitive and only looks at the first character,
    so "add" and "A" both mean ADD.
    """
    ADD = "a"
    ADD_HUNDRED = "h"
    EAT = "e"
    SORT_BY_PRICE = "p"
    SORT_BY_SIZE = "s"
    SORT_BY_CALORIES = "c"
    BINARY_SEARCH = "b"
    QUIT = "q"


def parse_command(line: str) -> Optional[Command]:
    """Return the Command for `line`, or None if it isn't recognized."""
    text = line.strip()
    if not text:
        return None
    try:
        return Command(text[0].lower())
    except ValueError:
        return None


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidArgumentError(f'"{text.strip()}" is not a valid {what}.') from None


def parse_index(text: str, length: int) -> int:
    """Parse a collection index that must lie in [0, length)."""
    index = _parse_int(text, "index")
    if index < 0 or index >= length:
        raise InvalidArgumentError(f"{index} is not a valid index.")
    return index


def parse_fraction(text: str) -> Rational:
    """
    Parse "a/b" into a Rational.

    Whitespace around either side of the slash is ignored. A missing
    slash, non-integer parts or a zero denominator raise
    InvalidArgumentError.
    """
    numerator, separator, denominator = text.strip().partition("/")
    if not separator:
        raise InvalidArgumentError(f'"{text.strip()}" is not valid input (format a/b).')

    return Rational(
        _parse_int(numerator, "numerator"),
        _parse_int(denominator, "denominator"),
    )


def parse_calories(text: str) -> int:
    """Parse a calorie count, which must be a positive integer."""
    calories = _parse_int(text, "number of calories")
    if calories <= 0:
        raise InvalidArgumentError(f"{calories} is an invalid number of calories.")
    return calories
