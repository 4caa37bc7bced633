"""
Money data model.

A non-negative amount in whole dollars and cents.
"""

from dataclasses import dataclass

from ..config import MAX_CENTS
from ..errors import InvalidArgumentError, UncomparableError


@dataclass(frozen=True, order=True)
class Money:
    """
    Dollars and cents, cents always in [0, MAX_CENTS].

    Ordering follows (dollars, cents). Adding two amounts carries cents
    over into dollars and returns a new Money.

    Example:
        Money(3, 75) + Money(4, 50)  ->  Money(8, 25)
        str(Money(2, 5))             ->  "$2.05"
    """
    dollars: int
    cents: int = 0

    def __post_init__(self):
        if self.dollars < 0 or self.cents < 0 or self.cents > MAX_CENTS:
            raise InvalidArgumentError(
                f"Illegal dollar or cent amount: {self.dollars}, {self.cents}"
            )

    @classmethod
    def zero(cls) -> "Money":
        return cls(0, 0)

    @property
    def total_cents(self) -> int:
        return self.dollars * 100 + self.cents

    def to_decimal(self) -> float:
        return self.dollars + self.cents / 100

    def add(self, other: "Money") -> "Money":
        """Return the sum of this amount and `other`."""
        if not isinstance(other, Money):
            raise UncomparableError(f"Cannot add {type(other).__name__} to Money.")
        dollars, cents = divmod(self.total_cents + other.total_cents, 100)
        return Money(dollars, cents)

    def compare(self, other: "Money") -> int:
        """Return -1, 0 or 1 as this amount is less than, equal to or greater than `other`."""
        if not isinstance(other, Money):
            raise UncomparableError(f"Cannot compare {type(other).__name__} with Money.")
        if self.total_cents > other.total_cents:
            return 1
        if self.total_cents == other.total_cents:
            return 0
        return -1

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __str__(self) -> str:
        return f"${self.dollars}.{self.cents:02d}"
