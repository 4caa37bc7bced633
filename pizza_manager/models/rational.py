"""
Exact fraction type.

Used to track how much of a pizza is left. Values are NOT normalized on
construction; call `reduce()` to get lowest terms with the sign on the
numerator.
"""

from ..errors import InvalidArgumentError, UncomparableError


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


class Rational:
    """
    A numerator/denominator pair with a non-zero denominator.

    SIGN CONVENTION:
    ----------------
    After `reduce()` only the numerator may be negative:
        Rational(6, -8).reduce()   -> -3/4
        Rational(-6, -8).reduce()  ->  3/4
        Rational(0, -5).reduce()   ->  0/1

    Comparisons reduce both operands first, then cross-multiply, so the
    stored (unreduced) form never affects ordering or equality.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 1, denominator: int = 1):
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise InvalidArgumentError(
                f"Rational parts must be integers, got {numerator!r}/{denominator!r}."
            )
        if denominator == 0:
            raise InvalidArgumentError("Cannot create a Rational whose denominator equals zero.")
        self._numerator = numerator
        self._denominator = denominator

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def reduce(self) -> "Rational":
        """Return this value in lowest terms with a positive denominator."""
        if self._numerator == 0:
            return Rational(0, 1)

        numerator, denominator = self._numerator, self._denominator
        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        divisor = gcd(abs(numerator), denominator)
        return Rational(numerator // divisor, denominator // divisor)

    def compare(self, other: "Rational") -> int:
        """Return -1, 0 or 1 as this value is less than, equal to or greater than `other`."""
        if not isinstance(other, Rational):
            raise UncomparableError(f"Cannot compare {type(other).__name__} with a Rational.")

        us = self.reduce()
        them = other.reduce()
        ours = us._numerator * them._denominator
        theirs = them._numerator * us._denominator

        if ours > theirs:
            return 1
        if ours == theirs:
            return 0
        return -1

    def subtract(self, other: "Rational") -> "Rational":
        """Return `self - other` in lowest terms."""
        if not isinstance(other, Rational):
            raise UncomparableError(f"Cannot subtract {type(other).__name__} from a Rational.")
        return Rational(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        ).reduce()

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_negative(self) -> bool:
        return self.reduce()._numerator < 0

    def to_decimal(self) -> float:
        """Floating-point approximation. Lossy: 1/3 is not exactly representable."""
        return self._numerator / self._denominator

    def __sub__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.subtract(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) == 0

    def __hash__(self) -> int:
        reduced = self.reduce()
        return hash((reduced._numerator, reduced._denominator))

    def __lt__(self, other) -> bool:
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        return self.compare(other) >= 0

    def __float__(self) -> float:
        return self.to_decimal()

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"
