import pytest

from pizza_manager.errors import InvalidArgumentError, UncomparableError
from pizza_manager.models import Rational, gcd


def test_zero_denominator_rejected():
    with pytest.raises(InvalidArgumentError):
        Rational(3, 0)


def test_not_normalized_on_construction():
    r = Rational(6, -8)
    assert r.numerator == 6
    assert r.denominator == -8
    assert str(r) == "6/-8"


@pytest.mark.parametrize("n, d, expected", [
    (6, -8, (-3, 4)),
    (-6, -8, (3, 4)),
    (-6, 8, (-3, 4)),
    (10, 5, (2, 1)),
    (7, 13, (7, 13)),
    (0, -5, (0, 1)),
    (0, 9, (0, 1)),
])
def test_reduce_canonical_form(n, d, expected):
    reduced = Rational(n, d).reduce()
    assert (reduced.numerator, reduced.denominator) == expected


def test_reduce_invariants_over_range():
    for n in range(-12, 13):
        for d in range(-12, 13):
            if d == 0:
                continue
            reduced = Rational(n, d).reduce()
            assert reduced.denominator > 0
            if reduced.numerator == 0:
                assert reduced.denominator == 1
            else:
                assert gcd(abs(reduced.numerator), reduced.denominator) == 1


def test_reduce_returns_new_value():
    original = Rational(4, 8)
    reduced = original.reduce()
    assert reduced is not original
    assert (original.numerator, original.denominator) == (4, 8)


def test_compare_cross_multiplies_reduced_values():
    assert Rational(1, 2).compare(Rational(2, 4)) == 0
    assert Rational(1, 3).compare(Rational(1, 2)) == -1
    assert Rational(3, 4).compare(Rational(2, 3)) == 1
    # Sign on the denominator must not flip the ordering
    assert Rational(1, -2).compare(Rational(1, 4)) == -1
    assert Rational(-1, -2).compare(Rational(1, 4)) == 1


def test_compare_with_non_rational_raises():
    with pytest.raises(UncomparableError):
        Rational(1, 2).compare(0.5)


def test_equality_uses_value():
    assert Rational(6, -8) == Rational(-3, 4)
    assert Rational(-6, -8) == Rational(3, 4)
    assert Rational(2, 4) != Rational(3, 4)
    assert hash(Rational(2, 4)) == hash(Rational(1, 2))


def test_ordering_operators():
    assert Rational(1, 3) < Rational(1, 2)
    assert Rational(1, 2) <= Rational(2, 4)
    assert Rational(5, 4) > Rational(1, 1)


def test_subtract():
    assert Rational(1, 1).subtract(Rational(1, 4)) == Rational(3, 4)
    left = Rational(3, 4) - Rational(1, 4)
    assert (left.numerator, left.denominator) == (1, 2)
    assert (Rational(1, 2) - Rational(1, 2)).is_zero()


def test_to_decimal_is_approximate():
    assert Rational(1, 4).to_decimal() == 0.25
    assert Rational(1, 3).to_decimal() == pytest.approx(0.3333333)
    assert Rational(3, -4).to_decimal() == -0.75


def test_is_negative():
    assert Rational(1, -2).is_negative()
    assert not Rational(-1, -2).is_negative()
    assert not Rational(0, -2).is_negative()


def test_gcd():
    assert gcd(12, 8) == 4
    assert gcd(7, 13) == 1
    assert gcd(5, 0) == 5


@pytest.mark.parametrize("n, d", [(1, 0.5), (1.9, 2), ("1", 2), (1, None)])
def test_non_integer_parts_rejected(n, d):
    with pytest.raises(InvalidArgumentError):
        Rational(n, d)
