"""
Comparator-driven sorting.

This module handles ordering a pizza collection by price, remaining size
or calories using selection sort over an ArrayList.
"""

import logging
from enum import Enum
from typing import Callable, TypeVar

from ..errors import UncomparableError
from ..models import Pizza
from ..structures import ArrayList

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Three-way comparison: negative, zero or positive.
Comparator = Callable[[T, T], int]


def _three_way(ours, theirs) -> int:
    if ours > theirs:
        return 1
    if ours == theirs:
        return 0
    return -1


def _check_pizzas(a, b):
    if not isinstance(a, Pizza) or not isinstance(b, Pizza):
        raise UncomparableError("Cannot compare non-Pizza objects to a Pizza object.")


def compare_by_price(a: Pizza, b: Pizza) -> int:
    """Compare two pizzas by total cost."""
    _check_pizzas(a, b)
    return a.cost.compare(b.cost)


def compare_by_size(a: Pizza, b: Pizza) -> int:
    """Compare two pizzas by remaining covered area."""
    _check_pizzas(a, b)
    return _three_way(a.remaining_area, b.remaining_area)


def compare_by_calories(a: Pizza, b: Pizza) -> int:
    """Compare two pizzas by total calories."""
    _check_pizzas(a, b)
    return _three_way(a.calories, b.calories)


class SortCriterion(Enum):
    """
    The orders a pizza collection can be sorted into.

    PRICE: Cheapest first
    SIZE: Least remaining area first
    CALORIES: Fewest calories first
    """
    PRICE = "price"
    SIZE = "size"
    CALORIES = "calories"

    @property
    def comparator(self) -> Comparator:
        return _COMPARATORS[self]


_COMPARATORS = {
    SortCriterion.PRICE: compare_by_price,
    SortCriterion.SIZE: compare_by_size,
    SortCriterion.CALORIES: compare_by_calories,
}


def selection_sort(sequence: ArrayList, compare: Comparator) -> ArrayList:
    """
    Sort `sequence` ascending in place.

    For each position i, find the smallest element in [i, length) under
    `compare` and swap it into i. O(n^2) comparisons, at most n swaps.
    Not stable: equal elements may change relative order.

    Returns:
        The same sequence, for chaining
    """
    length = sequence.length()
    for i in range(length):
        smallest = i
        for j in range(i + 1, length):
            if compare(sequence.get(j), sequence.get(smallest)) < 0:
                smallest = j

        if smallest != i:
            displaced = sequence.set(sequence.get(smallest), i)
            sequence.set(displaced, smallest)

    return sequence


def sort_pizzas(pizzas: ArrayList, criterion: SortCriterion) -> ArrayList:
    """Sort a pizza collection in place by one of the named criteria."""
    logger.debug("Sorting %d pizzas by %s", pizzas.length(), criterion.value)
    return selection_sort(pizzas, criterion.comparator)
