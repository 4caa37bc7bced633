"""
Binary search over sorted collections.

The caller is responsible for sorting by the same key first; see
`sort_pizzas(pizzas, SortCriterion.CALORIES)`.
"""

import logging
from typing import Callable

from ..errors import PreconditionViolatedError
from ..models import Pizza
from ..structures import ArrayList, NOT_FOUND

logger = logging.getLogger(__name__)


def _calories(pizza: Pizza) -> int:
    return pizza.calories


def is_sorted_by(sequence: ArrayList, key: Callable) -> bool:
    """True if `key` is non-decreasing across the sequence."""
    return all(
        key(sequence.get(i)) <= key(sequence.get(i + 1))
        for i in range(sequence.length() - 1)
    )


def binary_search(sequence: ArrayList, target, key: Callable,
                  verify_sorted: bool = False) -> int:
    """
    Find an element whose key equals `target`.

    PRECONDITION:
    -------------
    `sequence` is sorted ascending by `key`. If it isn't, the search may
    miss elements that are present. Pass verify_sorted=True to check first
    (O(n), defeats the point of a binary search on large inputs).

    Returns:
        Index of a matching element, or NOT_FOUND
    """
    if verify_sorted and not is_sorted_by(sequence, key):
        raise PreconditionViolatedError("Binary search requires a sequence sorted by the search key.")

    low = 0
    high = sequence.length() - 1

    while low <= high:
        mid = (low + high) // 2
        mid_key = key(sequence.get(mid))

        if mid_key > target:
            high = mid - 1
        elif mid_key == target:
            return mid
        else:
            low = mid + 1

    return NOT_FOUND


def binary_search_by_calories(pizzas: ArrayList, calories: int,
                              verify_sorted: bool = False) -> int:
    """Find a pizza with exactly `calories` in a collection sorted by calories."""
    index = binary_search(pizzas, calories, _calories, verify_sorted=verify_sorted)
    logger.debug("Calorie search for %d -> %d", calories, index)
    return index
