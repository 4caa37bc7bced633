"""
Sorting and searching engines.

This package contains the algorithms that order and search a pizza
collection.
"""

from .sorting import (
    SortCriterion,
    compare_by_price,
    compare_by_size,
    compare_by_calories,
    selection_sort,
    sort_pizzas,
)
from .search import binary_search, binary_search_by_calories, is_sorted_by

__all__ = [
    "SortCriterion",
    "compare_by_price",
    "compare_by_size",
    "compare_by_calories",
    "selection_sort",
    "sort_pizzas",
    "binary_search",
    "binary_search_by_calories",
    "is_sorted_by",
]
