"""
Pizza Manager Package
=====================

A small console simulation that manages a collection of randomly generated
pizzas: add them, eat fractions of them, sort them and search them.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────┐  ┌─────────────────────────────────┐  │
│  │  ArrayList  │  │  Rational   │  │  selection_sort / binary_search │  │
│  │ (container) │  │ (fractions) │  │  (comparator-driven engines)    │  │
│  └─────────────┘  └─────────────┘  └─────────────────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │  Pizza, Ingredient, Money, Circle/Square  (domain models)        │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                          PizzaManager                                    │
│        (Session object - owns the collection, one method per command)   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│        cli.main (menu loop)  +  TerminalDisplay (all printing)          │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

pizza_manager/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── errors.py            # PizzaError and subclasses
├── manager.py           # PizzaManager session object
├── cli.py               # Command-line interface
│
├── structures/
│   └── array_list.py    # ArrayList, NOT_FOUND
│
├── models/
│   ├── rational.py      # Rational
│   ├── money.py         # Money
│   ├── shape.py         # Shape, Circle, Square
│   ├── ingredient.py    # Ingredient, IngredientCategory, catalog
│   └── pizza.py         # Pizza, EatResult
│
├── engines/
│   ├── sorting.py       # comparators, SortCriterion, selection_sort
│   └── search.py        # binary_search, binary_search_by_calories
│
├── data/
│   └── parser.py        # Command, parse_fraction, parse_index, ...
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from pizza_manager import PizzaManager, Rational, SortCriterion

    manager = PizzaManager()
    manager.add_random_pizzas(10)
    manager.eat(0, Rational(1, 3))
    manager.sort(SortCriterion.PRICE)
    index = manager.search_by_calories(1200)

Running from command line:

    python -m pizza_manager

"""

# Version
__version__ = "1.0.0"

# Main exports
from .manager import PizzaManager
from .cli import main

# Model exports
from .models import (
    Rational,
    Money,
    Shape,
    Circle,
    Square,
    IngredientCategory,
    Ingredient,
    INGREDIENT_CATALOG,
    Pizza,
    EatResult,
)

# Container exports
from .structures import ArrayList, NOT_FOUND

# Engine exports
from .engines import (
    SortCriterion,
    compare_by_price,
    compare_by_size,
    compare_by_calories,
    selection_sort,
    sort_pizzas,
    binary_search,
    binary_search_by_calories,
)

# Error exports
from .errors import (
    PizzaError,
    InvalidArgumentError,
    IndexOutOfRangeError,
    PreconditionViolatedError,
    UncomparableError,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "PizzaManager",
    "main",
    # Models
    "Rational",
    "Money",
    "Shape",
    "Circle",
    "Square",
    "IngredientCategory",
    "Ingredient",
    "INGREDIENT_CATALOG",
    "Pizza",
    "EatResult",
    # Containers
    "ArrayList",
    "NOT_FOUND",
    # Engines
    "SortCriterion",
    "compare_by_price",
    "compare_by_size",
    "compare_by_calories",
    "selection_sort",
    "sort_pizzas",
    "binary_search",
    "binary_search_by_calories",
    # Errors
    "PizzaError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "PreconditionViolatedError",
    "UncomparableError",
]
