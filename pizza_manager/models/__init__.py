"""
Data models for the pizza manager.

This package contains the value types and domain classes used throughout
the system: exact fractions, money, shapes, ingredients and pizzas.
"""

from .rational import Rational, gcd
from .money import Money
from .shape import Shape, Circle, Square
from .ingredient import (
    IngredientCategory,
    Ingredient,
    INGREDIENT_CATALOG,
    ALFREDO,
    MARINARA,
    GOAT,
    MOZZARELLA,
    OLIVE,
    PEPPER,
    PEPPERONI,
    SAUSAGE,
)
from .pizza import Pizza, EatResult

__all__ = [
    # Value types
    "Rational",
    "gcd",
    "Money",
    # Shapes
    "Shape",
    "Circle",
    "Square",
    # Ingredients
    "IngredientCategory",
    "Ingredient",
    "INGREDIENT_CATALOG",
    "ALFREDO",
    "MARINARA",
    "GOAT",
    "MOZZARELLA",
    "OLIVE",
    "PEPPER",
    "PEPPERONI",
    "SAUSAGE",
    # Pizza
    "Pizza",
    "EatResult",
]
