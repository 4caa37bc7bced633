"""
Pizza data model.

A pizza is a shape covered in ingredients, with a remaining fraction that
shrinks as it gets eaten.
"""

import random
from enum import Enum
from typing import Iterable, Optional

from ..config import (
    DEFAULT_RANDOM_CIRCLE_RADIUS,
    DEFAULT_RANDOM_SQUARE_SIDE_LENGTH,
    MAX_NUM_RANDOM_INGREDIENTS,
)
from ..errors import InvalidArgumentError
from ..structures import ArrayList
from .ingredient import INGREDIENT_CATALOG, Ingredient
from .money import Money
from .rational import Rational
from .shape import Circle, Shape, Square

_NONE_LEFT = Rational(0, 1)
_WHOLE = Rational(1, 1)


class EatResult(Enum):
    """
    Outcome of eating part of a pizza.

    REMAINING: Some pizza is still left
    FINISHED: The pizza is gone and can be removed from the collection
    """
    REMAINING = "remaining"
    FINISHED = "finished"


class Pizza:
    """
    A pizza made of ingredients on a circular or square crust.

    Cost and calories are running totals kept in step with the ingredient
    list. The remaining size starts at 1/1 and is always kept reduced.

    Usage:
        pizza = Pizza.random()
        pizza.eat(Rational(1, 4))       # EatResult.REMAINING, 3/4 left
        pizza.eat(Rational(3, 4))       # EatResult.FINISHED
    """

    def __init__(self, shape: Shape, ingredients: Iterable[Ingredient] = ()):
        self._shape = None
        self._ingredients: ArrayList[Ingredient] = ArrayList()
        self._cost = Money.zero()
        self._calories = 0
        self._remaining = _WHOLE

        self.set_shape(shape)
        for ingredient in ingredients:
            self.add_ingredient(ingredient)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> "Pizza":
        """
        Build a pizza with a random shape and 1 to MAX_NUM_RANDOM_INGREDIENTS
        random ingredients from the catalog.
        """
        rng = rng or random.Random()

        if rng.random() > 0.5:
            shape = Circle(0, 0, radius=DEFAULT_RANDOM_CIRCLE_RADIUS)
        else:
            shape = Square(0, 0, side=DEFAULT_RANDOM_SQUARE_SIDE_LENGTH)

        count = rng.randint(1, MAX_NUM_RANDOM_INGREDIENTS)
        return cls(shape, (rng.choice(INGREDIENT_CATALOG) for _ in range(count)))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def ingredients(self) -> ArrayList:
        return self._ingredients

    @property
    def cost(self) -> Money:
        return self._cost

    @property
    def calories(self) -> int:
        return self._calories

    @property
    def remaining(self) -> Rational:
        return self._remaining

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def remaining_area(self) -> float:
        """Area still covered by pizza: remaining fraction times shape area."""
        return self._remaining.to_decimal() * self._shape.area

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def set_shape(self, shape: Shape):
        if not isinstance(shape, Shape):
            raise InvalidArgumentError("Cannot set the shape of a pizza to a non-Shape value.")
        self._shape = shape.clone()

    def set_remaining(self, remaining: Rational):
        remaining = remaining.reduce()
        if remaining < _NONE_LEFT:
            raise InvalidArgumentError("Cannot set the remaining size of a pizza to less than zero.")
        if remaining > _WHOLE:
            raise InvalidArgumentError("Cannot set the remaining size of a pizza to more than one.")
        self._remaining = remaining

    def add_ingredient(self, ingredient: Ingredient):
        if not isinstance(ingredient, Ingredient):
            raise InvalidArgumentError("Cannot add a non-Ingredient to a pizza.")
        self._ingredients.append(ingredient)
        self._calories += ingredient.calories
        self._cost = self._cost + ingredient.cost

    def eat(self, amount: Rational) -> EatResult:
        """
        Eat `amount` of the whole pizza.

        Raises:
            InvalidArgumentError: amount is negative, the pizza is already
                gone, or amount is more than what is left
        """
        if amount.is_negative():
            raise InvalidArgumentError("Cannot eat a negative amount of pizza.")
        if self._remaining.is_zero():
            raise InvalidArgumentError("Cannot eat any amount from a pizza whose remaining size is zero.")

        left = self._remaining.subtract(amount)
        if left.is_negative():
            raise InvalidArgumentError(
                f"Cannot eat {amount} of a pizza with only {self._remaining} remaining."
            )

        self._remaining = left
        return EatResult.FINISHED if left.is_zero() else EatResult.REMAINING

    def __str__(self) -> str:
        lines = [
            f"Cost: {self._cost}",
            f"Calories: {self._calories}",
            f"Size: {self.remaining_area:.2f} ({self._remaining} of {self._shape})",
            "Ingredients:",
        ]
        lines.extend(f"\t{ingredient}" for ingredient in self._ingredients)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (f"Pizza(cost={self._cost}, calories={self._calories}, "
                f"remaining={self._remaining}, shape={self._shape})")
