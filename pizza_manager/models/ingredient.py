"""
Ingredient data models.

Contains the IngredientCategory enum, the Ingredient dataclass and the
catalog of every ingredient a random pizza can be built from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..errors import InvalidArgumentError, UncomparableError
from .money import Money


class IngredientCategory(Enum):
    """
    The kinds of ingredient that go on a pizza.

    BASE: Sauce spread on the crust
    CHEESE: Melted on top of the base
    MEAT: Sliced or crumbled toppings
    VEGETABLE: Fresh toppings, each with a color
    """
    BASE = "base"
    CHEESE = "cheese"
    MEAT = "meat"
    VEGETABLE = "vegetable"


@dataclass(frozen=True)
class Ingredient:
    """
    A single priced, caloric pizza ingredient.

    Attributes:
        name: Short display name (e.g., "Pepperoni")
        category: IngredientCategory enum value
        cost: Price of adding this ingredient
        calories: Calorie count, always positive
        description: Human-readable description, never empty
        color: Only set for vegetables (e.g., "red")
    """
    name: str
    category: IngredientCategory
    cost: Money
    calories: int
    description: str
    color: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.cost, Money):
            raise InvalidArgumentError("Cannot set the cost of an Ingredient to a non-Money value.")
        if self.calories <= 0:
            raise InvalidArgumentError("Cannot set the calorie count of an Ingredient to a number <= zero.")
        if not self.description:
            raise InvalidArgumentError("Cannot set the description of an Ingredient to an empty string.")

    def compare(self, other: "Ingredient") -> int:
        """Ingredients are ordered by cost."""
        if not isinstance(other, Ingredient):
            raise UncomparableError(f"Cannot compare {type(other).__name__} with an Ingredient.")
        return self.cost.compare(other.cost)

    def __str__(self) -> str:
        return f"{self.description}; cost: {self.cost}; calories: {self.calories}"


# =============================================================================
# CATALOG
# =============================================================================

ALFREDO = Ingredient(
    name="Alfredo",
    category=IngredientCategory.BASE,
    cost=Money(3, 0),
    calories=322,
    description=("Alfredo sauce is melted Parmesan cheese that has emulsified "
                 "butter to form a smooth and rich substance."),
)

MARINARA = Ingredient(
    name="Marinara",
    category=IngredientCategory.BASE,
    cost=Money(2, 50),
    calories=260,
    description=("Marinara sauce is an Italian sauce that originated in Naples, "
                 "usually made with tomatoes, garlic, herbs, and onions."),
)

GOAT = Ingredient(
    name="Goat",
    category=IngredientCategory.CHEESE,
    cost=Money(3, 0),
    calories=408,
    description="Goat cheese is a cheese made from goat's milk.",
)

MOZZARELLA = Ingredient(
    name="Mozzarella",
    category=IngredientCategory.CHEESE,
    cost=Money(2, 25),
    calories=360,
    description=("A southern Italian cheese traditionally made from Italian "
                 "buffalo milk by the pasta filata method."),
)

OLIVE = Ingredient(
    name="Olive",
    category=IngredientCategory.VEGETABLE,
    cost=Money(3, 75),
    calories=16,
    description="An Olive is a small black drupe.",
    color="black",
)

PEPPER = Ingredient(
    name="Pepper",
    category=IngredientCategory.VEGETABLE,
    cost=Money(4, 50),
    calories=72,
    description=("(Bell) Pepper is a cultivar group of the species Capsicum annuum. "
                 "Each pepper is sliced into eighths and is fresh and crisp."),
    color="red",
)

PEPPERONI = Ingredient(
    name="Pepperoni",
    category=IngredientCategory.MEAT,
    cost=Money(3, 0),
    calories=300,
    description=("Pepperoni is an American variety of salami, usually made from "
                 "cured pork and beef mixed together."),
)

SAUSAGE = Ingredient(
    name="Sausage",
    category=IngredientCategory.MEAT,
    cost=Money(4, 50),
    calories=782,
    description=("Italian sausage is a style of pork sausage seasoned with fennel "
                 "and/or anise."),
)

# Random pizzas draw uniformly from this tuple.
INGREDIENT_CATALOG = (
    ALFREDO,
    GOAT,
    MARINARA,
    MOZZARELLA,
    OLIVE,
    PEPPER,
    PEPPERONI,
    SAUSAGE,
)
