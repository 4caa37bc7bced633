import random

import pytest

from pizza_manager.models import Circle, Ingredient, IngredientCategory, Money, Pizza
from pizza_manager.structures import ArrayList


@pytest.fixture
def make_pizza():
    """Factory for a pizza with one ingredient carrying the given calories and cost."""
    def _make(calories=100, cost=Money(1, 0), radius=10):
        topping = Ingredient(
            name="Test",
            category=IngredientCategory.BASE,
            cost=cost,
            calories=calories,
            description="A test topping.",
        )
        return Pizza(Circle(0, 0, radius=radius), [topping])
    return _make


@pytest.fixture
def pizza_list(make_pizza):
    """Factory for an ArrayList of pizzas with the given calorie counts, in order."""
    def _make(calories):
        pizzas = ArrayList()
        for count in calories:
            pizzas.append(make_pizza(calories=count))
        return pizzas
    return _make


@pytest.fixture
def rng():
    return random.Random(1234)
