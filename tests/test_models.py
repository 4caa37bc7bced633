import math
import random

import pytest

from pizza_manager.config import MAX_NUM_RANDOM_INGREDIENTS
from pizza_manager.errors import InvalidArgumentError, UncomparableError
from pizza_manager.models import (
    INGREDIENT_CATALOG,
    MOZZARELLA,
    OLIVE,
    PEPPER,
    PEPPERONI,
    SAUSAGE,
    Circle,
    EatResult,
    Ingredient,
    IngredientCategory,
    Money,
    Pizza,
    Rational,
    Shape,
    Square,
)


# =============================================================================
# MONEY
# =============================================================================

@pytest.mark.parametrize("dollars, cents", [(-1, 0), (0, -1), (0, 100)])
def test_money_rejects_illegal_amounts(dollars, cents):
    with pytest.raises(InvalidArgumentError):
        Money(dollars, cents)


def test_money_addition_carries_cents():
    assert Money(3, 75) + Money(4, 50) == Money(8, 25)
    assert Money(0, 99).add(Money(0, 1)) == Money(1, 0)


def test_money_formatting():
    assert str(Money(2, 5)) == "$2.05"
    assert str(Money(3, 50)) == "$3.50"
    assert str(Money(10)) == "$10.00"


def test_money_ordering():
    assert Money(2, 50) < Money(3, 0)
    assert Money(3, 10) > Money(3, 5)
    assert Money(1, 0).compare(Money(1, 0)) == 0
    assert Money(1, 1).compare(Money(1, 0)) == 1
    with pytest.raises(UncomparableError):
        Money(1, 0).compare(1.0)


# =============================================================================
# SHAPES
# =============================================================================

def test_shape_areas():
    assert Circle(0, 0, radius=20).area == pytest.approx(math.pi * 400)
    assert Square(0, 0, side=10).area == 100.0


@pytest.mark.parametrize("factory", [
    lambda: Circle(0, 0, radius=0),
    lambda: Square(0, 0, side=-3),
])
def test_shape_rejects_non_positive_dimensions(factory):
    with pytest.raises(InvalidArgumentError):
        factory()


def test_shape_clone_is_independent():
    circle = Circle(1, 2, radius=5, color="red")
    copy = circle.clone()
    assert copy == circle
    assert copy is not circle
    copy.x = 10
    assert circle.x == 1


# =============================================================================
# INGREDIENTS
# =============================================================================

def test_catalog_values():
    assert len(INGREDIENT_CATALOG) == 8
    assert SAUSAGE.calories == 782
    assert SAUSAGE.cost == Money(4, 50)
    assert MOZZARELLA.cost == Money(2, 25)
    assert OLIVE.color == "black"
    assert PEPPER.category is IngredientCategory.VEGETABLE
    assert PEPPERONI.category is IngredientCategory.MEAT


def test_ingredient_validation():
    with pytest.raises(InvalidArgumentError):
        Ingredient("Air", IngredientCategory.BASE, Money(1, 0), 0, "Nothing at all.")
    with pytest.raises(InvalidArgumentError):
        Ingredient("Air", IngredientCategory.BASE, Money(1, 0), 10, "")


def test_ingredients_compare_by_cost():
    assert MOZZARELLA.compare(SAUSAGE) == -1
    assert PEPPER.compare(SAUSAGE) == 0
    with pytest.raises(UncomparableError):
        MOZZARELLA.compare("cheese")


def test_ingredient_str():
    assert str(OLIVE) == "An Olive is a small black drupe.; cost: $3.75; calories: 16"


# =============================================================================
# PIZZA
# =============================================================================

def test_pizza_totals_follow_ingredients():
    pizza = Pizza(Square(0, 0, side=10), [MOZZARELLA, SAUSAGE])
    assert pizza.calories == 360 + 782
    assert pizza.cost == Money(6, 75)
    assert pizza.ingredients.length() == 2

    pizza.add_ingredient(OLIVE)
    assert pizza.calories == 360 + 782 + 16
    assert pizza.cost == Money(10, 50)


def test_pizza_rejects_bad_ingredient_and_shape():
    pizza = Pizza(Square(0, 0, side=10))
    with pytest.raises(InvalidArgumentError):
        pizza.add_ingredient("cheese")
    with pytest.raises(InvalidArgumentError):
        pizza.set_shape(None)


def test_pizza_keeps_a_copy_of_its_shape():
    square = Square(0, 0, side=10)
    pizza = Pizza(square)
    square.side = 1
    assert pizza.shape.side == 10


def test_random_pizza_is_within_limits():
    rng = random.Random(42)
    for _ in range(50):
        pizza = Pizza.random(rng)
        count = pizza.ingredients.length()
        assert 1 <= count <= MAX_NUM_RANDOM_INGREDIENTS
        assert pizza.calories == sum(i.calories for i in pizza.ingredients)
        assert isinstance(pizza.shape, (Circle, Square))
        assert pizza.remaining == Rational(1, 1)


def test_remaining_area_scales_with_fraction():
    pizza = Pizza(Square(0, 0, side=10), [MOZZARELLA])
    assert pizza.remaining_area == 100.0
    pizza.eat(Rational(1, 4))
    assert pizza.remaining_area == pytest.approx(75.0)


def test_eat_until_finished():
    pizza = Pizza(Circle(0, 0, radius=20), [PEPPERONI])
    assert pizza.eat(Rational(1, 3)) is EatResult.REMAINING
    assert pizza.remaining == Rational(2, 3)
    assert pizza.eat(Rational(4, 6)) is EatResult.FINISHED
    assert pizza.remaining.is_zero()
    assert pizza.remaining_area == 0.0


@pytest.mark.parametrize("amount", [Rational(-1, 4), Rational(1, -4), Rational(5, 4)])
def test_eat_rejects_invalid_amounts(amount):
    pizza = Pizza(Circle(0, 0, radius=20), [PEPPERONI])
    with pytest.raises(InvalidArgumentError):
        pizza.eat(amount)
    assert pizza.remaining == Rational(1, 1)


def test_eat_from_finished_pizza_raises():
    pizza = Pizza(Circle(0, 0, radius=20), [PEPPERONI])
    pizza.eat(Rational(1, 1))
    with pytest.raises(InvalidArgumentError):
        pizza.eat(Rational(0, 1))


def test_set_remaining_bounds():
    pizza = Pizza(Circle(0, 0, radius=20), [PEPPERONI])
    pizza.set_remaining(Rational(2, 4))
    assert (pizza.remaining.numerator, pizza.remaining.denominator) == (1, 2)
    with pytest.raises(InvalidArgumentError):
        pizza.set_remaining(Rational(3, 2))
    with pytest.raises(InvalidArgumentError):
        pizza.set_remaining(Rational(-1, 2))


def test_pizza_str_lists_ingredients():
    pizza = Pizza(Square(0, 0, side=10), [OLIVE])
    text = str(pizza)
    assert "Cost: $3.75" in text
    assert "Calories: 16" in text
    assert "small black drupe" in text


def test_bare_shape_cannot_be_built():
    with pytest.raises(TypeError):
        Shape()
