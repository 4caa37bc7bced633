"""
Pizza Manager - Session Object.

This module contains the PizzaManager class that owns the pizza collection
and exposes every user operation as a plain method. It never prints; the
CLI passes its results to the presentation layer.
"""

import logging
import random
from typing import Optional

from .config import BULK_PIZZA_COUNT
from .engines import SortCriterion, binary_search_by_calories, sort_pizzas
from .errors import InvalidArgumentError
from .models import EatResult, Pizza, Rational
from .structures import ArrayList

logger = logging.getLogger(__name__)


class PizzaManager:
    """
    Holds the pizza collection for one session.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: SESSION STATE + COMMAND INTERFACE
    ═══════════════════════════════════════════════════════════════════════════

    Each menu command maps to one method:

        A  -> add_random_pizza()
        H  -> add_random_pizzas(100)
        E  -> eat(index, amount)
        P  -> sort(SortCriterion.PRICE)
        S  -> sort(SortCriterion.SIZE)
        C  -> sort(SortCriterion.CALORIES)
        B  -> search_by_calories(calories)

    Methods return data (pizzas, indexes, EatResult) and raise PizzaError
    subclasses on bad input. Text parsing lives in `pizza_manager.data`.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        manager = PizzaManager(rng=random.Random(7))
        manager.add_random_pizzas(3)
        manager.sort(SortCriterion.CALORIES)
        index = manager.search_by_calories(1200)
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self._pizzas: ArrayList[Pizza] = ArrayList()

    @property
    def pizzas(self) -> ArrayList:
        return self._pizzas

    @property
    def count(self) -> int:
        return self._pizzas.length()

    def add_pizza(self, pizza: Pizza) -> Pizza:
        self._pizzas.append(pizza)
        logger.debug("Added pizza #%d: %r", self._pizzas.length() - 1, pizza)
        return pizza

    def add_random_pizza(self) -> Pizza:
        return self.add_pizza(Pizza.random(self.rng))

    def add_random_pizzas(self, count: int = BULK_PIZZA_COUNT) -> int:
        """Add `count` random pizzas. Returns how many were added."""
        for _ in range(count):
            self.add_random_pizza()
        return count

    def eat(self, index: int, amount: Rational) -> EatResult:
        """
        Eat `amount` of the pizza at `index`.

        A pizza that is finished is removed from the collection, so later
        indexes shift down by one.
        """
        pizza = self._pizzas.get(index)
        result = pizza.eat(amount)

        if result is EatResult.FINISHED:
            self._pizzas.remove_at(index)
            logger.debug("Pizza #%d finished and removed", index)

        return result

    def sort(self, criterion: SortCriterion):
        sort_pizzas(self._pizzas, criterion)

    def search_by_calories(self, calories: int) -> int:
        """
        Sort by calories, then binary-search for a pizza with exactly
        `calories`.

        Returns:
            Index of a matching pizza in the (now sorted) collection, or -1
        """
        if calories <= 0:
            raise InvalidArgumentError(f"{calories} is an invalid number of calories.")

        sort_pizzas(self._pizzas, SortCriterion.CALORIES)
        return binary_search_by_calories(self._pizzas, calories)
