"""
Command-Line Interface for the Pizza Manager.

This module provides the interactive menu loop. It reads commands,
hands them to PizzaManager and passes the results to TerminalDisplay.

Run with:
    python -m pizza_manager
    pizza-manager
"""

import logging
import random

from .config import BULK_PIZZA_COUNT, LOG_LEVEL, random_seed
from .data import Command, parse_calories, parse_command, parse_fraction, parse_index
from .engines import SortCriterion
from .errors import PizzaError
from .manager import PizzaManager
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)

_SORT_COMMANDS = {
    Command.SORT_BY_PRICE: SortCriterion.PRICE,
    Command.SORT_BY_SIZE: SortCriterion.SIZE,
    Command.SORT_BY_CALORIES: SortCriterion.CALORIES,
}


def _eat_some_pizza(manager: PizzaManager):
    """Ask for an index and a fraction, then eat that much of the pizza."""
    if manager.count == 0:
        TerminalDisplay.print_warning("There are currently no pizzas to be eaten.")
        return

    index = parse_index(
        input(f"  Index of the pizza to eat from (valid indexes: 0-{manager.count - 1}): "),
        manager.count,
    )
    pizza = manager.pizzas.get(index)
    amount = parse_fraction(
        input(f"  Fraction to eat from the remaining {pizza.remaining} (format a/b): ")
    )

    result = manager.eat(index, amount)
    TerminalDisplay.print_eat_result(index, result, pizza)


def _binary_search(manager: PizzaManager):
    """Ask for a calorie count, sort by calories and search for it."""
    TerminalDisplay.print_info("(B)inary search over pizzas by calories. Sorting first.")
    calories = parse_calories(input("  What calorie count are you looking for? "))
    index = manager.search_by_calories(calories)
    TerminalDisplay.print_search_result(calories, index)


def run(manager: PizzaManager):
    """
    Run the menu loop until the user quits or input ends.

    Each iteration shows the collection and the menu, reads one command
    and executes it. A PizzaError aborts only the current command.
    """
    while True:
        TerminalDisplay.print_pizzas(manager.pizzas)
        TerminalDisplay.print_instructions()

        try:
            command = parse_command(input("  Selection: "))
        except EOFError:
            command = Command.QUIT

        if command is None:
            TerminalDisplay.print_warning("Unrecognized input - try again")
            continue

        if command is Command.QUIT:
            TerminalDisplay.print_info("(Q)uitting!")
            return

        try:
            if command is Command.ADD:
                TerminalDisplay.print_info("Adding a random pizza.")
                manager.add_random_pizza()
            elif command is Command.ADD_HUNDRED:
                TerminalDisplay.print_info(f"Adding {BULK_PIZZA_COUNT} random pizzas.")
                manager.add_random_pizzas(BULK_PIZZA_COUNT)
            elif command is Command.EAT:
                _eat_some_pizza(manager)
            elif command is Command.BINARY_SEARCH:
                _binary_search(manager)
            else:
                criterion = _SORT_COMMANDS[command]
                TerminalDisplay.print_info(f"Sorting pizzas by {criterion.value}")
                manager.sort(criterion)
        except PizzaError as error:
            logger.debug("Command %s failed: %s", command.name, error)
            TerminalDisplay.print_error(str(error))
        except EOFError:
            TerminalDisplay.print_info("(Q)uitting!")
            return


def main():
    """Entry point: configure logging, build a manager and run the menu loop."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    seed = random_seed()
    if seed is not None:
        logger.info("Using random seed %d", seed)

    run(PizzaManager(rng=random.Random(seed)))


if __name__ == "__main__":
    main()
