"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the pizza_manager package.
"""

from ..models import EatResult, Pizza
from ..structures import ArrayList, NOT_FOUND


class TerminalDisplay:
    """
    Pretty terminal output for the pizza collection and command results.

    All methods are classmethods so the CLI can call them without holding
    an instance.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    INSTRUCTIONS = (
        "(A)dd a random pizza",
        "Add a (H)undred random pizzas",
        "(E)at a fraction of a pizza",
        "Sort pizzas by (P)rice",
        "Sort pizzas by (S)ize",
        "Sort pizzas by (C)alories",
        "(B)inary search pizzas by calories",
        "(Q)uit",
    )

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_pizza(cls, index: int, pizza: Pizza):
        cls.print_subheader(f"Pizza #{index}")
        for line in str(pizza).splitlines():
            print(f"  {line}")

    @classmethod
    def print_pizzas(cls, pizzas: ArrayList):
        """Print every pizza in the collection, or a note if there are none."""
        if pizzas.is_empty():
            print(f"\n  {cls.DIM}No pizzas yet.{cls.RESET}")
            return
        for index, pizza in enumerate(pizzas):
            cls.print_pizza(index, pizza)

    @classmethod
    def print_instructions(cls):
        cls.print_header("Welcome to PizzaManager")
        for line in cls.INSTRUCTIONS:
            print(f"  {line}")
        print()

    @classmethod
    def print_info(cls, message: str):
        print(f"  {cls.GREEN}{message}{cls.RESET}")

    @classmethod
    def print_warning(cls, message: str):
        print(f"  {cls.YELLOW}{message}{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"  {cls.RED}✗ {message}{cls.RESET}")

    @classmethod
    def print_eat_result(cls, index: int, result: EatResult, pizza: Pizza):
        if result is EatResult.FINISHED:
            cls.print_info(f"Pizza #{index} is finished and has been removed.")
        else:
            cls.print_info(f"Pizza #{index} has {pizza.remaining} remaining.")

    @classmethod
    def print_search_result(cls, calories: int, index: int):
        if index == NOT_FOUND:
            cls.print_warning(f"Could not find a pizza with {calories} calories.")
        else:
            cls.print_info(f"Found a pizza with {calories} calories at index = {index}")
