"""
Exceptions raised by the pizza manager.

Every error derives from PizzaError so the CLI can catch one type per
command. The concrete classes also derive from the closest built-in
exception, so callers that expect ValueError/IndexError/TypeError keep
working.
"""


class PizzaError(Exception):
    """Base class for every error raised while working with pizzas."""

    def __init__(self, message: str = "An error has occurred when working with a pizza!"):
        super().__init__(message)


class InvalidArgumentError(PizzaError, ValueError):
    """A value that cannot be constructed or used (zero denominator, negative money, ...)."""
    pass


class IndexOutOfRangeError(PizzaError, IndexError):
    """Container access outside [0, length)."""
    pass


class PreconditionViolatedError(PizzaError):
    """An operation was invoked on data that breaks its documented precondition."""
    pass


class UncomparableError(PizzaError, TypeError):
    """A comparison between incompatible types."""
    pass
