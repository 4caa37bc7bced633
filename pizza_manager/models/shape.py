"""
Pizza shape models.

Shapes give a pizza its area. The set is closed: a pizza is either a
Circle or a Square.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

from ..config import DEFAULT_SHAPE_COLOR
from ..errors import InvalidArgumentError


@dataclass
class Shape(ABC):
    """
    Common position and color for every shape.

    Abstract: only Circle and Square can be built. `clone()` returns an
    independent copy so a pizza never shares its shape with the caller
    that set it.
    """
    x: int = 0
    y: int = 0
    color: str = DEFAULT_SHAPE_COLOR

    @property
    @abstractmethod
    def area(self) -> float:
        ...

    def clone(self) -> "Shape":
        return replace(self)


@dataclass
class Circle(Shape):
    radius: int = 1

    def __post_init__(self):
        if self.radius <= 0:
            raise InvalidArgumentError("Cannot create a circle with radius <= 0.")

    @property
    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def __str__(self) -> str:
        return f"Circle(r={self.radius})"


@dataclass
class Square(Shape):
    side: int = 1

    def __post_init__(self):
        if self.side <= 0:
            raise InvalidArgumentError("Cannot create a square with side length <= 0.")

    @property
    def area(self) -> float:
        return float(self.side * self.side)

    def __str__(self) -> str:
        return f"Square(side={self.side})"
