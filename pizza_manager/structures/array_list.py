"""
Growable sequence container.

ArrayList keeps its elements in a fixed-size backing list and tracks the
logical length separately. When an insert fills the storage, the storage
grows by a fixed number of slots.
"""

import logging
from typing import Generic, Iterator, List, Optional, TypeVar

from ..config import DEFAULT_ARRAY_SIZE, DEFAULT_GROWTH_SIZE
from ..errors import IndexOutOfRangeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Returned by index_of when nothing matches.
NOT_FOUND = -1


class ArrayList(Generic[T]):
    """
    Ordered, index-addressable collection of elements.

    STORAGE:
    --------
    - `_items` always has `capacity` slots
    - slots [0, length) hold live elements
    - slots [length, capacity) are unused (None)

    Capacity only ever grows, by `growth_size` slots at a time. Removing
    elements shrinks the logical length but keeps the storage.

    Usage:
        pizzas = ArrayList()
        pizzas.append(pizza)
        pizzas.insert(other, 0)
        first = pizzas.get(0)
    """

    def __init__(self, initial_capacity: int = DEFAULT_ARRAY_SIZE,
                 growth_size: int = DEFAULT_GROWTH_SIZE):
        if initial_capacity < 1 or growth_size < 1:
            raise ValueError("ArrayList capacity and growth size must be positive")
        self._items: List[Optional[T]] = [None] * initial_capacity
        self._length = 0
        self._growth_size = growth_size

    @property
    def capacity(self) -> int:
        """Number of slots in the backing storage."""
        return len(self._items)

    def length(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    def get(self, index: int) -> T:
        """Return the element at `index` without removing it."""
        self._check_index(index)
        return self._items[index]

    def set(self, value: T, index: int) -> T:
        """
        Replace the element at `index` and return the one it replaced.

        Only live slots can be replaced; writing one past the end is an
        insert, not a set.
        """
        self._check_index(index)
        previous = self._items[index]
        self._items[index] = value
        return previous

    def insert(self, value: T, index: int) -> bool:
        """
        Insert `value` at `index`, shifting later elements toward the end.

        An out-of-range index is reported (logged) rather than raised, so a
        bulk fill doesn't abort halfway through.

        Returns:
            True if the value was inserted, False if the index was rejected
        """
        if index < 0 or index > self._length:
            logger.warning("Failed to insert %r @ %d (length %d)", value, index, self._length)
            return False

        self._length += 1
        if self._length >= self.capacity:
            self._grow(self._growth_size)

        # Shift [index, length - 1) one slot toward the end
        for place in range(self._length - 1, index, -1):
            self._items[place] = self._items[place - 1]

        self._items[index] = value
        return True

    def append(self, value: T) -> bool:
        """Add `value` after the last element."""
        return self.insert(value, self._length)

    def remove_at(self, index: int) -> T:
        """Remove and return the element at `index`, collapsing the gap."""
        self._check_index(index)
        removed = self._items[index]

        self._length -= 1
        for place in range(index, self._length):
            self._items[place] = self._items[place + 1]
        self._items[self._length] = None

        return removed

    def index_of(self, value) -> int:
        """Index of the first element equal to `value`, or NOT_FOUND."""
        for index in range(self._length):
            if self._items[index] == value:
                return index
        return NOT_FOUND

    def _grow(self, growth: int):
        # Existing elements keep their positions; new slots are empty.
        self._items.extend([None] * growth)
        logger.debug("ArrayList grew to capacity %d", self.capacity)

    def _check_index(self, index: int):
        if index < 0 or index >= self._length:
            raise IndexOutOfRangeError(f"{index} is out of bounds for length {self._length}")

    # -------------------------------------------------------------------------
    # Python protocol support
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        for index in range(self._length):
            yield self._items[index]

    def __eq__(self, other) -> bool:
        if other is self:
            return True
        if not isinstance(other, ArrayList):
            return NotImplemented
        if self._length != other._length:
            return False
        return all(self._items[i] == other._items[i] for i in range(self._length))

    __hash__ = None

    def __str__(self) -> str:
        return "".join(f"{item}, " for item in self)

    def __repr__(self) -> str:
        return f"ArrayList([{', '.join(repr(item) for item in self)}])"
