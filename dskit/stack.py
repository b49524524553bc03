"""Stacks: fixed-capacity array, growing array and linked nodes."""

from dskit.errors import CapacityError, UnderflowError


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity=100):
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items = []

    @property
    def capacity(self):
        """The largest number of items the stack can hold."""
        return self._capacity

    def push(self, item):
        """Put an item on top of the stack."""
        if self.is_full():
            raise CapacityError()
        self._items.append(item)

    def pop(self):
        """Remove and return the top item."""
        if self.is_empty():
            raise UnderflowError()
        return self._items.pop()

    def peek(self):
        """Return the top item without removing it."""
        if self.is_empty():
            raise UnderflowError()
        return self._items[-1]

    def is_empty(self):
        return not self._items

    def is_full(self):
        return len(self._items) == self._capacity

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)


class DynamicArrayStack:
    """A stack whose capacity doubles whenever it fills up."""

    def __init__(self, capacity=10):
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items = []

    @property
    def capacity(self):
        """The current capacity; it doubles when a push finds the stack full."""
        return self._capacity

    def push(self, item):
        """Put an item on top, growing the capacity if necessary."""
        if self.is_full():
            self._capacity *= 2
        self._items.append(item)

    def pop(self):
        """Remove and return the top item."""
        if self.is_empty():
            raise UnderflowError()
        return self._items.pop()

    def peek(self):
        """Return the top item without removing it."""
        if self.is_empty():
            raise UnderflowError()
        return self._items[-1]

    def is_empty(self):
        return not self._items

    def is_full(self):
        return len(self._items) == self._capacity

    def __len__(self):
        return len(self._items)


class _Node:
    __slots__ = ("data", "link")

    def __init__(self, data, link=None):
        self.data = data
        self.link = link


class LinkedStack:
    """A stack built from singly linked nodes."""

    def __init__(self):
        self._top = None

    def push(self, item):
        """Put an item on top of the stack."""
        self._top = _Node(item, self._top)

    def pop(self):
        """Remove and return the top item."""
        if self._top is None:
            raise UnderflowError()
        node = self._top
        self._top = node.link
        return node.data

    def peek(self):
        """Return the top item without removing it."""
        if self._top is None:
            raise UnderflowError()
        return self._top.data

    def is_empty(self):
        return self._top is None

    def clear(self):
        """Remove every item."""
        self._top = None

    def __len__(self):
        return sum(1 for _ in self)

    def __iter__(self):
        """Iterate from the top of the stack to the bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.link

    def insertion_order(self):
        """Return the items bottom first, i.e. in the order they were pushed."""
        items = list(self)
        items.reverse()
        return items