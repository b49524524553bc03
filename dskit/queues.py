"""Queues and deques: circular arrays, singly and doubly linked nodes."""

from dskit.errors import CapacityError, UnderflowError


class CircularQueue:
    """A FIFO queue in a fixed circular array.

    One slot always stays free so that a full queue can be told apart from
    an empty one: a queue of capacity ``n`` holds at most ``n - 1`` items.
    """

    def __init__(self, capacity=100):
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self._capacity = capacity
        self._slots = [None] * capacity
        self._front = 0
        self._rear = 0

    @property
    def capacity(self):
        """The size of the underlying array."""
        return self._capacity

    @property
    def front(self):
        """Index of the slot just before the first item."""
        return self._front

    @property
    def rear(self):
        """Index of the slot holding the last item."""
        return self._rear

    def enqueue(self, item):
        """Add an item at the rear."""
        if self.is_full():
            raise CapacityError()
        self._rear = (self._rear + 1) % self._capacity
        self._slots[self._rear] = item

    def dequeue(self):
        """Remove and return the item at the front."""
        if self.is_empty():
            raise UnderflowError()
        self._front = (self._front + 1) % self._capacity
        item = self._slots[self._front]
        self._slots[self._front] = None
        return item

    def peek(self):
        """Return the item at the front without removing it."""
        if self.is_empty():
            raise UnderflowError()
        return self._slots[(self._front + 1) % self._capacity]

    def is_empty(self):
        return self._front == self._rear

    def is_full(self):
        return self._front == (self._rear + 1) % self._capacity

    def __len__(self):
        return (self._rear - self._front) % self._capacity

    def __iter__(self):
        """Iterate from the front to the rear."""
        for offset in range(1, len(self) + 1):
            yield self._slots[(self._front + offset) % self._capacity]


class CircularDeque(CircularQueue):
    """A double-ended queue in a fixed circular array."""

    def add_rear(self, item):
        """Add an item at the rear."""
        self.enqueue(item)

    def add_front(self, item):
        """Add an item at the front."""
        if self.is_full():
            raise CapacityError()
        self._slots[self._front] = item
        self._front = (self._front - 1) % self._capacity

    def delete_front(self):
        """Remove and return the item at the front."""
        return self.dequeue()

    def delete_rear(self):
        """Remove and return the item at the rear."""
        if self.is_empty():
            raise UnderflowError()
        item = self._slots[self._rear]
        self._slots[self._rear] = None
        self._rear = (self._rear - 1) % self._capacity
        return item

    def get_front(self):
        """Return the item at the front without removing it."""
        return self.peek()

    def get_rear(self):
        """Return the item at the rear without removing it."""
        if self.is_empty():
            raise UnderflowError()
        return self._slots[self._rear]


class _Node:
    __slots__ = ("data", "link")

    def __init__(self, data, link=None):
        self.data = data
        self.link = link


class LinkedQueue:
    """A FIFO queue of singly linked nodes with front and rear references."""

    def __init__(self):
        self._front = None
        self._rear = None

    def enqueue(self, item):
        """Add an item at the rear."""
        node = _Node(item)
        if self._front is None:
            self._front = self._rear = node
        else:
            self._rear.link = node
            self._rear = node

    def dequeue(self):
        """Remove and return the item at the front."""
        if self._front is None:
            raise UnderflowError()
        node = self._front
        self._front = node.link
        if self._front is None:
            self._rear = None
        return node.data

    def peek(self):
        """Return the item at the front without removing it."""
        if self._front is None:
            raise UnderflowError()
        return self._front.data

    def is_empty(self):
        return self._front is None

    def clear(self):
        """Remove every item."""
        self._front = self._rear = None

    def __len__(self):
        return sum(1 for _ in self)

    def __iter__(self):
        """Iterate from the front to the rear."""
        node = self._front
        while node is not None:
            yield node.data
            node = node.link


class CircularLinkedQueue:
    """A FIFO queue on a circular singly linked list holding only the rear."""

    def __init__(self):
        self._rear = None

    def enqueue(self, item):
        """Add an item at the rear."""
        node = _Node(item)
        if self._rear is None:
            node.link = node
        else:
            node.link = self._rear.link
            self._rear.link = node
        self._rear = node

    def dequeue(self):
        """Remove and return the item at the front."""
        if self._rear is None:
            raise UnderflowError()
        head = self._rear.link
        if head is self._rear:
            self._rear = None
        else:
            self._rear.link = head.link
        return head.data

    def peek(self):
        """Return the item at the front without removing it."""
        if self._rear is None:
            raise UnderflowError()
        return self._rear.link.data

    def is_empty(self):
        return self._rear is None

    def clear(self):
        """Remove every item."""
        self._rear = None

    def __len__(self):
        return sum(1 for _ in self)

    def __iter__(self):
        """Iterate from the front to the rear."""
        if self._rear is None:
            return
        node = self._rear.link
        while node is not self._rear:
            yield node.data
            node = node.link
        yield self._rear.data


class _DNode:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data):
        self.data = data
        self.prev = None
        self.next = None


class LinkedDeque:
    """A double-ended queue of doubly linked nodes."""

    def __init__(self):
        self._front = None
        self._rear = None

    def add_front(self, item):
        """Add an item at the front."""
        node = _DNode(item)
        if self._front is None:
            self._front = self._rear = node
        else:
            node.next = self._front
            self._front.prev = node
            self._front = node

    def add_rear(self, item):
        """Add an item at the rear."""
        node = _DNode(item)
        if self._front is None:
            self._front = self._rear = node
        else:
            node.prev = self._rear
            self._rear.next = node
            self._rear = node

    def delete_front(self):
        """Remove and return the item at the front."""
        if self._front is None:
            raise UnderflowError()
        node = self._front
        if self._front is self._rear:
            self._front = self._rear = None
        else:
            self._front = node.next
            self._front.prev = None
        return node.data

    def delete_rear(self):
        """Remove and return the item at the rear."""
        if self._front is None:
            raise UnderflowError()
        node = self._rear
        if self._front is self._rear:
            self._front = self._rear = None
        else:
            self._rear = node.prev
            self._rear.next = None
        return node.data

    def get_front(self):
        """Return the item at the front without removing it."""
        if self._front is None:
            raise UnderflowError()
        return self._front.data

    def get_rear(self):
        """Return the item at the rear without removing it."""
        if self._front is None:
            raise UnderflowError()
        return self._rear.data

    def is_empty(self):
        return self._front is None

    def clear(self):
        """Remove every item."""
        self._front = self._rear = None

    def __len__(self):
        return sum(1 for _ in self)

    def __iter__(self):
        """Iterate from the front to the rear."""
        node = self._front
        while node is not None:
            yield node.data
            node = node.next