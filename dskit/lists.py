"""Lists: fixed-capacity array, singly linked and doubly linked."""

from dskit.errors import CapacityError, InvalidPositionError, UnderflowError


class ArrayList:
    """A positional list stored in an array of fixed capacity."""

    def __init__(self, capacity=100):
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items = []

    @property
    def capacity(self):
        """The largest number of items the list can hold."""
        return self._capacity

    def _check_position(self, pos):
        if not 0 <= pos < len(self._items):
            raise InvalidPositionError()

    def insert(self, pos, item):
        """Insert ``item`` so that it ends up at position ``pos``."""
        if self.is_full():
            raise CapacityError()
        if not 0 <= pos <= len(self._items):
            raise InvalidPositionError()
        self._items.insert(pos, item)

    def delete(self, pos):
        """Remove and return the item at ``pos``."""
        if self.is_empty():
            raise UnderflowError()
        self._check_position(pos)
        return self._items.pop(pos)

    def __getitem__(self, pos):
        if self.is_empty():
            raise UnderflowError()
        self._check_position(pos)
        return self._items[pos]

    def append(self, item):
        """Add ``item`` at the end."""
        self.insert(len(self._items), item)

    def pop(self):
        """Remove and return the last item."""
        return self.delete(len(self._items) - 1)

    def replace(self, pos, item):
        """Overwrite the item at ``pos``."""
        self._check_position(pos)
        self._items[pos] = item

    def find(self, item):
        """Return the position of the first item equal to ``item``, or -1."""
        for pos, value in enumerate(self._items):
            if value == item:
                return pos
        return -1

    def is_empty(self):
        return not self._items

    def is_full(self):
        return len(self._items) == self._capacity

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)


class _Node:
    __slots__ = ("data", "link")

    def __init__(self, data, link=None):
        self.data = data
        self.link = link


class LinkedList:
    """A positional list of singly linked nodes."""

    def __init__(self):
        self._head = None

    def _node_at(self, pos):
        if pos < 0:
            return None
        node = self._head
        for _ in range(pos):
            if node is None:
                return None
            node = node.link
        return node

    def insert(self, pos, item):
        """Insert ``item`` so that it ends up at position ``pos``."""
        if pos == 0:
            self._head = _Node(item, self._head)
            return
        before = self._node_at(pos - 1)
        if before is None:
            raise InvalidPositionError()
        before.link = _Node(item, before.link)

    def delete(self, pos):
        """Remove and return the item at ``pos``."""
        if self._head is None:
            raise UnderflowError()
        node = self._node_at(pos)
        if node is None:
            raise InvalidPositionError()
        if pos == 0:
            self._head = node.link
        else:
            self._node_at(pos - 1).link = node.link
        return node.data

    def __getitem__(self, pos):
        node = self._node_at(pos)
        if node is None:
            raise InvalidPositionError()
        return node.data

    def append(self, item):
        """Add ``item`` at the end."""
        self.insert(len(self), item)

    def pop(self):
        """Remove and return the last item."""
        return self.delete(len(self) - 1)

    def replace(self, pos, item):
        """Overwrite the item at ``pos``."""
        node = self._node_at(pos)
        if node is None:
            raise InvalidPositionError()
        node.data = item

    def find(self, item):
        """Return the position of the first item equal to ``item``, or -1."""
        for pos, value in enumerate(self):
            if value == item:
                return pos
        return -1

    def is_empty(self):
        return self._head is None

    def clear(self):
        """Remove every item."""
        self._head = None

    def __len__(self):
        return sum(1 for _ in self)

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.data
            node = node.link


class _DNode:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data=None):
        self.data = data
        self.prev = None
        self.next = None


class DoublyLinkedList:
    """A positional list of doubly linked nodes behind a header node."""

    def __init__(self):
        self._org = _DNode()

    def _node_at(self, pos):
        """Return the node at ``pos``; position -1 is the header node."""
        node = self._org
        for _ in range(pos + 1):
            if node is None:
                return None
            node = node.next
        return node

    def insert(self, pos, item):
        """Insert ``item`` so that it ends up at position ``pos``."""
        if pos < 0:
            raise InvalidPositionError()
        before = self._node_at(pos - 1)
        if before is None:
            raise InvalidPositionError()
        node = _DNode(item)
        node.next = before.next
        node.prev = before
        before.next = node
        if node.next is not None:
            node.next.prev = node

    def delete(self, pos):
        """Remove and return the item at ``pos``."""
        node = self._node_at(pos) if pos >= 0 else None
        if node is None:
            raise InvalidPositionError()
        node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        return node.data

    def __getitem__(self, pos):
        node = self._node_at(pos) if pos >= 0 else None
        if node is None:
            raise InvalidPositionError()
        return node.data

    def is_empty(self):
        return self._org.next is None

    def clear(self):
        """Remove every item."""
        self._org.next = None

    def __len__(self):
        return sum(1 for _ in self)

    def __iter__(self):
        node = self._org.next
        while node is not None:
            yield node.data
            node = node.next