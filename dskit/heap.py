"""Array-based binary heaps: a max-heap and a heap ordered by a compare function."""

from dskit.errors import CapacityError, UnderflowError

MAX_HSIZE = 100


def _check_capacity(capacity):
    if capacity < 2:
        raise ValueError("capacity must be at least 2")


class MaxHeap:
    """A max-heap of comparable items kept in a 1-based array."""

    def __init__(self, capacity=MAX_HSIZE):
        _check_capacity(capacity)
        self._capacity = capacity
        self._slots = [None]

    @property
    def capacity(self):
        """The array size; the heap holds at most ``capacity - 1`` items."""
        return self._capacity

    def push(self, item):
        """Add an item and move it up to its place."""
        if self.is_full():
            raise CapacityError()
        slots = self._slots
        slots.append(item)
        i = len(self)
        while i != 1 and slots[i] > slots[i // 2]:
            slots[i], slots[i // 2] = slots[i // 2], slots[i]
            i //= 2

    def pop(self):
        """Remove and return the largest item."""
        if self.is_empty():
            raise UnderflowError()
        slots = self._slots
        root = slots[1]
        last = slots.pop()
        size = len(self)
        if size == 0:
            return root
        slots[1] = last
        i = 1
        while 2 * i <= size:
            left, right = 2 * i, 2 * i + 1
            if right <= size and not slots[left] > slots[right]:
                child = right
            else:
                child = left
            if last > slots[child]:
                break
            slots[i], slots[child] = slots[child], last
            i = child
        return root

    def peek(self):
        """Return the largest item without removing it."""
        if self.is_empty():
            raise UnderflowError()
        return self._slots[1]

    def is_empty(self):
        return len(self._slots) == 1

    def is_full(self):
        return len(self) == self._capacity - 1

    def __len__(self):
        return len(self._slots) - 1

    def __iter__(self):
        """Iterate over the items in array order, root first."""
        return iter(self._slots[1:])


class PriorityHeap:
    """A heap whose root is the item of highest priority.

    ``compare(a, b)`` is positive when ``a`` has higher priority than ``b``,
    zero when they are equal and negative otherwise.
    """

    def __init__(self, compare, capacity=MAX_HSIZE):
        _check_capacity(capacity)
        self._capacity = capacity
        self._slots = [None]
        self._compare = compare

    @property
    def capacity(self):
        """The array size; the heap holds at most ``capacity - 1`` items."""
        return self._capacity

    def push(self, item):
        """Add an item, moving lower-priority parents down as it rises."""
        if self.is_full():
            raise CapacityError()
        slots = self._slots
        slots.append(None)
        i = len(self)
        while i != 1 and self._compare(item, slots[i // 2]) > 0:
            slots[i] = slots[i // 2]
            i //= 2
        slots[i] = item

    def pop(self):
        """Remove and return the item of highest priority."""
        if self.is_empty():
            raise UnderflowError()
        slots = self._slots
        root = slots[1]
        last = slots.pop()
        size = len(self)
        if size == 0:
            return root
        pid, cid = 1, 2
        while cid <= size:
            if cid < size and self._compare(slots[cid], slots[cid + 1]) < 0:
                cid += 1
            if self._compare(last, slots[cid]) >= 0:
                break
            slots[pid] = slots[cid]
            pid = cid
            cid *= 2
        slots[pid] = last
        return root

    def peek(self):
        """Return the item of highest priority without removing it."""
        if self.is_empty():
            raise UnderflowError()
        return self._slots[1]

    def is_empty(self):
        return len(self._slots) == 1

    def is_full(self):
        return len(self) == self._capacity - 1

    def __len__(self):
        return len(self._slots) - 1


def is_max_heap(values, length=None):
    """Return True if ``values[1:length]`` satisfies the max-heap property.

    Slot 0 is unused, as in the heaps above; ``length`` defaults to the
    length of ``values``.
    """
    if length is None:
        length = len(values)
    for i in range(1, length // 2 + 1):
        for child in (2 * i, 2 * i + 1):
            if child < length and values[i] < values[child]:
                return False
    return True