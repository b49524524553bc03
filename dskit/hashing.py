"""Hash tables of integer keys: separate chaining and linear probing."""

from dskit.errors import CapacityError

DEFAULT_SIZE = 13
EMPTY = 0
DELETED = -1


class ChainedHashTable:
    """A hash table whose buckets are chains; new keys go to the chain's front."""

    def __init__(self, size=DEFAULT_SIZE):
        if size < 1:
            raise ValueError("table size must be positive")
        self._size = size
        self._buckets = [[] for _ in range(size)]

    def _hash(self, key):
        return key % self._size

    def insert(self, key):
        """Add ``key`` at the front of its chain."""
        self._buckets[self._hash(key)].insert(0, key)

    def search(self, key):
        """Return True if ``key`` is in the table."""
        return key in self._buckets[self._hash(key)]

    def __contains__(self, key):
        return self.search(key)

    def delete(self, key):
        """Remove the first occurrence of ``key``; return whether one was found."""
        bucket = self._buckets[self._hash(key)]
        if key in bucket:
            bucket.remove(key)
            return True
        return False

    def buckets(self):
        """Return a copy of every chain, front first."""
        return [list(bucket) for bucket in self._buckets]


class LinearProbingHashTable:
    """An open-addressing hash table probing linearly.

    Slots hold ``EMPTY`` (never used), ``DELETED`` (freed) or a key, so
    those two values cannot be stored as keys.
    """

    def __init__(self, size=DEFAULT_SIZE):
        if size < 1:
            raise ValueError("table size must be positive")
        self._size = size
        self._slots = [EMPTY] * size

    def _probe(self, key):
        start = key % self._size
        for k in range(self._size):
            yield (start + k) % self._size

    def insert(self, key):
        """Store ``key`` in the first free slot of its probe sequence; return the index."""
        if key in (EMPTY, DELETED):
            raise ValueError(f"{key} is reserved and cannot be stored")
        for i in self._probe(key):
            if self._slots[i] in (EMPTY, DELETED):
                self._slots[i] = key
                return i
        raise CapacityError()

    def search(self, key):
        """Return the index holding ``key``, or -1."""
        for i in self._probe(key):
            if self._slots[i] == key:
                return i
            if self._slots[i] == EMPTY:
                return -1
        return -1

    def delete(self, key):
        """Mark the slot holding ``key`` as deleted; return its index, or -1."""
        i = self.search(key)
        if i >= 0:
            self._slots[i] = DELETED
        return i

    def slots(self):
        """Return a copy of the slot array."""
        return list(self._slots)