"""Small introductory algorithms: sums, maxima, searches and arrays."""

import random


def calc_sum(n):
    """Return the sum of the integers from 1 to ``n``."""
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def find_max(a, b, c):
    """Return the largest of three values."""
    largest = a
    if b > largest:
        largest = b
    if c > largest:
        largest = c
    return largest


def has_duplicate(values):
    """Return True if any element occurs more than once."""
    seen = []
    for value in values:
        if value in seen:
            return True
        seen.append(value)
    return False


def sequential_search(values, key):
    """Return the index of the first element equal to ``key``, or -1."""
    for index, value in enumerate(values):
        if value == key:
            return index
    return -1


def random_array(n, rng=None):
    """Return ``n`` random integers in the range 0..99."""
    if n < 0:
        raise ValueError("array size must not be negative")
    rng = random.Random() if rng is None else rng
    return [rng.randrange(100) for _ in range(n)]


def average(values):
    """Return the arithmetic mean of the values."""
    values = list(values)
    if not values:
        raise ValueError("cannot average an empty sequence")
    return sum(values) / len(values)


def add(a, b):
    """Return ``a + b``."""
    return a + b


def sub(a, b):
    """Return ``a - b``."""
    return a - b


def addnum(a, b):
    """Return the sum of the integers from ``a`` to ``b`` inclusive."""
    total = 0
    for value in range(a, b + 1):
        total += value
    return total


def multiplication_table():
    """Return the 9x9 multiplication table, one line per multiplier."""
    return [
        "".join(f"{j}*{i}={i * j}\t" for j in range(1, 10))
        for i in range(1, 10)
    ]