"""Comparison and distribution sorts on Python lists.

The step-recording sorts rearrange the list in place and return the
snapshots of the list taken after each pass.
"""

from dataclasses import dataclass

from dskit.errors import InvalidPositionError
from dskit.queues import CircularQueue

_BUCKETS = 10
_BUCKET_CAPACITY = 100


@dataclass(frozen=True)
class Point2D:
    """A point on the integer plane."""

    x: int
    y: int


def selection_sort(values):
    """Sort ``values`` in place by selection; return a snapshot per pass."""
    steps = []
    n = len(values)
    for i in range(n - 1):
        least = min(range(i, n), key=values.__getitem__)
        values[i], values[least] = values[least], values[i]
        steps.append(tuple(values))
    return steps


def _insertion(values, shifts):
    steps = []
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and shifts(values[j], key):
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key
        steps.append(tuple(values))
    return steps


def insertion_sort(values):
    """Sort ``values`` in place by insertion; return a snapshot per pass."""
    return _insertion(values, lambda item, key: item > key)


def bubble_sort(values):
    """Sort ``values`` in place by bubbling; return a snapshot per pass.

    Stops as soon as a pass makes no exchange; that pass is not recorded.
    """
    steps = []
    for end in range(len(values) - 1, 0, -1):
        changed = False
        for j in range(end):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                changed = True
        if not changed:
            break
        steps.append(tuple(values))
    return steps


def ascend(x, y):
    """Compare for ascending order: negative when ``x`` should follow ``y``."""
    return y - x


def descend(x, y):
    """Compare for descending order: negative when ``x`` should follow ``y``."""
    return x - y


def insertion_sort_by(values, compare):
    """Sort ``values`` in place by insertion using ``compare``.

    An element moves behind the key while ``compare(element, key) < 0``.
    Returns a snapshot per pass.
    """
    return _insertion(values, lambda item, key: compare(item, key) < 0)


def _bounds(values, left, right):
    if right is None:
        right = len(values) - 1
    if left < 0 or right >= len(values):
        raise InvalidPositionError()
    return left, right


def _merge(values, left, mid, right):
    merged = []
    i, j = left, mid + 1
    while i <= mid and j <= right:
        if values[i] <= values[j]:
            merged.append(values[i])
            i += 1
        else:
            merged.append(values[j])
            j += 1
    merged.extend(values[i : mid + 1])
    merged.extend(values[j : right + 1])
    values[left : right + 1] = merged


def merge_sort(values, left=0, right=None):
    """Sort ``values[left..right]`` in place by merging."""
    left, right = _bounds(values, left, right)
    if left < right:
        mid = (left + right) // 2
        merge_sort(values, left, mid)
        merge_sort(values, mid + 1, right)
        _merge(values, left, mid, right)


def partition(values, left, right):
    """Split ``values[left..right]`` around ``values[left]``; return its new index."""
    pivot = values[left]
    low = left + 1
    high = right
    while low <= high:
        while low <= high and values[low] <= pivot:
            low += 1
        while low <= high and values[high] > pivot:
            high -= 1
        if low < high:
            values[low], values[high] = values[high], values[low]
    values[left], values[high] = values[high], values[left]
    return high


def quick_sort(values, left=0, right=None):
    """Sort ``values[left..right]`` in place by quicksort."""
    left, right = _bounds(values, left, right)
    if left < right:
        q = partition(values, left, right)
        quick_sort(values, left, q - 1)
        quick_sort(values, q + 1, right)


def _drain(queue):
    while not queue.is_empty():
        yield queue.dequeue()


def radix_sort(values, digits=4):
    """Sort non-negative integers in place by their lowest ``digits`` decimal digits.

    Returns a snapshot after each digit pass.
    """
    if any(value < 0 for value in values):
        raise ValueError("radix sort needs non-negative integers")
    queues = [CircularQueue(_BUCKET_CAPACITY) for _ in range(_BUCKETS)]
    steps = []
    factor = 1
    for _ in range(digits):
        for value in values:
            queues[(value // factor) % _BUCKETS].enqueue(value)
        values[:] = [item for queue in queues for item in _drain(queue)]
        factor *= _BUCKETS
        steps.append(tuple(values))
    return steps


def x_ascend(a, b):
    """Compare points for ascending x."""
    return b.x - a.x


def y_descend(a, b):
    """Compare points for descending y."""
    return a.y - b.y


def z_ascend(a, b):
    """Compare points for ascending distance from the origin."""
    return (b.x * b.x + b.y * b.y) - (a.x * a.x + a.y * a.y)