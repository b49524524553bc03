"""Sequential, binary and interpolation search over index ranges."""

from dskit.errors import InvalidPositionError


def _bounds(values, left, right):
    if right is None:
        right = len(values) - 1
    if left < 0 or right >= len(values):
        raise InvalidPositionError()
    return left, right


def sequential_search(values, key, left=0, right=None):
    """Return the first index in ``left..right`` holding ``key``, or -1."""
    left, right = _bounds(values, left, right)
    for i in range(left, right + 1):
        if values[i] == key:
            return i
    return -1


def sequential_search_transpose(values, key, left=0, right=None):
    """Search like :func:`sequential_search`, moving a found key one place forward.

    Returns the key's index after the move, or -1.
    """
    i = sequential_search(values, key, left, right)
    if i > left:
        values[i - 1], values[i] = values[i], values[i - 1]
        i -= 1
    return i


def binary_search(values, key, low=0, high=None):
    """Return the index of ``key`` in sorted ``values[low..high]``, or -1 (recursive)."""
    low, high = _bounds(values, low, high)
    if low > high:
        return -1
    mid = (low + high) // 2
    if key == values[mid]:
        return mid
    if key < values[mid]:
        return binary_search(values, key, low, mid - 1) if mid > low else -1
    return binary_search(values, key, mid + 1, high) if mid < high else -1


def binary_search_iter(values, key, low=0, high=None):
    """Return the index of ``key`` in sorted ``values[low..high]``, or -1 (iterative)."""
    low, high = _bounds(values, low, high)
    while low <= high:
        mid = (low + high) // 2
        if key == values[mid]:
            return mid
        if key < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def interpolation_search(values, key, low=0, high=None):
    """Return the index of ``key`` in sorted ``values[low..high]``, or -1.

    The probe position is estimated from the key's place between the
    values at the two ends of the range.
    """
    low, high = _bounds(values, low, high)
    while low <= high:
        if key < values[low] or key > values[high]:
            return -1
        span = values[high] - values[low]
        if span == 0:
            mid = low
        else:
            mid = int((key - values[low]) / span * (high - low)) + low
        if key == values[mid]:
            return mid
        if key < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return -1