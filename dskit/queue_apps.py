"""Queue applications: Fibonacci numbers and depth-first maze search."""

from dskit.queues import CircularDeque, CircularQueue

_FIB_QUEUE_CAPACITY = 5
_MAZE_DEQUE_CAPACITY = 100
_OPEN = "0"
_EXIT = "x"
_VISITED = "."

MAZE = (
    "111111",
    "001001",
    "100011",
    "101011",
    "10100x",
    "111111",
)
MAZE_START = (1, 0)


def fibonacci(n):
    """Return the ``n``-th Fibonacci number, computed with a queue."""
    if n <= 1:
        return n
    queue = CircularQueue(_FIB_QUEUE_CAPACITY)
    queue.enqueue(0)
    queue.enqueue(1)
    for _ in range(2, n + 1):
        older = queue.dequeue()
        queue.enqueue(older + queue.peek())
    queue.dequeue()
    return queue.dequeue()


def explore_maze(grid, start=MAZE_START):
    """Yield each ``(row, col)`` taken from the deque during a depth-first search.

    ``grid`` is a sequence of equal-length strings where ``'0'`` is open,
    ``'x'`` is the exit and anything else is a wall. The search stops after
    yielding the exit, or when no open cell is left to try.
    """
    cells = [list(row) for row in grid]
    deque = CircularDeque(_MAZE_DEQUE_CAPACITY)

    def push(r, c):
        if r < 0 or c < 0 or r >= len(cells) or c >= len(cells[r]):
            return
        if cells[r][c] not in (_OPEN, _EXIT):
            return
        deque.add_rear((r, c))

    push(*start)
    while not deque.is_empty():
        r, c = deque.delete_rear()
        yield (r, c)
        if cells[r][c] == _EXIT:
            return
        cells[r][c] = _VISITED
        push(r - 1, c)
        push(r + 1, c)
        push(r, c - 1)
        push(r, c + 1)


def escape_maze(grid, start=MAZE_START):
    """Return True if a depth-first search from ``start`` reaches the exit."""
    last = None
    for last in explore_maze(grid, start):
        pass
    if last is None:
        return False
    r, c = last
    return grid[r][c] == _EXIT